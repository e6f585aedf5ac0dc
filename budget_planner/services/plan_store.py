"""In-memory store holding the budget plan.

The store owns an ordered list of sections and a single id counter that is
shared by sections and items, so every id it hands out is unique across
both kinds. A re-entrant lock serialises every read and mutation because
FastAPI runs the synchronous route handlers on a threadpool.

Callers only ever receive deep copies; the stored records change solely
through the methods below.
"""
from __future__ import annotations

from decimal import Decimal
from threading import RLock
from typing import Iterable

from budget_planner.core.errors import (
    IncomeSectionMissingError,
    ProtectedSectionError,
    SectionNotFoundError,
)
from budget_planner.core.log import get_logger
from budget_planner.schemas.plan import BudgetItem, BudgetSection

LOGGER = get_logger(__name__)

INCOME_TITLE = "Income"


def seed_sections() -> list[BudgetSection]:
    """Return the sections every fresh plan starts with."""

    housing_items = [
        BudgetItem(
            id=2,
            item_name="Mortgage",
            item_value=Decimal("3000.69"),
            cols=1,
            rows=1,
            color="lightblue",
        ),
        BudgetItem(
            id=3,
            item_name="Internet",
            item_value=Decimal("70.99"),
            cols=1,
            rows=1,
            color="lightgreen",
        ),
    ]
    return [
        BudgetSection(id=4, title=INCOME_TITLE, items=[]),
        BudgetSection(id=1, title="Housing", items=housing_items),
    ]


class PlanStore:
    """Ordered collection of budget sections guarded by a single lock."""

    def __init__(self, sections: Iterable[BudgetSection] = (), last_id: int | None = None) -> None:
        self._lock = RLock()
        self._sections: list[BudgetSection] = [section.model_copy(deep=True) for section in sections]
        if last_id is None:
            last_id = self._highest_id()
        self._last_id = last_id

    @classmethod
    def seeded(cls) -> "PlanStore":
        """Build a store holding the default Income and Housing sections.

        The counter starts at the highest seeded id so the first entity
        created through the API never reuses an id already in the plan.
        """

        return cls(seed_sections())

    @property
    def last_id(self) -> int:
        with self._lock:
            return self._last_id

    def _highest_id(self) -> int:
        ids = [0]
        for section in self._sections:
            ids.append(section.id)
            ids.extend(item.id for item in section.items)
        return max(ids)

    def _next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def _snapshot(self) -> list[BudgetSection]:
        return [section.model_copy(deep=True) for section in self._sections]

    def find_index_by_id(self, section_id: int) -> int:
        """Return the position of the first section with ``section_id`` or ``-1``."""

        with self._lock:
            for index, section in enumerate(self._sections):
                if section.id == section_id:
                    return index
            return -1

    def require_index(self, section_id: int) -> int:
        """Return the position of ``section_id`` or raise :class:`SectionNotFoundError`."""

        index = self.find_index_by_id(section_id)
        if index == -1:
            LOGGER.warning("Section %s not found", section_id)
            raise SectionNotFoundError(section_id)
        return index

    def list_sections(self) -> list[BudgetSection]:
        with self._lock:
            return self._snapshot()

    def create_section(self, section: BudgetSection) -> BudgetSection:
        """Append ``section`` under a freshly issued id, ignoring any id it carries."""

        with self._lock:
            created = section.model_copy(deep=True, update={"id": self._next_id()})
            self._sections.append(created)
            LOGGER.info("Created section %s (%r)", created.id, created.title)
            return created.model_copy(deep=True)

    def replace_section(self, section_id: int, section: BudgetSection) -> BudgetSection:
        """Replace the whole record stored under ``section_id``.

        The replacement is stored verbatim, including its own id and title,
        so a section can be renamed to or away from Income this way.
        """

        with self._lock:
            index = self.require_index(section_id)
            replacement = section.model_copy(deep=True)
            self._sections[index] = replacement
            LOGGER.info(
                "Replaced section %s with id=%s title=%r",
                section_id,
                replacement.id,
                replacement.title,
            )
            return replacement.model_copy(deep=True)

    def delete_section(self, section_id: int) -> None:
        with self._lock:
            index = self.require_index(section_id)
            if self._sections[index].title == INCOME_TITLE:
                LOGGER.warning("Refused to delete Income section %s", section_id)
                raise ProtectedSectionError()
            removed = self._sections.pop(index)
            LOGGER.info("Deleted section %s (%r)", removed.id, removed.title)

    def create_item(self, section_id: int, item: BudgetItem) -> BudgetItem:
        """Append ``item`` to the section's items under a freshly issued id."""

        with self._lock:
            index = self.require_index(section_id)
            created = item.model_copy(deep=True, update={"id": self._next_id()})
            self._sections[index].items.append(created)
            LOGGER.info("Created item %s in section %s", created.id, section_id)
            return created.model_copy(deep=True)

    def get_income(self) -> BudgetSection:
        """Return the section currently titled Income."""

        with self._lock:
            for section in self._sections:
                if section.title == INCOME_TITLE:
                    return section.model_copy(deep=True)
        raise IncomeSectionMissingError()


__all__ = ["INCOME_TITLE", "PlanStore", "seed_sections"]
