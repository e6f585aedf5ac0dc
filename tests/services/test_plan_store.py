"""Unit tests for the in-memory plan store."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from budget_planner.core.errors import (
    IncomeSectionMissingError,
    ProtectedSectionError,
    SectionNotFoundError,
)
from budget_planner.schemas.plan import BudgetItem, BudgetSection
from budget_planner.services.plan_store import PlanStore


def _all_ids(store: PlanStore) -> list[int]:
    ids: list[int] = []
    for section in store.list_sections():
        ids.append(section.id)
        ids.extend(item.id for item in section.items)
    return ids


def test_seeded_store_layout() -> None:
    store = PlanStore.seeded()

    sections = store.list_sections()

    assert [(s.id, s.title) for s in sections] == [(4, "Income"), (1, "Housing")]
    assert sections[0].items == []
    assert [item.item_name for item in sections[1].items] == ["Mortgage", "Internet"]
    assert sections[1].items[0].item_value == Decimal("3000.69")
    assert store.last_id == 4


def test_create_section_appends_with_next_id_and_ignores_supplied_id() -> None:
    store = PlanStore.seeded()

    created = store.create_section(BudgetSection(id=99, title="Savings"))

    assert created.id == 5
    sections = store.list_sections()
    assert sections[-1].id == 5
    assert sections[-1].title == "Savings"
    assert store.find_index_by_id(99) == -1


def test_ids_are_shared_between_sections_and_items() -> None:
    store = PlanStore.seeded()

    first = store.create_section(BudgetSection(title="Savings"))
    item = store.create_item(1, BudgetItem(item_name="Water", item_value=Decimal("30")))
    second = store.create_section(BudgetSection(title="Fun"))

    assert (first.id, item.id, second.id) == (5, 6, 7)
    ids = _all_ids(store)
    assert len(ids) == len(set(ids))


def test_find_index_by_id() -> None:
    store = PlanStore.seeded()

    assert store.find_index_by_id(4) == 0
    assert store.find_index_by_id(1) == 1
    assert store.find_index_by_id(999) == -1


def test_replace_section_is_whole_record() -> None:
    store = PlanStore.seeded()

    store.replace_section(1, BudgetSection(title="Home"))

    sections = store.list_sections()
    assert sections[1].id == 0
    assert sections[1].title == "Home"
    assert sections[1].items == []


def test_replace_unknown_section_raises() -> None:
    store = PlanStore.seeded()

    with pytest.raises(SectionNotFoundError):
        store.replace_section(42, BudgetSection(title="Nope"))


def test_delete_income_section_is_refused() -> None:
    store = PlanStore.seeded()

    with pytest.raises(ProtectedSectionError) as excinfo:
        store.delete_section(4)

    assert excinfo.value.message == "Cannot delete Income section"
    assert len(store.list_sections()) == 2


def test_delete_guard_follows_current_title() -> None:
    store = PlanStore.seeded()
    store.replace_section(1, BudgetSection(id=1, title="Income"))
    store.replace_section(4, BudgetSection(id=4, title="Salary"))

    with pytest.raises(ProtectedSectionError):
        store.delete_section(1)

    store.delete_section(4)
    assert [s.id for s in store.list_sections()] == [1]


def test_delete_preserves_order_of_remaining_sections() -> None:
    store = PlanStore.seeded()
    for title in ("A", "B", "C"):
        store.create_section(BudgetSection(title=title))

    store.delete_section(6)

    assert [s.title for s in store.list_sections()] == ["Income", "Housing", "A", "C"]


def test_delete_unknown_section_raises() -> None:
    store = PlanStore.seeded()

    with pytest.raises(SectionNotFoundError):
        store.delete_section(999)


def test_create_item_only_touches_target_section() -> None:
    store = PlanStore.seeded()
    before = store.list_sections()

    store.create_item(4, BudgetItem(item_name="Salary", item_value=Decimal("5000")))

    after = store.list_sections()
    assert [item.item_name for item in after[0].items] == ["Salary"]
    assert after[1] == before[1]


def test_create_item_in_unknown_section_raises() -> None:
    store = PlanStore.seeded()

    with pytest.raises(SectionNotFoundError):
        store.create_item(999, BudgetItem(item_name="Ghost"))
    assert store.last_id == 4


def test_snapshots_are_detached_from_store() -> None:
    store = PlanStore.seeded()

    snapshot = store.list_sections()
    snapshot[1].items.clear()
    snapshot[0].title = "Renamed"

    fresh = store.list_sections()
    assert fresh[0].title == "Income"
    assert len(fresh[1].items) == 2


def test_get_income_reflects_items_and_missing_income() -> None:
    store = PlanStore.seeded()
    store.create_item(4, BudgetItem(item_name="Salary", item_value=Decimal("5000")))

    income = store.get_income()
    assert income.title == "Income"
    assert [item.item_name for item in income.items] == ["Salary"]

    store.replace_section(4, BudgetSection(id=4, title="Wages"))
    with pytest.raises(IncomeSectionMissingError):
        store.get_income()


def test_concurrent_creates_issue_unique_ids() -> None:
    store = PlanStore.seeded()

    with ThreadPoolExecutor(max_workers=8) as pool:
        created = list(pool.map(lambda n: store.create_section(BudgetSection(title=f"S{n}")), range(200)))

    ids = [section.id for section in created]
    assert len(set(ids)) == 200
    assert sorted(ids) == list(range(5, 205))
    assert len(store.list_sections()) == 202
