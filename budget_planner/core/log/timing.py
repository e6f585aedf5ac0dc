"""Timing helpers to log the duration of operations."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from time import perf_counter
from typing import Iterator, Optional


@dataclass
class _Timer:
    label: str
    logger: logging.Logger
    level: int
    outcome: Optional[str] = None
    start: float = field(default_factory=perf_counter)

    def set_outcome(self, outcome: object) -> None:
        """Attach a short result (e.g. a status code) to the finish message."""

        self.outcome = str(outcome)

    @property
    def elapsed_ms(self) -> float:
        return (perf_counter() - self.start) * 1000

    def finish(self, success: bool = True) -> None:
        elapsed = self.elapsed_ms
        if success:
            message = self.label
            if self.outcome is not None:
                message += f" -> {self.outcome}"
            message += f" in {elapsed:.1f}ms"
            self.logger.log(self.level, message)
        else:
            self.logger.error(f"{self.label} failed after {elapsed:.1f}ms")


@contextmanager
def timeit(
    label: str,
    *,
    logger: Optional[logging.Logger] = None,
    level: int = logging.INFO,
) -> Iterator[_Timer]:
    """Context manager for timing operations.

    Args:
        label: Description of the operation being timed
        logger: Logger instance to use (defaults to "budget_planner.timer")
        level: Logging level for the timing message
    """
    log = logger or logging.getLogger("budget_planner.timer")
    timer = _Timer(label=label, logger=log, level=level)

    try:
        yield timer
    except Exception:
        timer.finish(success=False)
        raise
    else:
        timer.finish(success=True)
