"""Obligation schedule model.

The schedule is the statutory income/obligation table: one ascending list of
combined monthly income breakpoints and, per child count, a column of basic
obligation amounts aligned positionally with those breakpoints.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ScheduleTable(BaseModel):
    """Income breakpoints plus one obligation column per child count.

    Structural invariants (ascending incomes, aligned columns) are checked by
    ``engines.schedule.validate_schedule`` rather than here, so every lookup
    can re-verify the table it is handed.
    """

    model_config = ConfigDict(frozen=True)

    incomes: list[Decimal]
    by_children: dict[int, list[Decimal]]
    meta: dict[str, Any] = Field(default_factory=dict)

    @property
    def child_counts(self) -> list[int]:
        return sorted(self.by_children)
