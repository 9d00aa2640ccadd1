"""Schedule lookup engine.

Given a combined income and a child count, find the basic obligation using
the "next higher row" rule: an income that falls between two breakpoints
uses the higher one. Incomes above the top row are advisory only; the
schedule is never extrapolated.
"""

import logging
from decimal import Decimal

from childsupport.exceptions import ScheduleValidationError, UnsupportedChildCountError
from childsupport.models.enums import LookupStatus
from childsupport.models.results import LookupResult
from childsupport.models.schedule import ScheduleTable

logger = logging.getLogger(__name__)


def validate_schedule(table: ScheduleTable) -> None:
    """Check that incomes ascend strictly and every column is aligned."""
    incomes = table.incomes
    if not incomes:
        raise ScheduleValidationError("schedule has no income rows")
    for prev, cur in zip(incomes, incomes[1:]):
        if not cur > prev:
            raise ScheduleValidationError(
                f"incomes must be strictly ascending ({cur} follows {prev})"
            )
    expected = len(incomes)
    for count, column in table.by_children.items():
        if len(column) != expected:
            raise ScheduleValidationError(
                f"column for {count} children has {len(column)} rows, expected {expected}"
            )


def ceiling_index(incomes: list[Decimal], target: Decimal) -> int | None:
    """Index of the first breakpoint >= target, or None above the top row."""
    for i, breakpoint in enumerate(incomes):
        if target <= breakpoint:
            return i
    return None


def lookup_basic_obligation(
    table: ScheduleTable, combined_income: Decimal, child_count: int
) -> LookupResult:
    """Look up the basic obligation for a combined income and child count.

    Raises:
        ScheduleValidationError: The table is malformed.
        UnsupportedChildCountError: The table has no column for child_count.
    """
    validate_schedule(table)

    column = table.by_children.get(child_count)
    if column is None:
        raise UnsupportedChildCountError(child_count)

    idx = ceiling_index(table.incomes, combined_income)
    if idx is None:
        logger.debug(
            "Income %s is above the top schedule row %s", combined_income, table.incomes[-1]
        )
        return LookupResult(status=LookupStatus.ABOVE_TOP)

    # atOrBelowMinimum is informational; the amount is used exactly like "ok".
    if idx == 0 and combined_income <= table.incomes[0]:
        status = LookupStatus.AT_OR_BELOW_MINIMUM
    else:
        status = LookupStatus.OK

    logger.debug(
        "Schedule lookup: income=%s children=%d -> row %d (%s) amount=%s",
        combined_income, child_count, idx, table.incomes[idx], column[idx],
    )
    return LookupResult(
        status=status,
        amount=column[idx],
        used_row_index=idx,
        used_row_income=table.incomes[idx],
    )
