"""Income adjustment engine.

Produces each parent's Adjusted Actual Income (worksheet line 2), the
multifamily allowance that feeds it, and the shared lines 2-4 used by both
worksheets.
"""

import logging
from decimal import Decimal

from childsupport.engines.guidelines import (
    MULTIFAMILY_ALLOWANCE_RATE,
    MULTIFAMILY_CHILD_COUNT,
    ZERO,
    ZERO_INCOME_SHARE,
)
from childsupport.engines.schedule import lookup_basic_obligation
from childsupport.exceptions import ScheduleValidationError
from childsupport.models.case import CaseInputs, ParentIncome
from childsupport.models.results import BasicResult
from childsupport.models.schedule import ScheduleTable

logger = logging.getLogger(__name__)


def adjusted_actual_income(
    parent: ParentIncome, multifamily_allowance: Decimal = ZERO
) -> Decimal:
    """Line 2: actual income less statutory deductions, plus alimony received.

    Not floored at zero; a negative AAI flows through to the share math.
    """
    return (
        parent.actual_monthly
        - parent.preexisting_support_paid
        - parent.alimony_paid
        + parent.alimony_received
        - multifamily_allowance
    )


def multifamily_allowance(table: ScheduleTable, parent: ParentIncome) -> Decimal:
    """Deduction for children in the parent's home who are not in this case.

    75% of the one-child basic obligation at the parent's own actual income,
    times the number of such children. When the parent's income is above the
    schedule, the top one-child amount is used as a ceiling.
    """
    count = parent.multifamily_children_in_home
    if count <= 0:
        return ZERO

    column = table.by_children.get(MULTIFAMILY_CHILD_COUNT)
    if not column:
        raise ScheduleValidationError(
            "schedule missing one-child column for multifamily allowance"
        )

    lookup = lookup_basic_obligation(table, parent.actual_monthly, MULTIFAMILY_CHILD_COUNT)
    base_amount = lookup.amount
    if base_amount is None:
        base_amount = column[-1]
        logger.debug(
            "Parent income %s above schedule; multifamily allowance capped at top "
            "one-child amount %s",
            parent.actual_monthly, base_amount,
        )

    return MULTIFAMILY_ALLOWANCE_RATE * base_amount * count


def income_shares(p1_aai: Decimal, p2_aai: Decimal) -> tuple[Decimal, Decimal]:
    """Line 3: each parent's percentage of combined AAI.

    When combined AAI is exactly zero the split is 50/50.
    """
    combined = p1_aai + p2_aai
    p1_share = ZERO_INCOME_SHARE if combined == 0 else p1_aai / combined
    return p1_share, 1 - p1_share


def compute_basic(inputs: CaseInputs, table: ScheduleTable) -> BasicResult:
    """Lines 2-4: AAI for both parents, income shares, basic obligation."""
    p1_aai = adjusted_actual_income(inputs.parent1, multifamily_allowance(table, inputs.parent1))
    p2_aai = adjusted_actual_income(inputs.parent2, multifamily_allowance(table, inputs.parent2))
    combined = p1_aai + p2_aai

    if combined < 0:
        # Left unclamped: shares fall outside [0, 1] and the caller decides.
        logger.warning(
            "Combined adjusted actual income is negative (%s); income shares "
            "will fall outside 0..1",
            combined,
        )

    p1_share, p2_share = income_shares(p1_aai, p2_aai)
    lookup = lookup_basic_obligation(table, combined, inputs.num_children)

    return BasicResult(
        p1_aai=p1_aai,
        p2_aai=p2_aai,
        combined_aai=combined,
        p1_share=p1_share,
        p2_share=p2_share,
        basic_status=lookup.status,
        basic=lookup.amount,
        used_row_income=lookup.used_row_income,
    )
