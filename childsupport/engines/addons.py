"""Add-on expense allocation (lines A-4a..e, A-7 / B-13, B-15)."""

import logging
from decimal import Decimal

from childsupport.engines.guidelines import AMOUNT_TOLERANCE
from childsupport.models.case import AddOnSet

logger = logging.getLogger(__name__)


def total_add_ons(add_ons: AddOnSet | None) -> Decimal:
    """Sum all five add-on categories. A missing set counts as zero."""
    if add_ons is None:
        return Decimal("0")
    return (
        add_ons.childcare
        + add_ons.health_insurance
        + add_ons.extraordinary_medical
        + add_ons.cash_medical_ivd
        + add_ons.additional_expenses
    )


def split_by_share(total: Decimal, p1_share: Decimal) -> tuple[Decimal, Decimal]:
    """Split a total by income share; the parts always sum to the total."""
    p1 = total * p1_share
    p2 = total - p1
    return p1, p2


def direct_pay_total_for_parent(direct_pay: AddOnSet | None) -> Decimal:
    """Total a parent pays directly to providers across all categories."""
    return total_add_ons(direct_pay)


def direct_pay_consistency_warning(
    add_ons_total: Decimal, p1_direct: Decimal, p2_direct: Decimal
) -> str | None:
    """Soft note when direct payments do not add up to the declared add-ons.

    Divergence is allowed (a parent may front more than their share), so the
    calculation continues either way.
    """
    direct_sum = p1_direct + p2_direct
    if abs(direct_sum - add_ons_total) <= AMOUNT_TOLERANCE:
        return None
    logger.warning(
        "Direct-pay sum %s does not match declared add-ons total %s",
        direct_sum, add_ons_total,
    )
    return (
        f"Note: direct-pay sum ({direct_sum:.2f}) != "
        f"add-ons total ({add_ons_total:.2f})."
    )
