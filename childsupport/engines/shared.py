"""Worksheet B engine (shared physical custody).

Three terminal outcomes:
  - advisory: combined income above the top of the schedule
  - redirected: a parent has fewer than 25% of overnights, so Worksheet A
    applies with the parent holding more overnights as custodian
  - computed: the full Worksheet B result, capped at the Worksheet A amount
    for the same case with the non-payor as custodian

Worksheet A is reached only through the injected ``primary_calculator``.
"""

import logging
from collections.abc import Callable
from decimal import Decimal

from childsupport.engines.addons import (
    direct_pay_consistency_warning,
    direct_pay_total_for_parent,
    split_by_share,
    total_add_ons,
)
from childsupport.engines.guidelines import (
    ADJUSTMENT_BAND_END,
    ADJUSTMENT_BAND_SPAN,
    ADJUSTMENT_BAND_START,
    AMOUNT_TOLERANCE,
    NIGHTS_IN_YEAR,
    SHARED_CUSTODY_MULTIPLIER,
    SHARED_CUSTODY_THRESHOLD,
    ZERO,
)
from childsupport.engines.income import compute_basic
from childsupport.exceptions import CustodyTypeMismatchError
from childsupport.models.case import NIGHTS_PER_YEAR, CaseInputs
from childsupport.models.enums import Advisory, CustodyType, Parent
from childsupport.models.results import (
    CapDetail,
    PrimaryFinal,
    SharedAdvisory,
    SharedComputed,
    SharedOutcome,
    SharedRedirected,
    SharedStarter,
)
from childsupport.models.schedule import ScheduleTable

logger = logging.getLogger(__name__)

PrimaryCalculator = Callable[[CaseInputs, Parent], PrimaryFinal]


def adjusted_basic(basic: Decimal) -> Decimal:
    """Line 5: 1.5x the basic obligation."""
    return basic * SHARED_CUSTODY_MULTIPLIER


def overnight_percents(overnights_p1: int) -> tuple[Decimal, Decimal]:
    """Line 7: each parent's share of the year's overnights."""
    p1_nights = max(0, min(NIGHTS_PER_YEAR, overnights_p1))
    p1_pct = Decimal(p1_nights) / NIGHTS_IN_YEAR
    return p1_pct, 1 - p1_pct


def meets_shared_threshold(overnights_p1: int) -> bool:
    """True when both parents keep the child at least 25% of overnights."""
    p1_pct, p2_pct = overnight_percents(overnights_p1)
    return p1_pct >= SHARED_CUSTODY_THRESHOLD and p2_pct >= SHARED_CUSTODY_THRESHOLD


def overnight_adjustment_amount(theoretical: Decimal, overnights: int) -> Decimal:
    """Line 10: the 92-109 overnight reduction for one parent.

    The reduction is theoretical * (110 - overnights) / 18 inside the band,
    i.e. 100% at 92 nights falling to 0% at 110. Outside the band there is no
    reduction. Below 92 nights is unreachable once the 25% threshold holds.
    """
    if overnights >= ADJUSTMENT_BAND_END:
        return ZERO
    if overnights < ADJUSTMENT_BAND_START:
        return ZERO
    return theoretical * (Decimal(ADJUSTMENT_BAND_END - overnights) / ADJUSTMENT_BAND_SPAN)


def primary_custodian_from_overnights(overnights_p1: int) -> Parent:
    """Parent with more overnights becomes custodian; a tie goes to Parent 1."""
    p1_pct, p2_pct = overnight_percents(overnights_p1)
    if p2_pct > p1_pct:
        return Parent.P2
    return Parent.P1


class SharedWorksheet:
    """Computes Worksheet B, falling back to / capping by Worksheet A."""

    def __init__(self, schedule: ScheduleTable, primary_calculator: PrimaryCalculator) -> None:
        self.schedule = schedule
        self.primary_calculator = primary_calculator

    def starter(self, inputs: CaseInputs) -> SharedStarter:
        """Lines 2-7: AAI, shares, basic, threshold check, adjusted basic."""
        self._require_shared(inputs, "starter")
        base = compute_basic(inputs, self.schedule)
        common = dict(
            used_row_income=base.used_row_income,
            p1_aai=base.p1_aai,
            p2_aai=base.p2_aai,
            combined_aai=base.combined_aai,
            p1_share=base.p1_share,
            p2_share=base.p2_share,
            overnights_p1=inputs.overnights_parent1,
        )

        if base.above_top:
            return SharedStarter(
                advisory=Advisory.ABOVE_TOP_OF_SCHEDULE,
                basic=None,
                adjusted_basic=None,
                **common,
            )

        if not meets_shared_threshold(inputs.overnights_parent1):
            return SharedStarter(
                redirect_to_worksheet_a=True,
                basic=base.basic,
                adjusted_basic=None,
                **common,
            )

        pct_p1, pct_p2 = overnight_percents(inputs.overnights_parent1)
        return SharedStarter(
            basic=base.basic,
            adjusted_basic=adjusted_basic(base.basic),
            overnight_pct_p1=pct_p1,
            overnight_pct_p2=pct_p2,
            **common,
        )

    def compute_final(self, inputs: CaseInputs) -> SharedOutcome:
        """Run Worksheet B to one of its three terminal outcomes."""
        self._require_shared(inputs, "compute_final")
        starter = self.starter(inputs)

        if starter.advisory == Advisory.ABOVE_TOP_OF_SCHEDULE:
            logger.debug("Worksheet B: combined AAI %s above schedule", starter.combined_aai)
            return SharedAdvisory(
                worksheet={
                    "line2_p1AAI": starter.p1_aai,
                    "line2_p2AAI": starter.p2_aai,
                    "line3_p1Share": starter.p1_share,
                    "line3_p2Share": starter.p2_share,
                },
            )

        if starter.redirect_to_worksheet_a:
            custodian = primary_custodian_from_overnights(starter.overnights_p1)
            logger.debug(
                "Worksheet B: %d overnights fails shared threshold; redirecting "
                "to Worksheet A with %s as custodian",
                starter.overnights_p1, custodian,
            )
            return SharedRedirected(
                primary_custodian=custodian,
                primary_result=self.primary_calculator(inputs, custodian),
                note=(
                    "Shared custody threshold not met; redirected to Worksheet A "
                    f"using {custodian} as primary custodian."
                ),
            )

        return self._compute(inputs, starter)

    def _compute(self, inputs: CaseInputs, starter: SharedStarter) -> SharedComputed:
        basic = starter.basic
        adj_basic = starter.adjusted_basic
        p1_share, p2_share = starter.p1_share, starter.p2_share
        pct_p1, pct_p2 = starter.overnight_pct_p1, starter.overnight_pct_p2
        p1_nights = starter.overnights_p1
        p2_nights = NIGHTS_PER_YEAR - p1_nights

        # Line 8: each parent's share of the adjusted basic
        line8_p1 = adj_basic * p1_share
        line8_p2 = adj_basic * p2_share

        # Line 9: owed for the time the child spends with the other parent
        line9_p1 = line8_p1 * pct_p2
        line9_p2 = line8_p2 * pct_p1

        # Lines 10-11: 92-109 overnight adjustment, floored at zero
        line10_p1 = overnight_adjustment_amount(line9_p1, p1_nights)
        line10_p2 = overnight_adjustment_amount(line9_p2, p2_nights)
        line11_p1 = max(ZERO, line9_p1 - line10_p1)
        line11_p2 = max(ZERO, line9_p2 - line10_p2)

        # Lines 13-14: add-ons by income share
        add_ons_total = total_add_ons(inputs.add_ons)
        add_on_p1, add_on_p2 = split_by_share(add_ons_total, p1_share)
        line14_p1 = line11_p1 + add_on_p1
        line14_p2 = line11_p2 + add_on_p2

        # Line 15: direct-pay credits, floored at zero
        p1_direct = direct_pay_total_for_parent(inputs.direct_pay.parent1)
        p2_direct = direct_pay_total_for_parent(inputs.direct_pay.parent2)
        note = direct_pay_consistency_warning(add_ons_total, p1_direct, p2_direct)
        line15_p1 = max(ZERO, line14_p1 - p1_direct)
        line15_p2 = max(ZERO, line14_p2 - p2_direct)

        payor, recommended = self._net(line15_p1, line15_p2)
        before_cap = recommended

        cap = None
        if payor is not None:
            primary = self.primary_calculator(inputs, payor.other)
            if primary.recommended_order is not None:
                capped = min(recommended, primary.recommended_order)
                cap = CapDetail(before=before_cap, after=capped, primary=primary.recommended_order)
                recommended = capped

        worksheet = {
            "line2_p1AAI": starter.p1_aai,
            "line2_p2AAI": starter.p2_aai,
            "line3_p1Share": p1_share,
            "line3_p2Share": p2_share,
            "line4_basic": basic,
            "line5_adjustedBasic": adj_basic,
            "line6_overnightsP1": Decimal(p1_nights),
            "line6_overnightsP2": Decimal(p2_nights),
            "line7_pctP1": pct_p1,
            "line7_pctP2": pct_p2,
            "line8_p1ShareAdjustedBasic": line8_p1,
            "line8_p2ShareAdjustedBasic": line8_p2,
            "line9_p1Theoretical": line9_p1,
            "line9_p2Theoretical": line9_p2,
            "line10_p1Adjustment": line10_p1,
            "line10_p2Adjustment": line10_p2,
            "line11_p1AfterAdjustment": line11_p1,
            "line11_p2AfterAdjustment": line11_p2,
            "line13_totalAddOns": add_ons_total,
            "line13_p1Share": add_on_p1,
            "line13_p2Share": add_on_p2,
            "line14_p1Total": line14_p1,
            "line14_p2Total": line14_p2,
            "line15_p1DirectPay": p1_direct,
            "line15_p2DirectPay": p2_direct,
            "line15_p1Recommended": line15_p1,
            "line15_p2Recommended": line15_p2,
            "line16_beforeCap": before_cap if payor is not None else ZERO,
        }

        logger.debug(
            "Worksheet B: payor=%s before cap=%s after cap=%s", payor, before_cap, recommended
        )
        return SharedComputed(
            payor=payor,
            recommended=recommended,
            note=note,
            worksheet=worksheet,
            cap=cap,
        )

    @staticmethod
    def _net(p1_amount: Decimal, p2_amount: Decimal) -> tuple[Parent | None, Decimal]:
        """Net the two line-15 amounts; within tolerance means nobody pays."""
        diff = p1_amount - p2_amount
        if abs(diff) <= AMOUNT_TOLERANCE:
            return None, ZERO
        if diff > 0:
            return Parent.P1, diff
        return Parent.P2, -diff

    @staticmethod
    def _require_shared(inputs: CaseInputs, stage: str) -> None:
        if inputs.custody_type != CustodyType.SHARED:
            raise CustodyTypeMismatchError(
                f"Worksheet B {stage}", CustodyType.SHARED.value, inputs.custody_type.value
            )
