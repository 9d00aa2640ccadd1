"""Worksheet A engine (primary physical custody).

Runs as a short linear pipeline, each stage building on the previous one:
  - Basic: lines 2-4 (AAI, income shares, basic obligation)
  - Totals: lines 5-6 (basic + add-ons, split by income share)
  - Final: lines 7-9 (direct-pay credits, recommended order)

Incomes above the top of the schedule stop at an advisory result with no
basic obligation and no recommended order.
"""

import logging

from childsupport.engines.addons import (
    direct_pay_consistency_warning,
    direct_pay_total_for_parent,
    split_by_share,
    total_add_ons,
)
from childsupport.engines.guidelines import ZERO
from childsupport.engines.income import compute_basic
from childsupport.exceptions import CustodyTypeMismatchError
from childsupport.models.case import CaseInputs
from childsupport.models.enums import Advisory, CustodyType, Parent
from childsupport.models.results import PrimaryFinal, PrimaryTotals
from childsupport.models.schedule import ScheduleTable

logger = logging.getLogger(__name__)

ABOVE_TOP_NOTE = "Above top of schedule; court discretion."


class PrimaryWorksheet:
    """Computes Worksheet A against an injected obligation schedule."""

    def __init__(self, schedule: ScheduleTable) -> None:
        self.schedule = schedule

    def compute_totals(self, inputs: CaseInputs) -> PrimaryTotals:
        """Worksheet A through line 6."""
        self._require_primary(inputs, "compute_totals")

        base = compute_basic(inputs, self.schedule)
        add_ons_total = total_add_ons(inputs.add_ons)

        if base.above_top:
            logger.debug("Worksheet A: combined AAI %s above schedule", base.combined_aai)
            return PrimaryTotals(
                advisory=Advisory.ABOVE_TOP_OF_SCHEDULE,
                basic=None,
                used_row_income=None,
                p1_aai=base.p1_aai,
                p2_aai=base.p2_aai,
                combined_aai=base.combined_aai,
                p1_share=base.p1_share,
                p2_share=base.p2_share,
                add_ons_total=add_ons_total,
                total_obligation=None,
                p1_obligation=None,
                p2_obligation=None,
            )

        # Line 5: basic + add-ons; line 6: allocated by income share
        total_obligation = base.basic + add_ons_total
        p1_obligation, p2_obligation = split_by_share(total_obligation, base.p1_share)

        return PrimaryTotals(
            basic=base.basic,
            used_row_income=base.used_row_income,
            p1_aai=base.p1_aai,
            p2_aai=base.p2_aai,
            combined_aai=base.combined_aai,
            p1_share=base.p1_share,
            p2_share=base.p2_share,
            add_ons_total=add_ons_total,
            total_obligation=total_obligation,
            p1_obligation=p1_obligation,
            p2_obligation=p2_obligation,
        )

    def compute_final(self, inputs: CaseInputs) -> PrimaryFinal:
        """Worksheet A through line 9.

        Direct payments (line 7) are credited against each parent's share
        without going below zero (line 8). The recommended order (line 9) is
        the non-custodial parent's line 8, whichever parent earns more.
        """
        self._require_primary(inputs, "compute_final")
        totals = self.compute_totals(inputs)

        if totals.advisory == Advisory.ABOVE_TOP_OF_SCHEDULE:
            return PrimaryFinal(
                **totals.model_dump(),
                primary_custodian=inputs.primary_custodian,
                note=ABOVE_TOP_NOTE,
            )

        p1_direct = direct_pay_total_for_parent(inputs.direct_pay.parent1)
        p2_direct = direct_pay_total_for_parent(inputs.direct_pay.parent2)
        note = direct_pay_consistency_warning(totals.add_ons_total, p1_direct, p2_direct)

        p1_recommended = max(ZERO, totals.p1_obligation - p1_direct)
        p2_recommended = max(ZERO, totals.p2_obligation - p2_direct)

        if inputs.primary_custodian is Parent.P1:
            recommended_order = p2_recommended
        else:
            recommended_order = p1_recommended

        logger.debug(
            "Worksheet A: custodian=%s recommended order=%s",
            inputs.primary_custodian, recommended_order,
        )
        return PrimaryFinal(
            **totals.model_dump(),
            primary_custodian=inputs.primary_custodian,
            p1_direct_pay=p1_direct,
            p2_direct_pay=p2_direct,
            p1_recommended=p1_recommended,
            p2_recommended=p2_recommended,
            recommended_order=recommended_order,
            note=note,
        )

    def compute_for_custodian(self, inputs: CaseInputs, custodian: Parent) -> PrimaryFinal:
        """Run Worksheet A on any case, treating `custodian` as primary."""
        return self.compute_final(inputs.as_primary(custodian))

    @staticmethod
    def _require_primary(inputs: CaseInputs, stage: str) -> None:
        if inputs.custody_type != CustodyType.PRIMARY:
            raise CustodyTypeMismatchError(
                f"Worksheet A {stage}", CustodyType.PRIMARY.value, inputs.custody_type.value
            )


def compute_primary_final(inputs: CaseInputs, schedule: ScheduleTable) -> PrimaryFinal:
    """Convenience wrapper: full Worksheet A for a primary-custody case."""
    return PrimaryWorksheet(schedule).compute_final(inputs)
