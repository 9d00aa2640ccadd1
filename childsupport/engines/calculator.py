"""Case orchestrator.

Routes a case to Worksheet A or B, orients the final amount (positive means
Parent 1 pays Parent 2), and gathers a flat, line-keyed worksheet map plus
any notes for display or audit.
"""

import logging
from decimal import Decimal

from childsupport.engines.guidelines import AMOUNT_TOLERANCE, ZERO
from childsupport.engines.primary import ABOVE_TOP_NOTE, PrimaryWorksheet
from childsupport.engines.shared import SharedWorksheet
from childsupport.models.case import CaseInputs
from childsupport.models.enums import Advisory, CustodyType, Parent, WorksheetPath
from childsupport.models.results import (
    CaseOutputs,
    PrimaryFinal,
    SharedAdvisory,
    SharedComputed,
    SharedRedirected,
)
from childsupport.models.schedule import ScheduleTable

logger = logging.getLogger(__name__)

# Worksheet A line keys, in display order, and the result attribute behind each.
PRIMARY_WORKSHEET_LINES: list[tuple[str, str]] = [
    ("line2_p1AAI", "p1_aai"),
    ("line2_p2AAI", "p2_aai"),
    ("line3_p1Share", "p1_share"),
    ("line3_p2Share", "p2_share"),
    ("line4_basic", "basic"),
    ("line4_usedRowIncome", "used_row_income"),
    ("line5_totalAddOns", "add_ons_total"),
    ("line5_totalObligation", "total_obligation"),
    ("line6_p1Obligation", "p1_obligation"),
    ("line6_p2Obligation", "p2_obligation"),
    ("line7_p1DirectPay", "p1_direct_pay"),
    ("line7_p2DirectPay", "p2_direct_pay"),
    ("line8_p1Recommended", "p1_recommended"),
    ("line8_p2Recommended", "p2_recommended"),
    ("line9_recommendedOrder", "recommended_order"),
]


def orient(amount: Decimal, payor: Parent | None) -> Decimal:
    """Sign an amount: + when Parent 1 pays, - when Parent 2 pays."""
    if payor is Parent.P1:
        return amount
    if payor is Parent.P2:
        return -amount
    return ZERO


def primary_worksheet_map(result: PrimaryFinal) -> dict[str, Decimal]:
    """Flatten a Worksheet A result into line keys, skipping null lines."""
    worksheet: dict[str, Decimal] = {}
    for key, attr in PRIMARY_WORKSHEET_LINES:
        value = getattr(result, attr)
        if value is not None:
            worksheet[key] = value
    return worksheet


class CaseCalculator:
    """Calculates a recommended child support order for one case."""

    def __init__(self, schedule: ScheduleTable) -> None:
        self.schedule = schedule
        self.primary = PrimaryWorksheet(schedule)
        self.shared = SharedWorksheet(schedule, self.primary.compute_for_custodian)

    def calculate(self, inputs: CaseInputs) -> CaseOutputs:
        logger.debug(
            "Calculating %s custody case with %d children",
            inputs.custody_type, inputs.num_children,
        )
        if inputs.custody_type == CustodyType.PRIMARY:
            return self._from_primary(self.primary.compute_final(inputs))

        outcome = self.shared.compute_final(inputs)
        if isinstance(outcome, SharedRedirected):
            return self._from_redirect(outcome)
        if isinstance(outcome, SharedAdvisory):
            return self._from_shared_advisory(outcome)
        return self._from_shared(outcome)

    @staticmethod
    def _from_primary(
        result: PrimaryFinal,
        notes: list[str] | None = None,
        advisory: Advisory | None = None,
    ) -> CaseOutputs:
        notes = list(notes or [])
        if result.note:
            notes.append(result.note)
        payor = result.payor
        amount = result.recommended_order if result.recommended_order is not None else ZERO
        return CaseOutputs(
            recommended_order=orient(amount, payor),
            payor=payor,
            path=WorksheetPath.WORKSHEET_A,
            worksheet=primary_worksheet_map(result),
            notes=notes,
            advisory=advisory or result.advisory,
        )

    def _from_redirect(self, outcome: SharedRedirected) -> CaseOutputs:
        return self._from_primary(
            outcome.primary_result,
            notes=[outcome.note],
            advisory=Advisory.REDIRECTED_TO_WORKSHEET_A,
        )

    @staticmethod
    def _from_shared_advisory(outcome: SharedAdvisory) -> CaseOutputs:
        return CaseOutputs(
            recommended_order=ZERO,
            payor=None,
            path=WorksheetPath.WORKSHEET_B,
            worksheet=dict(outcome.worksheet),
            notes=[ABOVE_TOP_NOTE],
            advisory=outcome.advisory,
        )

    @staticmethod
    def _from_shared(outcome: SharedComputed) -> CaseOutputs:
        notes: list[str] = []
        if outcome.note:
            notes.append(outcome.note)

        worksheet = {k: v for k, v in outcome.worksheet.items() if v is not None}
        cap = outcome.cap
        if cap is not None and abs(cap.before - cap.after) > AMOUNT_TOLERANCE:
            notes.append(
                f"Shared result capped at {cap.primary:.2f} (primary custody equivalent)."
            )
            worksheet["line16_cappedAmount"] = cap.after

        return CaseOutputs(
            recommended_order=orient(outcome.recommended, outcome.payor),
            payor=outcome.payor,
            path=WorksheetPath.WORKSHEET_B,
            worksheet=worksheet,
            notes=notes,
            advisory=None,
        )


def calculate_case(inputs: CaseInputs, schedule: ScheduleTable) -> CaseOutputs:
    """Calculate a case against an explicitly supplied schedule."""
    return CaseCalculator(schedule).calculate(inputs)
