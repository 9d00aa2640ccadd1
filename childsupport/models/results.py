"""Calculation result models.

Worksheet A and B stages mirror the line numbers of the court forms. The
shared-custody pipeline has three terminal outcomes modelled as a tagged
union on ``kind`` so that, for example, a computed result can never lack a
basic obligation.
"""

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from childsupport.models.enums import Advisory, LookupStatus, Parent, WorksheetPath


class LookupResult(BaseModel):
    status: LookupStatus
    amount: Decimal | None = None
    used_row_index: int | None = None
    used_row_income: Decimal | None = None


class BasicResult(BaseModel):
    """Lines 2-4 common to both worksheets."""

    p1_aai: Decimal
    p2_aai: Decimal
    combined_aai: Decimal
    p1_share: Decimal
    p2_share: Decimal
    basic_status: LookupStatus
    basic: Decimal | None
    used_row_income: Decimal | None

    @property
    def above_top(self) -> bool:
        return self.basic_status == LookupStatus.ABOVE_TOP or self.basic is None


class PrimaryTotals(BaseModel):
    """Worksheet A through line 6."""

    path: WorksheetPath = WorksheetPath.WORKSHEET_A
    advisory: Advisory | None = None
    basic: Decimal | None
    used_row_income: Decimal | None
    p1_aai: Decimal
    p2_aai: Decimal
    combined_aai: Decimal
    p1_share: Decimal
    p2_share: Decimal
    add_ons_total: Decimal
    total_obligation: Decimal | None
    p1_obligation: Decimal | None
    p2_obligation: Decimal | None


class PrimaryFinal(PrimaryTotals):
    """Worksheet A through line 9 (recommended order)."""

    primary_custodian: Parent
    p1_direct_pay: Decimal | None = None
    p2_direct_pay: Decimal | None = None
    p1_recommended: Decimal | None = None
    p2_recommended: Decimal | None = None
    recommended_order: Decimal | None = None
    note: str | None = None

    @property
    def payor(self) -> Parent | None:
        if self.advisory == Advisory.ABOVE_TOP_OF_SCHEDULE:
            return None
        return self.primary_custodian.other


class SharedStarter(BaseModel):
    """Worksheet B lines 2-7: the threshold and adjusted-basic slice."""

    advisory: Advisory | None = None
    redirect_to_worksheet_a: bool = False
    basic: Decimal | None
    adjusted_basic: Decimal | None
    used_row_income: Decimal | None
    p1_aai: Decimal
    p2_aai: Decimal
    combined_aai: Decimal
    p1_share: Decimal
    p2_share: Decimal
    overnights_p1: int
    overnight_pct_p1: Decimal | None = None
    overnight_pct_p2: Decimal | None = None


class CapDetail(BaseModel):
    before: Decimal
    after: Decimal
    primary: Decimal


class SharedAdvisory(BaseModel):
    kind: Literal["advisory"] = "advisory"
    advisory: Literal[Advisory.ABOVE_TOP_OF_SCHEDULE] = Advisory.ABOVE_TOP_OF_SCHEDULE
    worksheet: dict[str, Decimal]


class SharedRedirected(BaseModel):
    kind: Literal["redirected"] = "redirected"
    primary_custodian: Parent
    primary_result: PrimaryFinal
    note: str


class SharedComputed(BaseModel):
    kind: Literal["computed"] = "computed"
    payor: Parent | None
    recommended: Decimal
    note: str | None = None
    worksheet: dict[str, Decimal]
    cap: CapDetail | None = None


SharedOutcome = Annotated[
    SharedAdvisory | SharedRedirected | SharedComputed,
    Field(discriminator="kind"),
]


class CaseOutputs(BaseModel):
    """Final answer for one case.

    ``recommended_order`` is signed: positive means Parent 1 pays Parent 2,
    negative means Parent 2 pays Parent 1.
    """

    recommended_order: Decimal
    payor: Parent | None
    path: WorksheetPath
    worksheet: dict[str, Decimal] = Field(default_factory=dict)
    notes: list[str] = Field(default_factory=list)
    advisory: Advisory | None = None
