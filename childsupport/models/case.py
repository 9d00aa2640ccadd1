"""Case input models.

All money amounts are monthly. Parent 2's overnights are never stored; they
are always 365 minus Parent 1's so the two can never disagree.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from childsupport.models.enums import CustodyType, Parent

NIGHTS_PER_YEAR = 365


class ParentIncome(BaseModel):
    """One parent's monthly financial facts (worksheet line 1 inputs)."""

    model_config = ConfigDict(frozen=True)

    actual_monthly: Decimal = Field(ge=0)
    preexisting_support_paid: Decimal = Field(default=Decimal("0"), ge=0)
    alimony_paid: Decimal = Field(default=Decimal("0"), ge=0)
    alimony_received: Decimal = Field(default=Decimal("0"), ge=0)
    multifamily_children_in_home: int = Field(default=0, ge=0)


class AddOnSet(BaseModel):
    """Monthly add-on expenses by category (lines A-4a..e / B-13a..e)."""

    model_config = ConfigDict(frozen=True)

    childcare: Decimal = Field(default=Decimal("0"), ge=0)
    health_insurance: Decimal = Field(default=Decimal("0"), ge=0)
    extraordinary_medical: Decimal = Field(default=Decimal("0"), ge=0)
    cash_medical_ivd: Decimal = Field(default=Decimal("0"), ge=0)
    additional_expenses: Decimal = Field(default=Decimal("0"), ge=0)


class DirectPay(BaseModel):
    """Add-on amounts each parent pays straight to a provider."""

    model_config = ConfigDict(frozen=True)

    parent1: AddOnSet = Field(default_factory=AddOnSet)
    parent2: AddOnSet = Field(default_factory=AddOnSet)

    def for_parent(self, parent: Parent) -> AddOnSet:
        return self.parent1 if parent is Parent.P1 else self.parent2


class CaseInputs(BaseModel):
    """Everything one calculation run needs."""

    model_config = ConfigDict(frozen=True)

    num_children: int = Field(ge=1)
    custody_type: CustodyType
    primary_custodian: Parent = Parent.P1
    overnights_parent1: int = Field(default=NIGHTS_PER_YEAR, ge=0, le=NIGHTS_PER_YEAR)
    parent1: ParentIncome
    parent2: ParentIncome
    add_ons: AddOnSet = Field(default_factory=AddOnSet)
    direct_pay: DirectPay = Field(default_factory=DirectPay)

    @property
    def overnights_parent2(self) -> int:
        return NIGHTS_PER_YEAR - self.overnights_parent1

    def as_primary(self, custodian: Parent) -> "CaseInputs":
        """Copy of this case routed to Worksheet A with the given custodian."""
        return self.model_copy(
            update={"custody_type": CustodyType.PRIMARY, "primary_custodian": custodian}
        )
