"""Shared test fixtures for the child support calculator."""

from decimal import Decimal

import pytest

from childsupport.models.case import AddOnSet, CaseInputs, DirectPay, ParentIncome
from childsupport.models.enums import CustodyType, Parent
from childsupport.models.schedule import ScheduleTable


def _d(values: list[int]) -> list[Decimal]:
    return [Decimal(v) for v in values]


# Same numbers as childsupport/data/demo_schedule.json
SAMPLE_INCOMES = _d([1000, 1250, 1500, 2000, 2500, 3000, 4000, 5000, 6000, 8000, 10000])
SAMPLE_COLUMNS = {
    1: _d([100, 150, 200, 250, 330, 400, 520, 640, 760, 900, 1020]),
    2: _d([150, 200, 250, 300, 420, 520, 680, 830, 990, 1200, 1400]),
    3: _d([180, 240, 300, 370, 510, 640, 840, 1030, 1230, 1500, 1750]),
}


@pytest.fixture
def sample_schedule() -> ScheduleTable:
    return ScheduleTable(incomes=SAMPLE_INCOMES, by_children=SAMPLE_COLUMNS)


def make_parent(actual: str | int, **kwargs) -> ParentIncome:
    return ParentIncome(actual_monthly=Decimal(str(actual)), **kwargs)


def make_case(
    custody_type: CustodyType = CustodyType.PRIMARY,
    p1_income: str | int = 900,
    p2_income: str | int = 700,
    num_children: int = 2,
    primary_custodian: Parent = Parent.P1,
    overnights_parent1: int = 365,
    add_ons: AddOnSet | None = None,
    direct_pay: DirectPay | None = None,
    parent1: ParentIncome | None = None,
    parent2: ParentIncome | None = None,
) -> CaseInputs:
    return CaseInputs(
        num_children=num_children,
        custody_type=custody_type,
        primary_custodian=primary_custodian,
        overnights_parent1=overnights_parent1,
        parent1=parent1 or make_parent(p1_income),
        parent2=parent2 or make_parent(p2_income),
        add_ons=add_ons or AddOnSet(),
        direct_pay=direct_pay or DirectPay(),
    )


@pytest.fixture
def sample_add_ons() -> AddOnSet:
    return AddOnSet(childcare=Decimal("120"), health_insurance=Decimal("30"))


@pytest.fixture
def mismatched_direct_pay() -> DirectPay:
    """Parent 1 pays 50 and Parent 2 pays 20 directly (70 of 150 declared)."""
    return DirectPay(
        parent1=AddOnSet(childcare=Decimal("20"), health_insurance=Decimal("30")),
        parent2=AddOnSet(childcare=Decimal("10"), health_insurance=Decimal("10")),
    )


@pytest.fixture
def primary_case(sample_add_ons: AddOnSet, mismatched_direct_pay: DirectPay) -> CaseInputs:
    return make_case(add_ons=sample_add_ons, direct_pay=mismatched_direct_pay)


@pytest.fixture
def shared_case(sample_add_ons: AddOnSet, mismatched_direct_pay: DirectPay) -> CaseInputs:
    return make_case(
        custody_type=CustodyType.SHARED,
        overnights_parent1=200,
        add_ons=sample_add_ons,
        direct_pay=mismatched_direct_pay,
    )


@pytest.fixture
def case_factory():
    return make_case


@pytest.fixture
def parent_factory():
    return make_parent
