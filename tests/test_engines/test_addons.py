"""Tests for add-on totals, income-share split and direct-pay credits."""

from decimal import Decimal

from childsupport.engines.addons import (
    direct_pay_consistency_warning,
    direct_pay_total_for_parent,
    split_by_share,
    total_add_ons,
)
from childsupport.models.case import AddOnSet


class TestTotalAddOns:
    def test_sums_all_categories(self):
        add_ons = AddOnSet(
            childcare=Decimal("120"),
            health_insurance=Decimal("30"),
            extraordinary_medical=Decimal("15.50"),
            cash_medical_ivd=Decimal("4.50"),
            additional_expenses=Decimal("80"),
        )
        assert total_add_ons(add_ons) == Decimal("250")

    def test_missing_categories_are_zero(self):
        assert total_add_ons(AddOnSet(childcare=Decimal("120"))) == Decimal("120")

    def test_none_is_zero(self):
        assert total_add_ons(None) == Decimal("0")


class TestSplitByShare:
    def test_split(self):
        p1, p2 = split_by_share(Decimal("450"), Decimal("0.5625"))
        assert p1 == Decimal("253.125")
        assert p2 == Decimal("196.875")

    def test_parts_always_sum_to_total(self):
        total = Decimal("1000.01")
        for share in (Decimal(1) / Decimal(3), Decimal("0.123456789"), Decimal("0.999")):
            p1, p2 = split_by_share(total, share)
            assert p1 + p2 == total

    def test_zero_total(self):
        assert split_by_share(Decimal("0"), Decimal("0.4")) == (Decimal("0"), Decimal("0"))


class TestDirectPay:
    def test_total_for_parent(self):
        direct = AddOnSet(childcare=Decimal("20"), health_insurance=Decimal("30"))
        assert direct_pay_total_for_parent(direct) == Decimal("50")

    def test_consistent_direct_pay_has_no_warning(self):
        assert direct_pay_consistency_warning(
            Decimal("150"), Decimal("120"), Decimal("30")
        ) is None

    def test_within_tolerance_has_no_warning(self):
        assert direct_pay_consistency_warning(
            Decimal("150"), Decimal("120.0000001"), Decimal("30")
        ) is None

    def test_mismatch_produces_note(self):
        note = direct_pay_consistency_warning(Decimal("150"), Decimal("50"), Decimal("20"))
        assert note == "Note: direct-pay sum (70.00) != add-ons total (150.00)."

    def test_overpayment_produces_note(self):
        note = direct_pay_consistency_warning(Decimal("100"), Decimal("150"), Decimal("0"))
        assert note == "Note: direct-pay sum (150.00) != add-ons total (100.00)."
