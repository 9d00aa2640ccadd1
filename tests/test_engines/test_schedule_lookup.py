"""Tests for the schedule lookup engine (next-higher-row rule)."""

from decimal import Decimal

import pytest

from childsupport.engines.schedule import (
    ceiling_index,
    lookup_basic_obligation,
    validate_schedule,
)
from childsupport.exceptions import ScheduleValidationError, UnsupportedChildCountError
from childsupport.models.enums import LookupStatus
from childsupport.models.schedule import ScheduleTable


class TestCeilingIndex:
    def test_exact_breakpoint(self):
        incomes = [Decimal("1000"), Decimal("2000"), Decimal("3000")]
        assert ceiling_index(incomes, Decimal("2000")) == 1

    def test_between_rows_picks_higher(self):
        incomes = [Decimal("1000"), Decimal("2000"), Decimal("3000")]
        assert ceiling_index(incomes, Decimal("2000.01")) == 2

    def test_above_top(self):
        incomes = [Decimal("1000"), Decimal("2000")]
        assert ceiling_index(incomes, Decimal("2000.01")) is None


class TestLookupBasicObligation:
    def test_between_rows_uses_next_higher_row(self, sample_schedule):
        # 1600 falls between 1500 and 2000 -> 2000 row
        result = lookup_basic_obligation(sample_schedule, Decimal("1600"), 2)
        assert result.status == LookupStatus.OK
        assert result.amount == Decimal("300")
        assert result.used_row_index == 3
        assert result.used_row_income == Decimal("2000")

    def test_exact_breakpoint_uses_that_row(self, sample_schedule):
        result = lookup_basic_obligation(sample_schedule, Decimal("2500"), 3)
        assert result.used_row_income == Decimal("2500")
        assert result.amount == Decimal("510")

    def test_just_above_breakpoint(self, sample_schedule):
        result = lookup_basic_obligation(sample_schedule, Decimal("1234"), 2)
        assert result.used_row_income == Decimal("1250")
        assert result.amount == Decimal("200")

    def test_at_or_below_minimum_still_returns_amount(self, sample_schedule):
        result = lookup_basic_obligation(sample_schedule, Decimal("400"), 1)
        assert result.status == LookupStatus.AT_OR_BELOW_MINIMUM
        assert result.amount == Decimal("100")
        assert result.used_row_index == 0

    def test_exactly_first_row_is_at_or_below_minimum(self, sample_schedule):
        result = lookup_basic_obligation(sample_schedule, Decimal("1000"), 1)
        assert result.status == LookupStatus.AT_OR_BELOW_MINIMUM

    def test_top_row_is_ok(self, sample_schedule):
        result = lookup_basic_obligation(sample_schedule, Decimal("10000"), 2)
        assert result.status == LookupStatus.OK
        assert result.amount == Decimal("1400")

    def test_above_top_has_no_amount(self, sample_schedule):
        result = lookup_basic_obligation(sample_schedule, Decimal("40000"), 2)
        assert result.status == LookupStatus.ABOVE_TOP
        assert result.amount is None
        assert result.used_row_index is None
        assert result.used_row_income is None

    def test_unsupported_child_count(self, sample_schedule):
        with pytest.raises(UnsupportedChildCountError, match="7 children"):
            lookup_basic_obligation(sample_schedule, Decimal("1600"), 7)

    def test_unsupported_child_count_above_top(self, sample_schedule):
        with pytest.raises(UnsupportedChildCountError):
            lookup_basic_obligation(sample_schedule, Decimal("99999"), 7)

    def test_monotonic_across_table(self, sample_schedule):
        amounts = [
            lookup_basic_obligation(sample_schedule, income, 2).amount
            for income in sample_schedule.incomes
        ]
        assert amounts == sorted(amounts)


class TestValidateSchedule:
    def test_valid_schedule(self, sample_schedule):
        validate_schedule(sample_schedule)

    def test_empty_incomes(self):
        table = ScheduleTable(incomes=[], by_children={1: []})
        with pytest.raises(ScheduleValidationError, match="no income rows"):
            validate_schedule(table)

    def test_non_ascending_incomes(self):
        table = ScheduleTable(
            incomes=[Decimal("1000"), Decimal("1000")],
            by_children={1: [Decimal("100"), Decimal("150")]},
        )
        with pytest.raises(ScheduleValidationError, match="strictly ascending"):
            validate_schedule(table)

    def test_misaligned_column(self):
        table = ScheduleTable(
            incomes=[Decimal("1000"), Decimal("2000")],
            by_children={1: [Decimal("100")]},
        )
        with pytest.raises(ScheduleValidationError, match="column for 1 children"):
            validate_schedule(table)

    def test_lookup_revalidates_every_call(self):
        table = ScheduleTable(
            incomes=[Decimal("2000"), Decimal("1000")],
            by_children={2: [Decimal("100"), Decimal("150")]},
        )
        with pytest.raises(ScheduleValidationError):
            lookup_basic_obligation(table, Decimal("500"), 2)
