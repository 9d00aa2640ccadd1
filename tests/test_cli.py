"""Tests for CLI commands."""

import json
from decimal import Decimal

import pytest
from typer.testing import CliRunner

from childsupport.cli import app

runner = CliRunner()


@pytest.fixture
def case_file(tmp_path):
    f = tmp_path / "case.json"
    f.write_text(json.dumps({
        "num_children": 2,
        "custody_type": "PRIMARY",
        "parent1": {"actual_monthly": 900},
        "parent2": {"actual_monthly": 700},
    }))
    return f


@pytest.fixture
def small_schedule(tmp_path):
    f = tmp_path / "schedule.json"
    f.write_text(json.dumps({
        "combined_monthly_income": [500, 5000],
        "by_children": {"1": [50, 500], "2": [80, 800]},
    }))
    return f


class TestCLI:
    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Child support" in result.output

    @pytest.mark.parametrize("command", ["calculate", "lookup", "check-schedule"])
    def test_command_help(self, command):
        result = runner.invoke(app, [command, "--help"])
        assert result.exit_code == 0


class TestCalculate:
    def test_report(self, case_file):
        result = runner.invoke(app, ["calculate", str(case_file)])
        assert result.exit_code == 0
        assert "WORKSHEET A - PRIMARY PHYSICAL CUSTODY" in result.output
        assert "RECOMMENDED ORDER: P2 pays $131.25 per month" in result.output

    def test_json(self, case_file):
        result = runner.invoke(app, ["calculate", str(case_file), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["payor"] == "P2"
        assert data["path"] == "WorksheetA"
        assert Decimal(data["recommended_order"]) == Decimal("-131.25")
        assert data["advisory"] is None

    def test_custom_schedule(self, case_file, small_schedule):
        result = runner.invoke(
            app, ["calculate", str(case_file), "--schedule", str(small_schedule), "--json"]
        )
        assert result.exit_code == 0
        # 1600 combined rounds up to the 5000 row: 800 * 0.4375
        assert Decimal(json.loads(result.output)["recommended_order"]) == Decimal("-350")

    def test_schedule_from_environment(self, case_file, small_schedule):
        result = runner.invoke(
            app,
            ["calculate", str(case_file), "--json"],
            env={"CHILDSUPPORT_SCHEDULE": str(small_schedule)},
        )
        assert result.exit_code == 0
        assert Decimal(json.loads(result.output)["recommended_order"]) == Decimal("-350")

    def test_warning_for_ignored_overnights(self, tmp_path):
        f = tmp_path / "case.json"
        f.write_text(json.dumps({
            "num_children": 1,
            "custody_type": "PRIMARY",
            "overnights_parent1": 200,
            "parent1": {"actual_monthly": 900},
            "parent2": {"actual_monthly": 700},
        }))
        result = runner.invoke(app, ["calculate", str(f)])
        assert result.exit_code == 0
        assert "Warning: overnights_parent1 is ignored" in result.output

    def test_missing_case_file(self, tmp_path):
        result = runner.invoke(app, ["calculate", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Error: File not found" in result.output

    def test_invalid_case(self, tmp_path):
        f = tmp_path / "case.json"
        f.write_text(json.dumps({"num_children": 0, "custody_type": "PRIMARY"}))
        result = runner.invoke(app, ["calculate", str(f)])
        assert result.exit_code == 1
        assert "num_children" in result.output

    def test_unsupported_child_count(self, tmp_path):
        f = tmp_path / "case.json"
        f.write_text(json.dumps({
            "num_children": 7,
            "custody_type": "PRIMARY",
            "parent1": {"actual_monthly": 900},
            "parent2": {"actual_monthly": 700},
        }))
        result = runner.invoke(app, ["calculate", str(f)])
        assert result.exit_code == 1
        assert "no column for 7 children" in result.output


class TestLookup:
    def test_lookup(self):
        result = runner.invoke(app, ["lookup", "1600", "2"])
        assert result.exit_code == 0
        assert "Schedule Lookup" in result.output
        assert "$300.00" in result.output
        assert "$2,000.00" in result.output

    def test_above_top(self):
        result = runner.invoke(app, ["lookup", "50000", "1"])
        assert result.exit_code == 0
        assert "aboveTop" in result.output

    def test_invalid_income(self):
        result = runner.invoke(app, ["lookup", "lots", "2"])
        assert result.exit_code == 1
        assert "Invalid income 'lots'" in result.output

    @pytest.mark.parametrize("income", ["nan", "Infinity", "-inf"])
    def test_non_finite_income(self, income):
        result = runner.invoke(app, ["lookup", "--", income, "2"])
        assert result.exit_code == 1
        assert f"Invalid income '{income}'" in result.output

    def test_unsupported_child_count(self):
        result = runner.invoke(app, ["lookup", "1600", "5"])
        assert result.exit_code == 1


class TestCheckSchedule:
    def test_demo_schedule(self):
        result = runner.invoke(app, ["check-schedule"])
        assert result.exit_code == 0
        assert (
            "Schedule OK: 11 income rows ($1,000.00 to $10,000.00), child counts 1, 2, 3"
            in result.output
        )

    def test_custom_schedule(self, small_schedule):
        result = runner.invoke(app, ["check-schedule", "--schedule", str(small_schedule)])
        assert result.exit_code == 0
        assert "2 income rows" in result.output

    def test_malformed_schedule(self, tmp_path):
        f = tmp_path / "bad.json"
        f.write_text(json.dumps({
            "combined_monthly_income": [2000, 1000],
            "by_children": {"1": [10, 20]},
        }))
        result = runner.invoke(app, ["check-schedule", "--schedule", str(f)])
        assert result.exit_code == 1
        assert "Invalid schedule" in result.output
