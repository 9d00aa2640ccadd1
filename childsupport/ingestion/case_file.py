"""Case file adapter: reads and validates a JSON case description."""

import json
from decimal import Decimal
from pathlib import Path

from pydantic import ValidationError

from childsupport.engines.addons import direct_pay_total_for_parent, total_add_ons
from childsupport.engines.guidelines import AMOUNT_TOLERANCE
from childsupport.exceptions import DataValidationError
from childsupport.models.case import NIGHTS_PER_YEAR, CaseInputs
from childsupport.models.enums import CustodyType


class CaseFileAdapter:
    """Turns a case JSON file into a validated CaseInputs."""

    def parse(self, file_path: Path) -> CaseInputs:
        """Read a case file and validate it.

        Raises:
            FileNotFoundError: The file does not exist.
            DataValidationError: The JSON is malformed or breaks an input rule.
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            raw = json.loads(file_path.read_text(), parse_float=Decimal)
        except json.JSONDecodeError as e:
            raise DataValidationError(file_path.name, f"invalid JSON ({e})") from e
        return self.from_dict(raw)

    @staticmethod
    def from_dict(raw: dict) -> CaseInputs:
        try:
            return CaseInputs.model_validate(raw)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or "case"
            raise DataValidationError(field, first["msg"]) from e

    def validate(self, inputs: CaseInputs) -> list[str]:
        """Non-blocking advisories about a validated case."""
        warnings: list[str] = []

        if (
            inputs.custody_type == CustodyType.PRIMARY
            and inputs.overnights_parent1 != NIGHTS_PER_YEAR
        ):
            warnings.append(
                "overnights_parent1 is ignored for PRIMARY custody cases "
                "(primary_custodian decides who pays)."
            )

        declared = total_add_ons(inputs.add_ons)
        direct = direct_pay_total_for_parent(
            inputs.direct_pay.parent1
        ) + direct_pay_total_for_parent(inputs.direct_pay.parent2)
        if abs(direct - declared) > AMOUNT_TOLERANCE:
            warnings.append(
                f"Direct payments ({direct:.2f}) differ from declared add-ons "
                f"({declared:.2f}); each parent is credited what they actually pay."
            )

        for label, parent in (("parent1", inputs.parent1), ("parent2", inputs.parent2)):
            deductions = (
                parent.preexisting_support_paid + parent.alimony_paid
            )
            if deductions > parent.actual_monthly + parent.alimony_received:
                warnings.append(
                    f"{label} deductions exceed income; adjusted actual income "
                    "will be negative (multifamily allowance not included)."
                )

        return warnings
