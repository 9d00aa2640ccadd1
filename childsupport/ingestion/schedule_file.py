"""Schedule data source: reads an obligation schedule from a JSON file.

Expected shape::

    {
      "combined_monthly_income": [1000, 1250, ...],
      "by_children": {"1": [100, 150, ...], "2": [...]},
      "meta": {...}
    }
"""

import json
import logging
from decimal import Decimal
from pathlib import Path

from pydantic import ValidationError

from childsupport.engines.schedule import validate_schedule
from childsupport.exceptions import ScheduleLoadError
from childsupport.models.schedule import ScheduleTable

logger = logging.getLogger(__name__)

DEMO_SCHEDULE_PATH = Path(__file__).parent.parent / "data" / "demo_schedule.json"


class ScheduleLoader:
    """Loads and structurally validates schedule JSON files."""

    def load(self, file_path: Path) -> ScheduleTable:
        """Read a schedule file and return a validated ScheduleTable.

        Raises:
            FileNotFoundError: The file does not exist.
            ScheduleLoadError: The file is not a decodable schedule.
            ScheduleValidationError: The table is structurally malformed.
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            raw = json.loads(file_path.read_text(), parse_float=Decimal)
        except json.JSONDecodeError as e:
            raise ScheduleLoadError(str(file_path), f"invalid JSON ({e})") from e

        table = self.from_dict(raw, source=str(file_path))
        validate_schedule(table)
        logger.info(
            "Loaded schedule from %s: %d rows, child counts %s",
            file_path, len(table.incomes), table.child_counts,
        )
        return table

    @staticmethod
    def from_dict(raw: dict, source: str = "<dict>") -> ScheduleTable:
        if not isinstance(raw, dict):
            raise ScheduleLoadError(source, "top level must be a JSON object")
        missing = [k for k in ("combined_monthly_income", "by_children") if k not in raw]
        if missing:
            raise ScheduleLoadError(source, f"missing keys: {', '.join(missing)}")
        try:
            return ScheduleTable(
                incomes=raw["combined_monthly_income"],
                by_children=raw["by_children"],
                meta=raw.get("meta") or {},
            )
        except ValidationError as e:
            raise ScheduleLoadError(source, str(e)) from e


def load_demo_schedule() -> ScheduleTable:
    """The bundled demonstration schedule. For applications, not the engine."""
    return ScheduleLoader().load(DEMO_SCHEDULE_PATH)
