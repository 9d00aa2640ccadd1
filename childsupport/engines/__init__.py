"""Child support worksheet engines."""

from childsupport.engines.calculator import CaseCalculator, calculate_case
from childsupport.engines.primary import PrimaryWorksheet, compute_primary_final
from childsupport.engines.schedule import lookup_basic_obligation, validate_schedule
from childsupport.engines.shared import SharedWorksheet

__all__ = [
    "CaseCalculator",
    "PrimaryWorksheet",
    "SharedWorksheet",
    "calculate_case",
    "compute_primary_final",
    "lookup_basic_obligation",
    "validate_schedule",
]
