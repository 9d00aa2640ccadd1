"""Data models for the child support calculator."""

from childsupport.models.case import AddOnSet, CaseInputs, DirectPay, ParentIncome
from childsupport.models.enums import (
    Advisory,
    CustodyType,
    LookupStatus,
    Parent,
    WorksheetPath,
)
from childsupport.models.results import (
    BasicResult,
    CapDetail,
    CaseOutputs,
    LookupResult,
    PrimaryFinal,
    PrimaryTotals,
    SharedAdvisory,
    SharedComputed,
    SharedOutcome,
    SharedRedirected,
    SharedStarter,
)
from childsupport.models.schedule import ScheduleTable

__all__ = [
    "AddOnSet",
    "Advisory",
    "BasicResult",
    "CapDetail",
    "CaseInputs",
    "CaseOutputs",
    "CustodyType",
    "DirectPay",
    "LookupResult",
    "LookupStatus",
    "Parent",
    "ParentIncome",
    "PrimaryFinal",
    "PrimaryTotals",
    "ScheduleTable",
    "SharedAdvisory",
    "SharedComputed",
    "SharedOutcome",
    "SharedRedirected",
    "SharedStarter",
    "WorksheetPath",
]
