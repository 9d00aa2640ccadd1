"""Enumerations for the child support calculator."""

from enum import StrEnum


class CustodyType(StrEnum):
    PRIMARY = "PRIMARY"
    SHARED = "SHARED"


class Parent(StrEnum):
    P1 = "P1"
    P2 = "P2"

    @property
    def other(self) -> "Parent":
        return Parent.P2 if self is Parent.P1 else Parent.P1


class LookupStatus(StrEnum):
    OK = "ok"
    AT_OR_BELOW_MINIMUM = "atOrBelowMinimum"
    ABOVE_TOP = "aboveTop"


class Advisory(StrEnum):
    ABOVE_TOP_OF_SCHEDULE = "aboveTopOfSchedule"
    REDIRECTED_TO_WORKSHEET_A = "redirectedToWorksheetA"


class WorksheetPath(StrEnum):
    WORKSHEET_A = "WorksheetA"
    WORKSHEET_B = "WorksheetB"
