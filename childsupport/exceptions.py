"""Custom exceptions for the child support calculator."""


class ChildSupportError(Exception):
    """Base exception for child support computation errors."""


class ScheduleValidationError(ChildSupportError):
    """Raised when the obligation schedule is structurally malformed."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid schedule: {reason}")


class UnsupportedChildCountError(ScheduleValidationError):
    """Raised when the schedule has no column for the requested child count."""

    def __init__(self, child_count: int):
        self.child_count = child_count
        super().__init__(f"Schedule has no column for {child_count} children.")


class CustodyTypeMismatchError(ChildSupportError):
    """Raised when a worksheet is run against a case of the other custody type."""

    def __init__(self, worksheet: str, expected: str, actual: str):
        self.worksheet = worksheet
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{worksheet} expects custody type {expected!r}, got {actual!r}"
        )


class DataValidationError(ChildSupportError):
    """Raised when input data fails validation."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error on '{field}': {message}")


class ScheduleLoadError(ChildSupportError):
    """Raised when a schedule file cannot be read or decoded."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Schedule load error from {source}: {message}")
