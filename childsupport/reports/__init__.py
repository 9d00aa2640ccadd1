"""Report generation for the child support calculator."""

from childsupport.reports.worksheet import WorksheetReportGenerator

__all__ = ["WorksheetReportGenerator"]
