"""Loaders for case files and obligation schedules."""

from childsupport.ingestion.case_file import CaseFileAdapter
from childsupport.ingestion.schedule_file import ScheduleLoader, load_demo_schedule

__all__ = [
    "CaseFileAdapter",
    "ScheduleLoader",
    "load_demo_schedule",
]
