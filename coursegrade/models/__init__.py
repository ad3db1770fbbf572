"""
Data models for the grade tracker.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .course import SubItem, Criterion, GradeScaleEntry, Course, Semester
from .state import AppState, Theme
from .summary import CourseBreakdown, DistributionEntry, SemesterSummary

__all__ = [
    # Gradebook entities
    "SubItem",
    "Criterion",
    "GradeScaleEntry",
    "Course",
    "Semester",
    # Saved state
    "AppState",
    "Theme",
    # Summary view-models
    "CourseBreakdown",
    "DistributionEntry",
    "SemesterSummary",
]
