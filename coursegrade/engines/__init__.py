"""
Grading, summary and editing engines.

This package contains all the business logic of the grade tracker. The
grading functions are the core; the summary engine and the editing
functions are built on top of them.
"""

from .grading import (
    resolve_criterion_score,
    total_weight,
    calculate_course_grade,
    get_letter_grade,
    lookup_grade_points,
    letter_grade_to_gpa,
    course_letter_grade,
    calculate_gpa,
    calculate_grade_distribution,
    is_course_default,
    is_semester_default,
)
from .summary import SummaryEngine
from . import editing

__all__ = [
    "resolve_criterion_score",
    "total_weight",
    "calculate_course_grade",
    "get_letter_grade",
    "lookup_grade_points",
    "letter_grade_to_gpa",
    "course_letter_grade",
    "calculate_gpa",
    "calculate_grade_distribution",
    "is_course_default",
    "is_semester_default",
    "SummaryEngine",
    "editing",
]
