"""
Summary data models.

View-models produced by the summary engine for the presentation layer.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class CourseBreakdown:
    """
    One course's computed result.

    grade_points is None when the letter is not in the fixed GPA table
    (a custom scale letter); it still counts as 0.0 toward the GPA.
    """
    course_id: str
    name: str
    credits: float
    numeric_grade: float
    letter: str
    grade_points: Optional[float]
    total_weight: float           # Sum of criterion weights
    weights_balanced: bool        # True when total_weight is exactly 100


@dataclass(frozen=True)
class DistributionEntry:
    """A single bar of the grade distribution chart."""
    letter: str
    count: int
    percentage: float             # Share of all courses, 0-100


@dataclass(frozen=True)
class SemesterSummary:
    """Everything the GPA card and distribution chart need."""
    gpa: float
    total_credits: float
    course_count: int
    courses: Tuple[CourseBreakdown, ...] = ()
    distribution: Tuple[DistributionEntry, ...] = ()
    unrecognized_letters: Tuple[str, ...] = ()    # Letters missing from the GPA table
