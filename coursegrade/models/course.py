"""
Gradebook data models.

Contains the immutable value snapshots the grading engine works on:
Semester -> Course -> Criterion -> SubItem, plus the per-course grade scale.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

Number = Union[int, float]


@dataclass(frozen=True)
class SubItem:
    """
    A single graded piece of work inside a criterion (e.g., "Homework 3").

    When a criterion has sub-items, their plain mean replaces the
    criterion's own score.
    """
    id: str
    name: str
    score: Number  # percentage, not range-checked


@dataclass(frozen=True)
class Criterion:
    """
    A weighted grading component of a course (e.g., "Midterm").

    Attributes:
        id: Unique within its course
        name: Display name
        weight: Percentage points this criterion is worth
        score: Percentage earned, used only when there are no sub-items
        sub_items: None when never created, otherwise a tuple (may be empty)
    """
    id: str
    name: str
    weight: Number
    score: Number
    sub_items: Optional[Tuple[SubItem, ...]] = None


@dataclass(frozen=True)
class GradeScaleEntry:
    """Minimum percentage (inclusive) needed to earn a letter."""
    letter: str
    min: Number


@dataclass(frozen=True)
class Course:
    """
    A course on the user's schedule.

    grade_scale is treated as an unordered set; the classifier sorts it.
    collapsed is presentation state only and is None when never set.
    """
    id: str
    name: str
    credits: Number
    criteria: Tuple[Criterion, ...] = ()
    grade_scale: Tuple[GradeScaleEntry, ...] = ()
    collapsed: Optional[bool] = None


@dataclass(frozen=True)
class Semester:
    """An ordered collection of courses; the unit GPA is computed over."""
    id: str
    name: str
    courses: Tuple[Course, ...] = field(default_factory=tuple)
