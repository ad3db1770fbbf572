"""
Grade Computation Engine.

This module turns raw criterion scores into course percentages, letter
grades, a semester GPA and a grade distribution. Everything here is a pure
function of its arguments: no I/O, no caching, no logging.
"""

import re
from typing import Dict, Iterable, Optional, Sequence

from .. import config
from ..models import Course, Criterion, GradeScaleEntry, Semester

_DEFAULT_COURSE_NAME = re.compile(r"Course \d+")
_DEFAULT_SEMESTER_NAME = re.compile(r"Semester \d+")


def resolve_criterion_score(criterion: Criterion) -> float:
    """
    Reduce a criterion to one percentage.

    SUB-ITEM RULE:
    -------------
    If the criterion has sub-items, they are the source of truth and the
    criterion's own score is ignored. Every sub-item counts equally.
    An empty sub-item tuple is treated like "no sub-items" rather than as
    a mean of nothing.
    """
    if criterion.sub_items:
        total = sum(item.score for item in criterion.sub_items)
        return total / len(criterion.sub_items)
    return criterion.score


def total_weight(criteria: Iterable[Criterion]) -> float:
    """Sum of criterion weights (expected to be 100, never enforced)."""
    return sum(c.weight for c in criteria)


def calculate_course_grade(criteria: Sequence[Criterion], normalize: Optional[bool] = None) -> float:
    """
    Combine all criteria of a course into one overall percentage.

    WEIGHTING POLICY:
    ----------------
    Each resolved score is multiplied by its weight and divided by
    config.WEIGHT_DIVISOR (100), not by the actual total weight. Weights
    summing to less than 100 therefore cap the grade below 100, and weights
    above 100 can push it past 100.

    Args:
        criteria: The course's criteria, in any order
        normalize: Divide by the real total weight instead. None uses
                   config.NORMALIZE_CRITERION_WEIGHTS.

    Returns:
        The weighted percentage, or exactly 0 when the total weight is 0
        (including when there are no criteria)
    """
    weight_sum = total_weight(criteria)
    if weight_sum == 0:
        return 0

    if normalize is None:
        normalize = config.NORMALIZE_CRITERION_WEIGHTS
    divisor = weight_sum if normalize else config.WEIGHT_DIVISOR

    return sum(resolve_criterion_score(c) * c.weight / divisor for c in criteria)


def get_letter_grade(numeric_grade: float, grade_scale: Iterable[GradeScaleEntry]) -> str:
    """
    Map a percentage to a letter using a course's grade scale.

    The scale is sorted by minimum, highest first. The first entry whose
    minimum the grade reaches wins, so duplicate minimums resolve to
    whichever entry came first in the input (the sort is stable).

    A grade below every minimum gets the lowest entry's letter.
    An empty scale gets config.FALLBACK_LETTER.
    """
    ordered = sorted(grade_scale, key=lambda entry: entry.min, reverse=True)

    for entry in ordered:
        if numeric_grade >= entry.min:
            return entry.letter

    if ordered:
        return ordered[-1].letter
    return config.FALLBACK_LETTER


def lookup_grade_points(letter: str) -> Optional[float]:
    """Grade points for a letter, or None if the letter is not in the table."""
    return config.GPA_POINTS.get(letter)


def letter_grade_to_gpa(letter: str) -> float:
    """
    Grade points for a letter on the fixed 4.0 table.

    Letters outside the table (custom scale names) silently earn
    config.UNKNOWN_LETTER_POINTS. Use lookup_grade_points() to tell an
    unknown letter apart from an earned F.
    """
    points = lookup_grade_points(letter)
    if points is None:
        return config.UNKNOWN_LETTER_POINTS
    return points


def course_letter_grade(course: Course) -> str:
    """Letter grade for a course, classified on that course's own scale."""
    return get_letter_grade(calculate_course_grade(course.criteria), course.grade_scale)


def calculate_gpa(courses: Sequence[Course]) -> float:
    """
    Credit-weighted GPA across courses.

    Each course is graded on its own scale, converted to grade points and
    weighted by its credits. Returns 0 for no courses, and 0 when the
    credits add up to zero.
    """
    if not courses:
        return 0

    total_points = 0
    total_credits = 0

    for course in courses:
        grade_points = letter_grade_to_gpa(course_letter_grade(course))
        total_points += grade_points * course.credits
        total_credits += course.credits

    return total_points / total_credits if total_credits > 0 else 0


def calculate_grade_distribution(courses: Iterable[Course]) -> Dict[str, int]:
    """
    Count how many courses earned each letter.

    Only letters that were actually earned appear. Key order carries no
    meaning; sort by config.CANONICAL_LETTER_ORDER for display.
    """
    distribution = {}

    for course in courses:
        letter = course_letter_grade(course)
        distribution[letter] = distribution.get(letter, 0) + 1

    return distribution


def is_course_default(course: Course) -> bool:
    """
    True for an untouched course: auto-generated name and all scores zero.

    Untouched courses can be deleted without asking for confirmation.
    """
    if not _DEFAULT_COURSE_NAME.fullmatch(course.name):
        return False

    for criterion in course.criteria:
        if criterion.sub_items:
            if any(item.score != 0 for item in criterion.sub_items):
                return False
        elif criterion.score != 0:
            return False
    return True


def is_semester_default(semester: Semester) -> bool:
    """True for an untouched semester: auto-generated name and no courses."""
    return bool(_DEFAULT_SEMESTER_NAME.fullmatch(semester.name)) and not semester.courses
