"""
Semester Summary Engine.

This module builds the view-model behind the GPA card and the grade
distribution chart from a list of courses.
"""

from .. import config
from ..models import CourseBreakdown, DistributionEntry, SemesterSummary
from .grading import (
    calculate_course_grade,
    calculate_gpa,
    calculate_grade_distribution,
    get_letter_grade,
    lookup_grade_points,
    total_weight,
)


class SummaryEngine:
    """
    Rolls a semester's courses up into a SemesterSummary.

    The grading functions return raw numbers and an unordered letter count.
    This engine adds what every display needs on top of that:

    - a per-course breakdown with the weight-total warning flag
    - the distribution in canonical A+ ... F order, with percentages
    - the letters the GPA table does not know about

    Like the grading functions, it never raises for empty or degenerate
    input; an empty semester yields a zeroed summary.
    """

    def __init__(self, letter_order=config.CANONICAL_LETTER_ORDER):
        self.letter_order = tuple(letter_order)

    def summarize(self, courses) -> SemesterSummary:
        courses = list(courses)

        breakdown = [self.course_breakdown(c) for c in courses]

        unrecognized = []
        for item in breakdown:
            if item.grade_points is None and item.letter not in unrecognized:
                unrecognized.append(item.letter)

        return SemesterSummary(
            gpa=calculate_gpa(courses),
            total_credits=sum(c.credits for c in courses),
            course_count=len(courses),
            courses=tuple(breakdown),
            distribution=self.sorted_distribution(courses),
            unrecognized_letters=tuple(unrecognized),
        )

    def course_breakdown(self, course) -> CourseBreakdown:
        """Compute one course's grade, letter and weight check."""
        numeric = calculate_course_grade(course.criteria)
        letter = get_letter_grade(numeric, course.grade_scale)
        weights = total_weight(course.criteria)

        return CourseBreakdown(
            course_id=course.id,
            name=course.name,
            credits=course.credits,
            numeric_grade=numeric,
            letter=letter,
            grade_points=lookup_grade_points(letter),
            total_weight=weights,
            weights_balanced=weights == config.EXPECTED_TOTAL_WEIGHT,
        )

    def sorted_distribution(self, courses) -> tuple:
        """
        Distribution entries in display order.

        Letters in the canonical order come first, best grade first.
        Custom letters follow in the order they were first earned.
        """
        courses = list(courses)
        counts = calculate_grade_distribution(courses)
        if not counts:
            return ()

        rank = {letter: i for i, letter in enumerate(self.letter_order)}
        # dict preserves first-seen order, and sorted() is stable
        letters = sorted(counts, key=lambda letter: rank.get(letter, len(rank)))

        return tuple(
            DistributionEntry(
                letter=letter,
                count=counts[letter],
                percentage=counts[letter] / len(courses) * 100,
            )
            for letter in letters
        )
