"""
Unit tests for SummaryEngine.
"""

import dataclasses

import pytest

from coursegrade.engines import SummaryEngine
from coursegrade.models import Course, Criterion, GradeScaleEntry


@pytest.fixture
def engine():
    return SummaryEngine()


class TestSummarize:
    """Tests for the full semester summary."""

    def test_empty_semester(self, engine):
        """No courses gives a zeroed summary."""
        summary = engine.summarize([])
        assert summary.gpa == 0
        assert summary.total_credits == 0
        assert summary.course_count == 0
        assert summary.courses == ()
        assert summary.distribution == ()
        assert summary.unrecognized_letters == ()

    def test_gpa_and_credits(self, engine, make_course):
        """GPA matches calculate_gpa and credits are summed."""
        summary = engine.summarize([make_course(95, credits=3), make_course(72, credits=4)])
        assert summary.gpa == pytest.approx(20 / 7)
        assert summary.total_credits == 7
        assert summary.course_count == 2

    def test_summary_is_immutable(self, engine, make_course):
        """The snapshot holds tuples and rejects reassignment."""
        summary = engine.summarize([make_course(95)])
        assert isinstance(summary.courses, tuple)
        assert isinstance(summary.distribution, tuple)
        assert isinstance(summary.unrecognized_letters, tuple)
        with pytest.raises(dataclasses.FrozenInstanceError):
            summary.courses = ()

    def test_breakdown_follows_input_order(self, engine, make_course):
        """One breakdown per course, same order as given."""
        courses = [make_course(72, name="Zoology"), make_course(95, name="Algebra")]
        summary = engine.summarize(courses)
        assert [c.name for c in summary.courses] == ["Zoology", "Algebra"]
        assert [c.letter for c in summary.courses] == ["C", "A"]
        assert summary.courses[1].grade_points == 4.0
        assert summary.courses[1].numeric_grade == pytest.approx(95)


class TestCourseBreakdown:
    """Tests for the per-course weight check."""

    def test_balanced_weights(self, engine, make_course):
        """A single 100% criterion is balanced."""
        item = engine.course_breakdown(make_course(80))
        assert item.total_weight == 100
        assert item.weights_balanced

    def test_unbalanced_weights(self, engine, simple_scale):
        """Weights summing to 80 are flagged."""
        course = Course(
            id="c", name="Lab", credits=1,
            criteria=(
                Criterion(id="a", name="Reports", weight=50, score=100),
                Criterion(id="b", name="Quiz", weight=30, score=100),
            ),
            grade_scale=simple_scale,
        )
        item = engine.course_breakdown(course)
        assert item.total_weight == 80
        assert not item.weights_balanced
        assert item.numeric_grade == pytest.approx(80)
        assert item.letter == "B"


class TestSortedDistribution:
    """Tests for the chart-ready distribution."""

    def test_canonical_order(self, engine, make_course):
        """Letters come out best grade first regardless of course order."""
        courses = [make_course(50), make_course(85), make_course(95), make_course(99)]
        entries = engine.sorted_distribution(courses)
        assert [(e.letter, e.count) for e in entries] == [("A", 2), ("B", 1), ("F", 1)]

    def test_percentages(self, engine, make_course):
        """Percentages are shares of all courses."""
        entries = engine.sorted_distribution([make_course(95), make_course(85), make_course(85)])
        assert entries[0].percentage == pytest.approx(100 / 3)
        assert entries[1].percentage == pytest.approx(200 / 3)

    def test_custom_letters_follow_canonical(self, engine, make_course):
        """Letters outside the canonical order go last, in first-seen order."""
        pass_fail = (GradeScaleEntry("Pass", 60), GradeScaleEntry("Fail", 0))
        courses = [
            make_course(70, scale=pass_fail),
            make_course(95),
            make_course(20, scale=pass_fail),
        ]
        letters = [e.letter for e in engine.sorted_distribution(courses)]
        assert letters == ["A", "Pass", "Fail"]

    def test_unrecognized_letters_reported(self, engine, make_course):
        """Letters missing from the GPA table are listed once each."""
        pass_fail = (GradeScaleEntry("Pass", 60), GradeScaleEntry("Fail", 0))
        summary = engine.summarize([
            make_course(70, scale=pass_fail),
            make_course(80, scale=pass_fail),
            make_course(95),
        ])
        assert summary.unrecognized_letters == ("Pass",)
        assert summary.courses[0].grade_points is None
