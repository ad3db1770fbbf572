import pytest

from coursegrade.models import Course, Criterion, GradeScaleEntry, Semester, SubItem


# Common test fixtures
@pytest.fixture
def simple_scale():
    """A/B/C/F scale, deliberately not in descending order."""
    return (
        GradeScaleEntry("C", 70),
        GradeScaleEntry("A", 90),
        GradeScaleEntry("F", 0),
        GradeScaleEntry("B", 80),
    )


@pytest.fixture
def make_course(simple_scale):
    """
    Factory for a course graded by a single criterion worth 100%.

    make_course(95, credits=3) -> an "A" course on the simple scale.
    """
    counter = {"n": 0}

    def _make(score, credits=3, scale=None, name=None):
        counter["n"] += 1
        n = counter["n"]
        return Course(
            id=f"course-{n}",
            name=name or f"Physics {n}",
            credits=credits,
            criteria=(Criterion(id=f"crit-{n}", name="Everything", weight=100, score=score),),
            grade_scale=simple_scale if scale is None else scale,
        )

    return _make


@pytest.fixture
def sample_semester():
    """A semester exercising every optional field, both absent and set."""
    return Semester(
        id="sem-1",
        name="Fall 2025",
        courses=(
            Course(
                id="c-1",
                name="Calculus",
                credits=4,
                criteria=(
                    Criterion(
                        id="cr-1",
                        name="Homework",
                        weight=30,
                        score=0,
                        sub_items=(
                            SubItem(id="s-1", name="HW 1", score=80),
                            SubItem(id="s-2", name="HW 2", score=95.5),
                        ),
                    ),
                    Criterion(id="cr-2", name="Midterm", weight=30, score=88, sub_items=()),
                    Criterion(id="cr-3", name="Final", weight=40, score=91),
                ),
                grade_scale=(GradeScaleEntry("A", 90), GradeScaleEntry("B", 80), GradeScaleEntry("F", 0)),
                collapsed=True,
            ),
            Course(
                id="c-2",
                name="Seminar",
                credits=0.5,
                criteria=(),
                grade_scale=(),
            ),
        ),
    )
