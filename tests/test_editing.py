"""
Unit tests for the copy-on-write editing functions.
"""

import logging
import uuid

import pytest

from coursegrade import config
from coursegrade.engines import editing, calculate_course_grade, course_letter_grade, is_course_default
from coursegrade.models import AppState, Theme


@pytest.fixture
def state():
    """Two semesters, the first active and holding two default courses."""
    s = editing.add_semester(AppState())
    s = editing.add_semester(s)
    first = s.semesters[0].id
    s = editing.set_active_semester(s, first)
    s = editing.add_course(s, first)
    s = editing.add_course(s, first)
    return s


def _first_course(state):
    return state.semesters[0].courses[0]


class TestNewId:
    """Tests for identifier generation."""

    def test_uuid4(self):
        """Identifiers are random UUIDs."""
        assert uuid.UUID(editing.new_id()).version == 4

    def test_unique(self):
        """Identifiers don't repeat."""
        assert len({editing.new_id() for _ in range(100)}) == 100


class TestSemesters:
    """Tests for semester edits."""

    def test_add_names_and_activates(self):
        """New semesters are numbered and become active."""
        s1 = editing.add_semester(AppState())
        s2 = editing.add_semester(s1)
        assert [s.name for s in s2.semesters] == ["Semester 1", "Semester 2"]
        assert s2.active_semester_id == s2.semesters[1].id
        assert len(s1.semesters) == 1

    def test_rename(self, state):
        """Only the named semester changes."""
        target = state.semesters[1].id
        renamed = editing.rename_semester(state, target, "Spring 2026")
        assert renamed.semesters[1].name == "Spring 2026"
        assert renamed.semesters[0] == state.semesters[0]
        assert state.semesters[1].name == "Semester 2"

    def test_rename_unknown_is_noop(self, state):
        """An unknown id returns the same snapshot."""
        assert editing.rename_semester(state, "missing", "X") is state

    def test_delete_active_switches_to_first(self, state):
        """Deleting the active semester activates the first remaining one."""
        s = editing.set_active_semester(state, state.semesters[1].id)
        s = editing.delete_semester(s, state.semesters[1].id)
        assert [x.id for x in s.semesters] == [state.semesters[0].id]
        assert s.active_semester_id == state.semesters[0].id

    def test_delete_inactive_keeps_active(self, state):
        """Deleting another semester leaves the active one alone."""
        s = editing.delete_semester(state, state.semesters[1].id)
        assert s.active_semester_id == state.active_semester_id

    def test_delete_last_clears_active(self):
        """With no semesters left the active id is None."""
        s = editing.add_semester(AppState())
        s = editing.delete_semester(s, s.semesters[0].id)
        assert s.semesters == ()
        assert s.active_semester_id is None

    def test_set_active_unknown_is_noop(self, state):
        """Switching to a missing semester is ignored."""
        assert editing.set_active_semester(state, "missing") is state


class TestCourses:
    """Tests for course edits."""

    def test_add_course_defaults(self, state):
        """New courses get the default criteria, scale and credits."""
        course = _first_course(state)
        assert course.name == "Course 1"
        assert state.semesters[0].courses[1].name == "Course 2"
        assert course.credits == config.DEFAULT_CREDITS
        assert [(c.name, c.weight, c.score) for c in course.criteria] == [
            ("Assignments", 30, 0), ("Midterm", 30, 0), ("Final Exam", 40, 0),
        ]
        assert [(g.letter, g.min) for g in course.grade_scale] == list(config.DEFAULT_GRADE_SCALE)
        assert course.collapsed is False

    def test_new_course_grades_to_f(self, state):
        """An untouched course is 0% and an F, and counts as default."""
        course = _first_course(state)
        assert calculate_course_grade(course.criteria) == 0
        assert course_letter_grade(course) == "F"
        assert is_course_default(course)

    def test_add_course_unknown_semester_is_noop(self, state):
        assert editing.add_course(state, "missing") is state

    def test_update_course_keeps_siblings_and_order(self, state):
        """Updating one course leaves the other untouched and in place."""
        sem = state.semesters[0]
        updated = editing.update_course(state, sem.id, sem.courses[1].id, credits=4.5)
        courses = updated.semesters[0].courses
        assert [c.id for c in courses] == [c.id for c in sem.courses]
        assert courses[1].credits == 4.5
        assert courses[0] == sem.courses[0]
        assert sem.courses[1].credits == config.DEFAULT_CREDITS

    def test_rename_course(self, state):
        sem = state.semesters[0]
        renamed = editing.rename_course(state, sem.id, sem.courses[0].id, "Linear Algebra")
        assert renamed.semesters[0].courses[0].name == "Linear Algebra"

    def test_update_unknown_course_is_noop(self, state):
        assert editing.update_course(state, state.semesters[0].id, "missing", credits=1) is state

    def test_toggle_collapsed(self, state):
        sem = state.semesters[0]
        toggled = editing.toggle_collapsed(state, sem.id, sem.courses[0].id)
        assert toggled.semesters[0].courses[0].collapsed is True
        again = editing.toggle_collapsed(toggled, sem.id, sem.courses[0].id)
        assert again.semesters[0].courses[0].collapsed is False

    def test_delete_course(self, state):
        sem = state.semesters[0]
        deleted = editing.delete_course(state, sem.id, sem.courses[0].id)
        assert [c.id for c in deleted.semesters[0].courses] == [sem.courses[1].id]

    def test_toggle_unknown_course_is_logged(self, state, caplog):
        """An ignored course id still leaves a debug trace."""
        with caplog.at_level(logging.DEBUG, logger="coursegrade.engines.editing"):
            assert editing.toggle_collapsed(state, state.semesters[0].id, "missing") is state
        assert "toggle_collapsed: no course missing" in caplog.text

    def test_replace_course(self, state):
        """A whole edited course can be swapped in by id."""
        sem = state.semesters[0]
        edited = editing.add_criterion(sem.courses[1])
        replaced = editing.replace_course(state, sem.id, edited)
        assert replaced.semesters[0].courses[1] is edited


class TestCriteria:
    """Tests for criterion edits on a course."""

    def test_add_criterion(self, state):
        course = editing.add_criterion(_first_course(state))
        added = course.criteria[-1]
        assert (added.name, added.weight, added.score, added.sub_items) == ("New Criterion", 0, 0, None)
        assert len(course.criteria) == 4

    def test_update_criterion(self, state):
        course = _first_course(state)
        target = course.criteria[1]
        updated = editing.update_criterion(course, target.id, score=88, weight=35)
        assert (updated.criteria[1].score, updated.criteria[1].weight) == (88, 35)
        assert updated.criteria[0] == course.criteria[0]

    def test_delete_criterion(self, state):
        course = _first_course(state)
        updated = editing.delete_criterion(course, course.criteria[0].id)
        assert [c.name for c in updated.criteria] == ["Midterm", "Final Exam"]

    def test_unknown_criterion_is_noop(self, state):
        course = _first_course(state)
        assert editing.update_criterion(course, "missing", score=1) is course
        assert editing.delete_criterion(course, "missing") is course


class TestSubItems:
    """Tests for sub-item edits on a course."""

    def test_add_creates_sequence(self, state):
        """Adding the first sub-item creates the tuple."""
        course = _first_course(state)
        crit = course.criteria[0]
        assert crit.sub_items is None
        course = editing.add_sub_item(course, crit.id)
        items = course.criteria[0].sub_items
        assert len(items) == 1
        assert (items[0].name, items[0].score) == ("Assignment", 0)

    def test_update_sub_item_changes_grade(self, state):
        """Sub-item scores flow into the course grade."""
        course = _first_course(state)
        crit_id = course.criteria[0].id
        course = editing.add_sub_item(course, crit_id)
        course = editing.add_sub_item(course, crit_id)
        first, second = course.criteria[0].sub_items
        course = editing.update_sub_item(course, crit_id, first.id, score=80)
        course = editing.update_sub_item(course, crit_id, second.id, score=100, name="Lab 2")
        assert course.criteria[0].sub_items[1].name == "Lab 2"
        # (80 + 100) / 2 = 90, worth 30%
        assert calculate_course_grade(course.criteria) == pytest.approx(27)

    def test_delete_last_sub_item_restores_own_score(self, state):
        """An emptied sub-item tuple makes the criterion score count again."""
        course = _first_course(state)
        crit_id = course.criteria[0].id
        course = editing.update_criterion(course, crit_id, score=50)
        course = editing.add_sub_item(course, crit_id)
        assert calculate_course_grade(course.criteria) == 0
        course = editing.delete_sub_item(course, crit_id, course.criteria[0].sub_items[0].id)
        assert course.criteria[0].sub_items == ()
        assert calculate_course_grade(course.criteria) == pytest.approx(15)

    def test_sub_item_edits_without_sequence_are_noop(self, state):
        course = _first_course(state)
        crit_id = course.criteria[0].id
        assert editing.update_sub_item(course, crit_id, "missing", score=1) is course
        assert editing.delete_sub_item(course, crit_id, "missing") is course
        assert editing.add_sub_item(course, "missing") is course

    def test_ignored_ids_are_logged(self, state, caplog):
        course = _first_course(state)
        crit_id = course.criteria[0].id
        with caplog.at_level(logging.DEBUG, logger="coursegrade.engines.editing"):
            editing.delete_criterion(course, "gone-criterion")
            editing.update_sub_item(course, "gone-parent", "x", score=1)
            editing.delete_sub_item(course, crit_id, "x")
        assert "delete_criterion: no criterion gone-criterion" in caplog.text
        assert "no criterion gone-parent" in caplog.text
        assert f"criterion {crit_id} has no sub-items" in caplog.text


class TestGradeScale:
    """Tests for index-addressed grade scale edits."""

    def test_add_entry(self, state):
        course = editing.add_grade_scale_entry(_first_course(state))
        assert (course.grade_scale[-1].letter, course.grade_scale[-1].min) == ("A+", 97)

    def test_update_entry(self, state):
        course = editing.update_grade_scale_entry(_first_course(state), 12, letter="E", min=10)
        assert (course.grade_scale[12].letter, course.grade_scale[12].min) == ("E", 10)

    def test_delete_entry(self, state):
        course = _first_course(state)
        updated = editing.delete_grade_scale_entry(course, 0)
        assert updated.grade_scale == course.grade_scale[1:]

    def test_out_of_range_is_noop(self, state):
        course = _first_course(state)
        assert editing.update_grade_scale_entry(course, 99, letter="X") is course
        assert editing.delete_grade_scale_entry(course, -1) is course


class TestUIState:
    """Tests for theme and sidebar flags."""

    def test_toggle_theme(self):
        dark = editing.toggle_theme(AppState())
        assert dark.theme is Theme.DARK
        assert editing.toggle_theme(dark).theme is Theme.LIGHT

    def test_sidebar(self):
        assert editing.set_sidebar_collapsed(AppState(), True).sidebar_collapsed is True
