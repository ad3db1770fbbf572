"""
Gradebook - Main Orchestrator.

This module contains the Gradebook class that connects the engine layer
to persistence and to the presentation layer.
"""

import logging
from pathlib import Path
from typing import Optional

from .data import StateStore
from .engines import SummaryEngine, calculate_course_grade, get_letter_grade, editing
from .models import AppState, Course, SemesterSummary
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class Gradebook:
    """
    Main interface for the grade tracker.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Loads the saved AppState through the StateStore
    2. Applies edits (pure functions from engines.editing) and saves the
       resulting snapshot after every change
    3. Runs the summary engine and hands the result to the display

    The engine functions never see the store or the display; they only get
    snapshots.

    TO CHANGE THE UI:
    -----------------
    Pass a different display object with the same method signatures.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        book = Gradebook()
        book.apply(editing.add_semester)
        book.apply(editing.add_course, book.state.active_semester_id)
        book.show_overview()
    """

    def __init__(self, path: Optional[Path] = None, display=None, autosave: bool = True):
        self.store = StateStore(path)
        self.summary_engine = SummaryEngine()
        self.display = display if display is not None else TerminalDisplay()
        self.autosave = autosave
        self.state = self.store.load()

    @property
    def load_error(self) -> Optional[str]:
        return self.store.load_error

    def apply(self, edit, *args, **kwargs) -> AppState:
        """
        Run a state edit, keep its result and save it.

        Args:
            edit: A function taking the current AppState first (see
                  engines.editing), returning the next AppState
        """
        new_state = edit(self.state, *args, **kwargs)
        if new_state == self.state:
            return self.state

        self.state = new_state
        if self.autosave:
            self.store.save(self.state)
        return self.state

    def edit_course(self, semester_id: str, course_id: str, edit, *args, **kwargs) -> AppState:
        """
        Run a course-level edit (add_criterion, update_sub_item, ...).

        The edited copy replaces the course inside its semester.
        """
        course = self.find_course(semester_id, course_id)
        if course is None:
            logger.debug("edit_course: no course %s in semester %s", course_id, semester_id)
            return self.state
        return self.apply(editing.replace_course, semester_id, edit(course, *args, **kwargs))

    def find_course(self, semester_id: str, course_id: str) -> Optional[Course]:
        for semester in self.state.semesters:
            if semester.id != semester_id:
                continue
            for course in semester.courses:
                if course.id == course_id:
                    return course
        return None

    def active_courses(self) -> tuple:
        semester = self.state.active_semester
        return semester.courses if semester is not None else ()

    def summarize(self) -> SemesterSummary:
        """Summary of the active semester (zeroed when there is none)."""
        return self.summary_engine.summarize(self.active_courses())

    def show_overview(self) -> SemesterSummary:
        """Print the semester list, GPA card and distribution."""
        summary = self.summarize()
        self.display.print_semester_list(self.state)
        if self.state.active_semester is not None:
            self.display.print_gpa_summary(summary)
            self.display.print_distribution(summary)
        return summary

    def show_course(self, course: Course):
        numeric = calculate_course_grade(course.criteria)
        self.display.print_course_detail(course, numeric, get_letter_grade(numeric, course.grade_scale))
