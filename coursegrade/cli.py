"""
Command-Line Interface for the Grade Tracker.

This module provides the interactive CLI. It handles user input and hands
every change to the Gradebook orchestrator, which saves after each edit.

Usage:
    coursegrade [--data-file PATH] [--verbose]
    python -m coursegrade
"""

import argparse
import logging
from pathlib import Path

from .config import LOG_FORMAT, STATE_FILE
from .engines import editing, is_course_default, is_semester_default
from .gradebook import Gradebook
from .ui import TerminalDisplay

D = TerminalDisplay


# =============================================================================
#  INPUT HELPERS
# =============================================================================

def _ask(prompt: str) -> str:
    """Read one line; end of input counts as an empty answer."""
    try:
        return input(prompt).strip()
    except EOFError:
        return ""


def _ask_number(prompt: str, current):
    """
    Read a number. Empty input keeps the current value shown in the prompt.

    Returns None (after telling the user) if the input is not a number.
    """
    raw = _ask(prompt)
    if raw == "":
        return current
    try:
        value = float(raw)
    except ValueError:
        print(f"  {D.RED}'{raw}' is not a number.{D.RESET}")
        return None
    return int(value) if value.is_integer() else value


def _choose(items, label: str):
    """Pick one of items by its 1-based number. Returns (index, item) or (None, None)."""
    if not items:
        print(f"  {D.DIM}No {label}s.{D.RESET}")
        return None, None

    for i, item in enumerate(items, 1):
        print(f"    {i}. {getattr(item, 'name', item)}")
    raw = _ask(f"  Select {label} (1-{len(items)}): ")
    try:
        index = int(raw) - 1
        if not 0 <= index < len(items):
            raise IndexError(index)
    except (ValueError, IndexError):
        print(f"  {D.DIM}Cancelled.{D.RESET}")
        return None, None
    return index, items[index]


def _confirm(prompt: str) -> bool:
    return _ask(f"  {prompt} [y/N]: ").lower() in ("y", "yes")


# =============================================================================
#  SEMESTER ACTIONS
# =============================================================================

def _select_semester(book: Gradebook):
    _, semester = _choose(book.state.semesters, "semester")
    if semester is not None:
        book.apply(editing.set_active_semester, semester.id)


def _rename_semester(book: Gradebook):
    semester = book.state.active_semester
    name = _ask(f"  New name for {semester.name}: ")
    if name:
        book.apply(editing.rename_semester, semester.id, name)


def _delete_semester(book: Gradebook):
    """Untouched semesters are deleted without asking."""
    semester = book.state.active_semester
    if is_semester_default(semester) or _confirm(f"Delete {semester.name} and all its courses?"):
        book.apply(editing.delete_semester, semester.id)


# =============================================================================
#  COURSE ACTIONS
# =============================================================================

def _edit_criterion(book: Gradebook, semester_id: str, course):
    _, criterion = _choose(course.criteria, "criterion")
    if criterion is None:
        return

    name = _ask(f"  Name [{criterion.name}]: ") or criterion.name
    weight = _ask_number(f"  Weight % [{criterion.weight}]: ", criterion.weight)
    if weight is None:
        return
    changes = {"name": name, "weight": weight}

    if not criterion.sub_items:
        score = _ask_number(f"  Score % [{criterion.score}]: ", criterion.score)
        if score is None:
            return
        changes["score"] = score

    book.edit_course(semester_id, course.id, editing.update_criterion, criterion.id, **changes)


def _edit_sub_items(book: Gradebook, semester_id: str, course):
    _, criterion = _choose(course.criteria, "criterion")
    if criterion is None:
        return

    print("\n  a. Add sub-item   e. Edit sub-item   d. Delete sub-item")
    action = _ask("  Action: ").lower()

    if action == "a":
        book.edit_course(semester_id, course.id, editing.add_sub_item, criterion.id)
        return

    _, item = _choose(criterion.sub_items or (), "sub-item")
    if item is None:
        return
    if action == "e":
        name = _ask(f"  Name [{item.name}]: ") or item.name
        score = _ask_number(f"  Score % [{item.score}]: ", item.score)
        if score is not None:
            book.edit_course(semester_id, course.id, editing.update_sub_item,
                             criterion.id, item.id, name=name, score=score)
    elif action == "d":
        book.edit_course(semester_id, course.id, editing.delete_sub_item, criterion.id, item.id)


def _edit_grade_scale(book: Gradebook, semester_id: str, course):
    print("\n  a. Add entry   e. Edit entry   d. Delete entry")
    action = _ask("  Action: ").lower()

    if action == "a":
        book.edit_course(semester_id, course.id, editing.add_grade_scale_entry)
        return

    labels = [f"{entry.letter} ≥{entry.min:g}" for entry in course.grade_scale]
    index, _ = _choose(labels, "entry")
    if index is None:
        return
    if action == "e":
        entry = course.grade_scale[index]
        letter = _ask(f"  Letter [{entry.letter}]: ") or entry.letter
        minimum = _ask_number(f"  Minimum % [{entry.min}]: ", entry.min)
        if minimum is not None:
            book.edit_course(semester_id, course.id, editing.update_grade_scale_entry,
                             index, letter=letter, min=minimum)
    elif action == "d":
        book.edit_course(semester_id, course.id, editing.delete_grade_scale_entry, index)


def _course_menu(book: Gradebook):
    """Loop over one course until the user goes back or deletes it."""
    semester_id = book.state.active_semester_id
    _, course = _choose(book.active_courses(), "course")
    if course is None:
        return
    course_id = course.id

    while True:
        course = book.find_course(semester_id, course_id)
        if course is None:
            return
        book.show_course(course)

        print(f"\n  {D.BOLD}1{D.RESET} Rename  {D.BOLD}2{D.RESET} Credits  "
              f"{D.BOLD}3{D.RESET} Add criterion  {D.BOLD}4{D.RESET} Edit criterion  "
              f"{D.BOLD}5{D.RESET} Delete criterion")
        print(f"  {D.BOLD}6{D.RESET} Sub-items  {D.BOLD}7{D.RESET} Grade scale  "
              f"{D.BOLD}8{D.RESET} Collapse/expand  {D.BOLD}9{D.RESET} Delete course  "
              f"{D.BOLD}b{D.RESET} Back")
        choice = _ask("  > ").lower()

        if choice == "1":
            name = _ask("  New name: ")
            if name:
                book.apply(editing.rename_course, semester_id, course_id, name)
        elif choice == "2":
            credits = _ask_number(f"  Credits [{course.credits}]: ", course.credits)
            if credits is not None:
                book.apply(editing.update_course, semester_id, course_id, credits=credits)
        elif choice == "3":
            book.edit_course(semester_id, course_id, editing.add_criterion)
        elif choice == "4":
            _edit_criterion(book, semester_id, course)
        elif choice == "5":
            _, criterion = _choose(course.criteria, "criterion")
            if criterion is not None:
                book.edit_course(semester_id, course_id, editing.delete_criterion, criterion.id)
        elif choice == "6":
            _edit_sub_items(book, semester_id, course)
        elif choice == "7":
            _edit_grade_scale(book, semester_id, course)
        elif choice == "8":
            book.apply(editing.toggle_collapsed, semester_id, course_id)
        elif choice == "9":
            if is_course_default(course) or _confirm(f"Delete {course.name}?"):
                book.apply(editing.delete_course, semester_id, course_id)
                return
        elif choice in ("b", ""):
            return


# =============================================================================
#  MAIN LOOP
# =============================================================================

def _parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="coursegrade",
        description="Track weighted course grades and semester GPA.",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        default=STATE_FILE,
        help=f"Saved gradebook (default: {STATE_FILE})",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """
    Command-line interface for the grade tracker.

    ═══════════════════════════════════════════════════════════════════════════
    Shows the active semester's GPA and distribution, then offers the
    semester-level actions. Course editing happens in a nested menu.
    Every change is saved immediately.
    ═══════════════════════════════════════════════════════════════════════════
    """
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    book = Gradebook(args.data_file)
    if book.load_error:
        D.print_load_error(book.load_error)

    print(f"\n{D.BOLD}{D.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         COURSEGRADE                                              ║")
    print("║         Weighted course grades and semester GPA                  ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{D.RESET}")

    while True:
        book.show_overview()
        has_semester = book.state.active_semester is not None

        print(f"\n  {D.BOLD}a{D.RESET} Add semester", end="")
        if has_semester:
            print(f"  {D.BOLD}s{D.RESET} Switch  {D.BOLD}r{D.RESET} Rename  {D.BOLD}x{D.RESET} Delete semester")
            print(f"  {D.BOLD}c{D.RESET} Add course  {D.BOLD}e{D.RESET} Edit course", end="")
        print(f"  {D.BOLD}t{D.RESET} Theme ({book.state.theme.value})  "
              f"{D.BOLD}h{D.RESET} {'Expand' if book.state.sidebar_collapsed else 'Collapse'} list  "
              f"{D.BOLD}q{D.RESET} Quit")

        choice = _ask(f"{D.BOLD}> {D.RESET}").lower()

        if choice in ("q", ""):
            break
        elif choice == "a":
            book.apply(editing.add_semester)
        elif choice == "t":
            book.apply(editing.toggle_theme)
        elif choice == "h":
            book.apply(editing.set_sidebar_collapsed, not book.state.sidebar_collapsed)
        elif not has_semester:
            continue
        elif choice == "s":
            _select_semester(book)
        elif choice == "r":
            _rename_semester(book)
        elif choice == "x":
            _delete_semester(book)
        elif choice == "c":
            book.apply(editing.add_course, book.state.active_semester_id)
        elif choice == "e":
            _course_menu(book)


if __name__ == "__main__":
    main()
