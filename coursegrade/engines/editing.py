"""
Gradebook Editing Engine.

Every edit the user can make, expressed as a function from one snapshot to
the next. Nothing is modified in place: each function returns a new
AppState or Course and leaves its input untouched, so older snapshots stay
valid and siblings keep their order.

ADDRESSING:
-----------
Semesters, courses, criteria and sub-items are addressed by id. Grade scale
entries have no id and are addressed by their position in the course's
grade_scale tuple. An id or index that does not exist is ignored: the input
snapshot is returned unchanged.
"""

import logging
import uuid
from dataclasses import replace

from .. import config
from ..models import AppState, Course, Criterion, GradeScaleEntry, Semester, SubItem, Theme

logger = logging.getLogger(__name__)


def new_id() -> str:
    """Random 128-bit identifier in standard UUID form."""
    return str(uuid.uuid4())


def _replace_by_id(items, item_id, transform):
    """
    Return (new_tuple, found) with the item matching item_id transformed.

    transform returns the replacement item, or None to drop it.
    """
    result = []
    found = False
    for item in items:
        if item.id == item_id:
            found = True
            item = transform(item)
            if item is None:
                continue
        result.append(item)
    return tuple(result), found


# =============================================================================
#  SEMESTERS
# =============================================================================

def add_semester(state: AppState) -> AppState:
    """Append an empty "Semester N" and make it the active semester."""
    semester = Semester(
        id=new_id(),
        name=f"Semester {len(state.semesters) + 1}",
        courses=(),
    )
    return replace(state, semesters=state.semesters + (semester,), active_semester_id=semester.id)


def rename_semester(state: AppState, semester_id: str, name: str) -> AppState:
    semesters, found = _replace_by_id(state.semesters, semester_id, lambda s: replace(s, name=name))
    if not found:
        logger.debug("rename_semester: no semester %s", semester_id)
        return state
    return replace(state, semesters=semesters)


def delete_semester(state: AppState, semester_id: str) -> AppState:
    """
    Remove a semester.

    If it was the active one, the first remaining semester becomes active
    (or None when none are left).
    """
    semesters, found = _replace_by_id(state.semesters, semester_id, lambda s: None)
    if not found:
        logger.debug("delete_semester: no semester %s", semester_id)
        return state

    active_id = state.active_semester_id
    if active_id == semester_id:
        active_id = semesters[0].id if semesters else None

    return replace(state, semesters=semesters, active_semester_id=active_id)


def set_active_semester(state: AppState, semester_id: str) -> AppState:
    if not any(s.id == semester_id for s in state.semesters):
        logger.debug("set_active_semester: no semester %s", semester_id)
        return state
    return replace(state, active_semester_id=semester_id)


# =============================================================================
#  COURSES
# =============================================================================

def new_course(position: int) -> Course:
    """
    A fresh course with the standard criteria and grade scale.

    Args:
        position: 1-based number used in the "Course N" name
    """
    return Course(
        id=new_id(),
        name=f"Course {position}",
        credits=config.DEFAULT_CREDITS,
        criteria=tuple(
            Criterion(id=new_id(), name=name, weight=weight, score=0)
            for name, weight in config.DEFAULT_CRITERIA
        ),
        grade_scale=tuple(
            GradeScaleEntry(letter=letter, min=minimum)
            for letter, minimum in config.DEFAULT_GRADE_SCALE
        ),
        collapsed=False,
    )


def _edit_semester_courses(state: AppState, semester_id: str, edit) -> AppState:
    """Apply edit(courses) -> (courses, found) inside one semester."""
    outcome = {"found": False}

    def transform(semester):
        courses, found = edit(semester.courses)
        outcome["found"] = found
        return replace(semester, courses=courses) if found else semester

    semesters, semester_found = _replace_by_id(state.semesters, semester_id, transform)
    if not (semester_found and outcome["found"]):
        return state
    return replace(state, semesters=semesters)


def add_course(state: AppState, semester_id: str) -> AppState:
    """Append a new default course to a semester."""
    def append(courses):
        return courses + (new_course(len(courses) + 1),), True

    new_state = _edit_semester_courses(state, semester_id, append)
    if new_state is state:
        logger.debug("add_course: no semester %s", semester_id)
    return new_state


def replace_course(state: AppState, semester_id: str, course: Course) -> AppState:
    """Swap in an edited copy of a course, matched by course.id."""
    new_state = _edit_semester_courses(
        state, semester_id, lambda courses: _replace_by_id(courses, course.id, lambda c: course)
    )
    if new_state is state:
        logger.debug("replace_course: no course %s in semester %s", course.id, semester_id)
    return new_state


def update_course(state: AppState, semester_id: str, course_id: str, **changes) -> AppState:
    """Partial update of a course's fields (name, credits, criteria, ...)."""
    new_state = _edit_semester_courses(
        state, semester_id, lambda courses: _replace_by_id(courses, course_id, lambda c: replace(c, **changes))
    )
    if new_state is state:
        logger.debug("update_course: no course %s in semester %s", course_id, semester_id)
    return new_state


def rename_course(state: AppState, semester_id: str, course_id: str, name: str) -> AppState:
    return update_course(state, semester_id, course_id, name=name)


def toggle_collapsed(state: AppState, semester_id: str, course_id: str) -> AppState:
    new_state = _edit_semester_courses(
        state,
        semester_id,
        lambda courses: _replace_by_id(courses, course_id, lambda c: replace(c, collapsed=not c.collapsed)),
    )
    if new_state is state:
        logger.debug("toggle_collapsed: no course %s in semester %s", course_id, semester_id)
    return new_state


def delete_course(state: AppState, semester_id: str, course_id: str) -> AppState:
    new_state = _edit_semester_courses(
        state, semester_id, lambda courses: _replace_by_id(courses, course_id, lambda c: None)
    )
    if new_state is state:
        logger.debug("delete_course: no course %s in semester %s", course_id, semester_id)
    return new_state


# =============================================================================
#  CRITERIA AND SUB-ITEMS
# =============================================================================

def add_criterion(course: Course) -> Course:
    """Append an empty criterion (weight 0, score 0)."""
    criterion = Criterion(id=new_id(), name=config.NEW_CRITERION_NAME, weight=0, score=0)
    return replace(course, criteria=course.criteria + (criterion,))


def update_criterion(course: Course, criterion_id: str, **changes) -> Course:
    criteria, found = _replace_by_id(course.criteria, criterion_id, lambda c: replace(c, **changes))
    if not found:
        logger.debug("update_criterion: no criterion %s in course %s", criterion_id, course.id)
        return course
    return replace(course, criteria=criteria)


def delete_criterion(course: Course, criterion_id: str) -> Course:
    criteria, found = _replace_by_id(course.criteria, criterion_id, lambda c: None)
    if not found:
        logger.debug("delete_criterion: no criterion %s in course %s", criterion_id, course.id)
        return course
    return replace(course, criteria=criteria)


def add_sub_item(course: Course, criterion_id: str) -> Course:
    """
    Append a sub-item to a criterion.

    Creates the sub-item tuple if the criterion never had one. From then
    on the sub-item mean replaces the criterion's own score.
    """
    sub_item = SubItem(id=new_id(), name=config.NEW_SUB_ITEM_NAME, score=0)
    criteria, found = _replace_by_id(
        course.criteria,
        criterion_id,
        lambda c: replace(c, sub_items=(c.sub_items or ()) + (sub_item,)),
    )
    if not found:
        logger.debug("add_sub_item: no criterion %s in course %s", criterion_id, course.id)
        return course
    return replace(course, criteria=criteria)


def _edit_sub_items(course: Course, criterion_id: str, edit) -> Course:
    """Apply edit(sub_items) -> (sub_items, found) inside one criterion."""
    for criterion in course.criteria:
        if criterion.id == criterion_id:
            break
    else:
        logger.debug("sub-item edit: no criterion %s in course %s", criterion_id, course.id)
        return course

    if criterion.sub_items is None:
        logger.debug("sub-item edit: criterion %s has no sub-items", criterion_id)
        return course

    sub_items, found = edit(criterion.sub_items)
    if not found:
        logger.debug("sub-item edit: no such sub-item in criterion %s", criterion_id)
        return course
    return update_criterion(course, criterion_id, sub_items=sub_items)


def update_sub_item(course: Course, criterion_id: str, sub_item_id: str, **changes) -> Course:
    return _edit_sub_items(
        course, criterion_id, lambda items: _replace_by_id(items, sub_item_id, lambda i: replace(i, **changes))
    )


def delete_sub_item(course: Course, criterion_id: str, sub_item_id: str) -> Course:
    """
    Remove a sub-item.

    Removing the last one leaves an empty tuple, which makes the criterion's
    own score authoritative again.
    """
    return _edit_sub_items(
        course, criterion_id, lambda items: _replace_by_id(items, sub_item_id, lambda i: None)
    )


# =============================================================================
#  GRADE SCALE
# =============================================================================

def add_grade_scale_entry(course: Course) -> Course:
    letter, minimum = config.NEW_GRADE_SCALE_ENTRY
    return replace(course, grade_scale=course.grade_scale + (GradeScaleEntry(letter=letter, min=minimum),))


def update_grade_scale_entry(course: Course, index: int, **changes) -> Course:
    if not 0 <= index < len(course.grade_scale):
        logger.debug("update_grade_scale_entry: index %d out of range", index)
        return course
    scale = list(course.grade_scale)
    scale[index] = replace(scale[index], **changes)
    return replace(course, grade_scale=tuple(scale))


def delete_grade_scale_entry(course: Course, index: int) -> Course:
    if not 0 <= index < len(course.grade_scale):
        logger.debug("delete_grade_scale_entry: index %d out of range", index)
        return course
    scale = course.grade_scale[:index] + course.grade_scale[index + 1:]
    return replace(course, grade_scale=scale)


# =============================================================================
#  UI STATE
# =============================================================================

def toggle_theme(state: AppState) -> AppState:
    theme = Theme.DARK if state.theme == Theme.LIGHT else Theme.LIGHT
    return replace(state, theme=theme)


def set_sidebar_collapsed(state: AppState, collapsed: bool) -> AppState:
    return replace(state, sidebar_collapsed=collapsed)
