"""
Gradebook serialization.

This module converts between the frozen model dataclasses and the plain
JSON shapes used on disk.
"""

from ..models import Course, Criterion, GradeScaleEntry, Semester, SubItem


# On-disk shapes (camelCase, shared with the browser version):
#
#   Semester  {"id", "name", "courses": [Course]}
#   Course    {"id", "name", "credits", "criteria": [Criterion],
#              "gradeScale": [GradeScale], "collapsed"?}
#   Criterion {"id", "name", "weight", "score", "subItems"?: [SubItem]}
#   SubItem   {"id", "name", "score"}
#   GradeScale {"letter", "min"}
#
# Keys marked ? are optional. They are written only when the model field is
# not None, so a file round-trips without gaining or losing keys.


def _field(data, key: str, kind: str, where: str):
    """Fetch data[key] and check its type, raising ValueError on mismatch."""
    if not isinstance(data, dict):
        raise ValueError(f"{where}: expected an object, got {type(data).__name__}")
    if key not in data:
        raise ValueError(f"{where}: missing '{key}'")

    value = data[key]
    if kind == "str":
        ok = isinstance(value, str)
    elif kind == "number":
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
    elif kind == "bool":
        ok = isinstance(value, bool)
    elif kind == "list":
        ok = isinstance(value, list)
    else:
        raise AssertionError(f"unknown field kind {kind}")

    if not ok:
        raise ValueError(f"{where}: '{key}' should be a {kind}, got {type(value).__name__}")
    return value


# =============================================================================
#  TO DICT
# =============================================================================

def sub_item_to_dict(item: SubItem) -> dict:
    return {"id": item.id, "name": item.name, "score": item.score}


def grade_scale_entry_to_dict(entry: GradeScaleEntry) -> dict:
    return {"letter": entry.letter, "min": entry.min}


def criterion_to_dict(criterion: Criterion) -> dict:
    data = {
        "id": criterion.id,
        "name": criterion.name,
        "weight": criterion.weight,
        "score": criterion.score,
    }
    if criterion.sub_items is not None:
        data["subItems"] = [sub_item_to_dict(i) for i in criterion.sub_items]
    return data


def course_to_dict(course: Course) -> dict:
    data = {
        "id": course.id,
        "name": course.name,
        "credits": course.credits,
        "criteria": [criterion_to_dict(c) for c in course.criteria],
        "gradeScale": [grade_scale_entry_to_dict(g) for g in course.grade_scale],
    }
    if course.collapsed is not None:
        data["collapsed"] = course.collapsed
    return data


def semester_to_dict(semester: Semester) -> dict:
    return {
        "id": semester.id,
        "name": semester.name,
        "courses": [course_to_dict(c) for c in semester.courses],
    }


def semesters_to_list(semesters) -> list:
    return [semester_to_dict(s) for s in semesters]


# =============================================================================
#  FROM DICT
# =============================================================================

def sub_item_from_dict(data: dict) -> SubItem:
    where = "subItem"
    return SubItem(
        id=_field(data, "id", "str", where),
        name=_field(data, "name", "str", where),
        score=_field(data, "score", "number", where),
    )


def grade_scale_entry_from_dict(data: dict) -> GradeScaleEntry:
    where = "gradeScale entry"
    return GradeScaleEntry(
        letter=_field(data, "letter", "str", where),
        min=_field(data, "min", "number", where),
    )


def criterion_from_dict(data: dict) -> Criterion:
    where = "criterion"
    sub_items = None
    if isinstance(data, dict) and "subItems" in data:
        sub_items = tuple(sub_item_from_dict(i) for i in _field(data, "subItems", "list", where))

    return Criterion(
        id=_field(data, "id", "str", where),
        name=_field(data, "name", "str", where),
        weight=_field(data, "weight", "number", where),
        score=_field(data, "score", "number", where),
        sub_items=sub_items,
    )


def course_from_dict(data: dict) -> Course:
    where = "course"
    collapsed = None
    if isinstance(data, dict) and "collapsed" in data:
        collapsed = _field(data, "collapsed", "bool", where)

    return Course(
        id=_field(data, "id", "str", where),
        name=_field(data, "name", "str", where),
        credits=_field(data, "credits", "number", where),
        criteria=tuple(criterion_from_dict(c) for c in _field(data, "criteria", "list", where)),
        grade_scale=tuple(grade_scale_entry_from_dict(g) for g in _field(data, "gradeScale", "list", where)),
        collapsed=collapsed,
    )


def semester_from_dict(data: dict) -> Semester:
    where = "semester"
    return Semester(
        id=_field(data, "id", "str", where),
        name=_field(data, "name", "str", where),
        courses=tuple(course_from_dict(c) for c in _field(data, "courses", "list", where)),
    )


def semesters_from_list(data) -> tuple:
    if not isinstance(data, list):
        raise ValueError(f"semesters: expected a list, got {type(data).__name__}")
    return tuple(semester_from_dict(s) for s in data)
