"""
CourseGrade Package
===================

A single-user grade tracker: weighted grading criteria per course, letter
grades from a per-course scale, and a credit-weighted semester GPA.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                           ENGINE LAYER                                   │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────────────────────────────────────────────────────────┐  │
│  │ grading: score resolver → course grade → letter → points → GPA   │  │
│  │                                         └──────→ distribution    │  │
│  └──────────────────────────────────────────────────────────────────┘  │
│  ┌────────────────────────┐  ┌──────────────────────────────────────┐  │
│  │     SummaryEngine      │  │   editing (copy-on-write commands)   │  │
│  │ (GPA card, chart data) │  │   add / update / delete by id        │  │
│  └────────────────────────┘  └──────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns frozen dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                 PERSISTENCE & PRESENTATION LAYERS                        │
│                                                                         │
│  StateStore (JSON file)          TerminalDisplay (console output)       │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                             Gradebook                                    │
│          (Orchestrator - connects engine, store and display)            │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

coursegrade/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants and grading policy
├── gradebook.py         # Gradebook orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Frozen dataclasses and enums
│   ├── course.py        # SubItem, Criterion, GradeScaleEntry, Course, Semester
│   ├── state.py         # AppState, Theme
│   └── summary.py       # CourseBreakdown, DistributionEntry, SemesterSummary
│
├── engines/
│   ├── grading.py       # The grade computation functions
│   ├── summary.py       # SummaryEngine
│   └── editing.py       # Snapshot-to-snapshot edit functions
│
├── data/
│   ├── serializer.py    # Models <-> JSON shapes
│   └── store.py         # StateStore
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

Computing grades directly:

    from coursegrade import calculate_gpa, calculate_grade_distribution

    gpa = calculate_gpa(semester.courses)
    counts = calculate_grade_distribution(semester.courses)

Editing and saving:

    from coursegrade import Gradebook, editing

    book = Gradebook()
    book.apply(editing.add_semester)
    book.apply(editing.add_course, book.state.active_semester_id)

Running from command line:

    coursegrade
    python -m coursegrade

"""

# Version
__version__ = "1.0.0"

# Main exports
from .gradebook import Gradebook
from .cli import main

# Model exports
from .models import (
    SubItem,
    Criterion,
    GradeScaleEntry,
    Course,
    Semester,
    AppState,
    Theme,
    CourseBreakdown,
    DistributionEntry,
    SemesterSummary,
)

# Engine exports
from .engines import (
    resolve_criterion_score,
    total_weight,
    calculate_course_grade,
    get_letter_grade,
    lookup_grade_points,
    letter_grade_to_gpa,
    course_letter_grade,
    calculate_gpa,
    calculate_grade_distribution,
    is_course_default,
    is_semester_default,
    SummaryEngine,
    editing,
)

# Data exports
from .data import StateStore

# UI exports
from .ui import TerminalDisplay

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "Gradebook",
    "main",
    # Models
    "SubItem",
    "Criterion",
    "GradeScaleEntry",
    "Course",
    "Semester",
    "AppState",
    "Theme",
    "CourseBreakdown",
    "DistributionEntry",
    "SemesterSummary",
    # Engines
    "resolve_criterion_score",
    "total_weight",
    "calculate_course_grade",
    "get_letter_grade",
    "lookup_grade_points",
    "letter_grade_to_gpa",
    "course_letter_grade",
    "calculate_gpa",
    "calculate_grade_distribution",
    "is_course_default",
    "is_semester_default",
    "SummaryEngine",
    "editing",
    # Data
    "StateStore",
    # UI
    "TerminalDisplay",
]
