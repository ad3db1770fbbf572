"""
Configuration constants for the grade tracker.

This module contains all configuration values and constants used throughout
the grading engine. Centralizing these makes it easy to adjust behavior as
grading policies change.
"""

import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Where the saved gradebook lives. Override with COURSEGRADE_DATA_DIR.
DATA_DIR = Path(os.environ.get("COURSEGRADE_DATA_DIR", Path.home() / ".coursegrade"))
STATE_FILE = DATA_DIR / "state.json"


# =============================================================================
# STORAGE KEYS
# =============================================================================
# The saved document is a flat key-value map. These keys are shared with the
# browser version of the tool, so a file exported from localStorage loads as-is.

SEMESTERS_KEY = "grade-calculator-semesters"
ACTIVE_SEMESTER_KEY = "grade-calculator-active-semester"
SIDEBAR_COLLAPSED_KEY = "sidebar-collapsed"
THEME_KEY = "theme"


# =============================================================================
# NEW ENTITY DEFAULTS
# =============================================================================

DEFAULT_CREDITS = 3

# (name, weight) for the criteria every new course starts with
DEFAULT_CRITERIA = (
    ("Assignments", 30),
    ("Midterm", 30),
    ("Final Exam", 40),
)

# (letter, min) pairs for a new course's grade scale
DEFAULT_GRADE_SCALE = (
    ("A+", 96),
    ("A", 93),
    ("A-", 90),
    ("B+", 87),
    ("B", 83),
    ("B-", 80),
    ("C+", 77),
    ("C", 73),
    ("C-", 70),
    ("D+", 67),
    ("D", 63),
    ("D-", 60),
    ("F", 0),
)

# Entry appended when the user adds a row to a grade scale
NEW_GRADE_SCALE_ENTRY = ("A+", 97)

NEW_CRITERION_NAME = "New Criterion"
NEW_SUB_ITEM_NAME = "Assignment"


# =============================================================================
# GRADE POINT POLICY
# =============================================================================

# Fixed 4.0 mapping. Not user-configurable: custom scale letters that are not
# listed here earn UNKNOWN_LETTER_POINTS.
GPA_POINTS = {
    "A+": 4.0,
    "A": 4.0,
    "A-": 3.7,
    "B+": 3.3,
    "B": 3.0,
    "B-": 2.7,
    "C+": 2.3,
    "C": 2.0,
    "C-": 1.7,
    "D+": 1.3,
    "D": 1.0,
    "D-": 0.7,
    "F": 0.0,
}
UNKNOWN_LETTER_POINTS = 0.0

# Returned by the classifier when a course has an empty grade scale
FALLBACK_LETTER = "F"

# Display order for distribution charts, best to worst
CANONICAL_LETTER_ORDER = tuple(GPA_POINTS)


# =============================================================================
# WEIGHTING POLICY
# =============================================================================

# Criterion weights are percentage points. Each weighted score is divided by
# this fixed value, NOT by the actual total weight: a course whose weights sum
# to 80 can reach at most 80%.
WEIGHT_DIVISOR = 100

# Flip to True to divide by the real total weight instead.
NORMALIZE_CRITERION_WEIGHTS = False

# Weight total at which the course editor stops warning
EXPECTED_TOTAL_WEIGHT = 100


# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
