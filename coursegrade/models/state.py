"""
Application state models.

The whole saved snapshot: every semester plus the small amount of UI state
that is persisted alongside it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .course import Semester


class Theme(Enum):
    """Color theme preference."""
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class AppState:
    """
    Everything the state store reads and writes.

    active_semester_id is None when there are no semesters. It may point at
    a semester that no longer exists only in hand-edited files; the store
    repairs that on load.
    """
    semesters: Tuple[Semester, ...] = ()
    active_semester_id: Optional[str] = None
    sidebar_collapsed: bool = False
    theme: Theme = Theme.LIGHT

    @property
    def active_semester(self) -> Optional[Semester]:
        for semester in self.semesters:
            if semester.id == self.active_semester_id:
                return semester
        return None
