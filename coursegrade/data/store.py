"""
Gradebook persistence.

This module reads and writes the whole application state as a single JSON
document. Any malformed file falls back to an empty gradebook, never a crash.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from ..config import (
    STATE_FILE,
    SEMESTERS_KEY,
    ACTIVE_SEMESTER_KEY,
    SIDEBAR_COLLAPSED_KEY,
    THEME_KEY,
)
from ..models import AppState, Theme
from .serializer import semesters_from_list, semesters_to_list

logger = logging.getLogger(__name__)


class StateStore:
    """
    JSON-backed store for the saved gradebook.

    FILE LAYOUT:
    -----------
    A flat object keyed like the browser version's localStorage:

        {
            "grade-calculator-semesters": [ {semester}, ... ],
            "grade-calculator-active-semester": "<semester id>",
            "sidebar-collapsed": false,
            "theme": "light"
        }

    Every key is optional. Missing keys take their AppState default.

    LOAD REPAIRS:
    ------------
    - active semester id that no longer exists -> first semester (or None)
    - unknown theme value -> light
    - unreadable or malformed file -> empty AppState, with load_error set
      so the caller can tell the user

    Usage:
        store = StateStore()
        state = store.load()
        store.save(state)
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else STATE_FILE
        self.load_error: Optional[str] = None

    def load(self) -> AppState:
        self.load_error = None

        if not self.path.exists():
            logger.debug("No saved state at %s, starting empty", self.path)
            return AppState()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            state = self.state_from_document(data)
        except json.JSONDecodeError as e:
            self.load_error = f"Saved gradebook is corrupted: {e}"
        except ValueError as e:
            self.load_error = f"Saved gradebook is malformed: {e}"
        except OSError as e:
            self.load_error = f"Failed to read saved gradebook: {e}"
        else:
            logger.debug("Loaded %d semester(s) from %s", len(state.semesters), self.path)
            return state

        logger.warning("%s (%s); starting empty", self.load_error, self.path)
        return AppState()

    def save(self, state: AppState) -> None:
        """
        Write the state atomically.

        The document goes to a temp file in the same directory first, then
        replaces the real file, so a crash mid-write never leaves half a file.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(self.state_to_document(state), indent=2)

        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".state-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except OSError:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

        logger.debug("Saved %d semester(s) to %s", len(state.semesters), self.path)

    @staticmethod
    def state_to_document(state: AppState) -> dict:
        document = {
            SEMESTERS_KEY: semesters_to_list(state.semesters),
            SIDEBAR_COLLAPSED_KEY: state.sidebar_collapsed,
            THEME_KEY: state.theme.value,
        }
        if state.active_semester_id is not None:
            document[ACTIVE_SEMESTER_KEY] = state.active_semester_id
        return document

    @staticmethod
    def state_from_document(data) -> AppState:
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")

        semesters = semesters_from_list(data.get(SEMESTERS_KEY, []))

        # Restore the previously active semester only if it still exists
        active_id = data.get(ACTIVE_SEMESTER_KEY)
        if not any(s.id == active_id for s in semesters):
            active_id = semesters[0].id if semesters else None

        sidebar_collapsed = data.get(SIDEBAR_COLLAPSED_KEY, False)
        if not isinstance(sidebar_collapsed, bool):
            raise ValueError(f"'{SIDEBAR_COLLAPSED_KEY}' should be a bool")

        try:
            theme = Theme(data.get(THEME_KEY, Theme.LIGHT.value))
        except ValueError:
            logger.warning("Unknown theme %r, using light", data.get(THEME_KEY))
            theme = Theme.LIGHT

        return AppState(
            semesters=semesters,
            active_semester_id=active_id,
            sidebar_collapsed=sidebar_collapsed,
            theme=theme,
        )
