"""Keyboard controllers that drive the engines.

Each controller owns the typed query and turns key presses into engine
operations. handle_key returns True when the list must be redrawn; once an
action closes the picker, finished is set and the driver should exit.

PUBLIC API:
  - SessionPicker: Keys for the session -> tab -> pane picker
  - CandidatePicker: Keys for the new-session candidate picker
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from .engine import CandidateList, SessionList
from .lexer import split_command
from .types import DisplayRow

__all__ = ["SessionPicker", "CandidatePicker"]


class _Picker(ABC):
    """Query editing shared by both pickers."""

    def __init__(self):
        self.query = ""
        self.finished = False

    def _bindings(self) -> dict[str, Callable[[], bool]]:
        return {}

    @abstractmethod
    def _apply_query(self) -> bool:
        """Re-filter the engine with the current query."""

    def handle_key(self, key: str, character: Optional[str] = None) -> bool:
        """Dispatch one key press.

        Args:
            key: Key name ("enter", "up", "backspace", "a", ...).
            character: Printable character produced by the key, if any.

        Returns:
            True when the display needs a redraw.
        """
        action = self._bindings().get(key)
        if action is not None:
            return action()

        if key == "escape":
            self.finished = True
            return False

        if key == "backspace":
            if not self.query:
                return False
            self.query = self.query[:-1]
            return self._apply_query()

        if key == "space":
            character = " "

        if character and character.isprintable():
            self.query += character
            return self._apply_query()

        return False


class SessionPicker(_Picker):
    """Session picker: arrows navigate and expand, Enter attaches.

    Args:
        engine: Hierarchical engine to drive.
    """

    def __init__(self, engine: SessionList):
        super().__init__()
        self.engine = engine

    def _bindings(self) -> dict[str, Callable[[], bool]]:
        return {
            "enter": self.attach,
            "delete": self.engine.delete_selected,
            "down": self.engine.select_next,
            "up": self.engine.select_prev,
            "right": self.engine.expand,
            "left": self.engine.shrink,
        }

    def _apply_query(self) -> bool:
        return self.engine.filter(self.query)

    def attach(self) -> bool:
        if self.engine.attach_selected():
            self.finished = True
        return False

    def rows(self) -> list[DisplayRow]:
        return self.engine.produce_display_list()


class CandidatePicker(_Picker):
    """Candidate picker: Enter creates or attaches the selected directory.

    Args:
        engine: Flat engine to drive.
        discovery_command: Command line listing candidate directories.
        height: Visible rows.
    """

    def __init__(self, engine: CandidateList, discovery_command: str, height: int):
        super().__init__()
        self.engine = engine
        self.discovery_command = discovery_command
        self.height = height

    @property
    def discovery_argv(self) -> list[str]:
        return split_command(self.discovery_command)

    def _bindings(self) -> dict[str, Callable[[], bool]]:
        return {
            "enter": self.create_or_attach,
            "delete": self.engine.delete_selected,
            "down": self.engine.select_next,
            "up": self.engine.select_prev,
        }

    def _apply_query(self) -> bool:
        return self.engine.filter(self.query)

    def create_or_attach(self) -> bool:
        if self.engine.create_or_attach():
            self.finished = True
        return False

    def rows(self) -> list[DisplayRow]:
        return self.engine.produce_display_list(self.height)
