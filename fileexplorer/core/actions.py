"""
Typed action contract between the browser window and the app loop.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ActionType(str, Enum):
    """Outcome kinds returned by window handlers."""

    REFRESH = "refresh"
    ERROR = "error"
    OPEN_FILE = "open_file"
    QUIT = "quit"


@dataclass(frozen=True)
class ActionResult:
    """Action message emitted by window handlers."""

    type: ActionType
    payload: Any = None
