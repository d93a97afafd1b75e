"""Exceptions raised while spawning a terminal."""

from __future__ import annotations

import errno
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import TerminalType


class SpawnError(OSError):
    """Base class for spawner failures."""


class ExecutableNotFoundError(SpawnError, FileNotFoundError):
    """The path of the running executable could not be determined."""

    def __init__(self, message: str):
        super().__init__(errno.ENOENT, message)


class TerminalNotFoundError(SpawnError, FileNotFoundError):
    """No terminal emulator from the fallback chain is installed."""

    def __init__(self, message: str, terminal: TerminalType | None = None):
        super().__init__(errno.ENOENT, message)
        self.terminal = terminal
