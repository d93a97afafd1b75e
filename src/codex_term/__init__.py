"""Codex terminal spawner - open the current program in a new terminal window."""

__version__ = "0.1.0"

from .spawner import TerminalType, detect_terminal, spawn_terminal_with_codex

__all__ = [
    "TerminalType",
    "detect_terminal",
    "spawn_terminal_with_codex",
    "__version__",
]
