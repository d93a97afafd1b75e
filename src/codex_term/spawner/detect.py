"""Terminal emulator detection from environment variables."""

from __future__ import annotations

import os
from typing import Mapping

from .models import TerminalType

# TERM_PROGRAM values that identify a terminal directly
_TERM_PROGRAMS = {
    "ghostty": TerminalType.GHOSTTY,
    "vscode": TerminalType.VSCODE,
    "wezterm": TerminalType.WEZTERM,
}


def detect_terminal(env: Mapping[str, str] | None = None) -> TerminalType:
    """Detect the terminal emulator we're running in.

    Several terminals export overlapping variables (and sessions can be
    nested), so the checks run in a fixed order and the first match wins.

    Args:
        env: Environment to inspect. Defaults to ``os.environ``.

    Returns:
        The detected terminal type, or ``TerminalType.UNKNOWN``
    """
    if env is None:
        env = os.environ

    # TERM_PROGRAM is the most reliable signal
    term_program = env.get("TERM_PROGRAM")
    if term_program is not None:
        detected = _TERM_PROGRAMS.get(term_program.lower())
        if detected is not None:
            return detected

    if "VSCODE_GIT_IPC_HANDLE" in env or term_program == "vscode":
        return TerminalType.VSCODE

    if "GHOSTTY_RESOURCES_DIR" in env:
        return TerminalType.GHOSTTY

    if "WEZTERM_EXECUTABLE" in env:
        return TerminalType.WEZTERM

    if "KITTY_WINDOW_ID" in env:
        return TerminalType.KITTY

    if "ALACRITTY_SOCKET" in env or env.get("TERM") == "alacritty":
        return TerminalType.ALACRITTY

    if "KONSOLE_VERSION" in env:
        return TerminalType.KONSOLE

    if "GNOME_TERMINAL_SCREEN" in env:
        return TerminalType.GNOME_TERMINAL

    return TerminalType.UNKNOWN
