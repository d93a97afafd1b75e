"""Data models for terminal spawning."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path


class TerminalType(Enum):
    """Terminal emulators we know how to open a new window in."""

    GHOSTTY = "ghostty"
    VSCODE = "vscode"
    ALACRITTY = "alacritty"
    KITTY = "kitty"
    WEZTERM = "wezterm"
    GNOME_TERMINAL = "gnome-terminal"
    KONSOLE = "konsole"
    XTERM = "xterm"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        """Human readable name of the terminal."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    TerminalType.GHOSTTY: "Ghostty",
    TerminalType.VSCODE: "VS Code",
    TerminalType.ALACRITTY: "Alacritty",
    TerminalType.KITTY: "Kitty",
    TerminalType.WEZTERM: "WezTerm",
    TerminalType.GNOME_TERMINAL: "GNOME Terminal",
    TerminalType.KONSOLE: "Konsole",
    TerminalType.XTERM: "xterm",
    TerminalType.UNKNOWN: "Unknown",
}


@dataclass(frozen=True)
class LaunchRequest:
    """What to run in the new terminal window."""

    executable: Path
    args: tuple[str, ...] = ()
    cwd: Path | None = None
    # Inserted between the executable and args, e.g. ("-m", "codex_term")
    executable_args: tuple[str, ...] = ()


@dataclass(frozen=True)
class LaunchCommand:
    """An external command that opens a terminal window.

    All three standard streams of the launched process are discarded; the new
    terminal owns its own I/O.
    """

    program: str
    argv: tuple[str, ...] = ()
    cwd: Path | None = None

    stdin = subprocess.DEVNULL
    stdout = subprocess.DEVNULL
    stderr = subprocess.DEVNULL

    @property
    def command_line(self) -> list[str]:
        """Program followed by its arguments, ready for ``subprocess``."""
        return [self.program, *self.argv]

    def with_cwd(self, cwd: Path | None) -> LaunchCommand:
        """Return a copy that starts in ``cwd``."""
        return replace(self, cwd=cwd)
