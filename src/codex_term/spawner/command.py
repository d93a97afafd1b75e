"""Building the command that opens a new terminal window."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Callable, Sequence

from ..logging import get_logger
from .errors import TerminalNotFoundError
from .models import LaunchCommand, TerminalType

log = get_logger("spawner")

# Looks a program up on the search path, returning its location or None
Which = Callable[[str], str | None]

# Program and the arguments that go before the target executable
TERMINAL_COMMANDS: dict[TerminalType, tuple[str, tuple[str, ...]]] = {
    # Ghostty can't open tabs from the CLI yet, so this opens a window
    TerminalType.GHOSTTY: ("ghostty", ()),
    TerminalType.ALACRITTY: ("alacritty", ("-e",)),
    TerminalType.KITTY: ("kitty", ()),
    TerminalType.WEZTERM: ("wezterm", ("start", "--")),
    TerminalType.GNOME_TERMINAL: ("gnome-terminal", ("--",)),
    TerminalType.KONSOLE: ("konsole", ("-e",)),
    TerminalType.XTERM: ("xterm", ("-e",)),
}

# Tried in order when the current terminal can't host a new window itself
FALLBACK_TERMINALS: tuple[TerminalType, ...] = (
    TerminalType.GNOME_TERMINAL,
    TerminalType.KONSOLE,
    TerminalType.XTERM,
)


def find_fallback_terminal(which: Which = shutil.which) -> TerminalType | None:
    """Return the first fallback terminal found on the search path."""
    for terminal in FALLBACK_TERMINALS:
        program, _ = TERMINAL_COMMANDS[terminal]
        if which(program):
            return terminal
    return None


def get_available_terminals(which: Which = shutil.which) -> list[TerminalType]:
    """Get list of terminals whose program is on the search path.

    Returns:
        Available terminal types, in table order
    """
    return [
        terminal
        for terminal, (program, _) in TERMINAL_COMMANDS.items()
        if which(program)
    ]


def build_terminal_command(
    terminal: TerminalType,
    executable: str | os.PathLike,
    args: Sequence[str] = (),
    which: Which = shutil.which,
) -> LaunchCommand:
    """Build the command that opens ``executable`` in a new terminal window.

    VS Code's integrated terminal (and an unrecognised terminal) can't open a
    detached window, so for those the first installed terminal out of
    ``FALLBACK_TERMINALS`` is used instead.

    Args:
        terminal: The detected terminal type
        executable: Program to run inside the new window
        args: Arguments passed to ``executable``, forwarded verbatim
        which: Search path lookup used to probe fallback terminals

    Returns:
        The command to launch

    Raises:
        TerminalNotFoundError: If no fallback terminal is installed
    """
    target = terminal
    if terminal in (TerminalType.VSCODE, TerminalType.UNKNOWN):
        target = find_fallback_terminal(which)
        if target is None:
            if terminal == TerminalType.VSCODE:
                message = "No suitable terminal emulator found for VS Code environment"
            else:
                message = "No suitable terminal emulator found"
            raise TerminalNotFoundError(message, terminal=terminal)
        log.debug(f"Falling back from {terminal.value} to {target.value}")

    program, prefix = TERMINAL_COMMANDS[target]
    return LaunchCommand(
        program=program,
        argv=(*prefix, str(Path(executable)), *args),
    )
