"""Spawner module for opening codex in a new terminal window.

Detects the terminal emulator from the environment, builds the command that
opens a new window for it, and launches that command detached.
"""

from .command import (
    FALLBACK_TERMINALS,
    TERMINAL_COMMANDS,
    build_terminal_command,
    find_fallback_terminal,
    get_available_terminals,
)
from .detect import detect_terminal
from .errors import ExecutableNotFoundError, SpawnError, TerminalNotFoundError
from .launch import (
    current_executable,
    current_invocation,
    prepare_launch,
    spawn_terminal_with_codex,
)
from .models import LaunchCommand, LaunchRequest, TerminalType

__all__ = [
    "FALLBACK_TERMINALS",
    "TERMINAL_COMMANDS",
    "ExecutableNotFoundError",
    "LaunchCommand",
    "LaunchRequest",
    "SpawnError",
    "TerminalNotFoundError",
    "TerminalType",
    "build_terminal_command",
    "current_executable",
    "current_invocation",
    "detect_terminal",
    "find_fallback_terminal",
    "get_available_terminals",
    "prepare_launch",
    "spawn_terminal_with_codex",
]
