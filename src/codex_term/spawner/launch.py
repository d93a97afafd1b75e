"""Launching codex in a new terminal window."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Mapping, Sequence

from ..logging import get_logger
from .command import Which, build_terminal_command
from .detect import detect_terminal
from .errors import ExecutableNotFoundError
from .models import LaunchCommand, LaunchRequest, TerminalType

log = get_logger("spawner")


def _argv0() -> str:
    return sys.argv[0] if sys.argv else ""


def current_executable(argv0: str | None = None) -> Path:
    """Resolve the absolute path of the program we're running as.

    Args:
        argv0: Invocation name. Defaults to ``sys.argv[0]``.

    Returns:
        Absolute path of the running executable

    Raises:
        ExecutableNotFoundError: If the path can't be determined or the file
            isn't executable
    """
    if argv0 is None:
        argv0 = _argv0()

    if not argv0:
        raise ExecutableNotFoundError("Cannot determine the running executable")

    if os.sep in argv0 or (os.altsep and os.altsep in argv0):
        path = Path(argv0).resolve()
        if path.is_file():
            if not os.access(path, os.X_OK):
                raise ExecutableNotFoundError(f"Running program is not executable: {path}")
            return path
    else:
        found = shutil.which(argv0)
        if found:
            return Path(found).resolve()

    raise ExecutableNotFoundError(f"Cannot resolve running executable: {argv0}")


def current_invocation(argv0: str | None = None) -> tuple[Path, tuple[str, ...]]:
    """Work out how to start the running program again.

    Installed scripts are re-run directly. A Python script, or a package run
    with ``python -m``, is re-run through the current interpreter.

    Args:
        argv0: Invocation name. Defaults to ``sys.argv[0]``.

    Returns:
        The executable and the arguments that go before the forwarded ones

    Raises:
        ExecutableNotFoundError: If the program can't be started again
    """
    if argv0 is None:
        argv0 = _argv0()

    script = Path(argv0)
    if script.suffix == ".py" and script.is_file():
        if not sys.executable:
            raise ExecutableNotFoundError("Cannot determine the Python interpreter")
        python = Path(sys.executable)
        script = script.resolve()
        # python -m pkg sets argv[0] to pkg/__main__.py
        if script.name == "__main__.py":
            return python, ("-m", script.parent.name)
        return python, (str(script),)

    return current_executable(argv0), ()


def prepare_launch(
    request: LaunchRequest,
    terminal: TerminalType | None = None,
    env: Mapping[str, str] | None = None,
    which: Which = shutil.which,
) -> LaunchCommand:
    """Detect the terminal and build the command for ``request``.

    Args:
        request: Executable, arguments and working directory to launch
        terminal: Terminal type to use. If None, auto-detect.
        env: Environment used for detection. Defaults to ``os.environ``.
        which: Search path lookup for fallback terminals

    Returns:
        The command that would be launched
    """
    if terminal is None:
        terminal = detect_terminal(env)
    log.debug(f"Detected terminal: {terminal.value}")

    command = build_terminal_command(
        terminal,
        request.executable,
        (*request.executable_args, *request.args),
        which,
    )
    if request.cwd is not None:
        command = command.with_cwd(request.cwd)
    return command


def spawn_terminal_with_codex(
    args: Sequence[str],
    cwd: str | os.PathLike | None = None,
    *,
    terminal: TerminalType | None = None,
    env: Mapping[str, str] | None = None,
    which: Which = shutil.which,
    executable: str | os.PathLike | None = None,
) -> subprocess.Popen:
    """Spawn a new terminal window running codex with ``args``.

    The process is started detached with all standard streams discarded, and
    this returns as soon as it has been created.

    Args:
        args: Arguments to pass to the codex executable
        cwd: Optional working directory for the new terminal
        terminal: Terminal type to use. If None, auto-detect.
        env: Environment used for detection. Defaults to ``os.environ``.
        which: Search path lookup for fallback terminals
        executable: Program to run. Defaults to the running program.

    Returns:
        Handle to the spawned terminal process

    Raises:
        ExecutableNotFoundError: If the running program can't be resolved
        TerminalNotFoundError: If no usable terminal emulator is installed
        OSError: If the operating system fails to start the process
    """
    if executable is not None:
        program, leading = Path(executable), ()
    else:
        program, leading = current_invocation()

    request = LaunchRequest(
        executable=program,
        args=tuple(args),
        cwd=Path(cwd) if cwd is not None else None,
        executable_args=leading,
    )
    command = prepare_launch(request, terminal=terminal, env=env, which=which)

    log.debug(f"Spawning: {command.command_line} (cwd={command.cwd})")
    return subprocess.Popen(
        command.command_line,
        cwd=command.cwd,
        stdin=command.stdin,
        stdout=command.stdout,
        stderr=command.stderr,
        start_new_session=True,
    )
