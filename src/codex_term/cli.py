"""CLI entry point for codex-term."""

import shlex

import click

from . import __version__
from .spawner import TerminalType

_TERMINAL_CHOICES = [t.value for t in TerminalType]


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__)
def main(verbose: bool):
    """codex-term - open codex in a new terminal window.

    Detects the terminal emulator you're running in and starts a new
    window of it running this program.

    Usage:
        codex-term detect             Show the detected terminal
        codex-term terminals          List installed terminals
        codex-term spawn -- ARGS...   Open a new window
    """
    from .logging import setup_logging

    setup_logging(verbose=verbose, log_to_file=False)


@main.command()
def detect():
    """Print the detected terminal emulator."""
    from .spawner import detect_terminal

    click.echo(detect_terminal().value)


@main.command()
def terminals():
    """List known terminals and whether they are installed."""
    from rich.console import Console
    from rich.table import Table

    from .spawner import TERMINAL_COMMANDS, detect_terminal, get_available_terminals

    current = detect_terminal()
    available = set(get_available_terminals())

    table = Table(title="Terminal Emulators")
    table.add_column("Terminal", style="cyan")
    table.add_column("Program")
    table.add_column("Installed", justify="center")

    for terminal, (program, _) in TERMINAL_COMMANDS.items():
        name = terminal.display_name
        if terminal == current:
            name += " (current)"
        installed = "[green]yes[/green]" if terminal in available else "[dim]no[/dim]"
        table.add_row(name, program, installed)

    Console().print(table)


@main.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False}
)
@click.option(
    "--cwd",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Working directory for the new terminal",
)
@click.option(
    "--terminal",
    type=click.Choice(_TERMINAL_CHOICES),
    default=None,
    help="Terminal to use instead of auto-detecting",
)
@click.option("--dry-run", is_flag=True, help="Print the command instead of running it")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def spawn(cwd, terminal, dry_run: bool, args):
    """Open a new terminal window running this program with ARGS."""
    import os
    from pathlib import Path

    from .spawner import (
        LaunchRequest,
        current_invocation,
        prepare_launch,
        spawn_terminal_with_codex,
    )

    terminal_type = TerminalType(terminal) if terminal else None
    if cwd is not None:
        cwd = os.path.abspath(cwd)

    try:
        if dry_run:
            executable, leading = current_invocation()
            request = LaunchRequest(
                executable=executable,
                args=tuple(args),
                cwd=Path(cwd) if cwd else None,
                executable_args=leading,
            )
            command = prepare_launch(request, terminal=terminal_type)
            click.echo(shlex.join(command.command_line))
            return

        process = spawn_terminal_with_codex(list(args), cwd, terminal=terminal_type)
    except OSError as e:
        message = e if e.filename else (e.strerror or e)
        click.echo(f"Error: {message}", err=True)
        raise SystemExit(1)

    click.echo(f"Spawned terminal (pid {process.pid}).")


if __name__ == "__main__":
    main()
