"""Shared fixtures for codex-term tests."""

import pytest


def make_which(*installed):
    """Build a search path lookup that only finds ``installed`` programs."""

    def which(program):
        if program in installed:
            return f"/usr/bin/{program}"
        return None

    return which


@pytest.fixture
def codex_exe(tmp_path):
    """A fake codex executable on disk."""
    exe = tmp_path / "bin" / "codex"
    exe.parent.mkdir()
    exe.write_text("#!/bin/sh\nexit 0\n")
    exe.chmod(0o755)
    return exe
