"""Tests for terminal detection."""

import pytest

from codex_term.spawner import TerminalType, detect_terminal


class TestDetectTerminal:
    """Tests for detect_terminal()."""

    def test_empty_environment_is_unknown(self):
        """Test that no markers means unknown."""
        assert detect_terminal({}) == TerminalType.UNKNOWN

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("ghostty", TerminalType.GHOSTTY),
            ("Ghostty", TerminalType.GHOSTTY),
            ("vscode", TerminalType.VSCODE),
            ("VSCode", TerminalType.VSCODE),
            ("WezTerm", TerminalType.WEZTERM),
        ],
    )
    def test_term_program_case_insensitive(self, value, expected):
        """Test TERM_PROGRAM matching ignores case."""
        assert detect_terminal({"TERM_PROGRAM": value}) == expected

    def test_unrecognised_term_program_falls_through(self):
        """Test an unknown TERM_PROGRAM doesn't stop later checks."""
        env = {"TERM_PROGRAM": "Apple_Terminal", "KITTY_WINDOW_ID": "1"}
        assert detect_terminal(env) == TerminalType.KITTY

    @pytest.mark.parametrize(
        "env, expected",
        [
            ({"VSCODE_GIT_IPC_HANDLE": "/tmp/vscode-git.sock"}, TerminalType.VSCODE),
            ({"GHOSTTY_RESOURCES_DIR": "/x"}, TerminalType.GHOSTTY),
            ({"WEZTERM_EXECUTABLE": "/usr/bin/wezterm-gui"}, TerminalType.WEZTERM),
            ({"KITTY_WINDOW_ID": "3"}, TerminalType.KITTY),
            ({"ALACRITTY_SOCKET": "/run/alacritty.sock"}, TerminalType.ALACRITTY),
            ({"TERM": "alacritty"}, TerminalType.ALACRITTY),
            ({"KONSOLE_VERSION": "230804"}, TerminalType.KONSOLE),
            ({"GNOME_TERMINAL_SCREEN": "/org/gnome/Terminal/screen/1"}, TerminalType.GNOME_TERMINAL),
        ],
    )
    def test_single_marker(self, env, expected):
        """Test each marker variable on its own."""
        assert detect_terminal(env) == expected

    def test_empty_marker_still_counts(self):
        """Test a marker that is set but empty is still detected."""
        assert detect_terminal({"KITTY_WINDOW_ID": ""}) == TerminalType.KITTY

    def test_other_term_values_ignored(self):
        """Test TERM only identifies alacritty."""
        assert detect_terminal({"TERM": "xterm-256color"}) == TerminalType.UNKNOWN

    def test_xterm_never_detected(self):
        """Test xterm is only reachable through the fallback chain."""
        assert detect_terminal({"TERM": "xterm"}) == TerminalType.UNKNOWN

    def test_term_program_beats_other_markers(self):
        """Test TERM_PROGRAM=ghostty wins over a Kitty window id."""
        env = {"TERM_PROGRAM": "ghostty", "KITTY_WINDOW_ID": "1"}
        assert detect_terminal(env) == TerminalType.GHOSTTY

    def test_priority_order_nested_sessions(self):
        """Test that with every marker set, the fixed order decides."""
        env = {
            "VSCODE_GIT_IPC_HANDLE": "h",
            "GHOSTTY_RESOURCES_DIR": "/x",
            "WEZTERM_EXECUTABLE": "w",
            "KITTY_WINDOW_ID": "1",
            "ALACRITTY_SOCKET": "s",
            "KONSOLE_VERSION": "1",
            "GNOME_TERMINAL_SCREEN": "g",
        }
        order = [
            ("VSCODE_GIT_IPC_HANDLE", TerminalType.VSCODE),
            ("GHOSTTY_RESOURCES_DIR", TerminalType.GHOSTTY),
            ("WEZTERM_EXECUTABLE", TerminalType.WEZTERM),
            ("KITTY_WINDOW_ID", TerminalType.KITTY),
            ("ALACRITTY_SOCKET", TerminalType.ALACRITTY),
            ("KONSOLE_VERSION", TerminalType.KONSOLE),
            ("GNOME_TERMINAL_SCREEN", TerminalType.GNOME_TERMINAL),
        ]
        for name, expected in order:
            assert detect_terminal(env) == expected
            del env[name]
        assert detect_terminal(env) == TerminalType.UNKNOWN

    def test_defaults_to_process_environment(self, monkeypatch):
        """Test that os.environ is read when no mapping is given."""
        for name in (
            "TERM_PROGRAM",
            "VSCODE_GIT_IPC_HANDLE",
            "GHOSTTY_RESOURCES_DIR",
            "WEZTERM_EXECUTABLE",
            "KITTY_WINDOW_ID",
            "ALACRITTY_SOCKET",
            "KONSOLE_VERSION",
        ):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("TERM", "xterm-256color")
        monkeypatch.setenv("GNOME_TERMINAL_SCREEN", "/org/gnome/Terminal/screen/1")

        assert detect_terminal() == TerminalType.GNOME_TERMINAL
