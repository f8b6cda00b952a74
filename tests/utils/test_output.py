"""Tests for terminal detection and raw line output."""

import pytest

from tinygrep.utils.output import is_piped, print_lines


class _Stream:
    def __init__(self, tty: bool) -> None:
        self._tty = tty

    def isatty(self) -> bool:
        return self._tty


class TestIsPiped:
    @pytest.mark.parametrize(
        "stdin_tty,stdout_tty,piped",
        [(True, True, False), (False, True, True), (True, False, True), (False, False, True)],
    )
    def test_needs_both_terminals(self, monkeypatch, stdin_tty, stdout_tty, piped):
        monkeypatch.setattr("sys.stdin", _Stream(stdin_tty))
        monkeypatch.setattr("sys.stdout", _Stream(stdout_tty))
        assert is_piped() is piped


class TestPrintLines:
    def test_escapes_untouched(self, capsys):
        print_lines(["plain", "\x1b[1;34mhi\x1b[0m [red]x[/red]"])
        assert capsys.readouterr().out == "plain\n\x1b[1;34mhi\x1b[0m [red]x[/red]\n"
