# tests/test_main.py

from __future__ import annotations

import io
import sys

from chad_bot.cli import main as cli_main


def test_main_runs_session_and_exits_zero(monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(sys, "stdin", io.StringIO("todo a\nbye\ntodo b\n"))

    assert cli_main.main() == 0

    out = capsys.readouterr().out
    assert "Now you have 1 task(s) in the list." in out
    assert "Bye. Hope to see you again soon!" in out
    assert "Now you have 2 task(s)" not in out


def test_main_exits_zero_on_eof(monkeypatch) -> None:
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert cli_main.main() == 0


def test_main_replaces_undecodable_input(monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kwargs: None)
    raw = io.BytesIO(b"todo a\n\xff\xfe bad\nlist\nbye\n")
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(raw, encoding="utf-8"))

    assert cli_main.main() == 0

    out = capsys.readouterr().out
    assert "Command not found" in out
    assert "1.[T][ ] a" in out
    assert "Bye. Hope to see you again soon!" in out
