# tests/test_console_connector.py

from __future__ import annotations

import io

from chad_bot.connectors.console_connector import format_bot_message, run_console_loop


def _session(state, text: str) -> tuple[bool, str]:
    out = io.StringIO()
    said_bye = run_console_loop(state, stdin=io.StringIO(text), stdout=out)
    return said_bye, out.getvalue()


def test_format_bot_message_frames_every_line() -> None:
    framed = format_bot_message("one\ntwo", width=3)
    assert framed == "    ___\n     one\n     two\n    ___"


def test_frames_are_not_followed_by_blank_lines(state) -> None:
    _, output = _session(state, "todo a\n")
    assert "\n\n" not in output
    assert output.count("    __________\n") == 4


def test_greets_and_stops_on_eof(state) -> None:
    said_bye, output = _session(state, "todo read\n")
    assert said_bye is False
    assert "Hello! I'm ChadGPT. What can I do for you?" in output
    assert "[T][ ] read" in output
    assert len(state.task_store) == 1


def test_errors_are_reported_and_loop_continues(state) -> None:
    script = "\nfoo bar\ntodo \nmark 9\nmark nope\ndeadline x\ntodo ok\n"
    said_bye, output = _session(state, script)

    assert said_bye is False
    assert "Command not found" in output
    assert 'I\'m sorry, but I don\'t know what "foo" means.' in output
    assert "The description of a todo cannot be empty." in output
    assert "Invalid task id: 9" in output
    assert "Invalid task id: nope" in output
    assert "Invalid task description: x" in output
    assert [t.description for t in state.task_store] == ["ok"]


def test_bye_ends_session_before_remaining_lines(state) -> None:
    said_bye, output = _session(state, "todo a\nbye\nlist\ntodo b\n")

    assert said_bye is True
    assert output.rstrip().endswith("____")
    assert "Bye. Hope to see you again soon!" in output
    assert "Here are the tasks in your list:" not in output
    assert len(state.task_store) == 1


def test_windows_line_endings_are_stripped(state) -> None:
    _session(state, "deadline Submit /by Friday\r\n")
    assert state.task_store.get(0).by == "Friday"


def test_handler_crash_is_contained(state, monkeypatch, caplog) -> None:
    def boom(self):
        raise RuntimeError("boom")

    monkeypatch.setattr(type(state.task_store), "format_list", boom)

    said_bye, output = _session(state, "list\ntodo after\n")
    assert said_bye is False
    assert "Internal error while handling a command." in output
    assert "Command handler crashed." in caplog.text
    assert len(state.task_store) == 1
