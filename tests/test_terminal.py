import logging
import os

from tetrogrid import terminal


class FakeStream:
    def fileno(self) -> int:
        return 1


def test_terminal_size_reports_columns_and_lines(monkeypatch):
    monkeypatch.setattr(terminal.os, "get_terminal_size", lambda fd: os.terminal_size((120, 33)))
    assert terminal.terminal_size(stream=FakeStream()) == (120, 33)


def test_terminal_size_falls_back_and_logs(monkeypatch, caplog):
    def fail(fd):
        raise OSError("not a tty")

    monkeypatch.setattr(terminal.os, "get_terminal_size", fail)
    with caplog.at_level(logging.WARNING, logger="tetrogrid.terminal"):
        assert terminal.terminal_size(stream=FakeStream()) == (40, 40)
        assert terminal.terminal_size(fallback=(10, 5), stream=FakeStream()) == (10, 5)
    assert "not a tty" in caplog.text


def test_terminal_size_without_fileno_uses_fallback():
    assert terminal.terminal_size(stream=object()) == (40, 40)
