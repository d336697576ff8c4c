"""Unit tests for :mod:`clinicflow.entrypoints.cli.helpers.messages`.

Glyph selection follows the encoding reported by
``click.get_text_stream("stderr")``; every message goes to stderr, styled.
"""

import io
import sys

import click
import pytest

from clinicflow.entrypoints.cli.helpers.messages import (
    _supports_character,
    caution_glyph,
    error,
    error_glyph,
    success,
    success_glyph,
    warn,
)

SET_YELLOW = "\x1b[33m"
SET_GREEN = "\x1b[32m"
SET_RED = "\x1b[31m"
SET_BOLD = "\x1b[1m"


class FakeTTY(io.StringIO):
    """A text stream posing as a TTY with a chosen encoding."""

    def __init__(self, encoding: str | None):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self):
        """Declared character encoding."""
        return self._encoding

    def isatty(self) -> bool:
        """Keep Click from stripping ANSI styles."""
        return True


@pytest.mark.parametrize(
    ("encoding", "expected"),
    [
        ("ascii", ("[!]", "[OK]", "[X]")),
        (None, ("[!]", "[OK]", "[X]")),
        ("utf-8", ("⚠️", "✅", "❌")),
    ],
    ids=["ascii", "no-encoding", "utf-8"],
)
def test_glyphs_follow_stderr_encoding(monkeypatch, encoding, expected):
    """Emoji only when stderr can encode them; a missing encoding means ASCII."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY(encoding))
    assert (caution_glyph(), success_glyph(), error_glyph()) == expected


def test_supports_character_is_not_cached(monkeypatch):
    """Each lookup asks Click for the current stream."""
    encodings = iter(["ascii", "utf-8"])
    monkeypatch.setattr(
        click, "get_text_stream", lambda name: FakeTTY(next(encodings))
    )
    assert _supports_character("✅") is False
    assert _supports_character("✅") is True


@pytest.mark.parametrize(
    ("func", "glyph", "color"),
    [(warn, "[!]", SET_YELLOW), (success, "[OK]", SET_GREEN), (error, "[X]", SET_RED)],
    ids=["warn", "success", "error"],
)
def test_messages_are_styled_on_stderr(monkeypatch, func, glyph, color):
    """Each helper writes one bold, colored line to stderr."""
    stream = FakeTTY("ascii")
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    monkeypatch.setattr(sys, "stderr", stream, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)

    func("Clinic with id 42 not found")

    out = stream.getvalue()
    assert f"{glyph}  Clinic with id 42 not found" in out
    assert SET_BOLD in out
    assert color in out


def test_stdout_stays_clean(monkeypatch, capsys):
    """Nothing reaches stdout, which is reserved for JSON output."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY("utf-8"))
    error("boom")
    captured = capsys.readouterr()
    assert "boom" in captured.err
    assert captured.out == ""
