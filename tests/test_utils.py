"""Tests for logging helpers and what the library logs."""

import logging

import pytest

from scopelex.lexer import Lexer
from scopelex.syntax import get_syntax
from scopelex.utils import get_logger


class TestGetLogger:
    """Logger namespacing."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("mymodule", "scopelex.mymodule"),
            ("scopelex", "scopelex"),
            ("scopelex.lexer.core", "scopelex.lexer.core"),
            ("scopelexer", "scopelex.scopelexer"),
        ],
    )
    def test_prefix(self, name: str, expected: str) -> None:
        """Names outside the package get the scopelex prefix."""
        assert get_logger(name).name == expected

    def test_no_handlers_added(self) -> None:
        """The library leaves handler setup to the application."""
        assert get_logger("scopelex").handlers == []


class TestDebugLogging:
    """Debug records emitted while splitting."""

    def test_rejected_single_line_block(self, caplog: pytest.LogCaptureFixture) -> None:
        """Keeping a single-line block comment as code is logged."""
        caplog.set_level(logging.DEBUG, logger="scopelex")
        Lexer(["/*@out@*/ int x;"], get_syntax("c")).tokenize()
        assert "keeping the whole line as code" in caplog.text

    def test_rejected_multiline_block(self, caplog: pytest.LogCaptureFixture) -> None:
        """Keeping the code after a multi-line block comment is logged."""
        caplog.set_level(logging.DEBUG, logger="scopelex")
        Lexer(["/* a", "*/ int x;"], get_syntax("c")).tokenize()
        assert "has code after its closer" in caplog.text

    def test_split_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        """Each split logs a summary naming the source file."""
        caplog.set_level(logging.DEBUG, logger="scopelex")
        Lexer(["// a", "b"], get_syntax("java"), source_file="A.java").tokenize()
        assert "Split A.java: 2 lines, 1 comment runs" in caplog.text
