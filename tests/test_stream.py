"""Tests for TokenStream."""

from scopelex.stream import TokenStream
from scopelex.tokens import Token, TokenType


class TestBuilding:
    """Appending to the stream."""

    def test_tokenize_line_appends_line_break(self) -> None:
        """Each tokenized line ends with a line break token."""
        stream = TokenStream()
        stream.tokenize_line("int x;")
        assert stream.values() == ["int", " ", "x", ";", "\n"]

    def test_empty_line_is_just_a_line_break(self) -> None:
        """An empty line contributes only its line break."""
        stream = TokenStream()
        stream.tokenize_line("")
        assert stream.values() == ["\n"]

    def test_add_line_break(self) -> None:
        """add_line_break counts as a line."""
        stream = TokenStream()
        stream.add_line_break()
        stream.add_line_break()
        assert stream.values() == ["\n", "\n"]
        assert stream.line_count() == 2

    def test_clear(self) -> None:
        """clear removes every token."""
        stream = TokenStream([Token(TokenType.WORD, "a")])
        stream.clear()
        assert len(stream) == 0


class TestReading:
    """Index access and text reconstruction."""

    def test_index_and_slice(self) -> None:
        """Streams support indexing and slicing."""
        stream = TokenStream()
        stream.tokenize_line("a b")
        assert stream[0] == Token(TokenType.WORD, "a")
        assert [t.value for t in stream[1:3]] == [" ", "b"]

    def test_value_at_out_of_range(self) -> None:
        """value_at returns None outside the stream."""
        stream = TokenStream()
        stream.tokenize_line("a")
        assert stream.value_at(0) == "a"
        assert stream.value_at(2) is None
        assert stream.value_at(-1) is None

    def test_text_range(self) -> None:
        """text joins a token range or the whole stream."""
        stream = TokenStream()
        stream.tokenize_line("foo(bar)")
        assert stream.text(2, 3) == "bar"
        assert stream.text() == "foo(bar)\n"

    def test_text_end_is_clamped(self) -> None:
        """Ranges past the end are clamped."""
        stream = TokenStream()
        stream.tokenize_line("ab")
        assert stream.text(0, 100) == "ab\n"
        assert stream.text(5, 10) == ""

    def test_repr(self) -> None:
        """repr reports the token count."""
        assert repr(TokenStream()) == "TokenStream(0 tokens)"
