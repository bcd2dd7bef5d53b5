"""Tests for splitting comments out of source lines.

Covers line comment runs, block comments (single and multi-line), the
doc-flavored variants, and the two ways a block comment followed by code is
kept as code.
"""

import pytest

from scopelex.comments import CommentCollector, CommentRun
from scopelex.lexer import Lexer
from scopelex.syntax import CommentSyntax, get_syntax
from scopelex.tokens import TokenType

JAVA = get_syntax("java")


def split(lines: list[str], syntax: CommentSyntax | None = JAVA) -> tuple[list[str], list[CommentRun]]:
    sink = CommentCollector()
    stream = Lexer(lines, syntax, sink).tokenize()
    return stream.values(), sink.runs


class TestCodeLines:
    """Lines that are not comments are tokenized as code."""

    def test_code_line_gets_trailing_line_break(self) -> None:
        """A code line is tokenized with a trailing line break."""
        values, runs = split(["int x;"])
        assert values == ["int", " ", "x", ";", "\n"]
        assert runs == []

    def test_no_syntax_keeps_everything_as_code(self) -> None:
        """Without a syntax comment markers are ordinary code."""
        values, runs = split(["// hi", "/* there */"], syntax=None)
        assert "".join(values) == "// hi\n/* there */\n"
        assert runs == []

    def test_marker_after_code_is_not_a_comment(self) -> None:
        """A line marker after code does not start a comment."""
        values, runs = split(["x = 1; // note"])
        assert "".join(values) == "x = 1; // note\n"
        assert runs == []

    def test_block_marker_after_code_is_not_a_comment(self) -> None:
        """A block opener after code does not start a comment."""
        values, runs = split(["x = 1; /* note */"])
        assert "".join(values) == "x = 1; /* note */\n"
        assert runs == []

    def test_empty_input(self) -> None:
        """No lines give no tokens and no comments."""
        values, runs = split([])
        assert values == []
        assert runs == []


class TestLineComments:
    """Runs of line comments."""

    def test_single_line_comment(self) -> None:
        """A line comment leaves only its line break."""
        values, runs = split(["// hello"])
        assert values == ["\n"]
        assert runs == [CommentRun((" hello",), 1, False)]

    def test_consecutive_lines_form_one_run(self) -> None:
        """Adjacent line comments are delivered together."""
        values, runs = split(["// a", "// b", "int x;"])
        assert "".join(values) == "\n\nint x;\n"
        assert runs == [CommentRun((" a", " b"), 1, False)]

    def test_code_line_ends_the_run(self) -> None:
        """A code line starts a new run after it."""
        _, runs = split(["int a;", "// one", "int b;", "// two"])
        assert [run.lineno for run in runs] == [2, 4]
        assert [run.lines for run in runs] == [(" one",), (" two",)]

    def test_leading_whitespace_is_kept(self) -> None:
        """Indentation before the marker stays in the comment text."""
        _, runs = split(["    // indented"])
        assert runs[0].lines == ("     indented",)

    def test_doc_line_comment_is_flagged(self) -> None:
        """A run opened by a doc marker is flagged as doc."""
        _, runs = split(["/// Docs", "// more"])
        assert runs == [CommentRun((" Docs", " more"), 1, True)]

    def test_doc_flavor_only_checked_on_first_line(self) -> None:
        """Later lines of a run strip only plain markers."""
        _, runs = split(["// plain", "/// looks like doc"])
        assert len(runs) == 1
        assert runs[0].is_doc is False
        assert runs[0].lines == (" plain", "/ looks like doc")

    def test_doc_marker_banner_is_plain(self) -> None:
        """A run of slashes is a plain comment, not doc."""
        _, runs = split(["//////////"])
        assert runs == [CommentRun(("////////",), 1, False)]

    def test_run_reaching_end_of_input(self) -> None:
        """A run ending at the last line is still delivered."""
        values, runs = split(["x;", "// last", "// lines"])
        assert values.count("\n") == 3
        assert runs == [CommentRun((" last", " lines"), 2, False)]


class TestBlockComments:
    """Block comments that are accepted as comments."""

    def test_single_line_block_comment(self) -> None:
        """A block comment on one line is removed from the code."""
        values, runs = split(["/* note */", "int x;"])
        assert "".join(values) == "\nint x;\n"
        assert runs == [CommentRun((" note ",), 1, False)]

    def test_multiline_block_comment(self) -> None:
        """Each line of a block comment leaves a line break."""
        values, runs = split(["/*", " * body", " */", "int x;"])
        assert "".join(values) == "\n\n\nint x;\n"
        assert runs == [CommentRun(("", " * body", " "), 1, False)]

    def test_doc_block_comment_is_flagged(self) -> None:
        """A doc block opener flags the run as doc."""
        _, runs = split(["/**", " * Docs.", " */"])
        assert len(runs) == 1
        assert runs[0].is_doc is True

    def test_whitespace_after_closer_is_still_a_comment(self) -> None:
        """Whitespace after the closer does not count as code."""
        values, runs = split(["/* note */   \t"])
        assert values == ["\n"]
        assert len(runs) == 1

    def test_empty_doc_block_is_plain(self) -> None:
        """An opener that runs into its closer is not doc."""
        _, runs = split(["/**/"])
        assert runs == [CommentRun(("",), 1, False)]

    def test_star_banner_is_plain(self) -> None:
        """A doc opener followed by its last character is not doc."""
        _, runs = split(["/*********/"])
        assert len(runs) == 1
        assert runs[0].is_doc is False

    def test_closing_marker_fixed_at_open(self) -> None:
        """Only the closer paired with the opener ends the comment."""
        syntax = CommentSyntax(
            block_markers=(("/*", "*/"),),
            doc_block_markers=(("/*!", "!*/"),),
        )
        values, runs = split(["/*! doc */ still", "more !*/"], syntax=syntax)
        assert values == ["\n", "\n"]
        assert runs == [CommentRun((" doc */ still", "more "), 1, True)]

    def test_unterminated_block_runs_to_end(self) -> None:
        """An unclosed block swallows the rest of the input."""
        values, runs = split(["/* never", "closed", "int x;"])
        assert values == ["\n", "\n", "\n"]
        assert runs == [CommentRun((" never", "closed", "int x;"), 1, False)]

    @pytest.mark.parametrize(
        "syntax_name,line",
        [
            ("pascal", "{ braces }"),
            ("pascal", "(* parens *)"),
            ("sql", "/* sql */"),
        ],
    )
    def test_other_block_syntaxes(self, syntax_name: str, line: str) -> None:
        """Pascal and SQL block comments are recognized."""
        values, runs = split([line], syntax=get_syntax(syntax_name))
        assert values == ["\n"]
        assert len(runs) == 1


class TestBlockCommentsKeptAsCode:
    """Block comments followed by code on their closing line."""

    def test_single_line_annotation_stays_in_code(self) -> None:
        """A same-line block followed by code keeps the whole line."""
        line = "/*@out@*/ array_t array);"
        values, runs = split([line])
        assert runs == []
        assert "".join(values) == line + "\n"
        assert values[:7] == ["/", "*", "@", "out", "@", "*", "/"]

    def test_indented_annotation_in_prototype(self) -> None:
        """Indented annotations inside a prototype stay in the code."""
        lines = ["int get_array(integer_t id,", "              /*@out@*/ array_t array);"]
        values, runs = split(lines)
        assert runs == []
        assert "".join(values) == "\n".join(lines) + "\n"

    def test_second_comment_on_line_keeps_line_as_code(self) -> None:
        """Two block comments on one line keep the line as code."""
        values, runs = split(["/* a */ /* b */"])
        assert runs == []
        assert "".join(values) == "/* a */ /* b */\n"

    def test_multiline_comment_keeps_only_trailing_code(self) -> None:
        """Only the code after a multi-line block's closer is kept."""
        values, runs = split(["/* first", "   middle", "*/ extra_code"])
        assert runs == []
        assert values == ["\n", "\n", " ", "extra_code", "\n"]

    def test_multiline_doc_comment_with_trailing_code(self) -> None:
        """Trailing code drops a multi-line doc comment too."""
        values, runs = split(["/**", " * doc", " */ int x;", "int y;"])
        assert runs == []
        assert "".join(values) == "\n\n int x;\nint y;\n"


class TestLineNumbers:
    """Comment runs report where they start."""

    def test_runs_report_starting_lines(self) -> None:
        """Runs carry the line number they start on."""
        lines = ["int a;", "", "/* x", "y */", "// z", "int b;"]
        values, runs = split(lines)
        assert [run.lineno for run in runs] == [3, 5]
        assert values.count("\n") == len(lines)

    def test_end_lineno(self) -> None:
        """end_lineno points at the run's last line."""
        _, runs = split(["", "/*", "two", "*/"])
        assert runs[0].lineno == 2
        assert runs[0].end_lineno == 4


class TestSink:
    """Comment sink handling."""

    def test_no_sink_drops_comments(self) -> None:
        """Without a sink comments are counted and discarded."""
        lexer = Lexer(["// x", "y"], JAVA)
        stream = lexer.tokenize()
        assert stream.text() == "\ny\n"
        assert lexer.comment_runs == 1

    def test_plain_callable_sink(self) -> None:
        """Any callable with the sink signature receives runs."""
        received = []

        def on_comment(lines, lineno, is_doc):
            received.append((list(lines), lineno, is_doc))

        Lexer(["/// a", "x", "/* b */"], JAVA, on_comment).tokenize()
        assert received == [([" a"], 1, True), ([" b "], 3, False)]

    def test_rejected_comments_do_not_count(self) -> None:
        """Block comments kept as code are not counted."""
        lexer = Lexer(["/* a */ b"], JAVA)
        lexer.tokenize()
        assert lexer.comment_runs == 0

    def test_appends_to_given_stream(self) -> None:
        """Tokens are appended to a stream passed in."""
        from scopelex.stream import TokenStream

        stream = TokenStream()
        result = Lexer(["a"], JAVA, stream=stream).tokenize()
        assert result is stream
        assert [t.type for t in stream] == [TokenType.WORD, TokenType.LINE_BREAK]
