"""Tests for line number tracking in the lexer.

Every emitted token carries a snapshot of the line counter taken right
after the token was committed. Tokens that swallow newlines (the newline
itself, line comments, multi-line comments and strings, error recovery)
therefore report the line they end on.
"""

from coolex import lex
from coolex.tokens import Keyword, TokenKind


def lines_of(source: str, kind: TokenKind) -> list[int]:
    return [context.line_number for token, context in lex(source) if token.kind == kind]


class TestSingleLine:
    def test_first_line_is_one(self) -> None:
        pairs = lex("class Main")
        assert [context.line_number for _, context in pairs] == [1, 1, 1]

    def test_contexts_are_snapshots(self) -> None:
        pairs = lex("a\nb")
        assert pairs[0][1] is not pairs[2][1]
        assert pairs[0][1].line_number == 1


class TestNewlines:
    def test_consecutive_lines(self) -> None:
        assert lines_of("a\nb\nc", TokenKind.OBJECT_ID) == [1, 2, 3]

    def test_newline_token_reports_next_line(self) -> None:
        assert lines_of("a\nb\nc", TokenKind.WHITESPACE) == [2, 3]

    def test_blank_lines(self) -> None:
        assert lines_of("a\n\n\nb", TokenKind.OBJECT_ID) == [1, 4]

    def test_carriage_return_is_not_a_line(self) -> None:
        assert lines_of("a\r\nb\rc", TokenKind.OBJECT_ID) == [1, 2, 2]


class TestComments:
    def test_line_comment_eats_newline(self) -> None:
        pairs = lex("-- hi\nx")

        assert [token.kind for token, _ in pairs] == [TokenKind.LINE_COMMENT, TokenKind.OBJECT_ID]
        assert [context.line_number for _, context in pairs] == [2, 2]

    def test_line_comment_at_eof(self) -> None:
        assert lines_of("x -- end", TokenKind.LINE_COMMENT) == [1]

    def test_multiline_block_comment(self) -> None:
        assert lines_of("(* a\nb *)\nx", TokenKind.BLOCK_COMMENT) == [2]
        assert lines_of("(* a\nb *)\nx", TokenKind.OBJECT_ID) == [3]

    def test_unterminated_comment_counts_lines(self) -> None:
        pairs = lex("(* a\nb\nc")
        assert len(pairs) == 1
        assert pairs[0][0].value == "EOF in comment"
        assert pairs[0][1].line_number == 3


class TestStrings:
    def test_escaped_newline_in_string(self) -> None:
        source = '"a\\\nb" x'
        assert lines_of(source, TokenKind.STRING) == [2]
        assert lines_of(source, TokenKind.OBJECT_ID) == [2]

    def test_unterminated_string(self) -> None:
        pairs = lex('"abc\nx')

        assert pairs[0][0].value == "Unterminated string constant."
        assert pairs[0][1].line_number == 2
        assert pairs[1][0].kind == TokenKind.OBJECT_ID
        assert pairs[1][1].line_number == 2

    def test_null_recovery(self) -> None:
        pairs = lex('"ab\0cd"\nclass')

        assert [token.kind for token, _ in pairs] == [
            TokenKind.ERROR,
            TokenKind.WHITESPACE,
            TokenKind.KEYWORD,
        ]
        error, keyword = pairs[0][0], pairs[2][0]
        assert error.value == "String contains null character."
        assert error.text == '"ab'
        assert keyword.value is Keyword.CLASS
        assert pairs[2][1].line_number == 2

    def test_null_recovery_across_newline(self) -> None:
        pairs = lex('"a\0b\nclass')

        assert [token.kind for token, _ in pairs] == [TokenKind.ERROR, TokenKind.KEYWORD]
        assert [context.line_number for _, context in pairs] == [2, 2]
