"""Unterminated and malformed constructs must fail fast.

The tokenizer raises instead of emitting a truncated token, and reports
the offset of the construct's opening character.
"""

import pytest

from writedown.errors import ParseError, UnsupportedSyntaxError, UnterminatedConstructError
from writedown.lexer import Tokenizer


def drain(source: str) -> None:
    for _ in Tokenizer(source).tokenize():
        pass


class TestUnterminatedDelimiters:
    """@<...>, @[...], (...) and {...}."""

    def test_function_name_without_closing_bracket(self) -> None:
        with pytest.raises(UnterminatedConstructError) as exc_info:
            drain("@<fn(")
        assert exc_info.value.offset == 0
        assert exc_info.value.expected == "'>'"

    def test_function_name_cannot_cross_lines(self) -> None:
        with pytest.raises(UnterminatedConstructError):
            drain("@<fn\n>(a)")

    def test_tag_without_closing_bracket(self) -> None:
        with pytest.raises(UnterminatedConstructError) as exc_info:
            drain("text @[tag\n")
        assert exc_info.value.offset == 5
        assert exc_info.value.expected == "']'"

    @pytest.mark.parametrize(
        "source",
        ["@<f>(", "@<f>(a", "@<f>(a, b\n", "@<f>(a,\nb)", "@<f>(\n)"],
    )
    def test_argument_list_without_close(self, source: str) -> None:
        with pytest.raises(UnterminatedConstructError) as exc_info:
            drain(source)
        assert exc_info.value.expected == "')'"

    @pytest.mark.parametrize("source", ["@<f>{x", "@<f>(){a{b}", "@<f>(){"])
    def test_block_without_closing_brace(self, source: str) -> None:
        with pytest.raises(UnterminatedConstructError) as exc_info:
            drain(source)
        assert exc_info.value.expected == "'}'"


class TestUnterminatedCode:
    """Inline code and fenced blocks."""

    def test_inline_code_without_closing_backtick(self) -> None:
        with pytest.raises(UnterminatedConstructError):
            drain("`abc")

    def test_escaped_backtick_is_not_a_close(self) -> None:
        with pytest.raises(UnterminatedConstructError):
            drain("`abc\\`")

    def test_block_without_closing_fence(self) -> None:
        with pytest.raises(UnterminatedConstructError) as exc_info:
            drain("```\nabc\n")
        assert exc_info.value.offset == 0

    def test_opener_at_end_of_input(self) -> None:
        with pytest.raises(UnterminatedConstructError):
            drain("```")

    def test_four_backticks_do_not_close(self) -> None:
        with pytest.raises(UnterminatedConstructError):
            drain("```\nabc\n````\n")

    def test_language_tagged_fence_is_reported(self) -> None:
        with pytest.raises(UnsupportedSyntaxError) as exc_info:
            drain("```python\nprint(1)\n```\n")
        assert "python" in str(exc_info.value)
        assert exc_info.value.offset == 3

    def test_double_backtick_is_malformed(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            drain("``x``\n")
        assert not isinstance(exc_info.value, UnterminatedConstructError)

    def test_four_backtick_opener_is_malformed(self) -> None:
        with pytest.raises(ParseError):
            drain("````\nx\n````\n")


class TestErrorLocation:
    """Errors carry line and column of the construct."""

    def test_line_and_column(self) -> None:
        with pytest.raises(UnterminatedConstructError) as exc_info:
            drain("ok\n  x @<bad\n")
        err = exc_info.value
        assert (err.lineno, err.col_offset) == (2, 5)
        assert str(err).startswith("2:5 unterminated function name")

    def test_source_file_in_message(self) -> None:
        with pytest.raises(UnterminatedConstructError) as exc_info:
            drain_with_file("@[x", "notes.wd")
        assert str(exc_info.value).startswith("notes.wd:1:1 ")


def drain_with_file(source: str, source_file: str) -> None:
    for _ in Tokenizer(source, source_file).tokenize():
        pass
