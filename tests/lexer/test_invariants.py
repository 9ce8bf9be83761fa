"""Property-based tests for tokenizer invariants using Hypothesis.

Arbitrary input either tokenizes completely or fails with a ParseError;
when it tokenizes, spans move strictly forward through the source.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from writedown.errors import ParseError
from writedown.lexer import Tokenizer
from writedown.tokens import TokenKind

# Characters that drive every scanner: titles, @ constructs, args, blocks, code
MARKUP_ALPHABET = "=@<>[](){},`\\\n \tab.1"

markup_text = st.text(alphabet=MARKUP_ALPHABET, max_size=200)


def _lex_or_error(source: str) -> list[tuple[TokenKind, int, int]] | tuple[type, int | None]:
    try:
        return [(t.kind, t.start, t.length) for t in Tokenizer(source).tokenize()]
    except ParseError as exc:
        return (type(exc), exc.offset)


class TestSpans:
    """Span ordering and bounds."""

    @given(markup_text)
    @settings(max_examples=300)
    def test_spans_non_overlapping_and_non_decreasing(self, source: str) -> None:
        tok = Tokenizer(source)
        previous_end = 0
        try:
            for token in tok.tokenize():
                assert token.start >= previous_end
                assert token.length >= 0
                assert token.end <= len(source)
                previous_end = token.end
        except ParseError:
            pass

    @given(st.text(alphabet="abc xyz\n", max_size=200))
    @settings(max_examples=100)
    def test_plain_text_round_trips(self, source: str) -> None:
        """Without markup characters the tokens cover the source exactly."""
        tok = Tokenizer(source)
        assert "".join(tok.text_of(t) for t in tok.tokenize()) == source


class TestFailureModes:
    """Arbitrary input never escapes as anything but ParseError."""

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_only_parse_errors_on_arbitrary_text(self, source: str) -> None:
        _lex_or_error(source)

    @given(markup_text)
    @settings(max_examples=300)
    def test_only_parse_errors_on_markup_soup(self, source: str) -> None:
        result = _lex_or_error(source)
        if isinstance(result, tuple):
            error_type, offset = result
            assert issubclass(error_type, ParseError)
            assert offset is not None
            assert 0 <= offset <= len(source)


class TestDeterminism:
    """Tokenizing is a pure function of the source."""

    @given(markup_text)
    @settings(max_examples=100)
    def test_repeated_tokenization_identical(self, source: str) -> None:
        assert _lex_or_error(source) == _lex_or_error(source)

    @given(markup_text)
    @settings(max_examples=100)
    def test_peek_before_advance_does_not_change_stream(self, source: str) -> None:
        expected = _lex_or_error(source)
        tok = Tokenizer(source)
        seen = []
        try:
            while tok.peek() is not None:
                peeked = tok.peek()
                token = tok.advance()
                assert token is peeked
                seen.append((token.kind, token.start, token.length))
        except ParseError as exc:
            assert expected == (type(exc), exc.offset)
            return
        assert seen == expected
