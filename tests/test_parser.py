"""Tests for the section/paragraph parser.

Trees are compared structurally; node locations are excluded from
equality, so expected trees are written without them.
"""

import typing
from collections.abc import Iterator

import pytest

from writedown import ParseConfig, parse
from writedown.errors import ParseError
from writedown.nodes import CodeBlock, FuncCall, Node, Paragraph, Section, Sentence
from writedown.parser import Parser


def root(*children) -> Section:
    return Section(level=0, title="", children=tuple(children))


def para(*children) -> Paragraph:
    return Paragraph(
        children=tuple(Sentence(c) if isinstance(c, str) else c for c in children)
    )


class TestSections:
    """Titles open sections that collect the rest of the input."""

    def test_title_with_two_paragraphs(self) -> None:
        doc = parse("= title level 1\n\np1s0\np1s1\n\np2s0\n")
        assert doc == root(
            Section(
                level=1,
                title="title level 1",
                children=(para("p1s0", "p1s1"), para("p2s0")),
            )
        )

    def test_sentences_before_first_title_belong_to_root(self) -> None:
        doc = parse("intro\n= Title\nbody\n")
        assert doc == root(
            para("intro"),
            Section(level=1, title="Title", children=(para("body"),)),
        )

    def test_titles_nest_in_order_of_appearance(self) -> None:
        doc = parse("= a\n== b\n= c\n")
        assert doc == root(
            Section(
                level=1,
                title="a",
                children=(
                    Section(
                        level=2,
                        title="b",
                        children=(Section(level=1, title="c"),),
                    ),
                ),
            )
        )

    def test_level_is_recorded_not_compared(self) -> None:
        doc = parse("=== deep\n= shallow\n")
        outer = doc.children[0]
        assert (outer.level, outer.title) == (3, "deep")
        inner = outer.children[0]
        assert (inner.level, inner.title) == (1, "shallow")

    def test_many_titles_do_not_recurse(self) -> None:
        doc = parse("= t\n" * 5000)
        depth = 0
        node = doc
        while node.children:
            node = node.children[0]
            depth += 1
        assert depth == 5000

    def test_empty_input(self) -> None:
        doc = parse("")
        assert doc == root()
        assert doc.level == 0
        assert doc.title == ""

    def test_blank_lines_only(self) -> None:
        assert parse("\n\n\n") == root()

    def test_layout_does_not_affect_equality(self) -> None:
        assert parse("= a\nx\n") == parse("= a\n\n\nx\n")


class TestParagraphs:
    """Paragraph boundaries."""

    def test_single_newline_is_a_soft_break(self) -> None:
        assert parse("one\ntwo\nthree\n") == root(para("one", "two", "three"))

    def test_blank_line_splits_paragraphs(self) -> None:
        assert parse("one\n\ntwo\n") == root(para("one"), para("two"))

    def test_extra_blank_lines_are_discarded(self) -> None:
        assert parse("one\n\n\n\ntwo") == root(para("one"), para("two"))

    def test_title_ends_paragraph(self) -> None:
        doc = parse("text\n= T\n")
        assert doc.children[0] == para("text")
        assert isinstance(doc.children[1], Section)

    def test_code_block_between_paragraphs(self) -> None:
        doc = parse("before\n```\ncode\n```\nafter\n")
        assert doc == root(para("before"), CodeBlock("code\n"), para("after"))

    def test_tag_ends_paragraph_and_is_dropped(self) -> None:
        assert parse("a\n@[t] b\n") == root(para("a"), para(" b"))

    def test_inline_code_is_dropped(self) -> None:
        assert parse("`x` y\n") == root(para(" y"))

    def test_at_string_is_dropped(self) -> None:
        assert parse("hi @name\n") == root(para("hi "))

    def test_whitespace_only_line_is_not_blank(self) -> None:
        assert parse("a\n  \nb\n") == root(para("a", "  ", "b"))


class TestLineEndings:
    """CRLF documents parse to the same tree as LF documents."""

    def test_crlf_matches_lf(self) -> None:
        source = "= Title\nfirst\nsecond\n\n@<f>(a){b}\n"
        crlf = parse(source.replace("\n", "\r\n"))
        assert crlf == parse(source)
        assert crlf.children[0].children[0] == para("first", "second")


class TestFunctionCalls:
    """@<name>(args){block} inside paragraphs."""

    def test_call_with_args_and_block(self) -> None:
        doc = parse("see @<ref>(a, b){body} now\n")
        assert doc == root(
            para("see ", FuncCall("ref", ("a", "b"), "body"), " now"),
        )

    def test_call_without_block(self) -> None:
        doc = parse("@<fn>(arg1, arg2)\n")
        assert doc == root(para(FuncCall("fn", ("arg1", "arg2"))))

    def test_empty_argument_list(self) -> None:
        call = parse("@<f>()\n").children[0].children[0]
        assert call == FuncCall("f")
        assert call.args == ()
        assert call.block is None

    def test_block_only(self) -> None:
        assert parse("@<f>{x}\n") == root(para(FuncCall("f", (), "x")))

    def test_multiline_block(self) -> None:
        call = parse("@<code>(){line 1\nline 2}\n").children[0].children[0]
        assert call.block == "line 1\nline 2"

    def test_args_are_stripped_by_default(self) -> None:
        call = parse("@<f>( a ,b )\n").children[0].children[0]
        assert call.args == ("a", "b")

    def test_args_kept_verbatim_without_strip(self) -> None:
        doc = parse("@<f>( a ,b )\n", config=ParseConfig(strip_args=False))
        assert doc.children[0].children[0].args == ("a ", "b ")

    def test_call_inside_title_section(self) -> None:
        doc = parse("= T\n@<f>(x)\n")
        assert doc.children[0].children == (para(FuncCall("f", ("x",))),)


class TestConfigEffects:
    """ParseConfig fields reach the parser."""

    def test_text_transformer(self) -> None:
        doc = parse("hello\n= keep\n", config=ParseConfig(text_transformer=str.upper))
        assert doc.children[0] == para("HELLO")
        # Titles are not sentences
        assert doc.children[1].title == "keep"

    def test_max_section_depth(self) -> None:
        config = ParseConfig(max_section_depth=1)
        with pytest.raises(ParseError) as exc_info:
            parse("= a\n== b\n", config=config)
        assert "deeper than 1" in str(exc_info.value)
        assert exc_info.value.lineno == 2

    def test_max_section_depth_allows_limit(self) -> None:
        doc = parse("= a\n== b\n", config=ParseConfig(max_section_depth=2))
        assert doc.children[0].children[0].title == "b"


class TestParserInstance:
    """Parser object contract."""

    def test_single_use(self) -> None:
        parser = Parser("x\n")
        parser.parse()
        with pytest.raises(RuntimeError, match="single-use"):
            parser.parse()

    def test_config_captured_at_construction(self) -> None:
        from writedown.config import parse_config_context

        with parse_config_context(ParseConfig(text_transformer=str.upper)):
            parser = Parser("quiet\n")
        assert parser.parse() == root(para("QUIET"))


class TestLocations:
    """Nodes carry 1-indexed source locations."""

    def test_section_and_paragraph_locations(self) -> None:
        doc = parse("x\n= T\nbody\n", source_file="doc.wd")
        section = doc.children[1]
        assert (section.location.lineno, section.location.col_offset) == (2, 3)
        assert section.location.source_file == "doc.wd"
        body = section.children[0]
        assert (body.location.lineno, body.location.col_offset) == (3, 1)

    def test_root_covers_source(self) -> None:
        source = "a\n\nb\n"
        loc = parse(source).location
        assert (loc.lineno, loc.col_offset) == (1, 1)
        assert (loc.offset, loc.end_offset) == (0, len(source))

    def test_func_call_location_is_name(self) -> None:
        call = parse("ab @<fn>(x)\n").children[0].children[1]
        assert (call.location.offset, call.location.end_offset) == (5, 7)


class TestWalk:
    """Section.walk visits every node in document order."""

    def test_walk_is_annotated_as_iterator(self) -> None:
        hints = typing.get_type_hints(Section.walk)
        assert hints["return"] == Iterator[Node]
        assert isinstance(parse("a\n").walk(), Iterator)

    def test_walk_order(self) -> None:
        doc = parse("a\n= T\n@<f>(x) b\n")
        names = [type(node).__name__ for node in doc.walk()]
        assert names == ["Paragraph", "Sentence", "Section", "Paragraph", "FuncCall", "Sentence"]
