"""Tests for the top-level package API."""

import tomllib
from pathlib import Path

import writedown
from writedown import ParseConfig, parse, render, tokenize
from writedown.tokens import TokenKind


def test_version_matches_pyproject() -> None:
    pyproject = Path(__file__).parent.parent / "pyproject.toml"
    with pyproject.open("rb") as f:
        data = tomllib.load(f)
    assert writedown.__version__ == data["project"]["version"]


def test_all_exports_exist() -> None:
    for name in writedown.__all__:
        assert hasattr(writedown, name), name


def test_parse_returns_root_section() -> None:
    doc = parse("= Hello\nworld\n")
    assert isinstance(doc, writedown.Section)
    assert doc.level == 0
    assert doc.children[0].title == "Hello"


def test_parse_with_config() -> None:
    doc = parse("@<f>( a )\n", config=ParseConfig(strip_args=False))
    assert doc.children[0].children[0].args == ("a ",)


def test_tokenize_returns_list() -> None:
    tokens = tokenize("hi\n")
    assert [t.kind for t in tokens] == [TokenKind.SENTENCE, TokenKind.NEWLINE]


def test_render_round_trip() -> None:
    html = render(parse("intro\n= Usage\ncall @<ref>(install)\n"))
    assert html == (
        "<p>intro</p>\n"
        '<section id="usage">\n'
        "<h2>Usage</h2>\n"
        '<p>call <span class="wd-func" data-name="ref" data-args="install"></span></p>\n'
        "</section>\n"
    )


def test_errors_share_base_class() -> None:
    assert issubclass(writedown.ParseError, writedown.WritedownError)
    assert issubclass(writedown.RenderError, writedown.WritedownError)
