import pytest

from sbm.document.models import Bookmark, Category, Document, Header
from sbm.parsers.sbm_parser import parse
from sbm.rendering.renderer import render

MESSY_SOURCES = [
    "",
    "// nothing but a comment",
    "#Solo",
    "#Icon only|★",
    "#Empty icon|",
    "  \n#A\n  a  |  b  |  c  \n\n// c\n#B|x\n\n",
    "#A\r\n1|2|3\r\n#B\r\n",
    "#Programming Languages\n"
    "Rust|The Rust Programming Language|https://www.rust-lang.org/\n"
    "// a comment\n"
    "\n"
    "#Web Development|🌐\n"
    "HTML|Hypertext Markup Language|https://developer.mozilla.org/\n",
]


class TestRoundTrip:
    @pytest.mark.parametrize("text", MESSY_SOURCES)
    def test_render_then_parse_is_stable(self, text: str) -> None:
        """Re-parsing the canonical rendering gives the same document."""
        document = parse(text)

        assert parse(render(document)) == document

    @pytest.mark.parametrize("text", MESSY_SOURCES)
    def test_rendering_is_canonical(self, text: str) -> None:
        once = render(parse(text))

        assert render(parse(once)) == once

    def test_programmatic_document_survives(self) -> None:
        document = Document(
            [
                Category(Header("No icon")),
                Category(Header("Empty icon", "")),
                Category(
                    Header("Web Development", "🌐"),
                    [
                        Bookmark("MDN", "Web documentation", "https://developer.mozilla.org/"),
                        Bookmark("", "", ""),
                        Bookmark("C#", "Language", "https://learn.microsoft.com/#top"),
                    ],
                ),
            ]
        )

        assert parse(render(document)) == document

    def test_icon_presence_is_preserved(self) -> None:
        absent = parse("#Name").categories[0].header
        empty = parse("#Name|").categories[0].header

        assert absent.icon is None
        assert empty.icon == ""
        assert render(parse("#Name|")) == "#Name|"
        assert render(parse("#Name")) == "#Name"


class TestInsensitivity:
    def test_blank_and_comment_lines_do_not_matter(self) -> None:
        plain = "#A\na|b|c\n#B\nd|e|f"
        noisy = "\n// top\n#A\n\n// mid\na|b|c\n   \n#B\n// tail\nd|e|f\n\n"

        assert parse(noisy) == parse(plain)

    def test_field_whitespace_does_not_matter(self) -> None:
        assert parse("#  A |  i \n a \t| b |c  ") == parse("#A|i\na|b|c")


class TestUnrepresentableValues:
    def test_pipe_in_field_breaks_round_trip(self) -> None:
        """Rendering writes fields verbatim; no escaping is attempted."""
        document = Document([Category(Header("A"), [Bookmark("a|b", "c", "d")])])

        assert render(document) == "#A\na|b|c|d"
