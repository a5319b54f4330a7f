# src/sbm/parsers/sbm_parser.py

import logging
from time import monotonic
from typing import Literal

from sbm.document.models import Bookmark, Category, Document, Header
from sbm.errors import (
    BookmarkBeforeHeaderError,
    MalformedBookmarkError,
    MalformedHeaderError,
    ParseError,
)
from sbm.observability import names
from sbm.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser

logger = logging.getLogger(__name__)

Mode = Literal["strict", "lenient"]

DELIMITER = "|"
HEADER_PREFIX = "#"
COMMENT_PREFIX = "//"
ASCII_WHITESPACE = " \t\n\r\v\f"


def split_pipe(line: str) -> list[str]:
    """Split a line on `|`. No escaping, no trimming.

    >>> split_pipe("Rust|Systems programming language|https://www.rust-lang.org/")
    ['Rust', 'Systems programming language', 'https://www.rust-lang.org/']
    """
    return line.split(DELIMITER)


def parse_bookmark(line: str) -> Bookmark:
    """Parse a bookmark line into its three trimmed fields.

    Raises:
        MalformedBookmarkError: If the line does not have exactly three fields.
    """
    parts = split_pipe(line)
    if len(parts) != 3:
        raise MalformedBookmarkError(
            f"bookmark has wrong number of parts (expected 3, got {len(parts)})"
        )
    name, description, url = (_trim(part) for part in parts)
    return Bookmark(name=name, description=description, url=url)


def parse_header(body: str) -> Header:
    """Parse the text after `#` into a header.

    A second field is always kept as the icon, even when it trims to "".

    Raises:
        MalformedHeaderError: If the body has more than two fields.
    """
    parts = split_pipe(body)
    if len(parts) not in (1, 2):
        raise MalformedHeaderError(
            f"header has wrong number of parts (expected 1 or 2, got {len(parts)})"
        )
    icon = _trim(parts[1]) if len(parts) == 2 else None
    return Header(name=_trim(parts[0]), icon=icon)


class SbmParser(DocumentParser):
    """
    Line-oriented parser for the bookmark file format.
    - One pass, lines in source order
    - `//` lines and blank lines are skipped
    - `#` lines open a category, every other line is a bookmark
    - Stops at the first bad line

    In "lenient" mode bookmark lines before the first header are dropped
    instead of rejected.
    """

    def __init__(
        self,
        mode: Mode = "strict",
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if mode not in ("strict", "lenient"):
            raise ValueError(f"Unknown parser mode: {mode}")
        self.mode = mode
        self.metrics_hook = metrics_hook
        logger.info("Initialized SbmParser with mode=%s", mode)

    def parse(self, text: str) -> Document:
        """Parse a whole bookmark file.

        Raises:
            MalformedHeaderError: A header line has three or more fields.
            MalformedBookmarkError: A bookmark line does not have three fields.
            BookmarkBeforeHeaderError: A bookmark line precedes every header
                (strict mode only).
        """
        return Document(categories=tuple(self.parse_categories(text)))

    def parse_categories(self, text: str) -> list[Category]:
        """Same as `parse`, returning the categories as a list."""
        start = monotonic()
        try:
            categories = self._parse_lines(_split_lines(text))
        except ParseError as exc:
            self.metrics_hook.increment(
                names.PARSE_ERRORS_TOTAL, labels={"kind": exc.kind.value}
            )
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        bookmark_count = sum(len(c.bookmarks) for c in categories)
        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.PARSE_TOTAL, labels={"mode": self.mode})
        self.metrics_hook.increment(names.CATEGORIES_PARSED, len(categories))
        self.metrics_hook.increment(names.BOOKMARKS_PARSED, bookmark_count)
        logger.debug(
            "Parsed %d categories with %d bookmarks", len(categories), bookmark_count
        )
        return categories

    def _parse_lines(self, lines: list[str]) -> list[Category]:
        self.metrics_hook.record_gauge(names.PARSE_INPUT_LINES, len(lines))
        categories: list[Category] = []

        # Category under construction; moved into `categories` when closed
        header: Header | None = None
        bookmarks: list[Bookmark] = []

        for line_number, line in enumerate(lines, start=1):
            if line.startswith(COMMENT_PREFIX):
                self._skip("comment")
                continue
            if not _trim(line):
                self._skip("blank")
                continue

            try:
                if line.startswith(HEADER_PREFIX):
                    next_header = parse_header(line[len(HEADER_PREFIX) :])
                    if header is not None:
                        categories.append(Category(header, tuple(bookmarks)))
                    header, bookmarks = next_header, []
                elif header is None:
                    if self.mode == "lenient":
                        logger.warning(
                            "Discarding bookmark before first header at line %d",
                            line_number,
                        )
                        self._skip("orphan")
                        continue
                    raise BookmarkBeforeHeaderError(
                        "bookmark line appears before any header"
                    )
                else:
                    bookmarks.append(parse_bookmark(line))
            except ParseError as exc:
                raise exc.at_line(line_number, line) from None

        if header is not None:
            categories.append(Category(header, tuple(bookmarks)))
        return categories

    def _skip(self, reason: str) -> None:
        self.metrics_hook.increment(
            names.LINES_SKIPPED_TOTAL, labels={"reason": reason}
        )


def parse(
    text: str,
    *,
    mode: Mode = "strict",
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Document:
    """Parse bookmark-file text into a Document.

    Example:
        >>> doc = parse("#Tools\\nRust|Systems language|https://www.rust-lang.org/")
        >>> doc.categories[0].bookmarks[0].name
        'Rust'
    """
    return SbmParser(mode=mode, metrics_hook=metrics_hook).parse(text)


def parse_categories(
    text: str,
    *,
    mode: Mode = "strict",
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Category]:
    return SbmParser(mode=mode, metrics_hook=metrics_hook).parse_categories(text)


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    # A trailing newline terminates the last line rather than starting a new one
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _trim(value: str) -> str:
    return value.strip(ASCII_WHITESPACE)
