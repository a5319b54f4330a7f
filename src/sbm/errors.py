# src/sbm/errors.py

from enum import Enum


class ErrorKind(str, Enum):
    """Why a line was rejected by the parser."""

    MALFORMED_BOOKMARK = "MalformedBookmark"
    MALFORMED_HEADER = "MalformedHeader"
    BOOKMARK_BEFORE_HEADER = "BookmarkBeforeHeader"


class ParseError(ValueError):
    """Base class for every parse failure.

    Carries the error kind, plus the 1-based line number and the raw line
    when the failure came from a whole-document parse. A caller that sees
    this must treat the whole parse as failed; no partial document exists.
    """

    kind: ErrorKind

    def __init__(
        self,
        detail: str,
        *,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        self.detail = detail
        self.line_number = line_number
        self.line = line
        super().__init__(self._format())

    def at_line(self, line_number: int, line: str) -> "ParseError":
        """Return a copy of this error located at the given input line."""
        return type(self)(self.detail, line_number=line_number, line=line)

    def _format(self) -> str:
        if self.line_number is None:
            return f"{self.kind.value}: {self.detail}"
        return f"{self.kind.value} at line {self.line_number}: {self.detail}"


class MalformedBookmarkError(ParseError):
    kind = ErrorKind.MALFORMED_BOOKMARK


class MalformedHeaderError(ParseError):
    kind = ErrorKind.MALFORMED_HEADER


class BookmarkBeforeHeaderError(ParseError):
    kind = ErrorKind.BOOKMARK_BEFORE_HEADER
