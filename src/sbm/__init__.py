# Document model
from .document import Bookmark, Category, Document, Header

# Errors
from .errors import (
    BookmarkBeforeHeaderError,
    ErrorKind,
    MalformedBookmarkError,
    MalformedHeaderError,
    ParseError,
)

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    DocumentParser,
    ParserConfig,
    SbmParser,
    create_parser,
    load_parser_config,
    parse,
    parse_categories,
)

# Rendering
from .rendering import render

__all__ = [
    # Document model
    "Bookmark",
    "Category",
    "Document",
    "Header",
    # Errors
    "BookmarkBeforeHeaderError",
    "ErrorKind",
    "MalformedBookmarkError",
    "MalformedHeaderError",
    "ParseError",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "DocumentParser",
    "ParserConfig",
    "SbmParser",
    "create_parser",
    "load_parser_config",
    "parse",
    "parse_categories",
    # Rendering
    "render",
]
