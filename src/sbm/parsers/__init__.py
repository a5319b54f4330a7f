from .base import DocumentParser
from .config import ParserConfig, load_parser_config
from .factory import create_parser
from .sbm_parser import (
    SbmParser,
    parse,
    parse_bookmark,
    parse_categories,
    parse_header,
    split_pipe,
)

__all__ = [
    "DocumentParser",
    "ParserConfig",
    "SbmParser",
    "create_parser",
    "load_parser_config",
    "parse",
    "parse_bookmark",
    "parse_categories",
    "parse_header",
    "split_pipe",
]
