# src/sbm/parsers/config.py

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class ParserConfig(BaseModel):
    """Configuration for the bookmark parser.

    Immutable. Explicit. No magic defaults from environment.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    # "lenient" drops bookmark lines that appear before the first header
    mode: Literal["strict", "lenient"] = "strict"


def load_parser_config(path: str | Path) -> ParserConfig:
    """Load a ParserConfig from a YAML mapping. An empty file gives defaults."""
    file_path = Path(path)
    logger.debug("Loading parser config from %s", file_path)
    with open(file_path) as f:
        data = yaml.safe_load(f) or {}
    config = ParserConfig(**data)
    logger.info("Loaded parser config from %s: mode=%s", file_path, config.mode)
    return config
