# src/sbm/parsers/factory.py

from sbm.observability.base import MetricsHook, NoOpMetricsHook

from .config import ParserConfig
from .sbm_parser import SbmParser


def create_parser(
    config: ParserConfig | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> SbmParser:
    """Create a parser from config.

    Args:
        config: Parser configuration. Defaults to strict mode.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured SbmParser.

    Raises:
        ValueError: If mode is unknown.

    Example:
        >>> parser = create_parser(ParserConfig(mode="lenient"))
        >>> document = parser.parse(text)
    """
    config = config or ParserConfig()

    if config.mode in ("strict", "lenient"):
        return SbmParser(mode=config.mode, metrics_hook=metrics_hook)

    raise ValueError(f"Unknown parser mode: {config.mode}")
