# src/sbm/rendering/renderer.py

import logging
from time import monotonic

from sbm.document.models import Document
from sbm.observability import names
from sbm.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)


def render(
    document: Document,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> str:
    """Render a document in canonical form.

    Lines are joined with a single "\\n", with no leading, trailing or blank
    separator lines. Field values are written verbatim: a `|` inside a field
    or a leading `#` in a bookmark name will not survive a re-parse.
    """
    start = monotonic()
    text = document.render()
    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.RENDER_DURATION, elapsed_ms)
    logger.debug("Rendered %d categories to %d characters", len(document), len(text))
    return text
