# src/sbm/observability/names.py

"""Standard metric names for sbm observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
PARSE_DURATION = "sbm_parse_duration"

# Counters
PARSE_TOTAL = "sbm_parse_total"
PARSE_ERRORS_TOTAL = "sbm_parse_errors_total"

# Counters (document contents, accumulate over time)
CATEGORIES_PARSED = "sbm_categories_parsed"
BOOKMARKS_PARSED = "sbm_bookmarks_parsed"

# Counters (labelled by reason: comment, blank, orphan)
LINES_SKIPPED_TOTAL = "sbm_lines_skipped_total"

# Gauges
PARSE_INPUT_LINES = "sbm_parse_input_lines"


# ============================================================================
# Render Metrics
# ============================================================================

# Duration
RENDER_DURATION = "sbm_render_duration"
