# src/byuuml/observability/names.py

"""Standard metric names for byuuml observability.

Use these constants instead of hardcoded strings so dashboards stay stable.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Document Metrics
# ============================================================================

# Duration
PARSE_DURATION = "byuuml_parse_duration"

# Counters
PARSE_DOCUMENTS_TOTAL = "byuuml_documents_total"
PARSE_ERRORS_TOTAL = "byuuml_parse_errors_total"  # labelled by error kind
PARSE_LINES_TOTAL = "byuuml_lines_total"
PARSE_NODES_TOTAL = "byuuml_nodes_total"

# Gauges
PARSE_DOCUMENT_DEPTH = "byuuml_document_depth"


# ============================================================================
# Scanner Metrics
# ============================================================================

# Counters
SCANNER_CHUNKS_READ = "byuuml_scanner_chunks_read"
SCANNER_BYTES_READ = "byuuml_scanner_bytes_read"
