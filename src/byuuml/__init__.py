# Configuration
from .config import ParserConfig, load_config

# Documents
from .document import Document, load, loads
from .models import Node

# Errors
from .errors import (
    BlankIndentedLineError,
    DataDecodeError,
    EmptyDocumentError,
    InvalidIndentationError,
    InvalidNodeNameError,
    NoParentError,
    ParseError,
    TooDeepError,
    UnterminatedQuoteError,
)

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Readers
from .readers import BytesReader, ChunkedReader, Reader, StreamReader

__all__ = [
    # Configuration
    "ParserConfig",
    "load_config",
    # Documents
    "Document",
    "Node",
    "load",
    "loads",
    # Errors
    "BlankIndentedLineError",
    "DataDecodeError",
    "EmptyDocumentError",
    "InvalidIndentationError",
    "InvalidNodeNameError",
    "NoParentError",
    "ParseError",
    "TooDeepError",
    "UnterminatedQuoteError",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Readers
    "BytesReader",
    "ChunkedReader",
    "Reader",
    "StreamReader",
]
