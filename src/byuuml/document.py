# src/byuuml/document.py

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from time import monotonic
from typing import BinaryIO

from byuuml.config import ParserConfig
from byuuml.errors import ParseError
from byuuml.models import Node
from byuuml.observability import names
from byuuml.observability.base import MetricsHook, NoOpMetricsHook
from byuuml.parsing import IndentationStack, LineScanner, freeze
from byuuml.readers import BytesReader, Reader, StreamReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """An immutable, ordered forest of top-level nodes.

    Build one with ``Document.parse`` (or ``load``/``loads``), or directly
    from already constructed nodes.
    """

    nodes: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", tuple(self.nodes))

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def walk(self) -> Iterator[tuple[int, Node]]:
        """Yield ``(depth, node)`` for every node in document order.

        Root nodes have depth 0. Uses an explicit stack, never recursion.
        """
        pending = [(0, node) for node in reversed(self.nodes)]
        while pending:
            depth, node = pending.pop()
            yield depth, node
            pending.extend((depth + 1, child) for child in reversed(node.children))

    @classmethod
    def parse(
        cls,
        reader: Reader,
        *,
        config: ParserConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> "Document":
        """Run the full parsing pipeline over a byte source.

        Args:
            reader: Byte source; consumed until it signals end-of-stream.
            config: Parser configuration. Defaults to ``ParserConfig()``.
            metrics_hook: Optional metrics hook for observability.

        Returns:
            The parsed Document.

        Raises:
            ParseError: On any malformed input, including DataDecodeError
                for data that ``config.encoding`` cannot decode under
                ``config.errors``. No partial document is produced.
        """
        config = config or ParserConfig()
        start = monotonic()
        logger.debug("Parsing document with max_depth=%d", config.max_depth)

        scanner = LineScanner(reader)
        stack = IndentationStack(max_depth=config.max_depth)
        try:
            for line in scanner:
                stack.feed(line)
            roots = stack.finish()
            nodes = freeze(roots, encoding=config.encoding, errors=config.errors)
        except ParseError as exc:
            logger.error(
                "Failed to parse document after %d lines: %s",
                scanner.lines_read,
                exc,
            )
            metrics_hook.increment(
                names.PARSE_ERRORS_TOTAL, labels={"kind": exc.kind}
            )
            raise

        document = cls(nodes)
        node_count = sum(1 for _ in document.walk())

        elapsed_ms = 1000 * (monotonic() - start)
        metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        metrics_hook.increment(names.PARSE_DOCUMENTS_TOTAL)
        metrics_hook.increment(names.PARSE_LINES_TOTAL, scanner.lines_read)
        metrics_hook.increment(names.PARSE_NODES_TOTAL, node_count)
        metrics_hook.increment(names.SCANNER_CHUNKS_READ, scanner.chunks_read)
        metrics_hook.increment(names.SCANNER_BYTES_READ, scanner.bytes_read)
        metrics_hook.record_gauge(names.PARSE_DOCUMENT_DEPTH, stack.deepest)
        logger.info(
            "Parsed document: %d root nodes, %d nodes from %d lines",
            len(document.nodes),
            node_count,
            scanner.lines_read,
        )
        return document


def loads(
    source: str | bytes,
    *,
    config: ParserConfig | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Document:
    """Parse a document held in memory. ``str`` input is encoded first."""
    config = config or ParserConfig()
    if isinstance(source, str):
        source = source.encode(config.encoding)
    reader = BytesReader(source, chunk_size=config.chunk_size)
    return Document.parse(reader, config=config, metrics_hook=metrics_hook)


def load(
    source: str | Path | BinaryIO,
    *,
    config: ParserConfig | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Document:
    """Parse a document from a file path or an open binary stream."""
    config = config or ParserConfig()
    if isinstance(source, (str, Path)):
        logger.debug("Loading document from %s", source)
        with open(source, "rb") as f:
            return load(f, config=config, metrics_hook=metrics_hook)

    reader = StreamReader(
        source, chunk_size=config.chunk_size, max_retries=config.read_retries
    )
    return Document.parse(reader, config=config, metrics_hook=metrics_hook)
