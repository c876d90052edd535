import logging
from typing import Protocol


class MetricsHook(Protocol):
    """Sink for parser metrics.

    The parser never talks to a metrics backend directly; callers plug in an
    adapter (Prometheus, StatsD, ...) implementing these three methods.
    Names come from ``byuuml.observability.names``.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Record one duration sample, in milliseconds."""
        ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Add ``value`` to a monotonic counter."""
        ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Record the latest value of a gauge (e.g. document depth)."""
        ...


class NoOpMetricsHook:
    """Default hook. Discards everything."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


class LoggingMetricsHook:
    """Writes every metric as a log record on the ``byuuml.metrics`` logger.

    Handy while debugging a document pipeline without a metrics backend.
    """

    def __init__(self, level: int = logging.DEBUG) -> None:
        self._logger = logging.getLogger("byuuml.metrics")
        self._level = level

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self._logger.log(self._level, "%s=%.3fms labels=%s", name, value_ms, labels)

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self._logger.log(self._level, "%s+=%d labels=%s", name, value, labels)

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self._logger.log(self._level, "%s:=%s labels=%s", name, value, labels)
