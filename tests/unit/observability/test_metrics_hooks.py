import logging

import pytest

from byuuml import LoggingMetricsHook, NoOpMetricsHook, loads
from byuuml.observability import names


def test_noop_hook_accepts_all_calls() -> None:
    hook = NoOpMetricsHook()

    hook.record_latency(names.PARSE_DURATION, 1.5)
    hook.increment(names.PARSE_DOCUMENTS_TOTAL)
    hook.record_gauge(names.PARSE_DOCUMENT_DEPTH, 3, labels={"source": "test"})


def test_logging_hook_emits_records(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="byuuml.metrics"):
        loads("a\n  b\n", metrics_hook=LoggingMetricsHook())

    messages = [r.getMessage() for r in caplog.records if r.name == "byuuml.metrics"]
    assert f"{names.PARSE_DOCUMENTS_TOTAL}+=1 labels=None" in messages
    assert f"{names.PARSE_DOCUMENT_DEPTH}:=2 labels=None" in messages
    assert any(m.startswith(f"{names.PARSE_DURATION}=") for m in messages)


def test_logging_hook_respects_level(caplog: pytest.LogCaptureFixture) -> None:
    hook = LoggingMetricsHook(level=logging.INFO)

    with caplog.at_level(logging.INFO, logger="byuuml.metrics"):
        hook.increment("custom", 2, labels={"kind": "x"})

    assert caplog.records[-1].levelno == logging.INFO
    assert caplog.records[-1].getMessage() == "custom+=2 labels={'kind': 'x'}"
