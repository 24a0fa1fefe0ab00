import sys
import json
import logging
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from rangelist import observability
from rangelist.config import Settings


def test_counter_render():
    counter = observability.Counter("demo_total", "Demo counter")
    counter.inc()
    counter.inc(2)
    assert counter.render() == (
        "# HELP demo_total Demo counter\n"
        "# TYPE demo_total counter\n"
        "demo_total 3.0\n"
    )


def test_generate_metrics_lists_all_counters():
    observability.reset_counters()
    observability.inc_add()
    observability.inc_add()
    observability.inc_remove()
    text = observability.generate_metrics().decode()
    assert "rangelist_add_total 2.0" in text
    assert "rangelist_remove_total 1.0" in text
    assert "rangelist_ignored_total 0.0" in text
    assert "rangelist_invariant_violations_total 0.0" in text


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord(
        "rangelist.test", logging.INFO, __file__, 1, "added %s", ("[1,5)",), None
    )
    record.low = 1
    data = json.loads(observability.JSONFormatter().format(record))
    assert data["level"] == "INFO"
    assert data["logger"] == "rangelist.test"
    assert data["message"] == "added [1,5)"
    assert data["low"] == 1


def test_configure_logging_replaces_handler():
    root = logging.getLogger()
    first = observability.configure_logging(Settings(log_json=True))
    second = observability.configure_logging(Settings(log_json=False, log_level="WARNING"))
    try:
        assert first not in root.handlers
        assert second in root.handlers
        assert not isinstance(second.formatter, observability.JSONFormatter)
        assert root.level == logging.WARNING
    finally:
        root.removeHandler(second)
        observability._handler = None


def test_violation_threshold_warning(monkeypatch, caplog):
    observability.reset_counters()
    monkeypatch.setenv("RANGELIST_VIOLATION_ALERT_THRESHOLD", "2")
    with caplog.at_level(logging.WARNING, logger="rangelist.observability"):
        observability.inc_invariant_violation()
        assert "threshold" not in caplog.text
        observability.inc_invariant_violation()
    assert "rangelist_invariant_violations_total threshold 2 reached" in caplog.text
