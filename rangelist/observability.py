import logging
import json
from typing import Optional

from .config import Settings, load_settings


class Counter:
    """Minimal Prometheus-style counter."""

    def __init__(self, name: str, documentation: str):
        self.name = name
        self.documentation = documentation
        self.value = 0.0

    def inc(self, amount: float = 1.0) -> None:
        self.value += amount

    def reset(self) -> None:
        self.value = 0.0

    def render(self) -> str:
        return (
            f"# HELP {self.name} {self.documentation}\n"
            f"# TYPE {self.name} counter\n"
            f"{self.name} {self.value}\n"
        )


_RESERVED = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "asctime",
    "message",
}


class JSONFormatter(logging.Formatter):
    """Simple JSON log formatter including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED:
                data[key] = value
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str)


PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(settings: Optional[Settings] = None) -> logging.Handler:
    """Install a single stream handler on the root logger."""
    global _handler
    settings = settings or load_settings()
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler()
    if settings.log_json:
        _handler.setFormatter(JSONFormatter())
    else:
        _handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    root.addHandler(_handler)
    root.setLevel(settings.log_level)
    return _handler


logger = logging.getLogger("rangelist.observability")

# Counters
ADD_COUNTER = Counter("rangelist_add_total", "Number of ranges added")
REMOVE_COUNTER = Counter("rangelist_remove_total", "Number of ranges removed")
IGNORED_COUNTER = Counter(
    "rangelist_ignored_total", "Number of empty or inverted ranges ignored"
)
VIOLATION_COUNTER = Counter(
    "rangelist_invariant_violations_total",
    "Number of internal range list invariant violations",
)

COUNTERS = [
    ADD_COUNTER,
    REMOVE_COUNTER,
    IGNORED_COUNTER,
    VIOLATION_COUNTER,
]


def _check_threshold(counter: Counter, threshold: int) -> None:
    if threshold and counter.value >= threshold:
        logger.warning(f"{counter.name} threshold {threshold} reached")


def inc_add() -> None:
    ADD_COUNTER.inc()


def inc_remove() -> None:
    REMOVE_COUNTER.inc()


def inc_ignored() -> None:
    IGNORED_COUNTER.inc()


def inc_invariant_violation() -> None:
    VIOLATION_COUNTER.inc()
    _check_threshold(VIOLATION_COUNTER, load_settings().violation_alert_threshold)


def reset_counters() -> None:
    for counter in COUNTERS:
        counter.reset()


def generate_metrics() -> bytes:
    return "".join(counter.render() for counter in COUNTERS).encode()


CONTENT_TYPE_LATEST = "text/plain; version=0.0.4"


__all__ = [
    "configure_logging",
    "inc_add",
    "inc_remove",
    "inc_ignored",
    "inc_invariant_violation",
    "reset_counters",
    "generate_metrics",
    "CONTENT_TYPE_LATEST",
    "logger",
]
