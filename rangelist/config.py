"""Environment driven settings."""
import logging
import os
from dataclasses import dataclass

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid value for {name}: {raw!r}")


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Invalid integer for {name}: {raw!r}") from None


def _level(name: str, default: str) -> str:
    value = os.getenv(name, default).strip().upper()
    if not isinstance(logging.getLevelName(value), int):
        raise ValueError(f"Invalid log level for {name}: {value!r}")
    return value


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_json: bool = True
    # run check_invariants after every mutation
    validate: bool = False
    max_lists: int = 1024
    violation_alert_threshold: int = 0


def load_settings() -> Settings:
    """Read ``RANGELIST_*`` variables, raising ``ValueError`` on bad values."""
    return Settings(
        log_level=_level("RANGELIST_LOG_LEVEL", "INFO"),
        log_json=_flag("RANGELIST_LOG_JSON", True),
        validate=_flag("RANGELIST_VALIDATE", False),
        max_lists=_int("RANGELIST_MAX_LISTS", 1024),
        violation_alert_threshold=_int("RANGELIST_VIOLATION_ALERT_THRESHOLD", 0),
    )
