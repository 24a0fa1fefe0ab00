import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

import pytest

from rangelist.config import Settings, load_settings


def test_defaults():
    assert load_settings() == Settings()


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("RANGELIST_LOG_LEVEL", "debug")
    monkeypatch.setenv("RANGELIST_LOG_JSON", "off")
    monkeypatch.setenv("RANGELIST_VALIDATE", "Yes")
    monkeypatch.setenv("RANGELIST_MAX_LISTS", "3")
    monkeypatch.setenv("RANGELIST_VIOLATION_ALERT_THRESHOLD", "5")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_json is False
    assert settings.validate is True
    assert settings.max_lists == 3
    assert settings.violation_alert_threshold == 5


@pytest.mark.parametrize(
    "key, value",
    [
        ("RANGELIST_VALIDATE", "maybe"),
        ("RANGELIST_LOG_JSON", "2"),
        ("RANGELIST_MAX_LISTS", "many"),
        ("RANGELIST_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValueError):
        load_settings()
