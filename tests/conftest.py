import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parent.parent))


# Settings are read from the environment; start every test from the defaults.
@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in [
        "RANGELIST_LOG_LEVEL",
        "RANGELIST_LOG_JSON",
        "RANGELIST_VALIDATE",
        "RANGELIST_MAX_LISTS",
        "RANGELIST_VIOLATION_ALERT_THRESHOLD",
    ]:
        monkeypatch.delenv(key, raising=False)
