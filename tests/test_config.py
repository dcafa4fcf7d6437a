"""Environment-driven settings."""

import pytest

from config import _positive_float


def test_positive_float_uses_default(monkeypatch):
    monkeypatch.delenv("TIME_LOG_INTERVAL_SEC", raising=False)
    assert _positive_float("TIME_LOG_INTERVAL_SEC", "1") == 1.0


def test_positive_float_reads_env(monkeypatch):
    monkeypatch.setenv("TIME_LOG_INTERVAL_SEC", "2.5")
    assert _positive_float("TIME_LOG_INTERVAL_SEC", "1") == 2.5


@pytest.mark.parametrize("value", ["0", "-1"])
def test_positive_float_rejects_non_positive(monkeypatch, value):
    monkeypatch.setenv("TIME_LOG_INTERVAL_SEC", value)
    with pytest.raises(ValueError, match="TIME_LOG_INTERVAL_SEC"):
        _positive_float("TIME_LOG_INTERVAL_SEC", "1")
