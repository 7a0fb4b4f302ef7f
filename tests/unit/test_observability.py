"""Unit tests for logging, metrics and settings"""

import json
import logging
import pytest
from calc_hub.config import Settings
from calc_hub.infrastructure.observability.logging import CustomJsonFormatter
from calc_hub.infrastructure.observability.metrics import export_textfile, record_calculation


def test_json_formatter_adds_service_fields():
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    record = logging.LogRecord("calc_hub", logging.INFO, __file__, 1, "Calculation completed", None, None)
    record.calculator = "loan"

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "Calculation completed"
    assert payload["level"] == "INFO"
    assert payload["service"] == "calc-hub"
    assert payload["calculator"] == "loan"
    assert "timestamp" in payload


def test_record_calculation_observes_duration(sample_value):
    labels = {"calculator": "discount"}
    before = sample_value("calc_hub_calculation_duration_seconds_count", labels)

    record_calculation("discount", ok=True, duration_seconds=0.0002)
    record_calculation("discount", ok=False)

    assert sample_value("calc_hub_calculation_duration_seconds_count", labels) == before + 1


def test_export_textfile(tmp_path):
    path = tmp_path / "metrics.prom"
    record_calculation("bmi", ok=True, duration_seconds=0.001)

    export_textfile(str(path))

    assert 'calc_hub_calculation_total{calculator="bmi",outcome="ok"}' in path.read_text()


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DDAY_REFRESH_SECONDS", "0.5")
    monkeypatch.setenv("METRICS_TEXTFILE", "/tmp/calc_hub.prom")

    config = Settings(_env_file=None)

    assert config.log_level == "DEBUG"
    assert config.dday_refresh_seconds == 0.5
    assert config.metrics_textfile == "/tmp/calc_hub.prom"


def test_settings_reject_non_positive_refresh(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DDAY_REFRESH_SECONDS", "0")
    with pytest.raises(ValueError):
        Settings(_env_file=None)
