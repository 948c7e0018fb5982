import logging

import pytest

from config import Environment, TrackerConfig, reload_config
from dashboard.config import DashboardSettings
from utils.logger import setup_logger

def test_tracker_config_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setenv("DATA_FILE", "habits.json")
    monkeypatch.setenv("TIMEZONE", "Europe/Moscow")
    monkeypatch.setenv("ENVIRONMENT", "testing")

    config = reload_config()

    assert config.storage.data_file == tmp_path / "habits.json"
    assert config.timezone_name == "Europe/Moscow"
    assert config.environment == Environment.TESTING
    assert config.to_dict()["timezone"] == "Europe/Moscow"

def test_tracker_config_rejects_unknown_timezone(monkeypatch):
    monkeypatch.setenv("TIMEZONE", "Mars/Olympus")
    with pytest.raises(ValueError):
        TrackerConfig()

def test_dashboard_settings_production_disables_docs(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test")

    settings = DashboardSettings()

    assert settings.is_production
    assert settings.DEBUG is False
    assert settings.DOCS_URL is None
    assert settings.allowed_origins == ["http://a.test", "http://b.test"]

def test_dashboard_settings_validates_port(monkeypatch):
    monkeypatch.setenv("DASHBOARD_PORT", "70000")
    with pytest.raises(ValueError):
        DashboardSettings()

def test_setup_logger_does_not_duplicate_handlers(tmp_path):
    log_file = tmp_path / "logs" / "app.log"

    setup_logger(log_file=str(log_file))
    root = setup_logger(log_file=str(log_file), level="DEBUG")

    own = [h for h in root.handlers if getattr(h, "_habitgrid", False)]
    assert len(own) == 2
    assert root.level == logging.DEBUG
    assert log_file.parent.exists()

    setup_logger(log_file=None)
    for handler in [h for h in root.handlers if getattr(h, "_habitgrid", False)]:
        root.removeHandler(handler)
