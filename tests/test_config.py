import logging

import pytest

from techscreen.config import LOG_FILE, MODEL_NAME, get_config
from techscreen.utils import setup_logging


def test_placeholder_project_is_rejected(monkeypatch):
    monkeypatch.delenv("GOOGLE_CLOUD_PROJECT", raising=False)
    with pytest.raises(ValueError):
        get_config()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "screening-prod")
    monkeypatch.setenv("TECHSCREEN_LOCATION", "europe-west4")
    monkeypatch.setenv("TECHSCREEN_LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("TECHSCREEN_MODEL", raising=False)
    monkeypatch.delenv("TECHSCREEN_LOG_FILE", raising=False)

    config = get_config()
    assert config.google_cloud_project == "screening-prod"
    assert config.vertex_location == "europe-west4"
    assert config.log_level == "DEBUG"
    assert config.model_name == MODEL_NAME
    assert config.log_file == LOG_FILE


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "logs" / "techscreen.log"
    try:
        assert setup_logging(str(log_file)) == str(log_file)
        logging.getLogger("services").info("hello from the test")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello from the test" in log_file.read_text()
    finally:
        for handler in list(logging.getLogger().handlers):
            logging.getLogger().removeHandler(handler)
            handler.close()
