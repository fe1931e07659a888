"""
Tests for configuration and logging setup.
"""

import io
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from agebmi.config import AgebmiConfig, get_config, reset_config
from agebmi.logging import JSONFormatter, setup_logging


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    for var in ("AGEBMI_LOG_LEVEL", "AGEBMI_LOG_FORMAT", "AGEBMI_HOST", "AGEBMI_PORT", "AGEBMI_CORS_ORIGINS"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()


class TestConfig:

    def test_defaults(self):
        config = get_config()

        assert config.log_level == "INFO"
        assert config.log_format == "text"
        assert config.host == "127.0.0.1"
        assert config.port == 8000
        assert config.cors_origins == ["*"]

    def test_singleton(self):
        assert get_config() is get_config()

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("AGEBMI_LOG_LEVEL", "debug")
        monkeypatch.setenv("AGEBMI_PORT", "9000")
        monkeypatch.setenv("AGEBMI_CORS_ORIGINS", "https://a.example, https://b.example,")

        config = get_config()

        assert config.log_level == "DEBUG"
        assert config.port == 9000
        assert config.cors_origins == ["https://a.example", "https://b.example"]

    @pytest.mark.parametrize("port", ["abc", "0", "70000"])
    def test_bad_port(self, monkeypatch, port):
        monkeypatch.setenv("AGEBMI_PORT", port)

        with pytest.raises(ValueError, match="AGEBMI_PORT"):
            AgebmiConfig()

    def test_bad_log_format(self, monkeypatch):
        monkeypatch.setenv("AGEBMI_LOG_FORMAT", "xml")

        with pytest.raises(ValueError, match="AGEBMI_LOG_FORMAT"):
            get_config()


class TestLogging:

    def test_text_format(self):
        stream = io.StringIO()
        root = setup_logging(level="INFO", stream=stream)

        logging.getLogger("agebmi.test").info("hello")

        assert root.level == logging.INFO
        assert "agebmi.test - INFO - hello" in stream.getvalue()

    def test_json_format(self, monkeypatch):
        monkeypatch.setenv("AGEBMI_LOG_FORMAT", "json")
        stream = io.StringIO()
        root = setup_logging(stream=stream)

        logging.getLogger("agebmi.test").warning("structured %s", "line")

        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["message"] == "structured line"
        assert record["level"] == "WARNING"
        assert record["logger"] == "agebmi.test"
