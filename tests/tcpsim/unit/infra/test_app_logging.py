from __future__ import annotations

import json
import logging

from fsmengine.runtime.logging import configure_engine_logging, shutdown_engine_logging
from tcpsim.infra.logging import build_logging_config


def test_build_logging_config_defaults_to_quiet_text(monkeypatch) -> None:
    for name in ("TCPSIM_LOG_LEVEL", "LOG_LEVEL", "LOG_FORMAT", "TCPSIM_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    config = build_logging_config()
    assert config.level_name == "WARNING"
    assert config.console_format == "text"
    assert config.file_path is None


def test_app_level_overrides_generic_level(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "info")
    monkeypatch.setenv("TCPSIM_LOG_LEVEL", "debug")
    assert build_logging_config().level_name == "DEBUG"


def test_build_logging_config_writes_json_file(monkeypatch, tmp_path) -> None:
    log_file = tmp_path / "logs" / "tcpsim.jsonl"
    monkeypatch.setenv("TCPSIM_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FORMAT", "json")
    monkeypatch.setenv("TCPSIM_LOG_FILE", str(log_file))
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        configure_engine_logging(build_logging_config())
        assert root.level == logging.DEBUG
        logging.getLogger("test.tcpsim.file").info("hello")
        shutdown_engine_logging()
        payload = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert payload["logger"] == "test.tcpsim.file"
    finally:
        shutdown_engine_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)
