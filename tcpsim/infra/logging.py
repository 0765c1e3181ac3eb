"""App-level logging policy over engine logging API."""

from __future__ import annotations

import logging
import os

from fsmengine.api.logging import EngineLoggingConfig, JsonFormatter, configure_logging

__all__ = ["JsonFormatter", "build_logging_config", "setup_logging"]


def build_logging_config() -> EngineLoggingConfig:
    """Resolve logging config from env. Console logs go to stderr."""
    level_name = os.getenv("TCPSIM_LOG_LEVEL", os.getenv("LOG_LEVEL", "WARNING")).strip().upper()
    console_format = os.getenv("LOG_FORMAT", "text").strip().lower()
    file_path = os.getenv("TCPSIM_LOG_FILE", "").strip() or None
    return EngineLoggingConfig(
        level_name=level_name or "WARNING",
        console_format=console_format,
        file_path=file_path,
        file_format="json",
    )


def setup_logging() -> None:
    """Configure application logging via engine logging API."""
    config = build_logging_config()
    configure_logging(config)
    logging.getLogger(__name__).debug(
        "logging_configured level=%s format=%s file=%s",
        config.level_name,
        config.console_format,
        config.file_path,
    )
