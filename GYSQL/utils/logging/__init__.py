"""Logging utilities for GYSQL."""

from .setup import setup_logging, setup_logging_from_config, get_logger, clear_log_file

__all__ = ["setup_logging", "setup_logging_from_config", "get_logger", "clear_log_file"]
