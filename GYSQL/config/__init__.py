"""Configuration loading for GYSQL."""

from .loader import find_config_file, load_config, get_config

__all__ = ["find_config_file", "load_config", "get_config"]
