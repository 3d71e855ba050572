"""Pytest fixtures and configuration."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Entry points reconfigure the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
