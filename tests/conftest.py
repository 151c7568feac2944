"""Pytest configuration and fixtures for test suite.

Provides:
- Environment defaults so settings never pick up a developer's .env
- A fresh settings cache per test
- Helpers for writing CSV fixtures into tmp_path
"""
import os
from pathlib import Path
from typing import Callable

import pytest

from csv2xlsx.config import get_settings


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Pin settings to known values and reset the settings cache around each test."""
    monkeypatch.setenv("CSV2XLSX_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("CSV2XLSX_ENVIRONMENT", "development")
    monkeypatch.setenv("CSV2XLSX_INFERENCE_SAMPLE_ROWS", "20")
    monkeypatch.setenv("CSV2XLSX_MAX_WORKERS", "8")
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture
def write_csv(tmp_path) -> Callable[..., Path]:
    """Return a helper that writes text to tmp_path/<name> and returns the path."""

    def _write(name: str, content: str, encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding=encoding)
        return path

    return _write
