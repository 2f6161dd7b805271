"""Unit tests for structlog setup."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from sitemapindex.config import Settings
from sitemapindex.logs import setup_logging


@pytest.fixture(autouse=True)
def _restore_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


def _renderer() -> object:
    return structlog.get_config()["processors"][-1]


class TestSetupLogging:
    def test_json_format(self) -> None:
        setup_logging(Settings(logging={"format": "json"}))
        assert isinstance(_renderer(), structlog.processors.JSONRenderer)

    def test_text_format(self) -> None:
        setup_logging(Settings(logging={"format": "text"}))
        assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)

    def test_level_filters(self) -> None:
        setup_logging(Settings(logging={"level": "WARNING"}))
        wrapper = structlog.get_config()["wrapper_class"]
        assert wrapper is structlog.make_filtering_bound_logger(logging.WARNING)
