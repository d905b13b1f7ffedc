"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import get_logger, setup_logging


class TestLogging:
    """Test core logging API."""

    @pytest.mark.unit
    def test_get_logger(self) -> None:
        """Verify logger instance creation under the package namespace."""
        logger = get_logger("grid")
        assert logger.name == "termgrid.grid"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "termgrid"

    @pytest.mark.unit
    def test_get_logger_keeps_qualified_name(self) -> None:
        """Already-qualified names are not nested twice."""
        assert get_logger("termgrid.frame").name == "termgrid.frame"

    @pytest.mark.unit
    def test_setup_logging(self) -> None:
        """Verify logging setup accepts level names."""
        stream = StringIO()
        setup_logging(level="debug", stream=stream)
        logger = get_logger("test_setup")
        logger.debug("test message")

        # basicConfig is a no-op when logging was already configured,
        # so only the API contract is checked here.
        assert logger.level == logging.NOTSET
