"""Tests for entry point helpers."""

import logging

import pytest

from gridsnake.__main__ import resolve_level


class TestResolveLevel:
    """Tests for turning GRIDSNAKE_LOG_LEVEL into a logging level."""

    @pytest.mark.parametrize("name,expected", [
        ("DEBUG", logging.DEBUG),
        ("info", logging.INFO),
        ("WARNING", logging.WARNING),
        ("ERROR", logging.ERROR),
    ])
    def test_known_names(self, name, expected):
        """Standard level names map to their numbers, in any case."""
        assert resolve_level(name) == expected

    @pytest.mark.parametrize("name", ["LOGGER", "basicConfig", "verbose", ""])
    def test_unknown_names_fall_back(self, name):
        """Names that are not levels, even other logging attributes, give WARNING."""
        assert resolve_level(name) == logging.WARNING
