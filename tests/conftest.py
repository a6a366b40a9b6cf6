"""Pytest configuration and fixtures for point tests."""

import pytest

from point_struct import Point


@pytest.fixture
def origin():
    """Point at (0, 0)."""
    return Point(0, 0)


@pytest.fixture
def neighborhood():
    """Points around the origin, including the origin itself."""
    return [Point(0, 0), Point(1, 1), Point(2, 2), Point(3, 3), Point(-2, -2)]
