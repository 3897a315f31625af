"""Shared fixtures for the osubuffer tests."""

import pytest

from osubuffer.objects.cursor import ByteCursor


@pytest.fixture
def cursor():
    """An empty cursor with a small capacity, so writes exercise growth."""
    return ByteCursor.empty(capacity=4)
