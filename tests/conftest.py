"""Shared fixtures for the GIF effect tests."""

from datetime import datetime, timezone

import pytest

from gif_effects.fonts import FontProvider


@pytest.fixture
def fonts():
    return FontProvider()


@pytest.fixture
def fixed_now():
    return datetime(2030, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
