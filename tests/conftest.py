"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def long_packed() -> bytes:
    """Nine byte packed value 12345678901234567 with a negative sign."""
    return bytes.fromhex("12345678901234567d")


@pytest.fixture
def short_packed() -> bytes:
    """Three byte packed value 12345 with an unsigned (0xF) sign."""
    return bytes.fromhex("12345f")


@pytest.fixture
def bad_packed() -> bytes:
    """Packed value with an 0xA nibble in the digit area."""
    return bytes.fromhex("12a45f")
