"""Utility functions for packdec.

This module provides size calculations for packed decimal buffers.
"""

from __future__ import annotations

from .sizing import max_digits, packed_length

__all__ = [
    "packed_length",
    "max_digits",
]
