"""Data models for packdec."""

from __future__ import annotations

from .descriptor import PackedSlice

__all__ = [
    "PackedSlice",
]
