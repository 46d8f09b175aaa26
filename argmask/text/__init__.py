"""Offsets into argument fragments."""

from argmask.text.text import TextRange, slice_text_range

__all__ = [
    "TextRange",
    "slice_text_range",
]
