"""Sizing of the hover box that shows language server information."""

from __future__ import annotations


def hover_box_height(content: str) -> int:
    """Height of the hover box for the given text."""
    trimmed = content.strip()
    lines = len(trimmed.split("\n")) if trimmed else 0
    if lines < 2:
        return 65
    if lines < 5:
        return 100
    if lines < 7:
        return 135
    return 170