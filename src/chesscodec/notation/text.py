"""Decoration stripping for move text comparisons."""

from __future__ import annotations

from typing import Final

DECORATIONS: Final[tuple[str, ...]] = ("?", "!", "+", "#", "e.p.")


def strip_decorations(text: str) -> str:
    """Remove check, mate, annotation and en-passant markers anywhere in *text*."""
    for marker in DECORATIONS:
        text = text.replace(marker, "")
    return text
