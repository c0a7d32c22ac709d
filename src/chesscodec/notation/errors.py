"""Errors raised by the notation codecs."""

from __future__ import annotations


class DecodeError(ValueError):
    """Move text could not be decoded for a position.

    Attributes:
        text: The raw input that failed to decode.
        notation: Human-readable name of the notation attempted.
        position: FEN of the position, or ``None`` when decoding without one.
    """

    def __init__(self, text: str, notation: str, position: str | None) -> None:
        self.text = text
        self.notation = notation
        self.position = position
        where = f"position {position}" if position is not None else "no position"
        super().__init__(f"could not decode {notation} text {text!r} for {where}")
