"""Runtime selection of a notation by name."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from chesscodec.notation.algebraic import AlgebraicNotation, LongAlgebraicNotation
from chesscodec.notation.uci import UCINotation

if TYPE_CHECKING:
    from chesscodec.notation.base import Notation

NOTATIONS: MappingProxyType[str, Notation] = MappingProxyType(
    {
        "uci": UCINotation(),
        "san": AlgebraicNotation(),
        "lan": LongAlgebraicNotation(),
    }
)

_ALIASES: dict[str, str] = {
    "algebraic": "san",
    "long": "lan",
    "long-algebraic": "lan",
}


def notation_by_name(name: str) -> Notation:
    """Look up a notation by canonical name or alias, case-insensitively."""
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    try:
        return NOTATIONS[key]
    except KeyError:
        valid = ", ".join(sorted((*NOTATIONS, *_ALIASES)))
        raise ValueError(f"Unknown notation {name!r} (expected one of: {valid})") from None
