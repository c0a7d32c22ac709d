"""Command-line entry point: convert single moves between notations."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Mapping
from typing import TextIO

from chesscodec.core import Move, Position
from chesscodec.notation import (
    NOTATIONS,
    STARTING_FEN,
    notation_by_name,
    position_from_fen,
)

_LOGGER = logging.getLogger(__name__)

FEN_ENV = "CHESSCODEC_FEN"
NOTATION_ENV = "CHESSCODEC_NOTATION"
_EXIT_USAGE = 2


def _build_parser(env: Mapping[str, str]) -> argparse.ArgumentParser:
    default_fen = env.get(FEN_ENV, STARTING_FEN)
    default_notation = env.get(NOTATION_ENV, "san")

    parser = argparse.ArgumentParser(
        prog="chesscodec",
        description="Encode and decode chess moves in UCI, SAN and long algebraic notation.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    parser.add_argument(
        "--fen",
        default=default_fen,
        help=f"position the move is played from (env {FEN_ENV}, default: start position)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    convert = sub.add_parser("convert", help="convert one move between notations")
    convert.add_argument("move", help="move text, e.g. Nf3 or g1f3")
    convert.add_argument(
        "--from", dest="source", default=default_notation, help="notation of MOVE"
    )
    convert.add_argument("--to", dest="target", default="uci", help="output notation")

    moves = sub.add_parser("moves", help="list every legal move")
    moves.add_argument(
        "--notation",
        default=default_notation,
        help=f"output notation (env {NOTATION_ENV}; one of {', '.join(NOTATIONS)})",
    )
    return parser


def main(
    argv: list[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Run the CLI and return its exit status."""
    out = out or sys.stdout
    err = err or sys.stderr
    args = _build_parser(os.environ if env is None else env).parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        position = position_from_fen(args.fen)
        if args.command == "convert":
            source = notation_by_name(args.source)
            target = notation_by_name(args.target)
            move = source.decode(position, args.move)
            _LOGGER.debug("Decoded %r with %s as %s", args.move, source, move)
            if move not in position.legal_moves():
                print(f"chesscodec: illegal move {args.move!r}", file=err)
                return _EXIT_USAGE
            print(target.encode(position, _tagged(position, move)), file=out)
        else:
            notation = notation_by_name(args.notation)
            for move in position.legal_moves():
                print(notation.encode(position, move), file=out)
    except ValueError as exc:  # DecodeError, bad FEN, unknown notation
        print(f"chesscodec: {exc}", file=err)
        return _EXIT_USAGE
    return 0


def _tagged(position: Position, move: Move) -> Move:
    """The legal move equal to *move*, carrying the position's full tags."""
    for legal in position.legal_moves():
        if legal == move:
            return legal
    return move
