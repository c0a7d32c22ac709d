"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chesscodec.core import Position
from chesscodec.notation import (
    AlgebraicNotation,
    LongAlgebraicNotation,
    UCINotation,
)


@pytest.fixture
def start() -> Position:
    return Position.initial()


@pytest.fixture
def uci() -> UCINotation:
    return UCINotation()


@pytest.fixture
def san() -> AlgebraicNotation:
    return AlgebraicNotation()


@pytest.fixture
def lan() -> LongAlgebraicNotation:
    return LongAlgebraicNotation()
