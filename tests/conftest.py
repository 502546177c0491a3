"""Shared test fixtures and helpers."""

from __future__ import annotations

from typing import Any

import pytest

import cjklint
from cjklint.grouper import group
from cjklint.report import Result, Target
from cjklint.sequence import TokenSequence
from cjklint.tokenizer import tokenize
from cjklint.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the token list."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


@pytest.fixture
def sequence():
    """Return a helper that tokenizes and groups source into a TokenSequence."""

    def _sequence(source: str) -> TokenSequence:
        return group(tokenize(source))

    return _sequence


def run(text: str, **rules: Any) -> Result:
    """Format text with the given rule options."""
    return cjklint.format(text, {"rules": rules})


def output(text: str, **rules: Any) -> str:
    """Formatted text only."""
    return run(text, **rules).result


def spots(result: Result) -> list[tuple[int, int, Target]]:
    """(index, length, target) of each validation, in report order."""
    return [(v.index, v.length, v.target) for v in result.validations]


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_raws(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token raw texts match the expected list."""
    actual = [t.raw for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
