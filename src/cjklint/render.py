"""Renderer: folds the mutated token arena back into text."""

from __future__ import annotations

from cjklint.sequence import TokenSequence


def render(seq: TokenSequence) -> str:
    """Concatenate every token's current space_before, content and space_after."""
    parts: list[str] = []
    for tok in seq:
        parts.append(tok.space_before)
        parts.append(tok.content)
        parts.append(tok.space_after)
    return "".join(parts)
