"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from cjklint.sequence import TokenSequence


def dump_tokens(seq: TokenSequence, *, file: TextIO = sys.stderr) -> None:
    """Print the token arena, indented by group nesting, to *file*."""
    file.write("Tokens\n")
    for index, tok in enumerate(seq):
        depth = seq.depth(index) + 1
        line = f"{_indent(depth)}{index} {tok.kind.name} {tok.offset}:{tok.end} {tok.content!r}"
        if tok.content != tok.raw:
            line += f" (was {tok.raw!r})"
        spaces = _spaces(tok.space_before, tok.space_after)
        if spaces:
            line += f" {spaces}"
        if seq.is_opener(index):
            g = seq.group_at(index)
            assert g is not None
            line += f" <{g.kind.name.lower()} {g.start}..{g.end}>"
        file.write(line + "\n")


def _indent(depth: int) -> str:
    return "  " * depth


def _spaces(before: str, after: str) -> str:
    parts = []
    if before:
        parts.append(f"before={before!r}")
    if after:
        parts.append(f"after={after!r}")
    return " ".join(parts)
