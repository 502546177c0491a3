"""Spacing shared by quote and bracket pairs: inside the marks, and outside them."""

from __future__ import annotations

from dataclasses import dataclass

from cjklint.chars import Width
from cjklint.dispatch import Context
from cjklint.tokens import CONTENT_KINDS, Group, TokenKind

# Outer neighbours whose gap to a pair is governed.
_OUTER_KINDS = CONTENT_KINDS | {TokenKind.CODE_FENCE}


@dataclass(frozen=True, slots=True)
class PairConfig:
    no_inside: bool
    outside_half: bool | None
    no_outside_full: bool


@dataclass(frozen=True, slots=True)
class PairMessages:
    no_inside: str
    space_outside: str
    no_space_outside: str


def check_pair(config: PairConfig, g: Group, ctx: Context, messages: PairMessages) -> None:
    seq = ctx.seq

    if config.no_inside:
        ctx.check_space_after(g.start, "", messages.no_inside)
        if g.end - 1 > g.start:
            ctx.check_space_after(g.end - 1, "", messages.no_inside)

    if seq[g.start].width is Width.FULL:
        if not config.no_outside_full:
            return
        expected, message = "", messages.no_space_outside
    else:
        if config.outside_half is None:
            return
        if config.outside_half:
            expected, message = " ", messages.space_outside
        else:
            expected, message = "", messages.no_space_outside

    before = seq.visible_before(g.start)
    if before is not None and seq[before].kind in _OUTER_KINDS:
        ctx.check_space_after(seq.space_host(before, g.start), expected, message)

    after = seq.visible_after(g.end)
    if after is not None and seq[after].kind in _OUTER_KINDS:
        ctx.check_space_after(seq.space_host(g.end, after), expected, message)
