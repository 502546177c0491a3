"""space-mark: no whitespace just inside emphasis marks; it moves outside instead."""

from __future__ import annotations

from dataclasses import dataclass

from cjklint.dispatch import Context, Rule
from cjklint.options import Options
from cjklint.tokens import Group, GroupKind, Token, TokenKind

NO_SPACE_INSIDE = "There should be no space inside the emphasis mark"
SPACE_OUTSIDE = "There should be one space outside the emphasis mark"

# Neighbours that take back a space pushed out of an emphasis pair.
_OUTER_KINDS = frozenset({TokenKind.CONTENT, TokenKind.RAW, TokenKind.CODE_FENCE})


@dataclass(frozen=True, slots=True)
class MarkConfig:
    pass


def configure(options: Options) -> MarkConfig | None:
    return MarkConfig() if options.flag("noSpaceInsideMark") else None


def handle(
    config: MarkConfig, token: Token, index: int, group: Group | None, ctx: Context
) -> None:
    seq = ctx.seq
    g = seq.group_at(index)
    if g is None or g.start != index or g.kind is not GroupKind.MARK:
        return

    # An empty pair closed up would read back as one longer mark run.
    first = seq.visible_after(g.start)
    if first is None or first >= g.end:
        return

    removed_start = ctx.check_space_after(g.start, "", NO_SPACE_INSIDE)
    removed_end = g.end - 1 > g.start and ctx.check_space_after(g.end - 1, "", NO_SPACE_INSIDE)

    if removed_start:
        # Walk out over directly adjacent opening marks: **_x
        k = g.start
        while k > 0 and seq.is_opener(k - 1) and seq[k - 1].kind is TokenKind.MARK:
            if seq[k - 1].space_after:
                break
            k -= 1
        before = k - 1
        if before >= 0 and seq[before].kind in _OUTER_KINDS and not seq[before].space_after:
            ctx.check_space_after(before, " ", SPACE_OUTSIDE)

    if removed_end:
        k = g.end
        while k + 1 < len(seq) and seq.is_closer(k + 1) and seq[k + 1].kind is TokenKind.MARK:
            if seq[k].space_after:
                break
            k += 1
        after = k + 1
        if after < len(seq) and seq[after].kind in _OUTER_KINDS and not seq[k].space_after:
            ctx.check_space_after(k, " ", SPACE_OUTSIDE)


RULE = Rule("space-mark", frozenset({TokenKind.MARK}), configure, handle)
