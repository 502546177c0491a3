"""space-code: one space, or none, between a code span and the text around it.

The code body itself is opaque; spaces inside the fences are never touched.
"""

from __future__ import annotations

from dataclasses import dataclass

from cjklint.dispatch import Context, Rule
from cjklint.options import Options
from cjklint.tokens import CONTENT_KINDS, Group, GroupKind, Token, TokenKind

SPACE_OUTSIDE = "There should be one space outside the code span"
NO_SPACE_OUTSIDE = "There should be no space outside the code span"


@dataclass(frozen=True, slots=True)
class CodeConfig:
    space: str
    message: str


def configure(options: Options) -> CodeConfig | None:
    wanted = options.flag("spaceOutsideCode")
    if wanted is None:
        return None
    if wanted:
        return CodeConfig(" ", SPACE_OUTSIDE)
    return CodeConfig("", NO_SPACE_OUTSIDE)


def handle(
    config: CodeConfig, token: Token, index: int, group: Group | None, ctx: Context
) -> None:
    seq = ctx.seq
    g = seq.group_at(index)
    if g is None or g.start != index or g.kind is not GroupKind.CODE:
        return

    # content x code
    before = seq.visible_before(g.start)
    if before is not None and seq[before].kind in CONTENT_KINDS:
        ctx.check_space_after(seq.space_host(before, g.start), config.space, config.message)

    # code x content, code x code
    after = seq.visible_after(g.end)
    if after is None:
        return
    nxt = seq[after]
    if nxt.kind in CONTENT_KINDS or (nxt.kind is TokenKind.CODE_FENCE and seq.is_opener(after)):
        ctx.check_space_after(seq.space_host(g.end, after), config.space, config.message)


RULE = Rule("space-code", frozenset({TokenKind.CODE_FENCE}), configure, handle)
