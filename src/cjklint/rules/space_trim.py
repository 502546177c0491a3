"""space-trim: no whitespace at the very start or end of the text."""

from __future__ import annotations

from dataclasses import dataclass

from cjklint.dispatch import Context, Rule
from cjklint.options import Options
from cjklint.tokens import Group, Token, TokenKind

TRIM = "There should be no space at the start or end of the text"


@dataclass(frozen=True, slots=True)
class TrimConfig:
    pass


def configure(options: Options) -> TrimConfig | None:
    return TrimConfig() if options.flag("trimSpace") else None


def handle(
    config: TrimConfig, token: Token, index: int, group: Group | None, ctx: Context
) -> None:
    if index == 0:
        ctx.check_space_before(index, "", TRIM)
    if index == len(ctx.seq) - 1:
        ctx.check_space_after(index, "", TRIM)


RULE = Rule("space-trim", frozenset(TokenKind), configure, handle)
