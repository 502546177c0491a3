"""space-quote: spacing inside and outside quote pairs."""

from __future__ import annotations

from cjklint.dispatch import Context, Rule
from cjklint.options import Options
from cjklint.rules.pairs import PairConfig, PairMessages, check_pair
from cjklint.tokens import Group, GroupKind, Token, TokenKind

MESSAGES = PairMessages(
    no_inside="There should be no space inside quotes",
    space_outside="There should be one space outside half-width quotes",
    no_space_outside="There should be no space outside quotes",
)


def configure(options: Options) -> PairConfig | None:
    config = PairConfig(
        no_inside=bool(options.flag("noSpaceInsideQuote")),
        outside_half=options.flag("spaceOutsideHalfQuote"),
        no_outside_full=bool(options.flag("noSpaceOutsideFullQuote")),
    )
    if not config.no_inside and config.outside_half is None and not config.no_outside_full:
        return None
    return config


def handle(
    config: PairConfig, token: Token, index: int, group: Group | None, ctx: Context
) -> None:
    g = ctx.seq.group_at(index)
    if g is not None and g.start == index and g.kind is GroupKind.QUOTE:
        check_pair(config, g, ctx, MESSAGES)


RULE = Rule("space-quote", frozenset({TokenKind.QUOTE}), configure, handle)
