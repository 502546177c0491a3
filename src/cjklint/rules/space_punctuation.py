"""space-punctuation: spacing on either side of pause and stop punctuation."""

from __future__ import annotations

from dataclasses import dataclass

from cjklint.chars import Width
from cjklint.dispatch import Context, Rule
from cjklint.options import Options
from cjklint.tokens import CONTENT_KINDS, Group, Token, TokenKind

NO_SPACE_BEFORE = "There should be no space before punctuation"
SPACE_AFTER_HALF = "There should be one space after half-width punctuation"
NO_SPACE_AFTER_FULL = "There should be no space after full-width punctuation"

_OPENING_KINDS = frozenset({TokenKind.QUOTE, TokenKind.BRACKET, TokenKind.CODE_FENCE})


@dataclass(frozen=True, slots=True)
class PunctuationConfig:
    no_before: bool
    half_after: bool
    no_full_after: bool


def configure(options: Options) -> PunctuationConfig | None:
    config = PunctuationConfig(
        no_before=bool(options.flag("noSpaceBeforePunctuation")),
        half_after=bool(options.flag("spaceAfterHalfWidthPunctuation")),
        no_full_after=bool(options.flag("noSpaceAfterFullWidthPunctuation")),
    )
    if not (config.no_before or config.half_after or config.no_full_after):
        return None
    return config


def handle(
    config: PunctuationConfig, token: Token, index: int, group: Group | None, ctx: Context
) -> None:
    seq = ctx.seq

    if config.no_before:
        before = seq.visible_before(index)
        if before is not None and not seq.is_opener(before):
            ctx.check_space_after(seq.space_host(before, index), "", NO_SPACE_BEFORE)

    after = seq.visible_after(index)
    if after is None:
        return
    host = seq.space_host(index, after)
    width = token.width

    if width is Width.HALF and config.half_after:
        nxt = seq[after]
        if nxt.kind in CONTENT_KINDS or (nxt.kind in _OPENING_KINDS and seq.is_opener(after)):
            ctx.check_space_after(host, " ", SPACE_AFTER_HALF)
    elif width is Width.FULL and config.no_full_after:
        ctx.check_space_after(host, "", NO_SPACE_AFTER_FULL)


RULE = Rule("space-punctuation", frozenset({TokenKind.PUNCTUATION}), configure, handle)
