"""space-content: spacing between two adjacent runs of letters or digits."""

from __future__ import annotations

from dataclasses import dataclass

from cjklint.chars import Width
from cjklint.dispatch import Context, Rule
from cjklint.options import Options
from cjklint.tokens import CONTENT_KINDS, Group, Token

HALF_WIDTH = "There should be one space between half-width content"
FULL_WIDTH = "There should be no space between full-width content"
MIXED_WIDTH_SPACE = "There should be one space between half-width and full-width content"
MIXED_WIDTH_NO_SPACE = "There should be no space between half-width and full-width content"


@dataclass(frozen=True, slots=True)
class ContentConfig:
    half: bool
    no_full: bool
    mixed: bool | None


def configure(options: Options) -> ContentConfig | None:
    half = options.flag("spaceBetweenHalfWidthContent")
    no_full = options.flag("noSpaceBetweenFullWidthContent")
    mixed = options.flag("spaceBetweenMixedWidthContent")
    if not half and not no_full and mixed is None:
        return None
    return ContentConfig(bool(half), bool(no_full), mixed)


def _is_entity(token: Token) -> bool:
    return token.raw.startswith("&")


def handle(
    config: ContentConfig, token: Token, index: int, group: Group | None, ctx: Context
) -> None:
    seq = ctx.seq
    after = seq.visible_after(index)
    if after is None or seq[after].kind not in CONTENT_KINDS:
        return
    if _is_entity(token) or _is_entity(seq[after]):
        return

    host = seq.space_host(index, after)
    left, right = token.width, seq[after].width

    if left is Width.HALF and right is Width.HALF:
        # Only an existing gap is normalized: two half-width runs without one are a single word.
        if config.half and seq[host].space_after:
            ctx.check_space_after(host, " ", HALF_WIDTH)
    elif left is Width.FULL and right is Width.FULL:
        if config.no_full:
            ctx.check_space_after(host, "", FULL_WIDTH)
    elif config.mixed is not None:
        if config.mixed:
            ctx.check_space_after(host, " ", MIXED_WIDTH_SPACE)
        else:
            ctx.check_space_after(host, "", MIXED_WIDTH_NO_SPACE)


RULE = Rule("space-content", CONTENT_KINDS, configure, handle)
