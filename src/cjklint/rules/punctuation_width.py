"""punctuation-width: convert punctuation to the configured half- or full-width form.

``fullWidthPunctuation`` lists the characters wanted in full-width form and
``halfWidthPunctuation`` those wanted in half-width form. Pause and stop
marks follow the width of the nearest content before them, so ``中文,`` gets
a full-width comma while ``foo,`` keeps its half-width one. Quote and
bracket pairs convert unconditionally, both marks at once.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from cjklint.chars import (
    FULL_QUOTE_TO_HALF,
    FULL_TO_HALF,
    HALF_QUOTE_TO_FULL,
    HALF_TO_FULL,
    Width,
)
from cjklint.dispatch import Context, Rule
from cjklint.options import Options
from cjklint.report import Target
from cjklint.tokens import Group, Token, TokenKind

FULL_WIDTH = "The punctuation should be full-width"
HALF_WIDTH = "The punctuation should be half-width"


@dataclass(frozen=True, slots=True)
class WidthConfig:
    to_full: Mapping[str, str]  # half-width char -> full-width char
    to_half: Mapping[str, str]  # full-width char -> half-width char
    full_quotes: frozenset[str]  # half-width quotes to widen
    half_quotes: frozenset[str]  # half-width quotes whose full forms narrow


def configure(options: Options) -> WidthConfig | None:
    half = options.text("halfWidthPunctuation")
    full = options.text("fullWidthPunctuation")
    if half is None and full is None:
        return None

    to_full: dict[str, str] = {}
    to_half: dict[str, str] = {}
    full_quotes: set[str] = set()
    half_quotes: set[str] = set()

    for ch in half or "":
        if ch in HALF_TO_FULL:
            to_half[HALF_TO_FULL[ch]] = ch
        elif ch in HALF_QUOTE_TO_FULL:
            half_quotes.add(ch)

    for ch in full or "":
        if ch in FULL_TO_HALF:
            to_full[FULL_TO_HALF[ch]] = ch
        elif ch in FULL_QUOTE_TO_HALF:
            full_quotes.add(FULL_QUOTE_TO_HALF[ch])

    # A pair listed both ways converts to full-width.
    for f in to_full.values():
        to_half.pop(f, None)
    half_quotes -= full_quotes

    return WidthConfig(
        MappingProxyType(to_full),
        MappingProxyType(to_half),
        frozenset(full_quotes),
        frozenset(half_quotes),
    )


def handle(
    config: WidthConfig, token: Token, index: int, group: Group | None, ctx: Context
) -> None:
    if token.kind is TokenKind.PUNCTUATION:
        _handle_punctuation(config, token, index, ctx)
    else:
        _handle_pair(config, index, ctx)


def _handle_punctuation(config: WidthConfig, token: Token, index: int, ctx: Context) -> None:
    ch = token.content
    # Runs such as ... or ！！ are left alone.
    if len(ch) != 1:
        return

    if ch in config.to_full:
        wanted, width, message = config.to_full[ch], Width.FULL, FULL_WIDTH
    elif ch in config.to_half:
        wanted, width, message = config.to_half[ch], Width.HALF, HALF_WIDTH
    else:
        return

    before = ctx.seq.content_before(index)
    if before is None or ctx.seq[before].width is not width:
        return
    ctx.check_content(index, wanted, message)


def _handle_pair(config: WidthConfig, index: int, ctx: Context) -> None:
    seq = ctx.seq
    g = seq.group_at(index)
    if g is None or g.start != index:
        return

    opener = seq[g.start].content
    closer = seq[g.end].content

    if opener in config.full_quotes:
        start, end = HALF_QUOTE_TO_FULL[opener]
        message = FULL_WIDTH
    elif opener in FULL_QUOTE_TO_HALF and FULL_QUOTE_TO_HALF[opener] in config.half_quotes:
        start = end = FULL_QUOTE_TO_HALF[opener]
        message = HALF_WIDTH
    elif opener in config.to_full and closer in config.to_full:
        start, end = config.to_full[opener], config.to_full[closer]
        message = FULL_WIDTH
    elif opener in config.to_half and closer in config.to_half:
        start, end = config.to_half[opener], config.to_half[closer]
        message = HALF_WIDTH
    else:
        return

    ctx.check_content(g.start, start, message, Target.START_CONTENT)
    ctx.check_content(g.end, end, message, Target.END_CONTENT)


RULE = Rule(
    "punctuation-width",
    frozenset({TokenKind.PUNCTUATION, TokenKind.QUOTE, TokenKind.BRACKET}),
    configure,
    handle,
)
