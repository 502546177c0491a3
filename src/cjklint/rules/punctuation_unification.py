"""punctuation-unification: one family of full-width quotes throughout."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from cjklint.chars import TO_SIMPLIFIED, TO_TRADITIONAL
from cjklint.dispatch import Context, Rule
from cjklint.options import Options
from cjklint.report import Target
from cjklint.tokens import Group, Token, TokenKind

SIMPLIFIED = "The quotes should be unified into the simplified form"
TRADITIONAL = "The quotes should be unified into the traditional form"


@dataclass(frozen=True, slots=True)
class UnificationConfig:
    mapping: Mapping[str, str]
    message: str


def configure(options: Options) -> UnificationConfig | None:
    mode = options.text("unifiedPunctuation")
    if mode == "simplified":
        return UnificationConfig(TO_SIMPLIFIED, SIMPLIFIED)
    if mode == "traditional":
        return UnificationConfig(TO_TRADITIONAL, TRADITIONAL)
    return None


def handle(
    config: UnificationConfig, token: Token, index: int, group: Group | None, ctx: Context
) -> None:
    seq = ctx.seq
    g = seq.group_at(index)
    if g is None or g.start != index:
        return
    opener = seq[g.start].content
    closer = seq[g.end].content
    if opener in config.mapping:
        ctx.check_content(g.start, config.mapping[opener], config.message, Target.START_CONTENT)
    if closer in config.mapping:
        ctx.check_content(g.end, config.mapping[closer], config.message, Target.END_CONTENT)


RULE = Rule("punctuation-unification", frozenset({TokenKind.QUOTE}), configure, handle)
