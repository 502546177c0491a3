"""Rule catalogue, in dispatch order. On a shared gap the later rule wins."""

from __future__ import annotations

from cjklint.dispatch import Rule
from cjklint.rules import (
    punctuation_unification,
    punctuation_width,
    space_bracket,
    space_code,
    space_content,
    space_mark,
    space_punctuation,
    space_quote,
    space_trim,
)

RULES: tuple[Rule, ...] = (
    space_mark.RULE,
    punctuation_width.RULE,
    punctuation_unification.RULE,
    space_content.RULE,
    space_punctuation.RULE,
    space_quote.RULE,
    space_bracket.RULE,
    space_code.RULE,
    space_trim.RULE,
)

RULES_BY_NAME: dict[str, Rule] = {rule.name: rule for rule in RULES}
