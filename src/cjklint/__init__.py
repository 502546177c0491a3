"""cjklint: formatter and linter for prose mixing CJK and Latin text."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from cjklint.options import DEFAULT_RULES

if TYPE_CHECKING:
    from cjklint.options import Options
    from cjklint.report import Result

__version__ = "0.1.0"

__all__ = ["DEFAULT_RULES", "format", "lint"]


def format(text: str, options: Options | Mapping[str, Any] | None = None) -> Result:
    """Tokenize, group, apply the configured rules, and render the text.

    Never raises for any input string. With no options every rule is off and
    the result equals the input.
    """
    from cjklint.dispatch import apply_all
    from cjklint.grouper import group
    from cjklint.options import Options
    from cjklint.render import render
    from cjklint.report import Result
    from cjklint.rules import RULES
    from cjklint.tokenizer import tokenize

    opts = Options.coerce(options)
    seq = group(tokenize(text))
    validations = apply_all(seq, RULES, opts)
    return Result(render(seq), validations, seq)


lint = format
