"""Rule dispatcher: runs every configured rule over the token arena in a fixed order."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from cjklint.options import Options
from cjklint.report import Reporter, Target, Validation
from cjklint.sequence import TokenSequence
from cjklint.tokens import Group, Token, TokenKind


class Context:
    """What a rule handler sees besides its token: the arena and the reporter.

    The ``check_*`` helpers compare a token's current state with the wanted
    state, record a validation against the original offsets when they differ,
    and write the fix. They return True when they changed something.
    """

    def __init__(self, seq: TokenSequence, reporter: Reporter, rule: str = "") -> None:
        self.seq = seq
        self.reporter = reporter
        self.rule = rule

    def check_space_after(self, index: int, expected: str, message: str) -> bool:
        seq = self.seq
        tok = seq[index]
        if tok.space_after == expected or seq.touches_linebreak(index):
            return False
        target = Target.INNER_SPACE_BEFORE if seq.is_opener(index) else Target.SPACE_AFTER
        self.reporter.record(tok.end, len(tok.raw_space_after), target, message, self.rule)
        tok.space_after = expected
        return True

    def check_space_before(self, index: int, expected: str, message: str) -> bool:
        tok = self.seq[index]
        if tok.space_before == expected:
            return False
        length = len(tok.raw_space_before)
        self.reporter.record(
            tok.offset - length, length, Target.SPACE_BEFORE, message, self.rule
        )
        tok.space_before = expected
        return True

    def check_content(
        self,
        index: int,
        expected: str,
        message: str,
        target: Target = Target.CONTENT,
    ) -> bool:
        tok = self.seq[index]
        if tok.content == expected:
            return False
        self.reporter.record(tok.offset, tok.length, target, message, self.rule)
        tok.content = expected
        return True


Handler = Callable[[Any, Token, int, Group | None, Context], None]


@dataclass(frozen=True, slots=True)
class Rule:
    """A named style rule.

    ``configure`` turns the options into the rule's own config, or None when
    every option the rule reads is undefined. ``handle`` is invoked once per
    token whose kind is in ``kinds``, with its innermost enclosing group.
    """

    name: str
    kinds: frozenset[TokenKind]
    configure: Callable[[Options], Any]
    handle: Handler


def apply_all(seq: TokenSequence, rules: Sequence[Rule], options: Options) -> list[Validation]:
    """Run rules in order over the arena, mutating it; return all validations."""
    reporter = Reporter()
    for rule in rules:
        config = rule.configure(options)
        if config is None:
            continue
        ctx = Context(seq, reporter, rule.name)
        for index, tok in enumerate(seq):
            if tok.kind not in rule.kinds:
                continue
            group = seq.parent_of(index)
            if group is not None and group.opaque:
                continue
            rule.handle(config, tok, index, group, ctx)
    return reporter.validations
