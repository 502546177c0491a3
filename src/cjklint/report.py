"""Validation records, the append-only reporter, and the result of a formatting pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from cjklint.tokens import LINEBREAK, locate

if TYPE_CHECKING:
    from cjklint.sequence import TokenSequence


class Target(Enum):
    """Which boundary of a token a validation judged."""

    SPACE_BEFORE = "spaceBefore"
    SPACE_AFTER = "spaceAfter"
    INNER_SPACE_BEFORE = "innerSpaceBefore"
    START_CONTENT = "startContent"
    END_CONTENT = "endContent"
    CONTENT = "content"


@dataclass(frozen=True, slots=True)
class Validation:
    """One diagnostic, positioned in the original input.

    For space targets ``index`` is where the whitespace sits (or would be
    inserted) and ``length`` the length of the original whitespace. For
    content targets it is the span of the judged character(s).
    """

    index: int
    length: int
    target: Target
    message: str
    rule: str = ""

    def format(self, source: str, filename: str = "input") -> str:
        pos = locate(source, self.index)
        lines = LINEBREAK.split(source)
        line_idx = pos.line - 1
        col = pos.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx]
        else:
            source_line = ""

        # Underline the judged span, at least one caret, never past the line end
        underline_len = max(1, min(self.length, len(source_line) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(pos.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        rule = f" [{self.rule}]" if self.rule else ""
        return (
            f"warning: {self.message}{rule}\n"
            f"{' ' * gutter_width}--> {filename}:{pos.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class Reporter:
    """Collects validations in the order rules record them. No deduplication."""

    def __init__(self) -> None:
        self.validations: list[Validation] = []

    def record(
        self,
        index: int,
        length: int,
        target: Target,
        message: str,
        rule: str = "",
    ) -> Validation:
        validation = Validation(index, length, target, message, rule)
        self.validations.append(validation)
        return validation


@dataclass(frozen=True, slots=True)
class Result:
    """Formatted text, the validations behind it, and the final token arena."""

    result: str
    validations: list[Validation] = field(default_factory=list)
    tokens: TokenSequence | None = None
