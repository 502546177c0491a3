"""Token kinds, token and group records, and source positions."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, auto

from cjklint.chars import Width, classify


class TokenKind(Enum):
    CONTENT = auto()  # letter/digit run, half-width or full-width
    SYMBOL = auto()  # symbol run without letters, or a demoted unmatched delimiter
    PUNCTUATION = auto()  # , . ; : ? ! and full-width forms (runs of one char)
    QUOTE = auto()  # " ' “ ” ‘ ’ 「 」 『 』
    BRACKET = auto()  # ( ) （ ） 【 】
    MARK = auto()  # emphasis delimiter: * ** _ __ ~~
    CODE_FENCE = auto()  # ` `` <code> </code>
    CODE = auto()  # code span body, verbatim
    RAW = auto()  # URL or HTML entity, never rewritten
    LINEBREAK = auto()  # \n, \r\n or \r


LINEBREAK = re.compile(r"\r\n|\r|\n")

# Kinds that read as words for spacing decisions.
CONTENT_KINDS = frozenset({TokenKind.CONTENT, TokenKind.RAW})


@dataclass(slots=True)
class Token:
    """A token with its original text and position, plus the state rules rewrite.

    ``raw``, ``offset`` and the ``raw_space_*`` fields describe the input and
    are fixed once tokenizing finishes. ``content`` and ``space_*`` start as
    copies and are what the renderer emits.
    """

    kind: TokenKind
    raw: str
    offset: int
    raw_space_before: str = ""
    raw_space_after: str = ""
    content: str = field(init=False, default="")
    space_before: str = field(init=False, default="")
    space_after: str = field(init=False, default="")

    def __post_init__(self) -> None:
        self.content = self.raw
        self.space_before = self.raw_space_before
        self.space_after = self.raw_space_after

    @property
    def length(self) -> int:
        return len(self.raw)

    @property
    def end(self) -> int:
        return self.offset + len(self.raw)

    @property
    def width(self) -> Width:
        """Width of the current content (falls back to the original text)."""
        text = self.content or self.raw
        if not text:
            return Width.NEUTRAL
        return classify(text[0]).width

    def attach_space_before(self, space: str) -> None:
        self.raw_space_before = space
        self.space_before = space

    def attach_space_after(self, space: str) -> None:
        self.raw_space_after = space
        self.space_after = space


class GroupKind(Enum):
    QUOTE = auto()
    BRACKET = auto()
    MARK = auto()
    CODE = auto()


@dataclass(slots=True)
class Group:
    """A matched delimiter pair, stored as arena indexes of its two marks.

    Children are the tokens strictly between ``start`` and ``end``. ``parent``
    indexes the enclosing group in the sequence's group table. Children of an
    ``opaque`` group are never visited by rules.
    """

    kind: GroupKind
    start: int
    end: int
    parent: int | None = None
    opaque: bool = False

    @property
    def children(self) -> range:
        return range(self.start + 1, self.end)


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


def locate(source: str, offset: int) -> Position:
    """Convert a character offset into a line/column position.

    Lines end at \\n, \\r\\n or a lone \\r, as the tokenizer reads them.
    """
    offset = max(0, min(offset, len(source)))
    line = 1
    line_start = 0
    for m in LINEBREAK.finditer(source, 0, offset):
        line += 1
        line_start = m.end()
    return Position(line, offset - line_start + 1, offset)
