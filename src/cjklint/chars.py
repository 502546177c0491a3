"""Character classification and punctuation pair tables."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum, auto
from functools import lru_cache


class Width(Enum):
    HALF = auto()
    FULL = auto()
    NEUTRAL = auto()  # spaces and linebreaks


class Role(Enum):
    LETTER = auto()
    DIGIT = auto()
    PUNCTUATION = auto()  # pause or stop: , . ; : ? ! and their full-width forms
    QUOTE = auto()  # " and ', direction depends on context
    QUOTE_OPEN = auto()
    QUOTE_CLOSE = auto()
    BRACKET_OPEN = auto()
    BRACKET_CLOSE = auto()
    SYMBOL = auto()
    SPACE = auto()
    LINEBREAK = auto()


@dataclass(frozen=True, slots=True)
class CharClass:
    """Width and role of a single character."""

    width: Width
    role: Role


HALF_PUNCTUATION = frozenset(",.;:?!")
FULL_PUNCTUATION = frozenset("，。；：？！、")

AMBIGUOUS_QUOTES = frozenset("\"'")
QUOTE_OPEN_TO_CLOSE: dict[str, str] = {
    "“": "”",
    "‘": "’",
    "「": "」",
    "『": "』",
}
QUOTE_CLOSE_TO_OPEN: dict[str, str] = {c: o for o, c in QUOTE_OPEN_TO_CLOSE.items()}

BRACKET_OPEN_TO_CLOSE: dict[str, str] = {
    "(": ")",
    "（": "）",
    "【": "】",
}
BRACKET_CLOSE_TO_OPEN: dict[str, str] = {c: o for o, c in BRACKET_OPEN_TO_CLOSE.items()}

# Curly quotes are "ambiguous" in East Asian Width terms; CJK text treats them as full-width.
_FULL_WIDTH_OVERRIDES = frozenset("“”‘’")

# Half-width <-> full-width counterparts for pause/stop punctuation and brackets.
HALF_TO_FULL: dict[str, str] = {
    ",": "，",
    ".": "。",
    ";": "；",
    ":": "：",
    "?": "？",
    "!": "！",
    "(": "（",
    ")": "）",
}
FULL_TO_HALF: dict[str, str] = {f: h for h, f in HALF_TO_FULL.items()}

# Quote pairs by width: half-width quote -> (full-width opener, full-width closer).
HALF_QUOTE_TO_FULL: dict[str, tuple[str, str]] = {
    '"': ("“", "”"),
    "'": ("‘", "’"),
}
FULL_QUOTE_TO_HALF: dict[str, str] = {
    "“": '"',
    "”": '"',
    "‘": "'",
    "’": "'",
}

# Quote unification: corner brackets (traditional) vs curly quotes (simplified).
TO_SIMPLIFIED: dict[str, str] = {
    "「": "“",
    "」": "”",
    "『": "‘",
    "』": "’",
}
TO_TRADITIONAL: dict[str, str] = {s: t for t, s in TO_SIMPLIFIED.items()}


def _width(ch: str) -> Width:
    if ch in _FULL_WIDTH_OVERRIDES:
        return Width.FULL
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return Width.FULL
    return Width.HALF


@lru_cache(maxsize=4096)
def classify(ch: str) -> CharClass:
    """Return the width and role of a character. Never fails."""
    if ch in "\n\r":
        return CharClass(Width.NEUTRAL, Role.LINEBREAK)
    if ch in " \t":
        return CharClass(Width.NEUTRAL, Role.SPACE)

    width = _width(ch)
    if ch in HALF_PUNCTUATION or ch in FULL_PUNCTUATION:
        role = Role.PUNCTUATION
    elif ch in AMBIGUOUS_QUOTES:
        role = Role.QUOTE
    elif ch in QUOTE_OPEN_TO_CLOSE:
        role = Role.QUOTE_OPEN
    elif ch in QUOTE_CLOSE_TO_OPEN:
        role = Role.QUOTE_CLOSE
    elif ch in BRACKET_OPEN_TO_CLOSE:
        role = Role.BRACKET_OPEN
    elif ch in BRACKET_CLOSE_TO_OPEN:
        role = Role.BRACKET_CLOSE
    elif ch.isdigit():
        role = Role.DIGIT
    elif ch.isalpha():
        role = Role.LETTER
    else:
        role = Role.SYMBOL
    return CharClass(width, role)


def is_half_alnum(ch: str) -> bool:
    """Return True if ch is a half-width letter or digit."""
    if not ch:
        return False
    cls = classify(ch)
    return cls.width is Width.HALF and cls.role in (Role.LETTER, Role.DIGIT)
