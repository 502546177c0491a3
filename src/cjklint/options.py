"""Formatting options: the rule map, the recommended preset, and its validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from cjklint.chars import FULL_QUOTE_TO_HALF, FULL_TO_HALF, HALF_QUOTE_TO_FULL, HALF_TO_FULL
from cjklint.errors import OptionsError

BOOLEAN_RULES = frozenset(
    {
        "noSpaceInsideMark",
        "spaceBetweenHalfWidthContent",
        "noSpaceBetweenFullWidthContent",
        "spaceBetweenMixedWidthContent",
        "noSpaceBeforePunctuation",
        "spaceAfterHalfWidthPunctuation",
        "noSpaceAfterFullWidthPunctuation",
        "noSpaceInsideQuote",
        "spaceOutsideHalfQuote",
        "noSpaceOutsideFullQuote",
        "noSpaceInsideBracket",
        "spaceOutsideHalfBracket",
        "noSpaceOutsideFullBracket",
        "spaceOutsideCode",
        "trimSpace",
    }
)

CHARSET_RULES = frozenset({"halfWidthPunctuation", "fullWidthPunctuation"})

UNIFICATION_MODES = frozenset({"simplified", "traditional"})

DEFAULT_RULES: Mapping[str, Any] = MappingProxyType(
    {
        "noSpaceInsideMark": True,
        "halfWidthPunctuation": "()",
        "fullWidthPunctuation": "，。：；？！“”‘’",
        "unifiedPunctuation": "simplified",
        "spaceBetweenHalfWidthContent": True,
        "noSpaceBetweenFullWidthContent": True,
        "spaceBetweenMixedWidthContent": True,
        "noSpaceBeforePunctuation": True,
        "spaceAfterHalfWidthPunctuation": True,
        "noSpaceAfterFullWidthPunctuation": True,
        "noSpaceInsideQuote": True,
        "spaceOutsideHalfQuote": True,
        "noSpaceOutsideFullQuote": True,
        "noSpaceInsideBracket": True,
        "spaceOutsideHalfBracket": True,
        "noSpaceOutsideFullBracket": True,
        "spaceOutsideCode": True,
        "trimSpace": True,
    }
)

PRESETS: Mapping[str, Mapping[str, Any]] = MappingProxyType({"default": DEFAULT_RULES})


@dataclass(frozen=True, slots=True)
class Options:
    """Read-only rule map. An absent key or ``None`` leaves a rule undefined."""

    rules: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    @classmethod
    def coerce(cls, value: Options | Mapping[str, Any] | None) -> Options:
        """Accept an Options, a ``{"rules": {...}}`` mapping, or None."""
        if value is None:
            return cls()
        if isinstance(value, Options):
            return value
        rules = value.get("rules") or {}
        return cls(rules)

    def flag(self, name: str) -> bool | None:
        value = self.rules.get(name)
        return value if isinstance(value, bool) else None

    def text(self, name: str) -> str | None:
        value = self.rules.get(name)
        return value if isinstance(value, str) else None


def _pair_key(ch: str) -> str:
    """Identify a punctuation pair by its half-width member."""
    if ch in FULL_TO_HALF:
        return FULL_TO_HALF[ch]
    if ch in FULL_QUOTE_TO_HALF:
        return FULL_QUOTE_TO_HALF[ch]
    return ch


def validate_rules(rules: Mapping[str, Any]) -> None:
    """Raise OptionsError for values no rule can act on. Unknown names pass."""
    for name, value in rules.items():
        if value is None:
            continue
        if name in BOOLEAN_RULES and not isinstance(value, bool):
            raise OptionsError(f"rule '{name}' expects true or false", name, value)
        if name in CHARSET_RULES:
            if not isinstance(value, str):
                raise OptionsError(f"rule '{name}' expects a string of characters", name, value)
            seen: set[str] = set()
            for ch in value:
                if ch in seen:
                    raise OptionsError(f"rule '{name}' lists '{ch}' more than once", name, value)
                seen.add(ch)
        if name == "unifiedPunctuation" and value not in UNIFICATION_MODES:
            modes = ", ".join(sorted(UNIFICATION_MODES))
            raise OptionsError(
                f"rule 'unifiedPunctuation' expects one of: {modes}", name, value
            )

    half = rules.get("halfWidthPunctuation")
    full = rules.get("fullWidthPunctuation")
    if isinstance(half, str) and isinstance(full, str):
        half_keys = {_pair_key(ch) for ch in half if ch in HALF_TO_FULL or ch in HALF_QUOTE_TO_FULL}
        for ch in full:
            key = _pair_key(ch)
            if key in half_keys:
                raise OptionsError(
                    f"'{ch}' is listed as both half-width and full-width punctuation",
                    "fullWidthPunctuation",
                    full,
                )
