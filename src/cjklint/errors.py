"""Error types with formatted context."""

from __future__ import annotations

from typing import Any


class OptionsError(Exception):
    """Raised when a rule option holds a value no rule can act on."""

    def __init__(self, message: str, key: str | None = None, value: Any = None) -> None:
        self.message = message
        self.key = key
        self.value = value
        super().__init__(self.format())

    def format(self, filename: str = "options") -> str:
        if self.key is None:
            return f"error: {self.message}\n  --> {filename}"

        setting = f"{self.key} = {self.value!r}"
        gutter = "  "
        return (
            f"error: {self.message}\n"
            f"{gutter}--> {filename} [rules]\n"
            f"{gutter}|\n"
            f"{gutter}| {setting}\n"
            f"{gutter}| {'^' * len(self.key)}"
        )
