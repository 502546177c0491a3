"""Grouper: pairs quotes, brackets, emphasis marks and code fences into groups."""

from __future__ import annotations

from cjklint.chars import (
    BRACKET_CLOSE_TO_OPEN,
    QUOTE_CLOSE_TO_OPEN,
    QUOTE_OPEN_TO_CLOSE,
    Width,
    is_half_alnum,
)
from cjklint.sequence import TokenSequence
from cjklint.tokens import Group, GroupKind, Token, TokenKind


class Grouper:
    """Stack-based pairing, one stack per delimiter vocabulary.

    The nearest unmatched opener closes first. Openers left inside a group
    when it closes can no longer nest properly and are dropped as unmatched,
    as is everything still open at a blank line or at the end of input.
    Unmatched delimiters become plain SYMBOL tokens.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._groups: list[Group] = []
        self._quotes: list[int] = []
        self._brackets: list[int] = []
        self._marks: list[int] = []
        self._fence: int | None = None

    def group(self) -> TokenSequence:
        """Pair all delimiters and return the token arena with its group table."""
        for i, tok in enumerate(self._tokens):
            kind = tok.kind
            if kind is TokenKind.LINEBREAK:
                self._drop_open(self._marks)
                if i > 0 and self._tokens[i - 1].kind is TokenKind.LINEBREAK:
                    self._reset()
            elif kind is TokenKind.QUOTE:
                self._pair_quote(i)
            elif kind is TokenKind.BRACKET:
                self._pair_bracket(i)
            elif kind is TokenKind.MARK:
                self._pair_mark(i)
            elif kind is TokenKind.CODE_FENCE:
                self._pair_fence(i)
        self._reset()
        self._groups.sort(key=lambda g: g.start)
        return TokenSequence(self._tokens, self._groups)

    # ------------------------------------------------------------------
    # Stack helpers
    # ------------------------------------------------------------------

    def _demote(self, index: int) -> None:
        self._tokens[index].kind = TokenKind.SYMBOL

    def _drop_open(self, stack: list[int]) -> None:
        for index in stack:
            self._demote(index)
        stack.clear()

    def _reset(self) -> None:
        self._drop_open(self._quotes)
        self._drop_open(self._brackets)
        self._drop_open(self._marks)

    def _close(self, stack: list[int], index: int, opener: str, kind: GroupKind) -> bool:
        """Close the nearest open entry whose raw text is opener; False if none."""
        for pos in range(len(stack) - 1, -1, -1):
            start = stack[pos]
            if self._tokens[start].raw != opener:
                continue
            del stack[pos]
            # Anything opened inside this group and still open can never nest.
            for other in (self._quotes, self._brackets, self._marks):
                inner = [j for j in other if j > start]
                for j in inner:
                    self._demote(j)
                other[:] = [j for j in other if j < start]
            self._groups.append(Group(kind, start, index))
            return True
        return False

    # ------------------------------------------------------------------
    # Vocabularies
    # ------------------------------------------------------------------

    def _pair_quote(self, index: int) -> None:
        ch = self._tokens[index].raw

        if ch in QUOTE_OPEN_TO_CLOSE:
            self._quotes.append(index)
            return

        if ch in QUOTE_CLOSE_TO_OPEN:
            if not self._close(self._quotes, index, QUOTE_CLOSE_TO_OPEN[ch], GroupKind.QUOTE):
                self._demote(index)
            return

        # Ambiguous " or ': close the nearest open one of the same character, else open.
        if self._close(self._quotes, index, ch, GroupKind.QUOTE):
            return
        if ch == "'" and self._follows_half_word(index):
            # users' items: an apostrophe, not an opening quote
            self._demote(index)
            return
        self._quotes.append(index)

    def _follows_half_word(self, index: int) -> bool:
        if index == 0:
            return False
        prev = self._tokens[index - 1]
        if prev.raw_space_after or prev.kind is not TokenKind.CONTENT:
            return False
        return prev.width is Width.HALF and is_half_alnum(prev.raw[-1:])

    def _pair_bracket(self, index: int) -> None:
        ch = self._tokens[index].raw
        if ch in BRACKET_CLOSE_TO_OPEN:
            if not self._close(self._brackets, index, BRACKET_CLOSE_TO_OPEN[ch], GroupKind.BRACKET):
                self._demote(index)
            return
        self._brackets.append(index)

    def _pair_mark(self, index: int) -> None:
        tok = self._tokens[index]
        if self._is_list_bullet(index):
            self._demote(index)
            return
        if self._close(self._marks, index, tok.raw, GroupKind.MARK):
            return
        self._marks.append(index)

    def _is_list_bullet(self, index: int) -> bool:
        """A lone * at the start of a line followed by a space is a list marker."""
        tok = self._tokens[index]
        if tok.raw != "*" or not tok.raw_space_after:
            return False
        return index == 0 or self._tokens[index - 1].kind is TokenKind.LINEBREAK

    def _pair_fence(self, index: int) -> None:
        # The tokenizer only emits fences in matched pairs.
        if self._fence is None:
            self._fence = index
            return
        self._groups.append(Group(GroupKind.CODE, self._fence, index, opaque=True))
        self._fence = None


def group(tokens: list[Token]) -> TokenSequence:
    """Convenience function: pair delimiters in a token list."""
    return Grouper(tokens).group()
