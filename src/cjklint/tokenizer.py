"""Tokenizer: converts prose into a flat token list, whitespace attached to its neighbours."""

from __future__ import annotations

import re

from cjklint.chars import Role, Width, classify, is_half_alnum
from cjklint.tokens import Token, TokenKind

_CJK_STOP = "\u2e80-\u9fff\uf900-\ufaff\uff00-\uffef"

_PASSTHROUGH = re.compile(
    rf"[A-Za-z][A-Za-z0-9+.\-]*://[^\s<>\"'`()（）{_CJK_STOP}]+"
    rf"|(?<![A-Za-z0-9.])www\.[A-Za-z0-9\-]+\.[^\s<>\"'`()（）{_CJK_STOP}]+"
    r"|&(?:[A-Za-z][A-Za-z0-9]*|#[0-9]+|#[xX][0-9A-Fa-f]+);"
)
_URL_TRAILING = ".,;:!?"

# A markdown link destination directly after "]".
_LINK_DESTINATION = re.compile(r"\([^\s()]*\)")

_BLANK_LINE = re.compile(r"\r?\n[ \t]*\r?\n")

_CODE_OPEN_TAG = "<code>"
_CODE_CLOSE_TAG = "</code>"

_INNER_PUNCTUATION = frozenset(",.;:?!'")


def _find_passthrough(source: str) -> dict[int, int]:
    """Map start offset -> end offset of every URL and HTML entity span."""
    spans: dict[int, int] = {}
    for m in _PASSTHROUGH.finditer(source):
        start, end = m.span()
        if m.group().startswith("&"):
            spans[start] = end
            continue
        while end > start and source[end - 1] in _URL_TRAILING:
            end -= 1
        spans[start] = end
    return spans


class Tokenizer:
    """Scan source text once, left to right, into Token objects."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._tokens: list[Token] = []
        self._leading_space = ""
        self._passthrough = _find_passthrough(source)

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        while self._pos < len(self._source):
            self._lex_one()

        if not self._tokens and self._leading_space:
            # Whitespace-only input still needs a host for its whitespace.
            self._tokens.append(
                Token(TokenKind.CONTENT, "", self._pos, raw_space_before=self._leading_space)
            )
        return self._tokens

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if 0 <= idx < len(self._source):
            return self._source[idx]
        return ""

    def _emit(self, kind: TokenKind, start: int) -> Token:
        tok = Token(kind, self._source[start : self._pos], start)
        if not self._tokens and self._leading_space:
            tok.attach_space_before(self._leading_space)
        self._tokens.append(tok)
        return tok

    def _paragraph_end(self) -> int:
        m = _BLANK_LINE.search(self._source, self._pos)
        return m.start() if m else len(self._source)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _lex_one(self) -> None:
        start = self._pos
        ch = self._peek()

        if start in self._passthrough:
            self._pos = self._passthrough[start]
            self._emit(TokenKind.RAW, start)
            return

        cls = classify(ch)

        if cls.role is Role.SPACE:
            self._lex_space()
            return

        if cls.role is Role.LINEBREAK:
            self._pos += 2 if self._source.startswith("\r\n", start) else 1
            self._emit(TokenKind.LINEBREAK, start)
            return

        if ch == "`":
            self._lex_backticks()
            return

        if self._code_tag_end(start) is not None:
            self._lex_code_tag()
            return

        if ch in "*_" or (ch == "~" and self._peek(1) == "~"):
            self._pos = self._run_end(start, ch)
            self._emit(TokenKind.MARK, start)
            return

        if cls.role is Role.PUNCTUATION:
            self._pos = self._run_end(start, ch)
            self._emit(TokenKind.PUNCTUATION, start)
            return

        if cls.role in (Role.QUOTE, Role.QUOTE_OPEN, Role.QUOTE_CLOSE):
            self._pos += 1
            self._emit(TokenKind.QUOTE, start)
            return

        if cls.role is Role.BRACKET_OPEN and start > 0 and self._source[start - 1] == "]":
            m = _LINK_DESTINATION.match(self._source, start)
            if m:
                self._pos = m.end()
                self._emit(TokenKind.RAW, start)
                return

        if cls.role in (Role.BRACKET_OPEN, Role.BRACKET_CLOSE):
            self._pos += 1
            self._emit(TokenKind.BRACKET, start)
            return

        if cls.width is Width.FULL:
            self._lex_full_run(cls.role)
            return

        self._lex_half_run()

    def _run_end(self, start: int, ch: str) -> int:
        end = start
        while end < len(self._source) and self._source[end] == ch:
            end += 1
        return end

    # ------------------------------------------------------------------
    # Whitespace
    # ------------------------------------------------------------------

    def _lex_space(self) -> None:
        start = self._pos
        while self._pos < len(self._source) and self._peek() in " \t":
            self._pos += 1
        space = self._source[start : self._pos]
        if self._tokens:
            self._tokens[-1].attach_space_after(space)
        else:
            self._leading_space = space

    # ------------------------------------------------------------------
    # Code spans
    # ------------------------------------------------------------------

    def _lex_backticks(self) -> None:
        start = self._pos
        fence_end = self._run_end(start, "`")
        fence = self._source[start:fence_end]
        closer = re.compile(rf"(?<!`){fence}(?!`)")
        m = closer.search(self._source, fence_end, self._paragraph_end())

        if m is None:
            self._pos = fence_end
            self._emit(TokenKind.SYMBOL, start)
            return

        self._pos = fence_end
        self._emit(TokenKind.CODE_FENCE, start)
        if m.start() > fence_end:
            self._pos = m.start()
            self._emit(TokenKind.CODE, fence_end)
        self._pos = m.end()
        self._emit(TokenKind.CODE_FENCE, m.start())

    def _code_tag_end(self, pos: int) -> int | None:
        """Offset of the matching </code> if an inline <code> span starts at pos."""
        if not self._source.startswith(_CODE_OPEN_TAG, pos):
            return None
        close = self._source.find(_CODE_CLOSE_TAG, pos + len(_CODE_OPEN_TAG), self._paragraph_end())
        return None if close < 0 else close

    def _lex_code_tag(self) -> None:
        start = self._pos
        close = self._code_tag_end(start)
        assert close is not None
        body_start = start + len(_CODE_OPEN_TAG)

        self._pos = body_start
        self._emit(TokenKind.CODE_FENCE, start)
        if close > body_start:
            self._pos = close
            self._emit(TokenKind.CODE, body_start)
        self._pos = close + len(_CODE_CLOSE_TAG)
        self._emit(TokenKind.CODE_FENCE, close)

    # ------------------------------------------------------------------
    # Content runs
    # ------------------------------------------------------------------

    def _lex_full_run(self, role: Role) -> None:
        """Full-width letters/digits form one CONTENT run, full-width symbols one SYMBOL run."""
        start = self._pos
        wanted_symbol = role is Role.SYMBOL
        while self._pos < len(self._source):
            cls = classify(self._peek())
            if cls.width is not Width.FULL:
                break
            is_symbol = cls.role is Role.SYMBOL
            if is_symbol != wanted_symbol or (
                not is_symbol and cls.role not in (Role.LETTER, Role.DIGIT)
            ):
                break
            self._pos += 1
        self._emit(TokenKind.SYMBOL if wanted_symbol else TokenKind.CONTENT, start)

    def _lex_half_run(self) -> None:
        """Half-width letters, digits and symbols, plus punctuation inside a word."""
        start = self._pos
        has_alnum = False
        while self._pos < len(self._source):
            pos = self._pos
            ch = self._peek()
            if pos != start and self._ends_half_run(pos, ch):
                break
            cls = classify(ch)
            if cls.role in (Role.LETTER, Role.DIGIT):
                has_alnum = True
            self._pos += 1
        self._emit(TokenKind.CONTENT if has_alnum else TokenKind.SYMBOL, start)

    def _ends_half_run(self, pos: int, ch: str) -> bool:
        if pos in self._passthrough or ch == "`" or ch == "*":
            return True
        if ch == "~" and self._peek(1) == "~":
            return True
        if self._code_tag_end(pos) is not None:
            return True
        if ch == "_" or ch in _INNER_PUNCTUATION:
            # Kept only between two half-width letters/digits: snake_case, Vue.js, what's
            return not (is_half_alnum(self._source[pos - 1]) and is_half_alnum(self._peek(1)))
        cls = classify(ch)
        if cls.width is not Width.HALF:
            return True
        return cls.role not in (Role.LETTER, Role.DIGIT, Role.SYMBOL)


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return the token list."""
    return Tokenizer(source).tokenize()
