"""Mutable token arena shared by all rules during one formatting pass."""

from __future__ import annotations

from collections.abc import Iterator

from cjklint.tokens import CONTENT_KINDS, Group, Token, TokenKind


class TokenSequence:
    """Flat arena of tokens plus a side table of matched groups.

    Tokens are addressed by index; indexes never shift during a pass. Groups
    record the indexes of their two delimiter tokens, so nesting is answered
    by index arithmetic instead of object links.
    """

    def __init__(self, tokens: list[Token], groups: list[Group] | None = None) -> None:
        self.tokens = tokens
        self.groups: list[Group] = groups or []
        self._delimits: dict[int, Group] = {}
        self._parents: list[Group | None] = [None] * len(tokens)
        self._index_groups()

    def _index_groups(self) -> None:
        for g in self.groups:
            self._delimits[g.start] = g
            self._delimits[g.end] = g

        open_groups: list[Group] = []
        for i in range(len(self.tokens)):
            g = self._delimits.get(i)
            if g is not None and g.end == i and open_groups and open_groups[-1] is g:
                open_groups.pop()
            self._parents[i] = open_groups[-1] if open_groups else None
            if g is not None and g.start == i:
                open_groups.append(g)

        position = {id(g): n for n, g in enumerate(self.groups)}
        for g in self.groups:
            parent = self._parents[g.start]
            g.parent = position[id(parent)] if parent is not None else None

    def __len__(self) -> int:
        return len(self.tokens)

    def __getitem__(self, index: int) -> Token:
        return self.tokens[index]

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    # ------------------------------------------------------------------
    # Group queries
    # ------------------------------------------------------------------

    def group_at(self, index: int) -> Group | None:
        """The group delimited by the token at index, if it is a start or end mark."""
        return self._delimits.get(index)

    def parent_of(self, index: int) -> Group | None:
        """The innermost group strictly containing the token at index."""
        return self._parents[index]

    def is_opener(self, index: int) -> bool:
        g = self._delimits.get(index)
        return g is not None and g.start == index

    def is_closer(self, index: int) -> bool:
        g = self._delimits.get(index)
        return g is not None and g.end == index

    def depth(self, index: int) -> int:
        depth = 0
        g = self._parents[index]
        while g is not None:
            depth += 1
            g = self.groups[g.parent] if g.parent is not None else None
        return depth

    # ------------------------------------------------------------------
    # Neighbour queries
    # ------------------------------------------------------------------

    def is_visible(self, index: int) -> bool:
        """Emphasis marks wrap content without being content; removed tokens are gone."""
        tok = self.tokens[index]
        if tok.kind is TokenKind.MARK:
            return False
        return bool(tok.content) or tok.kind is TokenKind.LINEBREAK

    def visible_before(self, index: int) -> int | None:
        """Index of the nearest visible token before index, stopping at a linebreak."""
        j = index - 1
        while j >= 0:
            if self.tokens[j].kind is TokenKind.LINEBREAK:
                return None
            if self.is_visible(j):
                return j
            j -= 1
        return None

    def visible_after(self, index: int) -> int | None:
        """Index of the nearest visible token after index, stopping at a linebreak."""
        j = index + 1
        while j < len(self.tokens):
            if self.tokens[j].kind is TokenKind.LINEBREAK:
                return None
            if self.is_visible(j):
                return j
            j += 1
        return None

    def space_host(self, before: int, after: int) -> int:
        """Token whose space_after is the outside gap between two visible tokens.

        Wrapper marks may sit between them: the gap belongs outside the marks,
        i.e. after the last closing mark and before the first opening mark.
        """
        host = before
        for k in range(before + 1, after):
            if self.is_opener(k):
                break
            if self.is_closer(k):
                host = k
        return host

    def content_before(self, index: int) -> int | None:
        """Index of the nearest word token before index at any depth, within the line."""
        j = index - 1
        while j >= 0:
            tok = self.tokens[j]
            if tok.kind is TokenKind.LINEBREAK:
                return None
            if tok.kind in CONTENT_KINDS and tok.content:
                return j
            j -= 1
        return None

    def touches_linebreak(self, index: int) -> bool:
        """Spaces around a linebreak belong to the authored line layout."""
        if self.tokens[index].kind is TokenKind.LINEBREAK:
            return True
        nxt = index + 1
        return nxt < len(self.tokens) and self.tokens[nxt].kind is TokenKind.LINEBREAK

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def remove_group(self, group: Group) -> None:
        """Remove a group's marks, children and their attached spaces together.

        The built-in rules never delete tokens; this is the only removal the
        arena offers, and it always takes a whole pair.
        """
        for k in range(group.start, group.end + 1):
            tok = self.tokens[k]
            tok.content = ""
            tok.space_before = ""
            tok.space_after = ""
        for k in range(group.start, group.end + 1):
            inner = self._delimits.get(k)
            if inner is not None:
                self._delimits.pop(inner.start, None)
                self._delimits.pop(inner.end, None)
