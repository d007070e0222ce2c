"""Incremental construction of a KMP partial-match table."""

from __future__ import annotations


class KMPBuildError(ValueError):
    """Raised when the table cannot be extended any further."""


class KMPTable:
    """Partial-match table for a pattern, which can be built in steps."""

    def __init__(self, pattern: str) -> None:
        self._pattern = pattern
        self._next: list[int] = [-1, 0]
        self._i = 0
        self._j = 1
        self._matching = False
        self._match_count = 0

    @property
    def pattern(self) -> str:
        """The pattern the table is built for."""
        return self._pattern

    @property
    def next(self) -> list[int]:
        """The table built so far."""
        return list(self._next)

    def continue_build(self, length: int | None = None) -> None:
        """Extend the table up to length characters (the whole pattern by default)."""
        self._build(len(self._pattern) if length is None else length)

    def _build(self, length: int) -> None:
        s = self._pattern
        if self._j >= len(s):
            raise KMPBuildError("already reach string maxlen")

        while self._j < length:
            while not self._matching and s[self._i] != s[self._j]:
                if self._j + 1 >= length:
                    return
                self._j += 1
                self._next.append(0)

            self._matching = True
            while self._matching and s[self._i] == s[self._j]:
                if self._j + 1 >= length:
                    return
                self._i += 1
                self._j += 1
                self._match_count += 1
                self._next.append(self._match_count)

            self._match_count = 0
            self._matching = False


def build_kmp(pattern: str, length: int | None = None) -> KMPTable:
    """Build a table for pattern, up to length characters if given."""
    table = KMPTable(pattern)
    table.continue_build(length)
    return table