"""A trie counting how many inserted words start with a given prefix."""

from __future__ import annotations


class _Branch(dict):
    """Children keyed by character, plus the number of words passing through."""

    __slots__ = ("count",)

    def __init__(self):
        super().__init__()
        self.count = 0


class PrefixCounter:
    """Counts inserted words (with repetition) by prefix."""

    def __init__(self):
        self._root = _Branch()

    def insert(self, word) -> None:
        branch = self._root
        branch.count += 1
        for ch in word:
            branch = branch.setdefault(ch, _Branch())
            branch.count += 1

    def count_prefix(self, prefix) -> int:
        """Number of inserted words that begin with prefix."""
        branch = self._root
        for ch in prefix:
            if ch not in branch:
                return 0
            branch = branch[ch]
        return branch.count

    def __len__(self):
        return self._root.count