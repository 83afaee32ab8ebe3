"""Aho-Corasick automaton counting occurrences of many patterns at once."""

from __future__ import annotations

from collections import deque


class AhoCorasick:
    """Multi-pattern matcher over arbitrary characters."""

    def __init__(self, patterns):
        self._goto = [{}]
        self._ends = []
        for pattern in patterns:
            if not pattern:
                raise ValueError("patterns must be non-empty")
            node = 0
            for ch in pattern:
                nxt = self._goto[node].get(ch)
                if nxt is None:
                    self._goto.append({})
                    nxt = len(self._goto) - 1
                    self._goto[node][ch] = nxt
                node = nxt
            self._ends.append(node)
        self._fail = [0] * len(self._goto)
        self._order = []
        queue = deque(self._goto[0].values())
        while queue:
            u = queue.popleft()
            self._order.append(u)
            for ch, v in self._goto[u].items():
                if u:
                    f = self._fail[u]
                    while f and ch not in self._goto[f]:
                        f = self._fail[f]
                    self._fail[v] = self._goto[f].get(ch, 0)
                queue.append(v)

    def count_occurrences(self, text):
        """Return, for each pattern in order, how many times it occurs in text (overlaps included)."""
        goto, fail = self._goto, self._fail
        hits = [0] * len(goto)
        state = 0
        for ch in text:
            while state and ch not in goto[state]:
                state = fail[state]
            state = goto[state].get(ch, 0)
            hits[state] += 1
        for u in reversed(self._order):
            hits[fail[u]] += hits[u]
        return [hits[end] for end in self._ends]