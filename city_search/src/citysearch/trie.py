from __future__ import annotations
from typing import Dict, List, Optional
from .models import Record

ROOT = 0


class Trie:
    """
    Character trie stored as an arena of nodes.
    Node ids index three parallel lists (children map, terminating records,
    end-of-word flag); node 0 is the root. Children are referenced by id, so
    every child has exactly one parent and there are no upward links.
    """
    def __init__(self) -> None:
        self._children: List[Dict[str, int]] = [{}]
        self._records: List[List[Record]] = [[]]
        self._terminal: List[bool] = [False]

    def __len__(self) -> int:
        """Number of nodes, root included."""
        return len(self._children)

    # -------- Build-time API --------
    def _new_node(self) -> int:
        self._children.append({})
        self._records.append([])
        self._terminal.append(False)
        return len(self._children) - 1

    def insert(self, key: str, record: Record) -> int:
        """Walk/create the path for `key` and append `record` at its end node."""
        node = ROOT
        for ch in key:
            nxt = self._children[node].get(ch)
            if nxt is None:
                nxt = self._new_node()
                self._children[node][ch] = nxt
            node = nxt
        self._terminal[node] = True
        self._records[node].append(record)
        return node

    # -------- Query API --------
    def descend(self, chars: str, start: int = ROOT) -> Optional[int]:
        """Follow `chars` from `start`; None as soon as a child is missing."""
        node = start
        for ch in chars:
            nxt = self._children[node].get(ch)
            if nxt is None:
                return None
            node = nxt
        return node

    def is_terminal(self, node: int) -> bool:
        return self._terminal[node]

    def collect(self, node: int) -> List[Record]:
        """Records stored at `node` and every node below it (iterative walk)."""
        out: List[Record] = []
        stack = [node]
        while stack:
            n = stack.pop()
            if self.is_terminal(n):
                out.extend(self._records[n])
            stack.extend(self._children[n].values())
        return out

