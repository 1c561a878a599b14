"""
Prefix trie used to locate fixed-length DNA prefixes across the genome library.
Supports exact lookup and lookup tolerating a single substituted base (SNP).
"""

from typing import Any, Dict, List, Tuple

ROOT = 0


class PrefixIndex:
    """
    Character trie stored as an arena of nodes.

    Node ``i`` is described by ``_children[i]`` (label -> child node index)
    and ``_values[i]`` (values stored under the key ending at node ``i``).
    Node 0 is the root and never holds values.
    """

    def __init__(self):
        self._children: List[Dict[str, int]] = [{}]
        self._values: List[List[Any]] = [[]]
        self._size = 0
        self._key_count = 0

    def _new_node(self) -> int:
        self._children.append({})
        self._values.append([])
        return len(self._children) - 1

    def insert(self, key: str, value: Any) -> None:
        """Add ``value`` under ``key``; values under one key keep insertion order."""
        if not key:
            return

        node = ROOT
        for char in key:
            child = self._children[node].get(char)
            if child is None:
                child = self._new_node()
                self._children[node][char] = child
            node = child

        if not self._values[node]:
            self._key_count += 1
        self._values[node].append(value)
        self._size += 1

    def find(self, key: str, exact_only: bool) -> List[Any]:
        """
        Return the values stored under ``key``.

        With ``exact_only`` False the result also holds the values of every
        stored key of the same length that differs from ``key`` in exactly
        one position. Values under ``key`` itself come first.
        """
        if not key:
            return []
        if exact_only:
            return list(self._values[self._walk(key)])

        exact: List[Any] = []
        substituted: List[Any] = []
        key_length = len(key)

        # (node, depth, substitution_used)
        stack: List[Tuple[int, int, bool]] = [(ROOT, 0, False)]
        while stack:
            node, depth, used = stack.pop()
            if depth == key_length:
                (substituted if used else exact).extend(self._values[node])
                continue

            wanted = key[depth]
            children = self._children[node]
            if used:
                child = children.get(wanted)
                if child is not None:
                    stack.append((child, depth + 1, True))
                continue

            for label, child in children.items():
                stack.append((child, depth + 1, label != wanted))

        return exact + substituted

    def _walk(self, key: str) -> int:
        """Follow ``key`` from the root; ROOT (which holds no values) when the path does not exist."""
        node = ROOT
        for char in key:
            node = self._children[node].get(char, ROOT)
            if node == ROOT:
                return ROOT
        return node

    @property
    def node_count(self) -> int:
        return len(self._children)

    @property
    def key_count(self) -> int:
        return self._key_count

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0


__all__ = ['PrefixIndex']
