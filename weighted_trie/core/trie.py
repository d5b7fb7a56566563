# trie.py
# Weighted Trie (prefix tree) for keyword lookup.
# Each keyword carries an integer weight; prefix searches return every
# stored keyword under the prefix, ordered by weight.

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

Keyword = str
Weight = int
Entry = Union[Keyword, Tuple[Keyword, Weight]]


class InvalidKeywordError(ValueError):
    """Raised when a keyword cannot be stored (empty or not a string)."""


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def coerce(cls, value: Union["SortOrder", str]) -> "SortOrder":
        """Accept a member or its case-insensitive name ("asc", "DESC")."""
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).upper()]
        except KeyError:
            raise ValueError(f"unknown sort order: {value!r}") from None


class MismatchPolicy(str, Enum):
    """
    What find() does when a prefix character has no matching edge.
    FALLBACK: keep the last node reached and search beneath it.
    STRICT: treat the prefix as unmatched and return nothing.
    """

    FALLBACK = "fallback"
    STRICT = "strict"

    @classmethod
    def coerce(cls, value: Union["MismatchPolicy", str]) -> "MismatchPolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"unknown mismatch policy: {value!r}") from None


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode (owned by this node)
    weight: ranking weight, only read when the node is terminal
    terminal_value: full keyword ending here, None for pass-through nodes
    """

    __slots__ = ("children", "weight", "terminal_value")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.weight: Weight = 0
        self.terminal_value: Optional[Keyword] = None

    @property
    def is_terminal(self) -> bool:
        return self.terminal_value is not None

    def child(self, ch: str) -> TrieNode:
        """Return the child for `ch`, creating it on first use."""
        node = self.children.get(ch)
        if node is None:
            node = self.children[ch] = TrieNode()
        return node

    def mark_end(self, keyword: Keyword, weight: Weight) -> None:
        self.weight = weight
        self.terminal_value = keyword

    def __repr__(self) -> str:
        return (
            f"TrieNode(terminal_value={self.terminal_value!r}, "
            f"weight={self.weight}, children={len(self.children)})"
        )


class Trie:
    """
    Weighted keyword store with prefix search.

    Only keywords with a positive weight are returned by find(); keywords
    stored with weight <= 0 stay in the tree but are never searchable.
    Not thread-safe: serialise insert/find externally when sharing a trie.
    """

    def __init__(
        self,
        default_order: Union[SortOrder, str] = SortOrder.ASC,
        mismatch: Union[MismatchPolicy, str] = MismatchPolicy.FALLBACK,
        max_results: Optional[int] = None,
    ) -> None:
        self._root = TrieNode()
        self._size = 0
        self.default_order = SortOrder.coerce(default_order)
        self.mismatch = MismatchPolicy.coerce(mismatch)
        # 0 means unlimited, as in the config file
        self.max_results = _check_limit(max_results) or None

    @classmethod
    def from_config(cls, cfg) -> Trie:
        """Build a trie from a Config (see utils.config_manager)."""
        return cls(
            default_order=cfg.get("default_order"),
            mismatch=cfg.get("mismatch"),
            max_results=cfg.get("max_results"),
        )

    # insertion -----------------------------------------------------
    def insert(self, keyword: Keyword, weight: Weight = 1) -> None:
        """
        Store `keyword` with `weight`.
        Re-inserting an existing keyword overwrites its weight.
        Raises InvalidKeywordError for empty / non-string keywords.
        """
        if not isinstance(keyword, str) or not keyword:
            logger.warning("rejected keyword %r", keyword)
            raise InvalidKeywordError(f"invalid keyword: {keyword!r}")
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise TypeError(f"weight must be an int, got {type(weight).__name__}")

        node = self._root
        for ch in keyword:
            node = node.child(ch)
        if not node.is_terminal:
            self._size += 1
        node.mark_end(keyword, weight)
        logger.debug("inserted %r (weight=%d)", keyword, weight)

    def insert_many(self, entries: Iterable[Entry]) -> int:
        """Insert plain keywords (weight 1) or (keyword, weight) pairs. Returns count."""
        n = 0
        for entry in entries:
            if isinstance(entry, tuple):
                self.insert(*entry)
            else:
                self.insert(entry)
            n += 1
        return n

    # search/traversal ---------------------------------------------------------
    def find(
        self,
        prefix: str,
        order: Union[SortOrder, str, None] = None,
        limit: Optional[int] = None,
        mismatch: Union[MismatchPolicy, str, None] = None,
    ) -> List[Keyword]:
        """
        Return the searchable keywords under `prefix`, sorted by weight.

        An empty prefix, or one whose first character is unknown, yields [].
        With the FALLBACK policy a later mismatch stops the walk and the
        search continues from the last matched node ("keyZZZ" behaves like
        "key"). Ties between equal weights have no guaranteed order.
        """
        order = SortOrder.coerce(order) if order is not None else self.default_order
        policy = MismatchPolicy.coerce(mismatch) if mismatch is not None else self.mismatch
        limit = _check_limit(limit) if limit is not None else self.max_results

        start = self._start_node(prefix, policy)
        if start is None or start is self._root:
            return []

        hits = self._collect(start)
        hits.sort(key=lambda n: n.weight, reverse=order is SortOrder.DESC)
        if limit is not None:
            hits = hits[:limit]
        return [n.terminal_value for n in hits]

    def _start_node(self, prefix: str, policy: MismatchPolicy) -> Optional[TrieNode]:
        node = self._root
        for i, ch in enumerate(prefix):
            nxt = node.children.get(ch)
            if nxt is None:
                if policy is MismatchPolicy.STRICT:
                    return None
                logger.debug("prefix %r unmatched at %d, using %r", prefix, i, prefix[:i])
                break
            node = nxt
        return node

    # internal collector ---------------------------------------------------------
    @staticmethod
    def _collect(start: TrieNode) -> List[TrieNode]:
        """DFS (explicit stack) collecting positively weighted terminals."""
        out: List[TrieNode] = []
        stack = [start]
        while stack:
            node = stack.pop()
            if node.is_terminal and node.weight > 0:
                out.append(node)
            # reversed so children come off the stack in insertion order
            stack.extend(reversed(list(node.children.values())))
        return out

    # convenience -----------------------------------------------------
    def _lookup(self, keyword: str) -> Optional[TrieNode]:
        node = self._root
        for ch in keyword:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def weight_of(self, keyword: Keyword) -> Optional[Weight]:
        """Stored weight of `keyword`, or None if it was never inserted."""
        if not isinstance(keyword, str):
            return None
        node = self._lookup(keyword)
        if node is None or not node.is_terminal:
            return None
        return node.weight

    def __contains__(self, keyword: object) -> bool:
        """Membership check, independent of weight."""
        return isinstance(keyword, str) and self.weight_of(keyword) is not None

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"Trie(size={self._size}, order={self.default_order.value}, mismatch={self.mismatch.value})"


def _check_limit(limit: Optional[int]) -> Optional[int]:
    if limit is None:
        return None
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise ValueError(f"limit must be a non-negative int, got {limit!r}")
    return limit
