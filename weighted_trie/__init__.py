# weighted_trie/__init__.py
# public API: weighted prefix tree + date progression

from .core import (
    DateProgression,
    InvalidKeywordError,
    MismatchPolicy,
    SortOrder,
    Trie,
    TrieNode,
    date_range,
)

__all__ = [
    "Trie",
    "TrieNode",
    "SortOrder",
    "MismatchPolicy",
    "InvalidKeywordError",
    "DateProgression",
    "date_range",
]

__version__ = "0.1.0"
