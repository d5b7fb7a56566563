"""
weighted_trie.core

Contains:
 - the weighted prefix tree (Trie, TrieNode) and its search options
 - a restartable stepped date range (DateProgression)
"""

from .trie import InvalidKeywordError, MismatchPolicy, SortOrder, Trie, TrieNode
from .date_progression import DateProgression, date_range

__all__ = [
    "Trie",
    "TrieNode",
    "SortOrder",
    "MismatchPolicy",
    "InvalidKeywordError",
    "DateProgression",
    "date_range",
]
