"""
Algorithms package for genome matching.
Contains the prefix trie, fragment matching and relatedness scoring.
"""

from .prefix_index import PrefixIndex
from .match_engine import MatchEngine, extend_match
from .relatedness import RelatednessScorer

__all__ = [
    'PrefixIndex',
    'MatchEngine',
    'extend_match',
    'RelatednessScorer'
]
