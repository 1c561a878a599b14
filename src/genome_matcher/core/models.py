"""
Result records produced by genome matching.
"""

from dataclasses import dataclass
from typing import NamedTuple


class Occurrence(NamedTuple):
    """Position of an indexed prefix: (library genome id, offset in that genome)."""
    genome_id: int
    offset: int


@dataclass(frozen=True)
class DNAMatch:
    """Longest verified match of a fragment inside one genome."""
    genome_name: str
    position: int
    length: int


@dataclass(frozen=True)
class GenomeMatch:
    """Share of a query genome's fragments found in one library genome."""
    genome_name: str
    percent_match: float


__all__ = ['Occurrence', 'DNAMatch', 'GenomeMatch']
