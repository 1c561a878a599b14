"""
Fragment matching against the genome library.
Extends prefix hits from the PrefixIndex into full fragment comparisons,
allowing at most one substituted base when SNPs are accepted.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from .prefix_index import PrefixIndex
from ..core.exceptions import ConfigurationError, InvalidInputError
from ..core.genome import Genome
from ..core.models import DNAMatch, Occurrence

logger = logging.getLogger(__name__)


def extend_match(fragment: str, window: str, exact_only: bool) -> int:
    """
    Length of the match between ``fragment`` and ``window`` read from position 0.

    A single mismatch is absorbed (and counted in the length) when
    ``exact_only`` is False; the next mismatch ends the match.
    """
    mismatch_allowed = not exact_only
    length = 0
    for expected, found in zip(fragment, window):
        if expected != found:
            if not mismatch_allowed:
                break
            mismatch_allowed = False
        length += 1
    return length


class MatchEngine:
    """Finds, per genome, the longest match of a DNA fragment."""

    def __init__(self, index: PrefixIndex, genomes: Sequence[Genome], min_search_length: int):
        self.index = index
        self.genomes = genomes
        self.min_search_length = min_search_length

    def _validate(self, fragment: str, minimum_length: int) -> None:
        if minimum_length < self.min_search_length:
            raise ConfigurationError(
                f"Minimum match length {minimum_length} is below the library's "
                f"minimum search length {self.min_search_length}")
        if len(fragment) < minimum_length:
            raise InvalidInputError(
                f"DNA fragment length {len(fragment)} is shorter than the minimum "
                f"match length {minimum_length}",
                recommended_next_step="Use a minimum match length no greater than the fragment length.")

    def find_matches(self, fragment: str, minimum_length: int, exact_only: bool) -> List[DNAMatch]:
        """
        Find every genome holding ``fragment`` (or a one-SNP variant of it when
        ``exact_only`` is False) over at least ``minimum_length`` bases.

        Returns one DNAMatch per genome, in library order; an empty list means
        no genome matched.
        """
        self._validate(fragment, minimum_length)

        candidates: List[Occurrence] = self.index.find(fragment[:self.min_search_length], exact_only)
        if not candidates:
            logger.debug(f"No prefix hits for fragment of {len(fragment)} bp")
            return []

        # genome id -> (length, offset) of the best occurrence so far
        best: Dict[int, Tuple[int, int]] = {}
        fragment_length = len(fragment)
        for genome_id, offset in candidates:
            genome = self.genomes[genome_id]
            search_length = min(fragment_length, genome.length - offset)
            window = genome.extract(offset, search_length)
            cur_length = extend_match(fragment, window, exact_only)

            current = best.get(genome_id)
            if (current is None or cur_length > current[0]
                    or (cur_length == current[0] and offset < current[1])):
                best[genome_id] = (cur_length, offset)

        matches = [
            DNAMatch(genome_name=self.genomes[genome_id].name, position=offset, length=length)
            for genome_id, (length, offset) in sorted(best.items())
            if length >= minimum_length
        ]
        logger.debug(f"{len(candidates)} prefix hits, {len(matches)} genome(s) matched")
        return matches


__all__ = ['MatchEngine', 'extend_match']
