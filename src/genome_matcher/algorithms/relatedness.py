"""
Genome relatedness scoring.
Splits a query genome into disjoint fragments, matches each one against the
library and ranks library genomes by the share of fragments they contain.
"""

import logging
from collections import Counter
from typing import List, Union

from .match_engine import MatchEngine
from ..core.exceptions import ConfigurationError, InvalidInputError
from ..core.genome import Genome
from ..core.models import GenomeMatch

logger = logging.getLogger(__name__)


class RelatednessScorer:
    """Ranks library genomes by how many of a query's fragments they match."""

    def __init__(self, engine: MatchEngine):
        self.engine = engine

    def find_related(self, query: Union[Genome, str], fragment_length: int, exact_only: bool,
                     pct_threshold: float) -> List[GenomeMatch]:
        """
        Score every library genome against ``query``.

        Returns GenomeMatch records with ``percent_match >= pct_threshold``,
        highest percentage first, ties by genome name. An empty list means no
        genome reached the threshold.
        """
        if not 0 <= pct_threshold <= 100:
            raise InvalidInputError(
                f"Match percentage threshold {pct_threshold} is outside 0-100",
                recommended_next_step="Enter a percentage between 0 and 100.")
        if fragment_length < self.engine.min_search_length:
            raise ConfigurationError(
                f"Fragment length {fragment_length} is below the library's "
                f"minimum search length {self.engine.min_search_length}")

        if not isinstance(query, Genome):
            query = Genome("query", query)

        num_fragments = query.length // fragment_length
        if num_fragments == 0:
            logger.debug(f"Query '{query.name}' is shorter than one {fragment_length} bp fragment")
            return []

        counts: Counter = Counter()
        for i in range(num_fragments):
            fragment = query.extract(i * fragment_length, fragment_length)
            matches = self.engine.find_matches(fragment, fragment_length, exact_only)
            counts.update({match.genome_name for match in matches})

        # Only genomes that matched at least one fragment are scored
        results = []
        for genome_name, count in counts.items():
            percent = 100.0 * count / num_fragments
            if percent >= pct_threshold:
                results.append(GenomeMatch(genome_name=genome_name, percent_match=percent))

        results.sort(key=lambda m: (-m.percent_match, m.genome_name))
        logger.debug(f"'{query.name}': {num_fragments} fragments, {len(results)} related genome(s)")
        return results


__all__ = ['RelatednessScorer']
