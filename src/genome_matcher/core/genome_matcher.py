"""
Main GenomeMatcher class: the genome library.
Owns the genomes, the prefix index built over them and the query engines.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import psutil
from tqdm import tqdm

from .exceptions import ConfigurationError
from .genome import Genome
from .models import DNAMatch, GenomeMatch, Occurrence
from ..algorithms.prefix_index import PrefixIndex
from ..algorithms.match_engine import MatchEngine
from ..algorithms.relatedness import RelatednessScorer
from ..config import DEFAULT_MIN_SEARCH_LENGTH, MAX_SEARCH_LENGTH, MIN_SEARCH_LENGTH_FLOOR

logger = logging.getLogger(__name__)


class GenomeMatcher:
    """A library of genomes indexed by fixed-length prefixes."""

    def __init__(self, min_search_length: int = DEFAULT_MIN_SEARCH_LENGTH):
        if not MIN_SEARCH_LENGTH_FLOOR <= min_search_length <= MAX_SEARCH_LENGTH:
            raise ConfigurationError(
                f"Minimum search length {min_search_length} is outside "
                f"{MIN_SEARCH_LENGTH_FLOOR}-{MAX_SEARCH_LENGTH}",
                recommended_next_step=f"Create the library with a prefix size between "
                                      f"{MIN_SEARCH_LENGTH_FLOOR} and {MAX_SEARCH_LENGTH}.")
        self._min_search_length = min_search_length
        self._genomes: List[Genome] = []
        self._index = PrefixIndex()
        self._engine = MatchEngine(self._index, self._genomes, min_search_length)
        self._scorer = RelatednessScorer(self._engine)
        logger.info(f"Created genome library (minimum search length {min_search_length})")

    @property
    def minimum_search_length(self) -> int:
        return self._min_search_length

    @property
    def genomes(self) -> Tuple[Genome, ...]:
        return tuple(self._genomes)

    def __len__(self) -> int:
        return len(self._genomes)

    def add_genome(self, genome: Genome) -> int:
        """Append ``genome`` to the library, index every prefix window and return its id."""
        genome_id = len(self._genomes)
        self._genomes.append(genome)

        k = self._min_search_length
        sequence = genome.sequence
        for offset in range(genome.length - k + 1):
            self._index.insert(sequence[offset:offset + k], Occurrence(genome_id, offset))

        logger.debug(f"Indexed genome {genome_id} '{genome.name}' ({genome.length:,} bp)")
        return genome_id

    def add_genomes(self, genomes: Iterable[Genome], show_progress: bool = False) -> List[int]:
        """Add a batch of genomes, optionally with a progress bar."""
        genomes = list(genomes)
        iterator = tqdm(genomes, desc="Indexing genomes", unit="genome") if show_progress else genomes
        ids = [self.add_genome(genome) for genome in iterator]
        logger.info(f"Indexed {len(ids)} genome(s); library now holds {len(self._genomes)}")
        return ids

    def find_genomes_with_this_dna(self, fragment: str, minimum_length: int,
                                   exact_only: bool) -> List[DNAMatch]:
        """Longest match of ``fragment`` per genome; empty list when nothing matches."""
        return self._engine.find_matches(fragment.upper(), minimum_length, exact_only)

    def find_related_genomes(self, query: Union[Genome, str], fragment_length: int,
                             exact_only: bool, match_percent_threshold: float) -> List[GenomeMatch]:
        """Library genomes sharing at least ``match_percent_threshold`` percent of query fragments."""
        return self._scorer.find_related(query, fragment_length, exact_only, match_percent_threshold)

    def rebuild(self, min_search_length: Optional[int] = None) -> 'GenomeMatcher':
        """Return a new, empty library; this instance is left as it is."""
        if min_search_length is None:
            min_search_length = self._min_search_length
        return GenomeMatcher(min_search_length)

    def get_library_stats(self) -> Dict[str, Any]:
        """Get library statistics."""
        try:
            memory_mb = psutil.Process().memory_info().rss / (1024 * 1024)
        except psutil.Error as e:
            logger.warning(f"Could not read process memory: {e}")
            memory_mb = 0.0

        return {
            'min_search_length': self._min_search_length,
            'genome_count': len(self._genomes),
            'total_bases': sum(genome.length for genome in self._genomes),
            'index_keys': self._index.key_count,
            'occurrences': len(self._index),
            'index_nodes': self._index.node_count,
            'memory_mb': memory_mb
        }


# Export class
__all__ = ['GenomeMatcher']
