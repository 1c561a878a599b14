"""
genome_matcher: index DNA genomes by fixed-length prefixes and find
fragments (exactly or with one SNP) and related genomes.
"""

from .core import (Genome, Occurrence, DNAMatch, GenomeMatch, GenomeMatcherError,
                   InvalidInputError, MalformedGenomeError, ConfigurationError)
from .core.genome_matcher import GenomeMatcher
from .io import parse_genomes, parse_genome_text, load_genome_file

__version__ = "1.0.0"

__all__ = [
    'GenomeMatcher',
    'Genome',
    'Occurrence',
    'DNAMatch',
    'GenomeMatch',
    'GenomeMatcherError',
    'InvalidInputError',
    'MalformedGenomeError',
    'ConfigurationError',
    'parse_genomes',
    'parse_genome_text',
    'load_genome_file'
]
