"""
Core genome matching types.
Contains the Genome record, result records and the exception hierarchy.
The GenomeMatcher library itself lives in core.genome_matcher.
"""

from .exceptions import GenomeMatcherError, InvalidInputError, MalformedGenomeError, ConfigurationError
from .genome import Genome
from .models import Occurrence, DNAMatch, GenomeMatch

__all__ = [
    'Genome',
    'Occurrence',
    'DNAMatch',
    'GenomeMatch',
    'GenomeMatcherError',
    'InvalidInputError',
    'MalformedGenomeError',
    'ConfigurationError'
]
