"""
File loader for genome libraries.
Handles loading of genome source files into Genome records.
"""

import logging
import os
from typing import Dict, Iterable, List, Optional, Sequence

from .sequence_parser import parse_genomes
from ..config import DATA_DIR, PROVIDED_FILES
from ..core.exceptions import MalformedGenomeError
from ..core.genome import Genome

logger = logging.getLogger(__name__)


def load_genome_file(path: str) -> List[Genome]:
    """
    Load every genome record from a genome source file.

    Args:
        path: Path to the genome file

    Returns:
        List of Genome records

    Raises:
        MalformedGenomeError: the file cannot be opened or is not properly formatted
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            genomes = parse_genomes(f, source=os.path.basename(path))
    except FileNotFoundError:
        raise MalformedGenomeError(f"Cannot open file: {path}",
                                   error_type="FILE_NOT_FOUND",
                                   recommended_next_step="Check the file path and try again.")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedGenomeError(f"Cannot read file {path}: {e}",
                                   error_type="FILE_UNREADABLE",
                                   recommended_next_step="Check file permissions and encoding.")

    logger.info(f"Loaded {len(genomes)} genome(s) from {path}")
    return genomes


def load_genome_files(paths: Iterable[str]) -> List[Genome]:
    """Load several genome files; the first failure aborts the whole load."""
    genomes: List[Genome] = []
    for path in paths:
        genomes.extend(load_genome_file(path))
    return genomes


def load_provided_files(data_dir: Optional[str] = None,
                        filenames: Sequence[str] = PROVIDED_FILES) -> Dict[str, List[Genome]]:
    """
    Load the provided data set, skipping files that fail.

    Returns:
        Mapping of file name to the genomes loaded from it
    """
    data_dir = data_dir or DATA_DIR
    loaded: Dict[str, List[Genome]] = {}
    for filename in filenames:
        path = os.path.join(data_dir, filename)
        try:
            loaded[filename] = load_genome_file(path)
        except MalformedGenomeError as e:
            logger.warning(f"Skipping {filename}: {e.message}")
    return loaded


# Export functions
__all__ = [
    'load_genome_file',
    'load_genome_files',
    'load_provided_files'
]
