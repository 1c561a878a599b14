"""
Configuration constants for the genome matcher.
Values can be overridden through GENOME_MATCHER_* environment variables.
"""

import os


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# Prefix (trie key) length limits
MIN_SEARCH_LENGTH_FLOOR = 3
MAX_SEARCH_LENGTH = 100
DEFAULT_MIN_SEARCH_LENGTH = _env_int('GENOME_MATCHER_MIN_SEARCH_LENGTH', 10)

# Related-genome searches split the query into fragments of this many prefixes
RELATED_FRAGMENT_FACTOR = 2

VALID_BASES = frozenset('ACGTN')

# Data files
DATA_DIR = os.environ.get('GENOME_MATCHER_DATA_DIR', os.path.join(os.getcwd(), 'data'))
PROVIDED_FILES = (
    'Ferroplasma_acidarmanus.txt',
    'Halobacterium_jilantaiense.txt',
    'Halorubrum_chaoviator.txt',
    'Halorubrum_californiense.txt',
    'Halorientalis_regularis.txt',
    'Halorientalis_persicus.txt',
    'Ferroglobus_placidus.txt',
    'Desulfurococcus_mucosus.txt',
)

# Logging
LOG_DIR = os.environ.get('GENOME_MATCHER_LOG_DIR', 'logs')
LOG_LEVEL = os.environ.get('GENOME_MATCHER_LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Progress bars while indexing batches of genomes
SHOW_PROGRESS = _env_flag('GENOME_MATCHER_PROGRESS', True)


__all__ = [
    'MIN_SEARCH_LENGTH_FLOOR',
    'MAX_SEARCH_LENGTH',
    'DEFAULT_MIN_SEARCH_LENGTH',
    'RELATED_FRAGMENT_FACTOR',
    'VALID_BASES',
    'DATA_DIR',
    'PROVIDED_FILES',
    'LOG_DIR',
    'LOG_LEVEL',
    'LOG_FORMAT',
    'SHOW_PROGRESS'
]
