"""
IO package for genome matching.
Contains genome source parsing and file loading.
"""

from .sequence_parser import parse_genomes, parse_genome_text
from .file_loader import load_genome_file, load_genome_files, load_provided_files

__all__ = [
    'parse_genomes',
    'parse_genome_text',
    'load_genome_file',
    'load_genome_files',
    'load_provided_files'
]
