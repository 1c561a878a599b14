"""
Interface package for genome matching.
Contains the interactive console and result formatting.
"""

from .menu import run_menu, show_menu
from .output_formatter import (format_dna_match, format_genome_match, format_fragment_results,
                               format_related_results, format_library_summary)

__all__ = [
    'run_menu',
    'show_menu',
    'format_dna_match',
    'format_genome_match',
    'format_fragment_results',
    'format_related_results',
    'format_library_summary'
]
