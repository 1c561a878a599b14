"""
Interactive console for the genome library.
Single-letter commands create and fill a library and run fragment and
related-genome searches against it.
"""

import logging
import os
from typing import Optional, Tuple

from .output_formatter import (format_fragment_results, format_library_summary,
                               format_related_results, print_lines)
from ..config import (DATA_DIR, DEFAULT_MIN_SEARCH_LENGTH, MAX_SEARCH_LENGTH,
                      MIN_SEARCH_LENGTH_FLOOR, PROVIDED_FILES, RELATED_FRAGMENT_FACTOR)
from ..core.exceptions import GenomeMatcherError
from ..core.genome import Genome
from ..core.genome_matcher import GenomeMatcher
from ..io.file_loader import load_genome_file

logger = logging.getLogger(__name__)

MENU = """        Commands:
         c - create new genome library      s - find matching SNiPs
         a - add one genome manually        r - find related genomes (manual)
         l - load one data file             f - find related genomes (file)
         d - load all provided data files   i - show library summary
         e - find matches exactly           ? - show this menu
                                            q - quit"""


def show_menu() -> None:
    print(MENU)


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _parse_float(text: str) -> Optional[float]:
    try:
        return float(text.strip())
    except ValueError:
        return None


def create_new_library(library: GenomeMatcher) -> GenomeMatcher:
    length = _parse_int(input(f"Enter minimum search length ({MIN_SEARCH_LENGTH_FLOOR}-{MAX_SEARCH_LENGTH}): "))
    if length is None or not MIN_SEARCH_LENGTH_FLOOR <= length <= MAX_SEARCH_LENGTH:
        print("Invalid prefix size.")
        return library
    return library.rebuild(length)


def add_one_genome_manually(library: GenomeMatcher) -> None:
    name = input("Enter name: ").strip()
    if not name:
        print("Name must not be empty.")
        return
    sequence = input("Enter DNA sequence: ").strip()
    if not sequence:
        print("Sequence must not be empty.")
        return
    library.add_genome(Genome(name, sequence))


def load_one_data_file(library: GenomeMatcher, show_progress: bool = False) -> None:
    filename = input("Enter file name: ").strip()
    if not filename:
        print("No file name entered.")
        return
    genomes = load_genome_file(filename)
    library.add_genomes(genomes, show_progress=show_progress)
    print(f"Successfully loaded {len(genomes)} genomes.")


def load_provided_data_files(library: GenomeMatcher, data_dir: str = DATA_DIR,
                             show_progress: bool = False) -> None:
    for filename in PROVIDED_FILES:
        try:
            genomes = load_genome_file(os.path.join(data_dir, filename))
        except GenomeMatcherError as e:
            print(e.message)
            continue
        library.add_genomes(genomes, show_progress=show_progress)
        print(f"Loaded {len(genomes)} genomes from {filename}")


def find_genome(library: GenomeMatcher, exact_only: bool) -> None:
    if exact_only:
        prompt = "Enter DNA sequence for which to find exact matches: "
    else:
        prompt = "Enter DNA sequence for which to find exact matches and SNiPs: "
    sequence = input(prompt).strip().upper()
    min_length = library.minimum_search_length
    if len(sequence) < min_length:
        print(f"DNA sequence length must be at least {min_length}")
        return

    min_match_length = _parse_int(input("Enter minimum sequence match length: "))
    if min_match_length is None or min_match_length > len(sequence):
        print("Minimum match length must be at most the sequence length.")
        return

    matches = library.find_genomes_with_this_dna(sequence, min_match_length, exact_only)
    print_lines(format_fragment_results(sequence, matches, exact_only))


def get_find_related_params() -> Optional[Tuple[float, bool]]:
    pct = _parse_float(input("Enter match percentage threshold (0-100): "))
    if pct is None or not 0 <= pct <= 100:
        print("Percentage must be in the range 0 to 100.")
        return None
    answer = input("Require (e)xact match or allow (S)NiPs (e or s): ").strip().lower()
    if not answer or answer[0] not in ('e', 's'):
        print("Response must be e or s.")
        return None
    return pct, answer[0] == 'e'


def find_related_genomes_manual(library: GenomeMatcher) -> None:
    sequence = input("Enter DNA sequence: ").strip()
    min_length = library.minimum_search_length
    if len(sequence) < min_length:
        print(f"DNA sequence length must be at least {min_length}")
        return
    params = get_find_related_params()
    if params is None:
        return
    pct_threshold, exact_only = params

    matches = library.find_related_genomes(Genome("x", sequence), RELATED_FRAGMENT_FACTOR * min_length,
                                           exact_only, pct_threshold)
    print_lines(format_related_results(matches))


def find_related_genomes_from_file(library: GenomeMatcher) -> None:
    filename = input("Enter name of file containing one or more genomes to find matches for: ").strip()
    if not filename:
        print("No file name entered.")
        return
    genomes = load_genome_file(filename)
    params = get_find_related_params()
    if params is None:
        return
    pct_threshold, exact_only = params

    fragment_length = RELATED_FRAGMENT_FACTOR * library.minimum_search_length
    for genome in genomes:
        matches = library.find_related_genomes(genome, fragment_length, exact_only, pct_threshold)
        print(f"  For {genome.name}")
        print_lines(format_related_results(matches, indent="     "))


def run_menu(library: Optional[GenomeMatcher] = None, data_dir: str = DATA_DIR,
             show_progress: bool = False) -> GenomeMatcher:
    """
    Run the command loop until 'q' or end of input.

    Returns:
        The library as it stands when the loop ends
    """
    if library is None:
        library = GenomeMatcher(DEFAULT_MIN_SEARCH_LENGTH)

    print("Welcome to the genome matcher console!")
    print(f"The genome library is initially empty, with a minimum search length of "
          f"{library.minimum_search_length}")
    show_menu()

    while True:
        try:
            command = input("Enter command: ").strip()
        except EOFError:
            break
        if not command:
            continue

        choice = command[0].lower()
        try:
            if choice == 'q':
                break
            elif choice == '?':
                show_menu()
            elif choice == 'c':
                library = create_new_library(library)
            elif choice == 'a':
                add_one_genome_manually(library)
            elif choice == 'l':
                load_one_data_file(library, show_progress)
            elif choice == 'd':
                load_provided_data_files(library, data_dir, show_progress)
            elif choice == 'e':
                find_genome(library, True)
            elif choice == 's':
                find_genome(library, False)
            elif choice == 'r':
                find_related_genomes_manual(library)
            elif choice == 'f':
                find_related_genomes_from_file(library)
            elif choice == 'i':
                print(format_library_summary(library.get_library_stats()))
            else:
                print(f"Invalid command {command}")
        except GenomeMatcherError as e:
            logger.error(f"Command '{choice}' failed: {e.message}")
            print(f"Error: {e.message}")
            print(f"Recommended next step: {e.recommended_next_step}")

    return library


__all__ = [
    'run_menu',
    'show_menu'
]
