#!/usr/bin/env python3
"""
Command line entry point for the genome matcher.

- Build a library from one or more genome files (or the provided data set)
- Search a DNA fragment exactly or allowing one SNP
- Find library genomes related to each genome of a query file or a typed sequence
- Or drop into the interactive console with --interactive
"""

import argparse
import logging
import signal
import sys
from typing import Iterable, List, Optional

from .config import (DEFAULT_MIN_SEARCH_LENGTH, LOG_DIR, LOG_LEVEL, RELATED_FRAGMENT_FACTOR,
                     SHOW_PROGRESS, DATA_DIR)
from .core.exceptions import GenomeMatcherError
from .core.genome import Genome
from .core.genome_matcher import GenomeMatcher
from .interface.menu import run_menu
from .interface.output_formatter import (format_fragment_results, format_library_summary,
                                         format_related_results, print_lines)
from .io.file_loader import load_genome_file, load_genome_files, load_provided_files
from .utils import _handle_sigint, setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find DNA fragments (exactly or with one SNP) and related genomes in a genome library.")
    parser.add_argument("--min-search-length", type=int, default=DEFAULT_MIN_SEARCH_LENGTH,
                        help=f"Prefix length used to index the library (default {DEFAULT_MIN_SEARCH_LENGTH})")
    parser.add_argument("--library", nargs="+", default=[], metavar="FILE",
                        help="Genome files to load into the library")
    parser.add_argument("--provided", action="store_true",
                        help="Also load the provided data files from the data directory")
    parser.add_argument("--data-dir", type=str, default=DATA_DIR,
                        help="Directory holding the provided data files")
    parser.add_argument("--find", type=str, metavar="FRAGMENT",
                        help="DNA fragment to search for")
    parser.add_argument("--min-length", type=int, default=None,
                        help="Minimum match length for --find (default: fragment length)")
    parser.add_argument("--snp", action="store_true",
                        help="Allow one substituted base (SNP) in matches")
    parser.add_argument("--related", type=str, metavar="FILE",
                        help="Genome file whose genomes are scored for related library genomes")
    parser.add_argument("--sequence", type=str,
                        help="DNA sequence to score for related library genomes")
    parser.add_argument("--threshold", type=float, default=0.0,
                        help="Match percentage threshold for related genomes (0-100)")
    parser.add_argument("--fragment-length", type=int, default=None,
                        help=f"Fragment length for related genomes "
                             f"(default {RELATED_FRAGMENT_FACTOR} x minimum search length)")
    parser.add_argument("--summary", action="store_true", help="Print a library summary")
    parser.add_argument("--interactive", action="store_true",
                        help="Start the interactive console after loading")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        default=LOG_LEVEL, help=f"Logging level (default: {LOG_LEVEL})")
    parser.add_argument("--log-dir", type=str, default=LOG_DIR,
                        help="Directory for log files ('' disables file logging)")
    parser.add_argument("--no-progress", action="store_true", help="Disable progress bars")
    return parser.parse_args(list(argv))


def build_library(args: argparse.Namespace, show_progress: bool) -> GenomeMatcher:
    library = GenomeMatcher(args.min_search_length)
    if args.library:
        library.add_genomes(load_genome_files(args.library), show_progress=show_progress)
    if args.provided:
        for filename, genomes in load_provided_files(args.data_dir).items():
            library.add_genomes(genomes, show_progress=show_progress)
            print(f"Loaded {len(genomes)} genomes from {filename}")
    return library


def run_find(library: GenomeMatcher, fragment: str, min_length: Optional[int], exact_only: bool) -> None:
    fragment = fragment.strip().upper()
    if min_length is None:
        min_length = len(fragment)
    matches = library.find_genomes_with_this_dna(fragment, min_length, exact_only)
    print_lines(format_fragment_results(fragment, matches, exact_only))


def run_related(library: GenomeMatcher, queries: List[Genome], fragment_length: Optional[int],
                exact_only: bool, threshold: float) -> None:
    if fragment_length is None:
        fragment_length = RELATED_FRAGMENT_FACTOR * library.minimum_search_length
    for query in queries:
        matches = library.find_related_genomes(query, fragment_length, exact_only, threshold)
        print(f"  For {query.name}")
        print_lines(format_related_results(matches))


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(log_dir=args.log_dir or None, log_level=args.log_level)

    show_progress = SHOW_PROGRESS and not args.no_progress
    exact_only = not args.snp

    try:
        library = build_library(args, show_progress)

        if args.summary:
            print(format_library_summary(library.get_library_stats()))

        if args.find:
            run_find(library, args.find, args.min_length, exact_only)

        queries: List[Genome] = []
        if args.related:
            queries.extend(load_genome_file(args.related))
        if args.sequence:
            queries.append(Genome("sequence", args.sequence.strip()))
        if queries:
            run_related(library, queries, args.fragment_length, exact_only, args.threshold)

        if args.interactive:
            signal.signal(signal.SIGINT, _handle_sigint)
            run_menu(library, data_dir=args.data_dir, show_progress=show_progress)

        return 0

    except GenomeMatcherError as e:
        logger.error(f"{e.error_type}: {e.message}")
        print(f"Error: {e.message}")
        print(f"Recommended next step: {e.recommended_next_step}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
