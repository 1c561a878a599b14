"""
Output formatter for genome matching.
Handles formatting and display of fragment matches and related genomes.
"""

from typing import Dict, Any, List, Sequence

from ..core.models import DNAMatch, GenomeMatch


def format_dna_match(match: DNAMatch) -> str:
    return f"  length {match.length} position {match.position} in {match.genome_name}"


def format_genome_match(match: GenomeMatch) -> str:
    return f" {match.percent_match:6.2f}%  {match.genome_name}"


def format_fragment_results(fragment: str, matches: Sequence[DNAMatch], exact_only: bool) -> List[str]:
    """
    Format the result of a fragment search.

    Args:
        fragment: The DNA fragment searched for
        matches: Matches returned by the library
        exact_only: Whether SNPs were excluded

    Returns:
        Lines ready for printing
    """
    if not matches:
        kind = "matches" if exact_only else "matches or SNiPs"
        return [f"No {kind} of {fragment} were found."]

    kind = "matches" if exact_only else "matches and/or SNiPs"
    lines = [f"{len(matches)} {kind} of {fragment} found:"]
    lines.extend(format_dna_match(m) for m in matches)
    return lines


def format_related_results(matches: Sequence[GenomeMatch], indent: str = "    ") -> List[str]:
    """Format related-genome results, one line per genome."""
    if not matches:
        return [f"{indent}No related genomes were found"]

    lines = [f"{indent}{len(matches)} related genomes were found:"]
    lines.extend(f"{indent}{format_genome_match(m)}" for m in matches)
    return lines


def format_library_summary(stats: Dict[str, Any]) -> str:
    """
    Format a summary of the genome library.

    Args:
        stats: Dictionary from GenomeMatcher.get_library_stats()

    Returns:
        Formatted summary string
    """
    summary = f"\n=== LIBRARY SUMMARY ===\n"
    summary += f"Minimum search length: {stats['min_search_length']}\n"
    summary += f"Genomes: {stats['genome_count']:,}\n"
    summary += f"Total bases: {stats['total_bases']:,}\n"
    summary += f"Indexed prefixes: {stats['occurrences']:,} ({stats['index_keys']:,} distinct)\n"
    summary += f"Trie nodes: {stats['index_nodes']:,}\n"
    summary += f"Process memory: {stats['memory_mb']:.1f} MB\n"
    return summary


def print_lines(lines: Sequence[str]) -> None:
    for line in lines:
        print(line)


# Export functions
__all__ = [
    'format_dna_match',
    'format_genome_match',
    'format_fragment_results',
    'format_related_results',
    'format_library_summary',
    'print_lines'
]
