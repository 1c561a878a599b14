"""
Sequence parser for genome sources.
Parses the multi-record '>name' text format into Genome records.
"""

import logging
from typing import Iterable, List, Optional

from ..config import VALID_BASES
from ..core.exceptions import MalformedGenomeError
from ..core.genome import Genome

logger = logging.getLogger(__name__)


def parse_genomes(lines: Iterable[str], source: str = "<input>") -> List[Genome]:
    """
    Parse genome records from an iterable of text lines.

    Args:
        lines: Lines of a genome source (newlines may be present)
        source: Name of the source used in error messages

    Returns:
        List of Genome records in source order

    Raises:
        MalformedGenomeError: the source is empty, does not start with a
        '>' name line (a blank first line included), has an empty name, contains a character outside
        A/C/G/T/N, or holds a record without sequence lines. No records are
        returned in that case.
    """
    genomes: List[Genome] = []
    current_name: Optional[str] = None
    current_sequence: List[str] = []

    def finish_record(line_num: int) -> None:
        if not current_sequence:
            raise MalformedGenomeError(
                f"{source}: genome '{current_name}' has no sequence lines (line {line_num})")
        genomes.append(Genome(current_name, ''.join(current_sequence)))

    line_num = 0
    for line_num, raw_line in enumerate(lines, 1):
        line = raw_line.strip()
        if not line:
            if line_num == 1:
                raise MalformedGenomeError(
                    f"{source}: expected a '>' name line first, found a blank line (line 1)")
            continue

        if line.startswith('>'):
            if current_name is not None:
                finish_record(line_num)
            name = line[1:].strip()
            if not name:
                raise MalformedGenomeError(f"{source}: name line without a name (line {line_num})")
            current_name = name
            current_sequence = []
            continue

        if current_name is None:
            raise MalformedGenomeError(
                f"{source}: expected a '>' name line first, found {line[:20]!r} (line {line_num})")

        bases = line.upper()
        bad = set(bases) - VALID_BASES
        if bad:
            raise MalformedGenomeError(
                f"{source}: invalid character(s) {''.join(sorted(bad))!r} in genome "
                f"'{current_name}' (line {line_num})")
        current_sequence.append(bases)

    if current_name is None:
        raise MalformedGenomeError(f"{source}: no genomes found (empty source)")
    finish_record(line_num)

    logger.debug(f"Parsed {len(genomes)} genome(s) from {source}")
    return genomes


def parse_genome_text(text: str, source: str = "<text>") -> List[Genome]:
    """Parse genome records from a string."""
    return parse_genomes(text.splitlines(), source)


# Export functions
__all__ = [
    'parse_genomes',
    'parse_genome_text'
]
