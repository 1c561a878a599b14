"""
Genome record: a named DNA sequence over A/C/G/T/N.
"""

from .exceptions import InvalidInputError
from ..config import VALID_BASES


class Genome:
    """Immutable named DNA sequence with bounded substring extraction."""

    __slots__ = ('_name', '_sequence')

    def __init__(self, name: str, sequence: str):
        if not name:
            raise InvalidInputError("Genome name must not be empty",
                                    recommended_next_step="Provide a non-empty genome name.")
        if not sequence:
            raise InvalidInputError(f"Genome '{name}' has an empty sequence",
                                    recommended_next_step="Provide at least one base for the genome.")
        normalized = sequence.upper()
        bad = set(normalized) - VALID_BASES
        if bad:
            raise InvalidInputError(
                f"Invalid character(s) {''.join(sorted(bad))!r} in DNA sequence of '{name}'",
                recommended_next_step="Use only A, C, G, T or N in DNA sequences.")
        self._name = name
        self._sequence = normalized

    @property
    def name(self) -> str:
        return self._name

    @property
    def sequence(self) -> str:
        return self._sequence

    @property
    def length(self) -> int:
        return len(self._sequence)

    def __len__(self) -> int:
        return len(self._sequence)

    def extract(self, position: int, length: int) -> str:
        """
        Return `length` bases starting at `position`.

        Raises InvalidInputError when the window does not fit inside the
        genome; no truncated fragment is ever returned.
        """
        if position < 0 or length < 0 or position + length > len(self._sequence):
            raise InvalidInputError(
                f"Cannot extract {length} bp at position {position} from '{self._name}' "
                f"({len(self._sequence)} bp)")
        return self._sequence[position:position + length]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Genome):
            return NotImplemented
        return self._name == other._name and self._sequence == other._sequence

    def __hash__(self) -> int:
        return hash((self._name, self._sequence))

    def __setattr__(self, key, value):
        if hasattr(self, '_sequence'):
            raise AttributeError("Genome is immutable")
        object.__setattr__(self, key, value)

    def __repr__(self) -> str:
        return f"Genome(name={self._name!r}, length={len(self._sequence)})"


__all__ = ['Genome']
