"""
Custom exceptions for genome matching operations.
Provides specific error types for different failure scenarios.
"""

from typing import Optional


class GenomeMatcherError(Exception):
    """Base exception for genome library errors."""

    default_error_type = "GENOME_MATCHER_ERROR"
    default_next_step = "Check the input and try again."

    def __init__(self, message: str, error_type: Optional[str] = None,
                 recommended_next_step: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_type = error_type or self.default_error_type
        self.recommended_next_step = recommended_next_step or self.default_next_step

    def to_dict(self) -> dict:
        return {
            "type": self.error_type,
            "message": self.message,
            "recommended_next_step": self.recommended_next_step,
        }


class InvalidInputError(GenomeMatcherError):
    """Raised when a query or genome record is rejected before any work is done."""

    default_error_type = "INVALID_INPUT"
    default_next_step = "Correct the query parameters and re-run the search."


class MalformedGenomeError(InvalidInputError):
    """Raised when genome source text cannot be parsed."""

    default_error_type = "MALFORMED_GENOME_SOURCE"
    default_next_step = "Validate the genome file content: '>name' lines followed by A/C/G/T/N lines."


class ConfigurationError(InvalidInputError):
    """Raised for prefix lengths the library cannot be built or queried with."""

    default_error_type = "CONFIGURATION_ERROR"
    default_next_step = "Choose lengths at or above the library's minimum search length."


# Export exceptions
__all__ = [
    'GenomeMatcherError',
    'InvalidInputError',
    'MalformedGenomeError',
    'ConfigurationError'
]
