"""
ISBN error taxonomy.

Every failure carries a machine readable ``reason`` so callers (forms, the
JSON API, the CLI) can map it to a translated message or an error code.
"""

from enum import Enum


class ErrorReason(str, Enum):
    EMPTY_INPUT = 'empty_input'
    NO_GROUPS_PRESENT = 'no_groups_present'
    INVALID_CHARACTERS = 'invalid_characters'
    INVALID_STRING_LENGTH = 'invalid_string_length'
    CHECKSUM_FAILED = 'checksum_failed'
    INVALID_INPUT = 'invalid_input'


class ISBNError(ValueError):
    """Base class for all ISBN codec errors."""

    reason = None
    default_message = 'Invalid ISBN.'

    def __init__(self, message=None, candidate=None):
        super().__init__(message or self.default_message)
        self.candidate = candidate


class ISBNParseError(ISBNError):
    """Raised when text cannot be turned into an ISBN value."""


class InvalidInputError(ISBNParseError):
    reason = ErrorReason.INVALID_INPUT
    default_message = 'ISBN must split into exactly five groups.'


class ISBNValidationError(ISBNParseError):
    """Raised by the validator; also the parser's ``Invalid(reason)`` case."""


class EmptyInputError(ISBNValidationError):
    reason = ErrorReason.EMPTY_INPUT
    default_message = 'No ISBN was supplied.'


class NoGroupsPresentError(ISBNValidationError):
    reason = ErrorReason.NO_GROUPS_PRESENT
    default_message = 'ISBN groups must be separated by hyphens or spaces.'


class InvalidCharactersError(ISBNValidationError):
    reason = ErrorReason.INVALID_CHARACTERS
    default_message = 'ISBN may only contain digits, hyphens and spaces.'


class InvalidStringLengthError(ISBNValidationError):
    reason = ErrorReason.INVALID_STRING_LENGTH
    default_message = 'ISBN must contain 10 or 13 digits.'


class ChecksumFailedError(ISBNValidationError):
    reason = ErrorReason.CHECKSUM_FAILED
    default_message = 'ISBN check digit does not match.'
