"""
ISBN codec services.

Validation, parsing and rendering (plain text and span-tagged) of ISBN values.
"""

from isbnkit.services.errors import (
    ErrorReason,
    ISBNError,
    ISBNParseError,
    ISBNValidationError,
    EmptyInputError,
    NoGroupsPresentError,
    InvalidCharactersError,
    InvalidStringLengthError,
    ChecksumFailedError,
    InvalidInputError,
)
from isbnkit.services.isbn_validator import ISBNValidator, validate, is_valid, validate_isbn
from isbnkit.services.isbn_format import (
    FormatStyle, Standard, Separator, ISBN13_STYLE, ISBN10_STYLE, isbn_style, format_isbn
)
from isbnkit.services.isbn_attributed import (
    AttributedFormatStyle, ISBNPart, Span, format_tagged, join_spans
)
from isbnkit.services.isbn_parser import ParseStrategy, parse

__all__ = [
    'ErrorReason',
    'ISBNError',
    'ISBNParseError',
    'ISBNValidationError',
    'EmptyInputError',
    'NoGroupsPresentError',
    'InvalidCharactersError',
    'InvalidStringLengthError',
    'ChecksumFailedError',
    'InvalidInputError',
    'ISBNValidator',
    'validate',
    'is_valid',
    'validate_isbn',
    'FormatStyle',
    'Standard',
    'Separator',
    'ISBN13_STYLE',
    'ISBN10_STYLE',
    'isbn_style',
    'format_isbn',
    'AttributedFormatStyle',
    'ISBNPart',
    'Span',
    'format_tagged',
    'join_spans',
    'ParseStrategy',
    'parse',
]
