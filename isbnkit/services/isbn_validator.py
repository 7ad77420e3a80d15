"""
ISBN validation utilities.

Candidates must be visually grouped: at least one hyphen or space has to be
present, even when the bare digit run would pass the checksum.
"""

import logging
import re

from isbnkit.services.errors import (
    ChecksumFailedError,
    EmptyInputError,
    InvalidCharactersError,
    InvalidStringLengthError,
    ISBNParseError,
    ISBNValidationError,
    NoGroupsPresentError,
)

logger = logging.getLogger(__name__)

# "Bookland" prefix used to lift ISBN-10 values into ISBN-13 form
BOOKLAND_PREFIX = '978'

DIGITS = '0123456789'
SEPARATORS = '- '

_VALID_CHARACTERS = re.compile(r'[0-9\- ]*')
_NON_DIGITS = re.compile(r'[^0-9]')
# Tab plus the Unicode space separators (category Zs); line breaks are kept
_HORIZONTAL_WHITESPACE = r'[\t \xa0\u1680\u2000-\u200a\u202f\u205f\u3000]+'
_EDGE_WHITESPACE = re.compile(rf'^{_HORIZONTAL_WHITESPACE}|{_HORIZONTAL_WHITESPACE}\Z')


def trim(value: str) -> str:
    """Strip leading and trailing spaces and tabs, keeping newlines."""
    return _EDGE_WHITESPACE.sub('', value)


class ISBNValidator:
    """Structural and checksum checks for ISBN-10 and ISBN-13 strings."""

    @staticmethod
    def normalize(isbn: str) -> str:
        """
        Reduce an ISBN string to its 13-digit checksum form.

        Args:
            isbn: ISBN string with or without separators

        Returns:
            Digits only, with the Bookland prefix prepended to 10-digit input
        """
        if not isbn:
            return ''
        digits = _NON_DIGITS.sub('', isbn)
        if len(digits) == 10:
            return BOOKLAND_PREFIX + digits
        return digits

    @staticmethod
    def checksum(digits: str) -> int:
        """
        Weighted ISBN-13 sum: weight 1 at even positions, 3 at odd ones.

        Characters that are not decimal digits count as zero.
        """
        return sum((int(char) if char in DIGITS else 0) * (1 if index % 2 == 0 else 3)
                   for index, char in enumerate(digits))

    @staticmethod
    def validate(candidate) -> str:
        """
        Validate an ISBN-10 or ISBN-13 candidate.

        The checksum is checked before the digit count, so a candidate with the
        wrong number of digits reports ChecksumFailedError unless its weighted
        sum happens to be a multiple of 10.

        Args:
            candidate: raw ISBN text

        Returns:
            The trimmed candidate, separators and digit form untouched

        Raises:
            ISBNValidationError subclass naming the first failed check
        """
        if candidate is None:
            raise EmptyInputError(candidate=candidate)

        if not any(separator in candidate for separator in SEPARATORS):
            logger.debug(f"ISBN rejected, no groups: {candidate!r}")
            raise NoGroupsPresentError(candidate=candidate)

        trimmed = trim(candidate)

        if not _VALID_CHARACTERS.fullmatch(trimmed):
            logger.debug(f"ISBN rejected, invalid characters: {candidate!r}")
            raise InvalidCharactersError(candidate=candidate)

        digits = ISBNValidator.normalize(trimmed)

        if ISBNValidator.checksum(digits) % 10 != 0:
            logger.debug(f"ISBN rejected, checksum failed: {candidate!r}")
            raise ChecksumFailedError(candidate=candidate)

        if len(digits) not in (10, 13):
            logger.debug(f"ISBN rejected, {len(digits)} digits: {candidate!r}")
            raise InvalidStringLengthError(candidate=candidate)

        return trimmed

    @staticmethod
    def is_valid(isbn) -> bool:
        """
        Check if ISBN is valid (either ISBN-10 or ISBN-13).

        Args:
            isbn: ISBN string (grouped with hyphens or spaces)

        Returns:
            True if valid, False otherwise
        """
        try:
            ISBNValidator.validate(isbn)
        except ISBNValidationError:
            return False
        return True


def validate(candidate) -> str:
    """Module-level shortcut for :meth:`ISBNValidator.validate`."""
    return ISBNValidator.validate(candidate)


def is_valid(candidate) -> bool:
    return ISBNValidator.is_valid(candidate)


def validate_isbn(isbn) -> tuple[bool, str]:
    """
    Validate ISBN and return formatted result.

    Args:
        isbn: ISBN string

    Returns:
        Tuple of (is_valid, canonical hyphenated ISBN-13)
    """
    from isbnkit.services.isbn_parser import parse

    if not isbn:
        return False, ''

    try:
        value = parse(isbn)
    except ISBNParseError:
        return False, ''

    return True, value.formatted()
