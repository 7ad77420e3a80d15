"""
Parsing of grouped ISBN text into ``ISBN`` values.
"""

import logging
import re

from isbnkit.models import ISBN
from isbnkit.services.errors import InvalidInputError
from isbnkit.services.isbn_validator import BOOKLAND_PREFIX, ISBNValidator, trim

logger = logging.getLogger(__name__)

_SEPARATOR_RUN = re.compile(r'[- ]+')


class ParseStrategy:
    """Turns ISBN-10 or ISBN-13 text into a five group ``ISBN``."""

    def parse(self, value) -> ISBN:
        """
        Parse a grouped ISBN string.

        ISBN-10 input (four groups) gains the literal ``978`` prefix group.

        Raises:
            ISBNValidationError: the text failed validation
            InvalidInputError: the text did not split into five groups
        """
        trimmed = trim(value) if value is not None else None
        valid = ISBNValidator.validate(trimmed)

        components = _SEPARATOR_RUN.split(valid)
        if len(components) == 4:
            components = [BOOKLAND_PREFIX] + components

        if len(components) != 5:
            logger.debug(f"ISBN rejected, {len(components)} groups: {value!r}")
            raise InvalidInputError(candidate=value)

        isbn = ISBN(*components)
        logger.debug(f"Parsed ISBN {isbn.formatted()} from {value!r}")
        return isbn


def parse(value) -> ISBN:
    return ParseStrategy().parse(value)
