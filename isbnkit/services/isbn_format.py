"""
Plain text rendering of ISBN values.

A ``FormatStyle`` is an immutable (standard, separator) pair. Customisation
returns a new style; nothing is mutated.
"""

from dataclasses import dataclass, replace
from enum import Enum


class Standard(str, Enum):
    ISBN13 = 'isbn13'
    ISBN10 = 'isbn10'


class Separator(str, Enum):
    HYPHEN = '-'
    SPACE = ' '
    NONE = ''

    @classmethod
    def from_name(cls, name):
        """Look a separator up by name (``hyphen``) or by literal (``-``)."""
        if isinstance(name, cls):
            return name
        try:
            return cls[name.upper()]
        except KeyError:
            return cls(name)


def _selected_parts(value, standard):
    parts = list(value.fields())
    if standard == Standard.ISBN10:
        # ISBN-10 never carries the Bookland prefix
        return parts[1:]
    return parts


@dataclass(frozen=True)
class FormatStyle:
    standard: Standard = Standard.ISBN13
    separator: Separator = Separator.HYPHEN

    def with_standard(self, standard):
        """Return a copy of this style using ``standard``."""
        return replace(self, standard=Standard(standard))

    def with_separator(self, separator):
        """Return a copy of this style using ``separator``."""
        return replace(self, separator=Separator.from_name(separator))

    def format(self, value) -> str:
        """Join the ISBN groups with the separator literal. Never validates."""
        return self.separator.value.join(_selected_parts(value, self.standard))

    @property
    def attributed(self):
        from isbnkit.services.isbn_attributed import AttributedFormatStyle
        return AttributedFormatStyle(self.standard, self.separator)

    @property
    def parse_strategy(self):
        from isbnkit.services.isbn_parser import ParseStrategy
        return ParseStrategy()


ISBN13_STYLE = FormatStyle(Standard.ISBN13, Separator.HYPHEN)
ISBN10_STYLE = FormatStyle(Standard.ISBN10, Separator.HYPHEN)


def isbn_style(standard=Standard.ISBN13, separator=Separator.HYPHEN):
    return FormatStyle(Standard(standard), Separator.from_name(separator))


def format_isbn(value, style=None) -> str:
    """Render ``value`` as text, hyphenated ISBN-13 unless ``style`` says otherwise."""
    return (style or ISBN13_STYLE).format(value)
