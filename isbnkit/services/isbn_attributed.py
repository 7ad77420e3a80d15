"""
Span-tagged rendering of ISBN values.

Each span records which ISBN group (or separator) its text came from, so a
host can colour or otherwise style the groups independently.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from isbnkit.services.isbn_format import FormatStyle, Separator, Standard


class ISBNPart(str, Enum):
    PREFIX = 'prefix'
    REGISTRATION_GROUP = 'registration_group'
    REGISTRANT = 'registrant'
    PUBLICATION = 'publication'
    CHECK_DIGIT = 'check_digit'
    SEPARATOR = 'separator'


_FIELD_PARTS = (
    ISBNPart.PREFIX,
    ISBNPart.REGISTRATION_GROUP,
    ISBNPart.REGISTRANT,
    ISBNPart.PUBLICATION,
    ISBNPart.CHECK_DIGIT,
)


@dataclass(frozen=True)
class Span:
    text: str
    part: ISBNPart

    def to_dict(self):
        return {'text': self.text, 'part': self.part.value}


@dataclass(frozen=True)
class AttributedFormatStyle:
    standard: Standard = Standard.ISBN13
    separator: Separator = Separator.HYPHEN

    def format(self, value) -> List[Span]:
        spans = [Span(text, part) for text, part in zip(value.fields(), _FIELD_PARTS)]
        if self.standard == Standard.ISBN10:
            spans = spans[1:]

        if self.separator == Separator.NONE:
            return spans

        separator = Span(self.separator.value, ISBNPart.SEPARATOR)
        tagged = [spans[0]]
        for span in spans[1:]:
            tagged.append(separator)
            tagged.append(span)
        return tagged


def format_tagged(value, style=None) -> List[Span]:
    """
    Render ``value`` as a list of spans.

    ``style`` may be a ``FormatStyle`` or an ``AttributedFormatStyle``; the
    default is hyphenated ISBN-13.
    """
    if style is None:
        style = AttributedFormatStyle()
    elif isinstance(style, FormatStyle):
        style = style.attributed
    return style.format(value)


def join_spans(spans) -> str:
    return ''.join(span.text for span in spans)
