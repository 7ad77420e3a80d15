from dataclasses import dataclass


@dataclass(frozen=True)
class ISBN:
    """
    A 13 digit International Standard Book Number split into its five groups.

    Every field is kept as text; leading zeros and group widths are significant.
    """

    prefix: str
    registration_group: str
    registrant: str
    publication: str
    check_digit: str

    @classmethod
    def from_string(cls, value):
        """Parse grouped ISBN-10 or ISBN-13 text into an ISBN."""
        from isbnkit.services.isbn_parser import parse
        return parse(value)

    def fields(self):
        return (
            self.prefix,
            self.registration_group,
            self.registrant,
            self.publication,
            self.check_digit,
        )

    @property
    def digits(self):
        return ''.join(self.fields())

    def formatted(self, style=None):
        """
        Render this ISBN.

        Args:
            style: any object with a ``format(isbn)`` method, defaults to
                hyphenated ISBN-13

        Returns:
            Whatever the style produces (text, or spans for the attributed style)
        """
        if style is None:
            from isbnkit.services.isbn_format import FormatStyle
            style = FormatStyle()
        return style.format(self)

    def to_dict(self):
        return {
            'prefix': self.prefix,
            'registration_group': self.registration_group,
            'registrant': self.registrant,
            'publication': self.publication,
            'check_digit': self.check_digit,
        }

    def __str__(self):
        return self.formatted()

    def __repr__(self):
        return f'ISBN: {self.formatted()}'
