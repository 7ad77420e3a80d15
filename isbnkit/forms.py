from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField, SelectField, BooleanField
from wtforms.validators import DataRequired, ValidationError
from flask_babel import lazy_gettext as _

from isbnkit.services import ISBNParseError, Separator, Standard, isbn_style, parse
from isbnkit.utils.messages import message_for


class ISBNValidator:
    """WTForms validator accepting grouped ISBN-10 and ISBN-13 values.

    Empty values are left to ``DataRequired``/``Optional``.
    """

    def __init__(self, message=None):
        self.message = message

    def __call__(self, form, field):
        if not field.data:
            return
        try:
            parse(field.data)
        except ISBNParseError as e:
            raise ValidationError(self.message or message_for(e.reason))


STANDARD_CHOICES = [
    (Standard.ISBN13.value, 'ISBN-13'),
    (Standard.ISBN10.value, 'ISBN-10'),
]

SEPARATOR_CHOICES = [
    ('hyphen', _('Hyphen')),
    ('space', _('Space')),
    ('none', _('None')),
]


def _as_text(value):
    return value if value is None else str(value)


class ISBNFormatForm(FlaskForm):
    isbn = StringField('ISBN', validators=[DataRequired(), ISBNValidator()], filters=[_as_text])
    standard = SelectField(_('Standard'), choices=STANDARD_CHOICES)
    separator = SelectField(_('Separator'), choices=SEPARATOR_CHOICES)
    tagged = BooleanField(_('Tag ISBN groups'))
    submit = SubmitField(_('Format'), render_kw={"class": "btn btn-primary"})

    def style(self):
        """FormatStyle selected by the form."""
        return isbn_style(self.standard.data, Separator[self.separator.data.upper()])
