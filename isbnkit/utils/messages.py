"""
Standardized user-facing messages for the application.
All messages are lazily translated so they can be defined at import time.
"""

from flask_babel import lazy_gettext as _

from isbnkit.services.errors import ErrorReason

# ISBN error messages
ISBN_EMPTY_INPUT = _("Please enter an ISBN.")
ISBN_NO_GROUPS_PRESENT = _("Separate the ISBN groups with hyphens or spaces (e.g. 978-17-85889-01-1).")
ISBN_INVALID_CHARACTERS = _("An ISBN may only contain digits, hyphens and spaces.")
ISBN_INVALID_STRING_LENGTH = _("An ISBN must contain 10 or 13 digits.")
ISBN_CHECKSUM_FAILED = _("The ISBN check digit is incorrect. Please check the number and try again.")
ISBN_INVALID_INPUT = _("An ISBN must consist of five groups (or four for ISBN-10).")
ISBN_INVALID = _("Invalid ISBN.")

# Generic messages
ERROR_UNSUPPORTED_LANGUAGE = _("Unsupported language.")

# Info messages
INFO_LANGUAGE_CHANGED_PL = "Język zmieniony na polski."
INFO_LANGUAGE_CHANGED_EN = "Language changed to English."

ISBN_ERROR_MESSAGES = {
    ErrorReason.EMPTY_INPUT: ISBN_EMPTY_INPUT,
    ErrorReason.NO_GROUPS_PRESENT: ISBN_NO_GROUPS_PRESENT,
    ErrorReason.INVALID_CHARACTERS: ISBN_INVALID_CHARACTERS,
    ErrorReason.INVALID_STRING_LENGTH: ISBN_INVALID_STRING_LENGTH,
    ErrorReason.CHECKSUM_FAILED: ISBN_CHECKSUM_FAILED,
    ErrorReason.INVALID_INPUT: ISBN_INVALID_INPUT,
}


def message_for(reason):
    """Return the translated message for an ISBN ``ErrorReason``."""
    return ISBN_ERROR_MESSAGES.get(reason, ISBN_INVALID)
