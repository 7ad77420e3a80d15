import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import Literal

BASE_DIR = os.path.abspath(os.path.dirname(__file__))

SEPARATOR_NAMES = {'-': 'hyphen', ' ': 'space', '': 'none'}


class Config(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',  # Ignore extra fields from .env
    )

    # Security configuration
    SECRET_KEY: str

    # Application environment: development | staging | production
    APP_ENV: str = os.getenv('FLASK_ENV', 'development')

    # Logging
    LOG_LEVEL: str = 'INFO'

    # ISBN output defaults used by the API and CLI when the caller omits them
    ISBN_DEFAULT_STANDARD: Literal['isbn13', 'isbn10'] = 'isbn13'
    ISBN_DEFAULT_SEPARATOR: Literal['hyphen', 'space', 'none'] = 'hyphen'

    @field_validator('ISBN_DEFAULT_SEPARATOR', mode='before')
    def _parse_separator(cls, v):
        """Accept separator literals ('-', ' ', '') as well as their names.
        Inline comments like 'space  # for print' are stripped first.
        """
        if not isinstance(v, str):
            return v
        if v in SEPARATOR_NAMES:
            return SEPARATOR_NAMES[v]
        v = v.split('#', 1)[0].strip().lower()
        return SEPARATOR_NAMES.get(v, v)

    @field_validator('LOG_LEVEL', mode='before')
    def _parse_log_level(cls, v):
        if isinstance(v, str):
            return v.split('#', 1)[0].strip().upper()
        return v

    # Internationalization
    LANGUAGES: list = ['en', 'pl']
    BABEL_DEFAULT_LOCALE: str = 'en'
    BABEL_DEFAULT_TIMEZONE: str = 'UTC'
    BABEL_TRANSLATION_DIRECTORIES: str = os.path.join(BASE_DIR, 'translations')

    # Forms
    WTF_CSRF_ENABLED: bool = True

    def default_style(self):
        """FormatStyle built from the ISBN_DEFAULT_* settings."""
        from isbnkit.services.isbn_format import Separator, isbn_style
        return isbn_style(self.ISBN_DEFAULT_STANDARD, Separator[self.ISBN_DEFAULT_SEPARATOR.upper()])
