"""
``flask isbn`` commands: validate, parse and format ISBNs from the shell.
"""

import click
from flask import current_app
from flask.cli import AppGroup

from isbnkit.services import ISBNError, Separator, format_tagged, isbn_style, parse, validate
from isbnkit.utils.messages import message_for

isbn_cli = AppGroup('isbn', help='Validate, parse and format ISBNs.')


def _fail(error: ISBNError):
    current_app.logger.debug(f"CLI: ISBN rejected ({error.reason.value})")
    click.echo(f"Error ({error.reason.value}): {message_for(error.reason)}", err=True)
    raise click.exceptions.Exit(1)


@isbn_cli.command('validate')
@click.argument('text')
def validate_command(text):
    """Print TEXT trimmed if it is a valid ISBN."""
    try:
        click.echo(validate(text))
    except ISBNError as e:
        _fail(e)


@isbn_cli.command('parse')
@click.argument('text')
def parse_command(text):
    """Print the five ISBN groups of TEXT."""
    try:
        isbn = parse(text)
    except ISBNError as e:
        _fail(e)
    for name, value in isbn.to_dict().items():
        click.echo(f"{name}: {value}")


@isbn_cli.command('format')
@click.argument('text')
@click.option('--standard', type=click.Choice(['isbn13', 'isbn10']), default=None,
              help='Output standard (defaults to ISBN_DEFAULT_STANDARD).')
@click.option('--separator', type=click.Choice(['hyphen', 'space', 'none']), default=None,
              help='Group separator (defaults to ISBN_DEFAULT_SEPARATOR).')
@click.option('--tagged', is_flag=True, help='Print one "part<TAB>text" line per span.')
def format_command(text, standard, separator, tagged):
    """Re-render TEXT in the requested style."""
    try:
        isbn = parse(text)
    except ISBNError as e:
        _fail(e)

    style = isbn_style(
        standard or current_app.config['ISBN_DEFAULT_STANDARD'],
        Separator[(separator or current_app.config['ISBN_DEFAULT_SEPARATOR']).upper()],
    )
    if tagged:
        for span in format_tagged(isbn, style):
            click.echo(f"{span.part.value}\t{span.text}")
    else:
        click.echo(style.format(isbn))
