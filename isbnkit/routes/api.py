from flask import Blueprint, current_app, jsonify, request

from isbnkit.forms import ISBNFormatForm
from isbnkit.services import (
    ISBNError, ISBNParseError, format_tagged, join_spans, parse, validate
)
from isbnkit.utils.messages import message_for

bp = Blueprint("api", __name__, url_prefix="/api/isbn")


def _isbn_from_request():
    """ISBN candidate from the JSON body, form data or query string."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    isbn = data.get('isbn')
    if isbn is None:
        isbn = request.values.get('isbn')
    return isbn if isbn is None else str(isbn)


def _error_response(error: ISBNError):
    current_app.logger.info(
        f"ISBN rejected ({error.reason.value}): {error.candidate!r}")
    return jsonify({
        'success': False,
        'error': error.reason.value,
        'message': str(message_for(error.reason)),
    }), 400


@bp.route("/validate", methods=["GET", "POST"])
def validate_isbn():
    """
    Validate an ISBN candidate.

    Expected JSON: {"isbn": "978-17-85889-01-1"} (or ?isbn=...)
    """
    candidate = _isbn_from_request()
    try:
        valid = validate(candidate)
    except ISBNError as e:
        return _error_response(e)

    try:
        canonical = parse(valid).formatted()
    except ISBNParseError:
        # Valid digits, but not split into the five ISBN groups
        canonical = None

    return jsonify({'success': True, 'isbn': valid, 'canonical': canonical})


@bp.route("/parse", methods=["GET", "POST"])
def parse_isbn():
    """Split an ISBN into its five groups."""
    candidate = _isbn_from_request()
    try:
        isbn = parse(candidate)
    except ISBNError as e:
        return _error_response(e)

    style = current_app.config['ISBN_DEFAULT_STYLE']
    return jsonify({
        'success': True,
        'isbn': isbn.to_dict(),
        'formatted': style.format(isbn),
    })


@bp.route("/format", methods=["POST"])
def format_isbn():
    """
    Re-render an ISBN.

    Expected JSON: {"isbn": "...", "standard": "isbn13|isbn10",
                    "separator": "hyphen|space|none", "tagged": false}
    Missing standard/separator fall back to the configured defaults.
    """
    form = ISBNFormatForm(
        data={
            'standard': current_app.config['ISBN_DEFAULT_STANDARD'],
            'separator': current_app.config['ISBN_DEFAULT_SEPARATOR'],
        },
        meta={'csrf': False},
    )
    if not form.validate_on_submit():
        # ISBN failures carry a reason code, other field errors do not
        try:
            parse(form.isbn.data)
        except ISBNError as e:
            return _error_response(e)
        return jsonify({
            'success': False,
            'error': 'invalid_form',
            'errors': {name: [str(m) for m in messages]
                       for name, messages in form.errors.items()},
        }), 400

    isbn = parse(form.isbn.data)
    style = form.style()
    if form.tagged.data:
        spans = format_tagged(isbn, style)
        response_data = {
            'success': True,
            'formatted': join_spans(spans),
            'spans': [span.to_dict() for span in spans],
        }
    else:
        response_data = {'success': True, 'formatted': style.format(isbn)}
    return jsonify(response_data)
