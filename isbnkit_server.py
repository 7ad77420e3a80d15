from isbnkit import create_app
from isbnkit.models import ISBN
from isbnkit.services import FormatStyle, format_isbn, format_tagged, parse, validate

app = create_app()


@app.shell_context_processor
def make_shell_context():
    return {
        "ISBN": ISBN,
        "FormatStyle": FormatStyle,
        "parse": parse,
        "validate": validate,
        "format_isbn": format_isbn,
        "format_tagged": format_tagged,
    }


if __name__ == '__main__':
    app.run(debug=True)
