from flask import Flask
from config import Config
from flask_babel import Babel
from flask import current_app, has_request_context, request

babel = Babel()


def create_app(config=None):
    """Application factory.

    ``config`` may be a ``Config`` instance or class; by default settings are
    read from the environment and ``.env``.
    """
    if config is None:
        config = Config()
    elif isinstance(config, type):
        config = config()

    app = Flask(__name__)
    app.config.from_mapping(config.model_dump())
    app.config['ISBN_DEFAULT_STYLE'] = config.default_style()

    # app.logger is the "isbnkit" logger, parent of every service logger
    app.logger.setLevel(app.config['LOG_LEVEL'])

    def get_locale():
        # CLI commands run without a request; use BABEL_DEFAULT_LOCALE
        if not has_request_context():
            return None

        # 1. Check for language in cookie first
        lang = request.cookies.get("language")
        if lang and lang in app.config["LANGUAGES"]:
            current_app.logger.debug(
                f"Locale selector: found language in cookie: {lang}")
            return lang

        # 2. Fallback to browser's preferred language
        browser_lang = request.accept_languages.best_match(
            app.config["LANGUAGES"])
        current_app.logger.debug(
            f"Locale selector: falling back to browser language: {browser_lang}"
        )
        return browser_lang

    babel.init_app(app, locale_selector=get_locale)

    from isbnkit.routes import register_blueprints
    register_blueprints(app)

    from isbnkit.cli import isbn_cli
    app.cli.add_command(isbn_cli)

    app.logger.debug(
        f"isbnkit started ({app.config['APP_ENV']}), default style "
        f"{app.config['ISBN_DEFAULT_STANDARD']}/{app.config['ISBN_DEFAULT_SEPARATOR']}")

    return app
