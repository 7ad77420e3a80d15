from isbnkit.routes.main import bp as main_bp
from isbnkit.routes.api import bp as api_bp


def register_blueprints(app):
    """Register all blueprints with the Flask app."""
    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp)
