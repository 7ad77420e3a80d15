import pytest
from config import Config
from isbnkit import create_app
from isbnkit.models import ISBN


@pytest.fixture
def app():
    """Create and configure a test app."""
    app = create_app(Config(SECRET_KEY='test-secret', WTF_CSRF_ENABLED=False, LOG_LEVEL='DEBUG'))
    app.config['TESTING'] = True

    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """A test runner for the app's Click commands."""
    return app.test_cli_runner()


@pytest.fixture
def isbn():
    """The ISBN used throughout the examples: 978-17-85889-01-1."""
    return ISBN(
        prefix='978',
        registration_group='17',
        registrant='85889',
        publication='01',
        check_digit='1',
    )
