# tests/conftest.py

import pytest

@pytest.fixture(scope="module")
def app():
    """
    Creates a new app instance for a test module with CSRF disabled so the
    calculator forms can be posted directly.
    """
    from incentives import create_app

    app = create_app()
    app.config.update({
        "TESTING": True,
        "WTF_CSRF_ENABLED": False
    })

    with app.app_context():
        yield app  # The tests will run here

@pytest.fixture
def client(app):
    return app.test_client()
