import pytest

from web_calculator.webapp.server import app, reset_state


@pytest.fixture
def client():
    """Flask test client with a fresh process-wide calculator state."""
    reset_state()
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
    reset_state()
