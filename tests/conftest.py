import pytest

from app import app as flask_app
from tour import Board


@pytest.fixture
def empty_board():
    """8x8 board with the knight on its starting corner."""
    return Board(8, (0, 0))


@pytest.fixture
def client():
    flask_app.config['TESTING'] = True
    with flask_app.test_client() as client:
        yield client
