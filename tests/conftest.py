import os
import random
import tempfile

import pytest

# Keep test logs out of the working tree; must be set before the package
# creates its global logger.
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordscramble-logs-'))

from wordscramble import create_app
from wordscramble.config import TestingConfig
from wordscramble.services import game_service as game_service_module
from wordscramble.services.game_service import initialize_game_service
from wordscramble.services.game_session import GameSession


class TestConfig(TestingConfig):
    SECRET_KEY = 'test-secret'


@pytest.fixture()
def session():
    """A session whose root word is always 'silkworm'."""
    game = GameSession(rng=random.Random(0))
    game.start_game(['silkworm'])
    return game


@pytest.fixture()
def game_service():
    service = initialize_game_service(lambda: ['silkworm'], rng=random.Random(0))
    yield service
    game_service_module._game_service = None


@pytest.fixture()
def flask_app(game_service):
    application, _ = create_app(TestConfig)
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = flask_app.socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client()
    )
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()
