import os
import sys
import pytest

# Ensure the project root (containing the `tictactoe` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from tictactoe import create_app, socketio
from tictactoe.engine import Game


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = ['http://localhost:3000']
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def game():
    return Game()


@pytest.fixture()
def app_factory():
    return lambda: create_app(TestConfig)


@pytest.fixture()
def flask_app(app_factory):
    application = app_factory()
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    if test_client.is_connected('/ws'):
        test_client.disconnect(namespace='/ws')
