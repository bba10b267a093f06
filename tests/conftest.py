import os
import pytest

from codebreaker import create_app, socketio
from codebreaker.services.games import GameRegistry, SecretGenerator


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    MAX_CODE_LENGTH = 12
    MAX_COLORS = 10
    MAX_ATTEMPTS = 50
    CORS_ORIGINS = ['http://localhost:5173']


class FixedSecretGenerator(SecretGenerator):
    """Hands out a known secret so tests can predict scores."""

    def __init__(self, secret):
        self.secret = tuple(secret)

    def generate(self, code_length, colors):
        return self.secret[:code_length]


@pytest.fixture()
def registry():
    return GameRegistry()


@pytest.fixture()
def fixed_registry():
    return GameRegistry(generator=FixedSecretGenerator([1, 2, 3, 4]))


@pytest.fixture()
def flask_app():
    registry = GameRegistry(
        generator=FixedSecretGenerator([1, 2, 3, 4]),
        max_code_length=TestConfig.MAX_CODE_LENGTH,
        max_colors=TestConfig.MAX_COLORS,
        max_attempts=TestConfig.MAX_ATTEMPTS,
    )
    application = create_app(TestConfig, registry=registry)
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
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
