import json
import os
import sys
import pytest

# Ensure the backend root (containing the `academy` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from academy import create_app, socketio
from academy.context import get_context


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = '*'
    STATIC_DIR = None
    LEADERBOARD_MAX_ENTRIES = 100
    LEADERBOARD_TOP_N = 10
    STATUS_LOG_INTERVAL_SEC = 0
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def game_ctx(flask_app):
    return get_context(flask_app)


@pytest.fixture()
def sio_factory(flask_app):
    """Open extra Socket.IO clients on /ws; all are closed at teardown."""
    clients = []

    def _open():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
            namespace='/ws'
        )
        clients.append(test_client)
        return test_client

    yield _open
    for test_client in clients:
        try:
            if test_client.is_connected('/ws'):
                test_client.disconnect(namespace='/ws')
        except Exception:
            pass


@pytest.fixture()
def sio_client(sio_factory):
    return sio_factory()


def received_messages(test_client):
    """Decode the JSON messages a test client got on /ws since the last call."""
    messages = []
    for pkt in test_client.get_received('/ws'):
        if pkt['name'] != 'message':
            continue
        # 'message' packets carry a single argument, not a list
        payload = pkt['args']
        if isinstance(payload, list):
            payload = payload[0]
        messages.append(json.loads(payload) if isinstance(payload, str) else payload)
    return messages


def send_message(test_client, message):
    test_client.send(json.dumps(message), namespace='/ws')
