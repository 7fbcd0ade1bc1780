"""
Shared fixtures for the language color game tests.
"""
import os
import tempfile

import pytest

# Keep test logs out of the working tree; must run before langcolor is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='langcolor-logs-'))

from langcolor import create_app
from langcolor.config import LANGUAGE_CATALOG, TestingConfig
from langcolor.services.game_service import initialize_game_service
from langcolor.services.guess_engine import GuessEngine


class FakeTimer:
    """Timer handle driven by FakeScheduler.advance()."""

    def __init__(self, due, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Deterministic scheduler; time only moves when advance() is called."""

    def __init__(self):
        self.now = 0
        self.timers = []

    def schedule(self, delay_seconds, callback):
        timer = FakeTimer(self.now + delay_seconds, callback)
        self.timers.append(timer)
        return timer

    def advance(self, seconds):
        self.now += seconds
        for timer in list(self.timers):
            if not timer.cancelled and not timer.fired and timer.due <= self.now:
                timer.fired = True
                timer.callback()


class RecordingAudioSink:
    def __init__(self):
        self.outcomes = []

    def play(self, outcome):
        self.outcomes.append(outcome)


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def audio():
    return RecordingAudioSink()


@pytest.fixture
def engine(scheduler, audio):
    """Engine past its reveal phase, ready for guesses."""
    engine = GuessEngine(LANGUAGE_CATALOG, scheduler=scheduler, audio=audio)
    engine.reveal()
    scheduler.advance(4)
    yield engine
    engine.dispose()


@pytest.fixture
def game_service(scheduler):
    service = initialize_game_service(TestingConfig, scheduler=scheduler)
    yield service
    service.shutdown()


@pytest.fixture
def app_and_socketio(game_service):
    app, socketio = create_app(TestingConfig)
    app.config['TESTING'] = True
    return app, socketio


@pytest.fixture
def client(app_and_socketio):
    app, _ = app_and_socketio
    with app.test_client() as client:
        yield client


@pytest.fixture
def socket_client(app_and_socketio):
    app, socketio = app_and_socketio
    client = socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
