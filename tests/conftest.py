import os
import random
import tempfile

import pytest

# Keep test runs from writing game logs into the working directory
os.environ.setdefault('LOG_DIR', os.path.join(tempfile.gettempdir(), 'timed_wordle_test_logs'))

from timed_wordle import create_app
from timed_wordle.config import TestingConfig
from timed_wordle.services.game_engine import GameEngine
from timed_wordle.services.game_service import initialize_game_service
from timed_wordle.services.timer import CountdownTimer
from timed_wordle.services.word_bank import WordBank

TARGET = 'crane'

VALID_WORDS = [
    'crane', 'crate', 'trace', 'react', 'cater',
    'speed', 'about', 'house', 'abbey', 'babes',
]


@pytest.fixture()
def word_bank():
    return WordBank(VALID_WORDS, [TARGET], word_length=5, rng=random.Random(0))


@pytest.fixture()
def events():
    return []


@pytest.fixture()
def timer():
    return CountdownTimer(start_time=180.0)


@pytest.fixture()
def engine(word_bank, timer, events):
    game = GameEngine(word_bank, timer, listener=events.append)
    game.new_game()
    events.clear()
    return game


@pytest.fixture()
def game_service(word_bank):
    return initialize_game_service(TestingConfig, word_bank=word_bank)


@pytest.fixture()
def flask_app(game_service):
    application, _ = create_app(TestingConfig)
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
