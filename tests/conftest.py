import datetime
import os
import tempfile

# Keep test logs out of the working tree; must happen before wheelword is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wheelword-logs-'))

import jwt
import mongomock
import pytest

from wheelword import create_app
from wheelword.config import TestingConfig
from wheelword.models.game import WordEntry
from wheelword.services import wheelword_service as wheelword_service_module
from wheelword.services.wheelword_service import initialize_wheelword_service

# TestingConfig keeps the default epoch of 2025-01-01, so this is game #5
TEST_DAY = datetime.date(2025, 1, 5)
TEST_GAME_NUMBER = 5

# Game #5 selects index 5 % 6 == 5
STABLE_BANK = [
    WordEntry('TURBO', 5, 'general'),
    WordEntry('PEDAL', 5, 'general'),
    WordEntry('SKYLINE', 7, 'modelo'),
    WordEntry('HONDA', 5, 'marca'),
    WordEntry('FRENO', 5, 'general'),
    WordEntry('MOTOR', 5, 'general'),
]
TARGET = 'MOTOR'

# Five-letter dictionary words that are not MOTOR
MISSES = ['TURBO', 'PEDAL', 'HONDA', 'FRENO', 'RALLY', 'DRIFT', 'SEDAN']


@pytest.fixture
def database():
    return mongomock.MongoClient().wheels_house_test


@pytest.fixture
def service(database):
    wheelword_service = initialize_wheelword_service(
        TestingConfig, database=database, word_bank=STABLE_BANK, today_fn=lambda: TEST_DAY
    )
    yield wheelword_service
    wheelword_service_module._wheelword_service = None


@pytest.fixture
def app(service):
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


def make_token(user_id='42', username='collector', secret=TestingConfig.JWT_SECRET, expires_in=3600):
    payload = {
        'user_id': user_id,
        'username': username,
        'exp': datetime.datetime.now(datetime.timezone.utc) + datetime.timedelta(seconds=expires_in)
    }
    return jwt.encode(payload, secret, algorithm='HS256')


@pytest.fixture
def auth_headers():
    def build(user_id='42', **kwargs):
        return {'Authorization': f'Bearer {make_token(user_id, **kwargs)}'}
    return build
