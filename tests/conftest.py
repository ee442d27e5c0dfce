import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fretlog_app import create_app
from fretlog_app.config import Config


class TestConfig(Config):
    TESTING = True
    LOG_LEVEL = 'WARNING'
    LOG_DIR = None
    CAGED_TARGET_TIME_SECONDS = 20
    MAX_RECORDS_PER_REQUEST = 50


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()
