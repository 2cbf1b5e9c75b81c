"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add parent directory to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config import TestingConfig
from propline import create_app
from propline.extensions import db


@pytest.fixture
def app():
    """Create application for testing, backed by a fresh in-memory database."""
    flask_app = create_app(TestingConfig)
    with flask_app.app_context():
        db.create_all()

    yield flask_app

    with flask_app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """Create test CLI runner."""
    return app.test_cli_runner()


@pytest.fixture
def seeded_app(app, runner):
    """Application whose database went through `flask seed-db` once."""
    result = runner.invoke(args=['seed-db'])
    assert result.exit_code == 0, result.output
    return app
