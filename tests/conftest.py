"""Test configuration and fixtures."""

import io
import os
import pytest
import tempfile
from pathlib import Path

from PIL import Image

from officetools import create_app
from officetools.extensions import db as _db


@pytest.fixture
def app(tmp_path):
    """Create application for testing."""
    db_fd, db_path = tempfile.mkstemp()

    app = create_app('testing', {
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': f'sqlite:///{db_path}',
        'SECRET_KEY': 'test-secret-key',
        'SHARED_UPLOAD_FOLDER': str(tmp_path / 'shared'),
    })

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()
        _db.engine.dispose()

    os.close(db_fd)
    Path(db_path).unlink(missing_ok=True)


@pytest.fixture
def client(app):
    """Test client for making requests."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """CLI test runner."""
    return app.test_cli_runner()


@pytest.fixture
def db(app):
    """Database fixture."""
    return _db


@pytest.fixture
def png_bytes():
    """A 400x300 RGBA PNG: left half red, right half transparent."""
    img = Image.new('RGBA', (400, 300), (0, 0, 0, 0))
    img.paste((255, 0, 0, 255), (0, 0, 200, 300))
    out = io.BytesIO()
    img.save(out, format='PNG')
    return out.getvalue()
