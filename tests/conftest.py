import pytest
from werkzeug.security import generate_password_hash

from caseportal import create_app, socketio
from caseportal.auth.tokens import issue_token
from caseportal.models import TABLE_HEADERS, Identity
from config import TestingConfig
from fakes import FakeDrive, FakeOpenAI, MemorySheets


def seed_tables():
    tables = {name: [list(header)] for name, header in TABLE_HEADERS.items()}
    tables['users'] += [
        ['alice', 'pw1', 'therapist', 'Alice'],
        ['bob', generate_password_hash('pw2'), 'teacher', 'Bob'],
        ['carol', 'pw3', 'parents', 'Carol'],
    ]
    return tables


@pytest.fixture
def sheets():
    return MemorySheets(seed_tables())


@pytest.fixture
def drive():
    return FakeDrive()


@pytest.fixture
def llm():
    return FakeOpenAI()


@pytest.fixture
def app(sheets, drive, llm):
    app = create_app(TestingConfig)
    app.extensions['sheets'] = sheets
    app.extensions['drive'] = drive
    app.extensions['openai'] = llm
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def token_for(app):
    def _token_for(role, username=None, name=None):
        identity = Identity(username or role, role, name or role.title())
        with app.app_context():
            return issue_token(identity)
    return _token_for


@pytest.fixture
def headers_for(token_for):
    def _headers_for(role, **kwargs):
        return {'Authorization': f'Bearer {token_for(role, **kwargs)}'}
    return _headers_for


@pytest.fixture
def socket_client(app, client, token_for):
    sio = socketio.test_client(app, flask_test_client=client, auth={'token': token_for('parents')})
    yield sio
    if sio.is_connected():
        sio.disconnect()
