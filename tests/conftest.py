import pytest

from inkwell import create_app
from inkwell.config import TestConfig
from inkwell.extensions import db
from inkwell.services import accounts, posts


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def app_context(app):
    # Service-level tests only; HTTP tests must not share an app context
    # with the test client or Flask-Login's per-request user leaks across requests.
    with app.app_context():
        yield


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app_context):
    def _make_user(username='alice', email=None, name=None, password='pw1'):
        return accounts.register(
            name or username.title(),
            email or f'{username}@example.com',
            username,
            password,
        )
    return _make_user


@pytest.fixture()
def make_post(app_context):
    def _make_post(user, title='Hello', content='First post'):
        return posts.create_post(user, title, content)
    return _make_post


def signup(client, username, password='pw1', email=None):
    return client.post('/register', data={
        'name': username.title(),
        'email': email or f'{username}@example.com',
        'username': username,
        'password': password,
    })


def signin(client, username, password='pw1'):
    return client.post('/login', data={'username': username, 'password': password})
