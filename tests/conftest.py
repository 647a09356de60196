# tests/conftest.py
from datetime import datetime, timedelta

import pytest

from config import Config
from hoshizora import create_app
from hoshizora.extensions import db
from hoshizora.models import Category, Post, User, POST_STATUS_PUBLISHED

API_TOKEN = 'test-admin-token'


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'  # in-memory database
    WTF_CSRF_ENABLED = False  # forms are posted without a CSRF token in tests
    ADMIN_API_TOKEN = API_TOKEN
    IMAGE_BASE_URL = ''


@pytest.fixture(scope='function')
def app():
    """Fresh application and empty database for every test."""
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    return app.test_client()


@pytest.fixture(scope='function')
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def api_token():
    return API_TOKEN


@pytest.fixture
def auth_headers(api_token):
    return {'Authorization': f'Bearer {api_token}'}


@pytest.fixture
def make_user(app):
    def _make_user(username='author', password='password123', is_admin=False, **kwargs):
        user = User(
            username=username,
            email=kwargs.pop('email', f'{username}@example.com'),
            display_name=kwargs.pop('display_name', username.title()),
            is_admin=is_admin,
            **kwargs,
        )
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user
    return _make_user


@pytest.fixture
def admin_user(make_user):
    return make_user(username='admin', is_admin=True, display_name='Administrator')


@pytest.fixture
def make_category(app):
    def _make_category(name='Anime', slug='anime', description=None):
        category = Category(name=name, slug=slug, description=description)
        db.session.add(category)
        db.session.commit()
        return category
    return _make_category


@pytest.fixture
def make_post(app, make_user):
    """Creates published posts by default, one day apart unless published_at is given."""
    state = {'author': None, 'count': 0}

    def _make_post(title=None, status=POST_STATUS_PUBLISHED, published_at=None, category=None,
                   author=None, **kwargs):
        if author is None:
            if state['author'] is None:
                state['author'] = make_user(username='writer', display_name='Hoshi Writer', title='Editor')
            author = state['author']
        state['count'] += 1
        number = state['count']
        if published_at is None and status == POST_STATUS_PUBLISHED:
            published_at = datetime(2024, 1, 1, 3, 0) + timedelta(days=number)
        post = Post(
            title=title or f'Post {number}',
            slug=kwargs.pop('slug', f'post-{number}'),
            description=kwargs.pop('description', f'Description {number}'),
            content=kwargs.pop('content', f'# Post {number}'),
            status=status,
            published_at=published_at,
            author=author,
            category=category,
            **kwargs,
        )
        db.session.add(post)
        db.session.commit()
        return post
    return _make_post


def _login(client, username='admin', password='password123'):
    return client.post('/auth/login', data={'username': username, 'password': password})


@pytest.fixture
def admin_client(client, admin_user):
    """Test client with an administrator session."""
    _login(client)
    return client
