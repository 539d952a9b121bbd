import pytest

from inkwell.services.guard import RESTRICTED_PAGES, first_segment, is_restricted
from tests.conftest import signup, signin


@pytest.mark.parametrize('path,segment', [
    ('/', ''),
    ('/blogs', 'blogs'),
    ('/user/abc', 'user'),
    ('/update/abc', 'update'),
    ('/api/delete-blog', 'api'),
    ('', ''),
])
def test_first_segment(path, segment):
    assert first_segment(path) == segment


def test_restricted_pages():
    assert RESTRICTED_PAGES == {'blogs', 'post', 'user', 'update'}
    assert is_restricted('/blogs')
    assert is_restricted('/post')
    assert is_restricted('/user/' + 'a' * 24)
    assert is_restricted('/update/' + 'a' * 24)
    # Single post view is public, the listing is not
    assert not is_restricted('/blog/' + 'a' * 24)
    assert not is_restricted('/')
    assert not is_restricted('/login')
    assert not is_restricted('/register')


@pytest.mark.parametrize('path', ['/blogs', '/post', '/user/' + 'a' * 24, '/update/' + 'a' * 24])
def test_anonymous_redirected_to_login(client, path):
    r = client.get(path)
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/login')


def test_anonymous_can_open_public_pages(client):
    assert client.get('/').status_code == 200
    assert client.get('/login').status_code == 200
    assert client.get('/register').status_code == 200
    r = client.get('/blog/' + 'a' * 24)
    assert r.status_code == 200
    assert 'There is no blog posted that matches that query' in r.get_data(as_text=True)


def test_logged_in_user_passes_guard(client):
    signup(client, 'alice')
    signin(client, 'alice')

    assert client.get('/blogs').status_code == 200
    assert client.get('/post').status_code == 200
