# tests/test_api_categories.py
import uuid

from hoshizora.models import Category
from hoshizora.messages import DESCRIPTION_INVALID, NAME_REQUIRED, SLUG_INVALID, SLUG_REQUIRED, SLUG_TAKEN


def test_list_categories_is_public(client, make_category):
    make_category(name='Game', slug='game')
    make_category(name='Anime', slug='anime')
    response = client.get('/api/categories')
    assert response.status_code == 200
    assert [c['slug'] for c in response.get_json()] == ['anime', 'game']


def test_list_categories_empty(client):
    response = client.get('/api/categories')
    assert response.status_code == 200
    assert response.get_json() == []


def test_get_category(client, make_category):
    category = make_category(description='Japanese animation')
    response = client.get(f'/api/categories/{category.id}')
    assert response.status_code == 200
    data = response.get_json()
    assert data['id'] == str(category.id)
    assert data['description'] == 'Japanese animation'


def test_get_missing_category_returns_json_404(client):
    response = client.get(f'/api/categories/{uuid.uuid4()}')
    assert response.status_code == 404
    assert response.get_json()['code'] == 'not_found'


def test_malformed_id_returns_json_404(client):
    response = client.get('/api/categories/not-a-uuid')
    assert response.status_code == 404
    assert response.get_json()['code'] == 'not_found'


def test_create_requires_token(client):
    response = client.post('/api/categories', json={'name': 'Anime', 'slug': 'anime'})
    assert response.status_code == 401
    assert response.get_json()['code'] == 'unauthorized'
    assert Category.query.count() == 0


def test_create_rejects_wrong_token(client):
    response = client.post('/api/categories', json={'name': 'Anime', 'slug': 'anime'},
                           headers={'Authorization': 'Bearer nope'})
    assert response.status_code == 401


def test_writes_refused_when_no_token_configured(app, client, auth_headers):
    app.config['ADMIN_API_TOKEN'] = ''
    response = client.post('/api/categories', json={'name': 'Anime', 'slug': 'anime'}, headers=auth_headers)
    assert response.status_code == 401


def test_create_category(client, auth_headers):
    response = client.post('/api/categories',
                           json={'name': '  Anime ', 'slug': 'anime', 'description': 'Cartoons'},
                           headers=auth_headers)
    assert response.status_code == 201
    data = response.get_json()
    assert data['name'] == 'Anime'
    assert data['slug'] == 'anime'
    assert Category.query.filter_by(slug='anime').one().description == 'Cartoons'


def test_create_validation_errors(client, auth_headers):
    response = client.post('/api/categories', json={'name': '', 'slug': 'Bad Slug'}, headers=auth_headers)
    assert response.status_code == 400
    data = response.get_json()
    assert data['code'] == 'validation_error'
    assert data['fields'] == {'name': NAME_REQUIRED, 'slug': SLUG_INVALID}


def test_create_with_non_object_body(client, auth_headers):
    response = client.post('/api/categories', json=['Anime'], headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()['code'] == 'validation_error'


def test_create_with_non_string_fields(client, auth_headers):
    response = client.post('/api/categories', json={'name': 5, 'slug': ['a']}, headers=auth_headers)
    assert response.status_code == 400
    data = response.get_json()
    assert data['code'] == 'validation_error'
    assert data['fields'] == {'name': NAME_REQUIRED, 'slug': SLUG_REQUIRED}
    assert Category.query.count() == 0


def test_create_with_non_string_description(client, auth_headers):
    response = client.post('/api/categories', json={'name': 'Anime', 'slug': 'anime', 'description': 42},
                           headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()['fields'] == {'description': DESCRIPTION_INVALID}
    assert Category.query.count() == 0


def test_update_with_non_string_name(client, auth_headers, make_category):
    category = make_category(name='Anime', slug='anime')
    response = client.put(f'/api/categories/{category.id}', json={'name': {'th': 'x'}, 'slug': 'anime'},
                          headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()['fields'] == {'name': NAME_REQUIRED}
    assert Category.query.one().name == 'Anime'


def test_create_duplicate_slug_conflicts(client, auth_headers, make_category):
    make_category(slug='anime')
    response = client.post('/api/categories', json={'name': 'Anime 2', 'slug': 'anime'}, headers=auth_headers)
    assert response.status_code == 409
    data = response.get_json()
    assert data['code'] == 'slug_conflict'
    assert data['error'] == SLUG_TAKEN
    assert Category.query.count() == 1


def test_update_category(client, auth_headers, make_category):
    category = make_category(description='keep me')
    response = client.put(f'/api/categories/{category.id}',
                          json={'name': 'Anime Club', 'slug': 'anime-club'},
                          headers=auth_headers)
    assert response.status_code == 200
    data = response.get_json()
    assert data['slug'] == 'anime-club'
    assert data['description'] == 'keep me'


def test_update_keeping_own_slug_is_allowed(client, auth_headers, make_category):
    category = make_category(name='Anime', slug='anime')
    response = client.put(f'/api/categories/{category.id}', json={'name': 'Anime!', 'slug': 'anime'},
                          headers=auth_headers)
    assert response.status_code == 200


def test_update_to_taken_slug_conflicts(client, auth_headers, make_category):
    make_category(name='Anime', slug='anime')
    game = make_category(name='Game', slug='game')
    response = client.put(f'/api/categories/{game.id}', json={'name': 'Game', 'slug': 'anime'},
                          headers=auth_headers)
    assert response.status_code == 409
    assert response.get_json()['code'] == 'slug_conflict'


def test_update_missing_category(client, auth_headers):
    response = client.put(f'/api/categories/{uuid.uuid4()}', json={'name': 'X', 'slug': 'x'},
                          headers=auth_headers)
    assert response.status_code == 404


def test_delete_category(client, auth_headers, make_category):
    category = make_category()
    response = client.delete(f'/api/categories/{category.id}', headers=auth_headers)
    assert response.status_code == 200
    assert Category.query.count() == 0


def test_delete_requires_token(client, make_category):
    category = make_category()
    response = client.delete(f'/api/categories/{category.id}')
    assert response.status_code == 401
    assert Category.query.count() == 1


def test_delete_category_in_use(client, auth_headers, make_category, make_post):
    category = make_category()
    make_post(category=category)
    response = client.delete(f'/api/categories/{category.id}', headers=auth_headers)
    assert response.status_code == 409
    assert response.get_json()['code'] == 'category_in_use'
    assert Category.query.count() == 1
