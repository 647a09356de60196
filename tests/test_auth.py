# tests/test_auth.py
from hoshizora.models import Category


def test_login_page(client):
    """The login page renders"""
    response = client.get('/auth/login')
    assert response.status_code == 200
    assert 'เข้าสู่ระบบ'.encode('utf-8') in response.data


def test_login_valid_credentials(client, admin_user):
    """Administrators land on the category page after logging in"""
    response = client.post('/auth/login', data={
        'username': 'admin',
        'password': 'password123'
    }, follow_redirects=True)
    assert response.status_code == 200
    assert 'จัดการหมวดหมู่'.encode('utf-8') in response.data


def test_login_invalid_password(client, admin_user):
    response = client.post('/auth/login', data={
        'username': 'admin',
        'password': 'wrongpassword'
    })
    assert response.status_code == 401
    assert 'ชื่อผู้ใช้หรือรหัสผ่านไม่ถูกต้อง'.encode('utf-8') in response.data


def test_login_inactive_user(client, make_user):
    make_user(username='sleepy', active=False)
    response = client.post('/auth/login', data={'username': 'sleepy', 'password': 'password123'})
    assert response.status_code == 401


def test_login_ignores_offsite_next(client, admin_user):
    response = client.post('/auth/login?next=https://evil.example.com/', data={
        'username': 'admin',
        'password': 'password123'
    })
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/admin/categories')


def test_logout(admin_client):
    response = admin_client.get('/auth/logout', follow_redirects=True)
    assert response.status_code == 200
    assert 'ออกจากระบบแล้ว'.encode('utf-8') in response.data
    assert admin_client.get('/admin/categories').status_code == 302


def test_admin_pages_require_login(client):
    response = client.get('/admin/categories')
    assert response.status_code == 302
    assert '/auth/login' in response.headers['Location']


def test_admin_pages_forbidden_for_authors(client, make_user):
    make_user(username='writer')
    client.post('/auth/login', data={'username': 'writer', 'password': 'password123'})
    response = client.get('/admin/categories')
    assert response.status_code == 403


def test_admin_add_category(admin_client):
    response = admin_client.post('/admin/categories/add', data={
        'name': 'Visual Novel',
        'slug': '',
        'description': 'Stories'
    }, follow_redirects=True)
    assert response.status_code == 200
    category = Category.query.one()
    assert category.slug == 'visual-novel'
    assert category.description == 'Stories'


def test_admin_add_duplicate_slug(admin_client, make_category):
    make_category(name='Anime', slug='anime')
    response = admin_client.post('/admin/categories/add', data={'name': 'Anime', 'slug': 'anime'})
    assert response.status_code == 200
    assert 'Slug นี้ถูกใช้งานแล้ว'.encode('utf-8') in response.data
    assert Category.query.count() == 1


def test_admin_add_invalid_slug(admin_client):
    response = admin_client.post('/admin/categories/add', data={'name': 'Anime', 'slug': 'Bad Slug'})
    assert response.status_code == 200
    assert Category.query.count() == 0


def test_admin_edit_category(admin_client, make_category):
    category = make_category(name='Game', slug='game')
    response = admin_client.post(f'/admin/categories/{category.id}/edit', data={
        'name': 'Games',
        'slug': 'games',
        'description': ''
    })
    assert response.status_code == 302
    assert Category.query.one().slug == 'games'


def test_admin_delete_category(admin_client, make_category):
    category = make_category()
    response = admin_client.post(f'/admin/categories/{category.id}/delete', follow_redirects=True)
    assert response.status_code == 200
    assert Category.query.count() == 0


def test_admin_delete_category_in_use(admin_client, make_category, make_post):
    category = make_category()
    make_post(category=category)
    response = admin_client.post(f'/admin/categories/{category.id}/delete', follow_redirects=True)
    assert 'ไม่สามารถลบหมวดหมู่ที่มีบทความอยู่ได้'.encode('utf-8') in response.data
    assert Category.query.count() == 1
