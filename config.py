# config.py
import os

# BASE_DIR points at the repository root
BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    # Session signing key. Always set SECRET_KEY in production.
    SECRET_KEY = os.environ.get('SECRET_KEY', 'hoshizora-dev-key')
    SESSION_COOKIE_SECURE = False

    # Database
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL',
        'sqlite:///' + os.path.join(BASE_DIR, 'instance', 'hoshizora.db'),
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    DEBUG = os.environ.get('FLASK_DEBUG', '0') == '1'

    # Bearer token for write access to /api/categories. Empty disables writes.
    ADMIN_API_TOKEN = os.environ.get('ADMIN_API_TOKEN', '')

    # Listing
    LATEST_POSTS_LIMIT = 6
    POSTS_PER_PAGE = int(os.environ.get('POSTS_PER_PAGE', 9))

    # Locale and dates
    BABEL_DEFAULT_LOCALE = 'th'
    BABEL_DEFAULT_TIMEZONE = 'Asia/Bangkok'
    DISPLAY_TIMEZONE = os.environ.get('DISPLAY_TIMEZONE', 'Asia/Bangkok')

    # Images. IMAGE_BASE_URL points at a CDN when set, otherwise the static folder is used.
    IMAGE_BASE_URL = os.environ.get('IMAGE_BASE_URL', '')
    DEFAULT_POST_IMAGE = 'images/placeholder.svg'
    DEFAULT_AVATAR = 'avatar/default.svg'

    SITE_TITLE = 'Blog Hoshizora'
    SITE_DESCRIPTION = 'Generated by Jiranon-K'

    # Logging
    LOG_DIR = os.environ.get('LOG_DIR', os.path.join(BASE_DIR, 'logs'))
