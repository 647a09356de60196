# hoshizora/presentation.py
"""
Pure helpers used by the templates to render post cards and category badges.
"""

from flask import current_app, url_for

# Checked in order; the first keyword contained in the category name wins.
CATEGORY_COLORS = (
    ('anime', 'text-pink-400 bg-pink-500/20'),
    ('novel', 'text-purple-400 bg-purple-500/20'),
    ('visual', 'text-blue-400 bg-blue-500/20'),
    ('game', 'text-amber-400 bg-amber-500/20'),
)
DEFAULT_CATEGORY_COLOR = 'text-emerald-400 bg-emerald-500/20'


def category_colors(category):
    normalized = (category or '').lower()
    for keyword, classes in CATEGORY_COLORS:
        if keyword in normalized:
            return classes
    return DEFAULT_CATEGORY_COLOR


def image_url(path, default=None):
    """
    Resolve an image reference from the database into a URL.

    Absolute and protocol-relative URLs are returned untouched, root-relative
    paths stay as they are, anything else is served from IMAGE_BASE_URL when
    configured or from the static folder otherwise.
    """
    if not path:
        path = default or current_app.config['DEFAULT_POST_IMAGE']
    if path.startswith(('http://', 'https://', '//', '/')):
        return path
    base_url = current_app.config.get('IMAGE_BASE_URL')
    if base_url:
        return f"{base_url.rstrip('/')}/{path}"
    return url_for('static', filename=path)


def avatar_url(path):
    return image_url(path, default=current_app.config['DEFAULT_AVATAR'])
