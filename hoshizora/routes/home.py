# hoshizora/routes/home.py

import logging

from flask import Blueprint, render_template, request, url_for, abort, current_app

from hoshizora.models import Category
from hoshizora.services.posts import get_latest_posts, list_published_posts, get_published_post
from hoshizora.utils import format_thai_date

logger = logging.getLogger(__name__)

home_bp = Blueprint('home', __name__)


def parse_listing_args(args):
    """Read the blog listing query string: ``category`` (default '') and ``page`` (default 1)."""
    category = args.get('category', '') or ''
    page = args.get('page', 1, type=int) or 1
    return category.strip(), max(page, 1)


# Home page: the latest published posts
@home_bp.route('/')
@home_bp.route('/index')
def index():
    posts = get_latest_posts()
    return render_template('home/index.html', posts=posts)


# Blog listing, optionally filtered by category slug
@home_bp.route('/blog')
def blog():
    category_slug, page = parse_listing_args(request.args)
    posts, pagination = list_published_posts(category=category_slug, page=page)

    category = Category.query.filter_by(slug=category_slug).first() if category_slug else None
    categories = Category.query.order_by(Category.name.asc()).all()

    next_url = url_for('home.blog', category=category_slug or None, page=pagination.next_num) if pagination.has_next else None
    prev_url = url_for('home.blog', category=category_slug or None, page=pagination.prev_num) if pagination.has_prev else None

    return render_template('blog/index.html',
                           posts=posts,
                           pagination=pagination,
                           category=category,
                           category_slug=category_slug,
                           categories=categories,
                           next_url=next_url,
                           prev_url=prev_url)


# Post detail page
@home_bp.route('/blog/<slug>')
def post_detail(slug):
    post = get_published_post(slug)
    if post is None:
        logger.warning(f"Attempted to access non-existent or unpublished post: {slug}")
        abort(404)
    published = format_thai_date(post.published_at, timezone=current_app.config['DISPLAY_TIMEZONE'])
    return render_template('blog/detail.html', post=post, published=published, title=post.title)
