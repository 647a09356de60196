# hoshizora/services/posts.py

import logging
from dataclasses import dataclass
from typing import Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from hoshizora.extensions import db
from hoshizora.models import Category, Post, User, POST_STATUS_PUBLISHED
from hoshizora.utils import format_thai_date

logger = logging.getLogger(__name__)

LATEST_POSTS_LIMIT = 6


@dataclass(frozen=True)
class AuthorSummary:
    display_name: str
    title: Optional[str]
    avatar: Optional[str]


@dataclass(frozen=True)
class PostSummary:
    id: str
    title: str
    description: Optional[str]
    image: Optional[str]
    date: str
    category_name: Optional[str]
    author: AuthorSummary
    slug: str


def _summary_columns():
    return (
        Post.id,
        Post.title,
        Post.description,
        Post.featured_image.label('image'),
        Post.published_at.label('date'),
        Category.name.label('category_name'),
        User.display_name.label('author'),
        User.title.label('author_title'),
        User.avatar.label('author_avatar'),
        Post.slug,
    )


def _published_posts_select():
    return (
        db.select(*_summary_columns())
        .join(User, Post.user_id == User.id)
        .outerjoin(Category, Post.category_id == Category.id)
        .where(Post.status == POST_STATUS_PUBLISHED)
        .order_by(Post.published_at.desc())
    )


def _display_date(value):
    return format_thai_date(value, timezone=current_app.config.get('DISPLAY_TIMEZONE', 'Asia/Bangkok'))


def to_summary(row):
    """Map a row of the summary select to a PostSummary."""
    return PostSummary(
        id=str(row.id),
        title=row.title,
        description=row.description,
        image=row.image,
        date=_display_date(row.date),
        category_name=row.category_name,
        author=AuthorSummary(
            display_name=row.author,
            title=row.author_title,
            avatar=row.author_avatar,
        ),
        slug=row.slug,
    )


def post_to_summary(post):
    return PostSummary(
        id=str(post.id),
        title=post.title,
        description=post.description,
        image=post.featured_image,
        date=_display_date(post.published_at),
        category_name=post.category.name if post.category else None,
        author=AuthorSummary(
            display_name=post.author.display_name,
            title=post.author.title,
            avatar=post.author.avatar,
        ),
        slug=post.slug,
    )


def get_latest_posts(limit=None):
    """
    Newest published posts with author and category names, for the home page.

    Any database error is logged and an empty list is returned, so callers
    cannot tell "no posts yet" apart from "query failed".
    """
    if limit is None:
        limit = current_app.config.get('LATEST_POSTS_LIMIT', LATEST_POSTS_LIMIT)
    try:
        rows = db.session.execute(_published_posts_select().limit(limit)).all()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Error fetching latest posts: {e}", exc_info=True)
        return []
    return [to_summary(row) for row in rows]


def list_published_posts(category='', page=1, per_page=None):
    """
    One page of published posts for the blog listing, optionally restricted to
    a category slug. Returns ``(summaries, pagination)``.
    """
    if per_page is None:
        per_page = current_app.config.get('POSTS_PER_PAGE', 9)
    query = Post.query.options(joinedload(Post.author), joinedload(Post.category)) \
        .filter(Post.status == POST_STATUS_PUBLISHED)
    if category:
        query = query.join(Post.category).filter(Category.slug == category)
    pagination = query.order_by(Post.published_at.desc()).paginate(
        page=page, per_page=per_page, error_out=False
    )
    return [post_to_summary(post) for post in pagination.items], pagination


def get_published_post(slug):
    return Post.query.filter_by(slug=slug, status=POST_STATUS_PUBLISHED).first()
