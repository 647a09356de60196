# hoshizora/services/categories.py

import logging

from sqlalchemy.exc import IntegrityError

from hoshizora.errors import (
    CategoryInUseError,
    CategoryNotFoundError,
    CategoryValidationError,
    SlugConflictError,
)
from hoshizora.extensions import db
from hoshizora.messages import NAME_REQUIRED, SLUG_INVALID, SLUG_REQUIRED
from hoshizora.models import Category
from hoshizora.slugs import is_valid_slug

logger = logging.getLogger(__name__)


def validate_fields(name, slug):
    """Return a field -> message mapping; empty when the values are acceptable."""
    errors = {}
    if not (name or '').strip():
        errors['name'] = NAME_REQUIRED
    if not (slug or '').strip():
        errors['slug'] = SLUG_REQUIRED
    elif not is_valid_slug(slug):
        errors['slug'] = SLUG_INVALID
    return errors


def list_categories():
    return Category.query.order_by(Category.name.asc()).all()


def get_category(category_id):
    category = db.session.get(Category, category_id)
    if category is None:
        raise CategoryNotFoundError()
    return category


def _check_slug_available(slug, exclude_id=None):
    query = Category.query.filter_by(slug=slug)
    if exclude_id is not None:
        query = query.filter(Category.id != exclude_id)
    if query.first() is not None:
        raise SlugConflictError(fields={'slug': SlugConflictError.default_message})


def _commit():
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        # Lost a race against another writer on the unique slug index.
        logger.warning(f"IntegrityError saving category: {e}")
        raise SlugConflictError(fields={'slug': SlugConflictError.default_message}) from e


def create_category(name, slug, description=None):
    errors = validate_fields(name, slug)
    if errors:
        raise CategoryValidationError(fields=errors)
    _check_slug_available(slug)

    category = Category(name=name.strip(), slug=slug, description=description or None)
    db.session.add(category)
    _commit()
    logger.info(f"Category created: {category.id} ({category.slug})")
    return category


def update_category(category, name, slug, description=None):
    errors = validate_fields(name, slug)
    if errors:
        raise CategoryValidationError(fields=errors)
    _check_slug_available(slug, exclude_id=category.id)

    category.name = name.strip()
    category.slug = slug
    if description is not None:
        category.description = description or None
    _commit()
    logger.info(f"Category updated: {category.id} ({category.slug})")
    return category


def delete_category(category):
    if category.posts.count() > 0:
        raise CategoryInUseError()
    category_id = category.id
    db.session.delete(category)
    db.session.commit()
    logger.info(f"Category deleted: {category_id}")
