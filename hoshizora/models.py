# hoshizora/models.py

import uuid
from datetime import datetime

import pytz
from flask_login import UserMixin
from sqlalchemy.orm import relationship
from sqlalchemy_utils import UUIDType
from werkzeug.security import generate_password_hash, check_password_hash

from hoshizora.extensions import db, login_manager


POST_STATUS_DRAFT = 'draft'
POST_STATUS_PUBLISHED = 'published'


def utcnow():
    return datetime.now(pytz.utc)


class User(UserMixin, db.Model):
    """
    A blog author. Authors own posts; administrators may also manage
    categories from the admin pages.
    """
    __tablename__ = 'users'
    id = db.Column(UUIDType(binary=False), primary_key=True, default=uuid.uuid4)
    username = db.Column(db.String(64), unique=True, nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)
    display_name = db.Column(db.String(128), nullable=False)
    title = db.Column(db.String(128), nullable=True)
    avatar = db.Column(db.String(500), nullable=True)
    is_admin = db.Column(db.Boolean, default=False, nullable=False)
    active = db.Column(db.Boolean, default=True, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    posts = relationship('Post', back_populates='author', lazy='dynamic')

    @property
    def is_active(self):
        return self.active

    def set_password(self, password):
        """Hash and store the given password."""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """Return True when the password matches the stored hash."""
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f'<User {self.username}>'


@login_manager.user_loader
def load_user(user_id):
    try:
        return db.session.get(User, uuid.UUID(str(user_id)))
    except ValueError:
        return None


class Category(db.Model):
    """
    A post category. Slugs are unique across the whole blog.
    """
    __tablename__ = 'categories'
    id = db.Column(UUIDType(binary=False), primary_key=True, default=uuid.uuid4)
    name = db.Column(db.String(128), nullable=False)
    slug = db.Column(db.String(128), unique=True, nullable=False)
    description = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    posts = relationship('Post', back_populates='category', lazy='dynamic')

    def to_dict(self):
        return {
            'id': str(self.id),
            'name': self.name,
            'slug': self.slug,
            'description': self.description,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<Category {self.name}>'


class Post(db.Model):
    """
    A blog post. Only posts with status 'published' are visible on the site.
    """
    __tablename__ = 'posts'
    id = db.Column(UUIDType(binary=False), primary_key=True, default=uuid.uuid4)
    title = db.Column(db.String(256), nullable=False)
    description = db.Column(db.Text, nullable=True)
    content = db.Column(db.Text, nullable=False, default='')
    featured_image = db.Column(db.String(500), nullable=True)
    slug = db.Column(db.String(256), unique=True, nullable=False)
    status = db.Column(db.String(20), default=POST_STATUS_DRAFT, nullable=False, index=True)
    published_at = db.Column(db.DateTime, nullable=True, index=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    user_id = db.Column(UUIDType(binary=False), db.ForeignKey('users.id'), nullable=False)
    category_id = db.Column(UUIDType(binary=False), db.ForeignKey('categories.id'), nullable=True)

    author = relationship('User', back_populates='posts')
    category = relationship('Category', back_populates='posts')

    def __repr__(self):
        return f'<Post {self.title}>'
