# hoshizora/api/__init__.py

from flask import Blueprint, jsonify

from hoshizora.errors import BlogError

bp = Blueprint('api', __name__)


@bp.errorhandler(BlogError)
def handle_blog_error(error):
    return jsonify(error.to_dict()), error.status_code


# Imported after bp is defined so the routes can register on it
from . import categories  # noqa: E402,F401
