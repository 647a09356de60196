# hoshizora/admin/__init__.py

from flask import Blueprint

bp = Blueprint('admin', __name__)

# Must come after bp is defined, the routes register on it
from . import routes  # noqa: E402,F401
