# hoshizora/decorators.py

import hmac
import logging
from functools import wraps

from flask import abort, current_app, flash, jsonify, redirect, request, url_for
from flask_login import current_user

logger = logging.getLogger(__name__)


def admin_required(f):
    """
    Require a logged-in administrator. Anonymous users are sent to the login
    page, logged-in non-administrators get 403.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            flash('กรุณาเข้าสู่ระบบก่อน', 'warning')
            return redirect(url_for('auth.login', next=request.path))
        if not current_user.is_admin:
            logger.warning(f"ACCESS_DENIED: User {current_user.id} attempted to access {f.__name__} without admin rights.")
            abort(403)
        return f(*args, **kwargs)
    return decorated_function


def api_token_required(f):
    """
    Require ``Authorization: Bearer <ADMIN_API_TOKEN>``. Writes are refused
    outright while no token is configured.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        expected = current_app.config.get('ADMIN_API_TOKEN') or ''
        header = request.headers.get('Authorization', '')
        scheme, _, token = header.partition(' ')
        if not expected or scheme.lower() != 'bearer' or not hmac.compare_digest(token.strip(), expected):
            logger.warning(f"ACCESS_DENIED: API call to {request.path} without a valid token.")
            return jsonify({'error': 'ไม่ได้รับอนุญาต', 'code': 'unauthorized'}), 401
        return f(*args, **kwargs)
    return decorated_function
