# hoshizora/routes/auth.py

from urllib.parse import urlparse

from flask import Blueprint, render_template, redirect, url_for, flash, request, current_app
from flask_login import login_user, logout_user, login_required, current_user

from hoshizora.forms import LoginForm
from hoshizora.models import User

bp = Blueprint('auth', __name__)


def _safe_next(target):
    # Only follow redirects that stay on this site
    if not target:
        return None
    parsed = urlparse(target)
    if parsed.scheme or parsed.netloc or not target.startswith('/'):
        return None
    return target


@bp.route('/login', methods=['GET', 'POST'])
def login():
    if current_user.is_authenticated:
        return redirect(url_for('home.index'))

    form = LoginForm()
    if form.validate_on_submit():
        user = User.query.filter_by(username=form.username.data).first()
        if user is None or not user.check_password(form.password.data) or not user.is_active:
            flash('ชื่อผู้ใช้หรือรหัสผ่านไม่ถูกต้อง', 'danger')
            current_app.logger.warning(f"Failed login attempt for username: {form.username.data}")
            return render_template('auth/login.html', form=form, title='เข้าสู่ระบบ'), 401

        login_user(user, remember=form.remember.data)
        current_app.logger.info(f"User {user.username} logged in.")
        flash('เข้าสู่ระบบเรียบร้อยแล้ว', 'success')
        default = url_for('admin.list_categories') if user.is_admin else url_for('home.index')
        return redirect(_safe_next(request.args.get('next')) or default)

    return render_template('auth/login.html', form=form, title='เข้าสู่ระบบ')


@bp.route('/logout')
@login_required
def logout():
    logout_user()
    flash('ออกจากระบบแล้ว', 'info')
    return redirect(url_for('home.index'))
