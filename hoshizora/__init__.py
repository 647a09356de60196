# hoshizora/__init__.py

import os
import logging
from logging.handlers import RotatingFileHandler
from datetime import datetime

import markdown
import pytz
from flask import Flask, render_template, request, jsonify
from flask_babel import get_locale

import config
from hoshizora.extensions import db, migrate, csrf, babel, login_manager


def _configure_logging(app):
    # app.logger is the "hoshizora" logger, so module loggers propagate into it.
    # Start from a clean slate when the factory runs more than once.
    app.logger.handlers.clear()

    # Rotating file log, skipped under test so runs do not leave files behind
    if not app.testing:
        log_dir = app.config.get('LOG_DIR') or 'logs'
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(os.path.join(log_dir, 'hoshizora.log'), maxBytes=10240, backupCount=10)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)

    # stdout logging (visible under gunicorn)
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.INFO)
    app.logger.addHandler(stream_handler)
    app.logger.setLevel(logging.INFO)


def _render_markdown(text):
    return markdown.markdown(
        text or '',
        extensions=[
            'fenced_code',
            'tables',
            'nl2br',
            'sane_lists',
            'codehilite',
            'extra',
        ]
    )


# Application factory
def create_app(config_class=config.Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///'):
        os.makedirs(app.instance_path, exist_ok=True)

    _configure_logging(app)

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)
    babel.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    login_manager.login_message = 'กรุณาเข้าสู่ระบบก่อน'
    login_manager.login_message_category = 'info'

    # Register model classes (and the user loader) with the extensions
    from hoshizora import models  # noqa: F401

    from hoshizora.presentation import category_colors, image_url, avatar_url

    @app.context_processor
    def inject_globals():
        return dict(
            current_year=datetime.now(pytz.utc).year,
            site_title=app.config.get('SITE_TITLE'),
            site_description=app.config.get('SITE_DESCRIPTION'),
            get_locale=get_locale,
        )

    app.jinja_env.filters['markdown'] = _render_markdown
    app.jinja_env.filters['category_colors'] = category_colors
    app.jinja_env.globals['image_url'] = image_url
    app.jinja_env.globals['avatar_url'] = avatar_url

    # Blueprints
    from hoshizora.routes.home import home_bp
    from hoshizora.routes.auth import bp as auth_bp
    from hoshizora.admin import bp as admin_bp
    from hoshizora.api import bp as api_bp

    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(admin_bp, url_prefix='/admin')
    # The JSON API authenticates with a bearer token, not a session cookie
    csrf.exempt(api_bp)
    app.register_blueprint(api_bp, url_prefix='/api')

    def _wants_json():
        return request.path.startswith('/api/')

    @app.errorhandler(403)
    def forbidden(error):
        if _wants_json():
            return jsonify({'error': 'ไม่ได้รับอนุญาต', 'code': 'forbidden'}), 403
        return render_template('errors/403.html'), 403

    @app.errorhandler(404)
    def not_found_error(error):
        app.logger.warning(f"PAGE_NOT_FOUND: {request.path}")
        if _wants_json():
            return jsonify({'error': 'ไม่พบข้อมูล', 'code': 'not_found'}), 404
        return render_template('errors/404.html'), 404

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        app.logger.error(f"INTERNAL_SERVER_ERROR: {error}", exc_info=True)
        if _wants_json():
            return jsonify({'error': 'เกิดข้อผิดพลาดภายในเซิร์ฟเวอร์', 'code': 'server_error'}), 500
        return render_template('errors/500.html'), 500

    # CLI commands
    from hoshizora import cli
    app.cli.add_command(cli.init)

    app.logger.info('Hoshizora Blog startup')
    return app
