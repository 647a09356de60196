# hoshizora/extensions.py

from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_wtf.csrf import CSRFProtect
from flask_babel import Babel
from flask_login import LoginManager

# Extension instances, bound to the app in create_app()
db = SQLAlchemy()
migrate = Migrate()
csrf = CSRFProtect()
babel = Babel()
login_manager = LoginManager()
