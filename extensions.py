from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Extensions are created unbound and attached in create_app()

# Database
db = SQLAlchemy()

# Request principal; tokens are resolved per request, no server-side session
login_manager = LoginManager()
