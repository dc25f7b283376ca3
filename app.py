import logging
import time

from flask import Flask, g, request
from dotenv import load_dotenv
from sqlalchemy import event

load_dotenv()

from config import Config  # noqa: E402  (load_dotenv needs to run first)
from extensions import db, login_manager  # noqa: E402  (load_dotenv needs to run first)
from logging_setup import setup_logging  # noqa: E402

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_app(overrides: dict | None = None) -> Flask:
    """Application factory for the task manager API."""

    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        # before init_app: the engine is built from this config
        app.config.update(overrides)

    setup_logging(app.config["LOG_LEVEL"],
                  quiet_werkzeug=app.config["APP_ENV"] != "development")

    # init extensions
    db.init_app(app)
    login_manager.init_app(app)

    # blueprints
    from modules.auth import bp as auth_bp
    from modules.tasks import bp as tasks_bp
    from modules.admin import bp as admin_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(tasks_bp)
    app.register_blueprint(admin_bp)

    from ui_routes import ui
    app.register_blueprint(ui)  # "/" and health

    from errors import register_error_handlers
    register_error_handlers(app)

    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.get("request_started")
        elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        logger.info("%s %s %s %.1fms", request.method, request.full_path.rstrip("?"),
                    response.status_code, elapsed_ms)
        return response

    # DB
    with app.app_context():
        # models must be imported before create_all()
        import models  # noqa: F401
        from modules.tasks import models as task_models  # noqa: F401

        if db.engine.dialect.name == "sqlite":
            event.listen(db.engine, "connect", _enable_sqlite_foreign_keys)
        db.create_all()
        logger.info("App created (env=%s, db=%s)", app.config["APP_ENV"],
                    db.engine.url.render_as_string(hide_password=True))

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=app.config["APP_ENV"] == "development")
