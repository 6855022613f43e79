"""Flask application entry point."""

import logging
import os
import traceback
from pathlib import Path

from flask import Flask, jsonify
from flask_cors import CORS
from pymongo import MongoClient
from werkzeug.exceptions import HTTPException

from .api.responses import error_response
from .config import SETTINGS_KEY, Settings, get_settings
from .db import DB_KEY, Database, create_client
from .exceptions import BackendError, ValidationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    target = os.path.abspath(path)
    return any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == target
        for handler in logger.handlers
    )


def configure_logging(settings: Settings) -> None:
    """Configure console logging, plus log files when log_dir is set.

    Repeated calls reapply the level and attach each log file only once.
    """
    logging.basicConfig(format=LOG_FORMAT)
    root = logging.getLogger()
    root.setLevel(settings.log_level.upper())

    if settings.log_dir:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        formatter = logging.Formatter(LOG_FORMAT)

        for filename, level in (("error.log", logging.ERROR), ("combined.log", logging.NOTSET)):
            path = log_dir / filename
            if _has_file_handler(root, path):
                continue
            handler = logging.FileHandler(path)
            handler.setLevel(level)
            handler.setFormatter(formatter)
            root.addHandler(handler)


# Error handlers
def handle_validation_error(error: ValidationError):
    """Handle ValidationError exceptions (field/message list under errors)."""
    details = dict(error.details)
    errors = details.pop("errors", None)
    return error_response(error.message, error.status_code, errors=errors, details=details)


def handle_backend_error(error: BackendError):
    """Handle all other application exceptions using their status code."""
    level = logging.ERROR if error.status_code >= 500 else logging.INFO
    logger.log(level, f"{error.__class__.__name__}: {error.message} ({error.status_code})")
    stack = None
    if error.status_code >= 500 and not get_settings().is_production:
        stack = "".join(traceback.format_exception(error))
    return error_response(error.message, error.status_code, details=error.details, stack=stack)


def handle_http_error(error: HTTPException):
    """Render werkzeug HTTP errors (unknown route, wrong method) as envelopes."""
    return error_response(error.description or error.name, error.code or 500)


def handle_internal_error(error: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Internal error: {error}")
    stack = None if get_settings().is_production else "".join(traceback.format_exception(error))
    return error_response("Internal Server Error", 500, stack=stack)


def register_error_handlers(app: Flask) -> None:
    app.register_error_handler(ValidationError, handle_validation_error)
    app.register_error_handler(BackendError, handle_backend_error)
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_internal_error)


def create_app(settings: Settings | None = None, mongo_client: MongoClient | None = None) -> Flask:
    """
    Build and configure a Flask application.

    Args:
        settings: Application settings; read from the environment if omitted
        mongo_client: pymongo-compatible client; created from settings if omitted

    Returns:
        Configured Flask app with its own Settings and Database
    """
    settings = settings or Settings()
    configure_logging(settings)

    app = Flask(__name__)
    CORS(app, origins=settings.cors_origins, supports_credentials=True)

    database = Database(mongo_client or create_client(settings), settings.mongo_db_name)
    app.extensions[SETTINGS_KEY] = settings
    app.extensions[DB_KEY] = database

    try:
        database.init_db()
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise

    register_error_handlers(app)

    @app.get("/")
    def index():
        """Root endpoint."""
        return jsonify({"success": True, "message": "API is running"})

    @app.get("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok"})

    # Register API blueprints
    from .auth.api import auth_bp
    from .users.api import users_bp

    app.register_blueprint(auth_bp, url_prefix=f"{settings.api_prefix}/auth")
    app.register_blueprint(users_bp, url_prefix=f"{settings.api_prefix}/users")

    logger.info("All routes configured successfully")
    return app


if __name__ == "__main__":
    application = create_app()
    app_settings = application.extensions[SETTINGS_KEY]
    application.run(port=app_settings.port, debug=not app_settings.is_production)
