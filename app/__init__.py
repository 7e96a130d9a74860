import os

from flask import Flask, current_app
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from config import Config

from .logging import configure as configure_logging, get_logger

# Initialize extensions
db = SQLAlchemy()

LOG = get_logger("app")


def check_connection():
    """Ask the database for its clock; log and return it, or None on failure."""
    try:
        now = db.session.execute(text("SELECT CURRENT_TIMESTAMP")).scalar()
    except SQLAlchemyError:
        LOG.error("Error de conexión a la base de datos", exc_info=True)
        db.session.rollback()
        return None
    LOG.info("Conexión exitosa a la base de datos: %s", now)
    return now


def _add_cors_headers(response):
    response.headers['Access-Control-Allow-Origin'] = current_app.config['CORS_ORIGIN']
    response.headers['Access-Control-Allow-Methods'] = 'GET, OPTIONS'
    response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
    return response


# Create app factory
def create_app(config_class=Config):
    # frontend files are served from the site root, next to the API routes
    app = Flask(
        __name__,
        static_folder=os.path.abspath(config_class.STATIC_FOLDER),
        static_url_path='',
    )
    app.config.from_object(config_class)
    configure_logging(app.config['LOG_LEVEL'])

    db.init_app(app)

    from .routes import bp
    app.register_blueprint(bp)
    app.after_request(_add_cors_headers)

    if app.config.get('CHECK_DB_ON_STARTUP'):
        with app.app_context():
            check_connection()

    return app
