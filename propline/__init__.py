from flask import Flask
from .extensions import db, login_manager, migrate
from .logging_config import setup_logging
from .errors import register_error_handlers
from .cli import register_commands
from config import Config

def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    setup_logging(app)

    # Init Extensions
    db.init_app(app)
    login_manager.init_app(app)
    migrate.init_app(app, db)

    # Register Blueprints
    from .blueprints.auth import auth_bp
    from .blueprints.main import main_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(main_bp)

    register_error_handlers(app)

    # Seeding is a separate step (`flask seed-db`), never part of app creation:
    # every Gunicorn worker imports the app.
    register_commands(app)

    app.logger.info(f"propline app created ({config_class.__name__})")
    return app
