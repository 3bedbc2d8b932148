from flask import Flask
from dotenv import load_dotenv

load_dotenv()

from config import Config  # noqa: E402  (load_dotenv needs to run first)
from extensions import broadcaster, cors, db, login_manager, socketio  # noqa: E402  (load_dotenv needs to run first)
from logger import configure_logging, get_logger  # noqa: E402


def create_app(config_class=Config) -> Flask:
    """Application factory for the asset tracking API."""

    app = Flask(__name__)
    app.config.from_object(config_class)

    logger = configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    logger.info("Initializing application")

    # init extensions
    db.init_app(app)
    login_manager.init_app(app)
    cors.init_app(app, origins=app.config["CORS_ORIGINS"], supports_credentials=True)
    socketio.init_app(app, cors_allowed_origins=app.config["CORS_ORIGINS"])
    broadcaster.init_app(app, socketio)

    # token loader and error boundary
    import tokens  # noqa: F401
    from errors import register_error_handlers

    register_error_handlers(app)

    # blueprints
    from modules.auth import bp as auth_bp
    from modules.assets import bp as assets_bp
    from modules.users import bp as users_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(assets_bp)
    app.register_blueprint(users_bp)

    # DB schema + seed admin
    from bootstrap import bootstrap

    bootstrap(app)

    return app


if __name__ == "__main__":
    app = create_app()
    log = get_logger("asset_tracker.server")
    log.info("Server running on port %s", app.config["PORT"])
    try:
        socketio.run(app, host="0.0.0.0", port=app.config["PORT"])
    finally:
        with app.app_context():
            db.engine.dispose()
