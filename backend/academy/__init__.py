import logging
import os

from flask import Flask, jsonify
from flask_cors import CORS
from flask_socketio import SocketIO
from werkzeug.exceptions import HTTPException

from config import Config

socketio = SocketIO(async_mode=None)


def _cors_origins(value):
    origins = [o.strip() for o in (value or '*').split(',') if o.strip()]
    return '*' if not origins or origins == ['*'] else origins


def create_app(config_class=Config):
    flask_app = Flask(
        __name__,
        static_folder=getattr(config_class, 'STATIC_DIR', None),
        static_url_path='',
    )
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = _cors_origins(flask_app.config.get('CORS_ORIGINS'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One shared game context per app; handlers reach it through current_app
    from academy.context import EXTENSION_KEY, GameContext
    flask_app.extensions[EXTENSION_KEY] = GameContext.create(
        socketio,
        max_entries=flask_app.config.get('LEADERBOARD_MAX_ENTRIES', 100),
        top_n=flask_app.config.get('LEADERBOARD_TOP_N', 10),
    )

    from academy.main import main
    flask_app.register_blueprint(main)

    from academy.api import api
    flask_app.register_blueprint(api, url_prefix='/api')

    from academy.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    @flask_app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        if isinstance(exc, HTTPException):
            return exc
        flask_app.logger.exception(f"[error] unhandled request failure: {exc}")
        return jsonify({'error': 'Something broke!'}), 500

    return flask_app


def ensure_static_dir(flask_app) -> None:
    static_dir = flask_app.static_folder
    if static_dir and not os.path.isdir(static_dir):
        os.makedirs(static_dir, exist_ok=True)
        flask_app.logger.info(f"[startup] created static directory {static_dir}")


def configure_logging(level='INFO') -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
