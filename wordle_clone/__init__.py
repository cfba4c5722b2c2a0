"""
Wordle Clone Server Application Package

Word-guessing game engine exposed to a presentation client over HTTP
and WebSocket.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Tuple of the Flask application and its SocketIO instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app, origins=config_class.CORS_ORIGINS)
    socketio = SocketIO(app, cors_allowed_origins=config_class.CORS_ORIGINS, logger=False, engineio_logger=False)

    # Initialize game service
    from .services.game_service import initialize_game_service
    initialize_game_service(max_guesses=config_class.MAX_GUESSES)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
