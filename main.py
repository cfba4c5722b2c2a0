"""
Wordle Clone Server - Main Entry Point

Creates the Flask-SocketIO application and starts serving games.
"""

from wordle_clone import create_app
from wordle_clone.config import Config, WORD_LIST, get_word_statistics
from wordle_clone.utils.game_logger import game_logger


def main():
    """Main function to create the app and start the server."""
    try:
        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        stats = get_word_statistics(WORD_LIST)
        print(f"✓ Word list loaded: {stats['total_words']} words")

        game_logger.logger.info("Wordle Clone Server starting")

        print(f"\nStarting Wordle Clone Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Clone Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
