"""
Word Scramble Game Server - Main Entry Point

This is the main entry point for the word scramble game server.
It loads the root-word list, initializes the game service and starts the
Flask-SocketIO application.
"""

from . import create_app
from .config import Config
from .services.game_service import initialize_game_service
from .services.word_source import FileWordSource, WordPoolUnavailableError
from .utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        # Without a word list no session can ever start
        try:
            game_service = initialize_game_service(FileWordSource(Config.WORD_LIST_PATH))
        except WordPoolUnavailableError as e:
            print(f"✗ Failed to load word list: {e}")
            game_logger.logger.critical(f"Cannot start without a word list: {e}")
            raise
        print(f"✓ Game service initialized with {len(game_service.word_pool)} root words")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Word Scramble Server Starting")

        print(f"\nStarting Word Scramble Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Scramble Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
