"""
Language Color Game Server - Main Entry Point

Initializes the game service and starts the Flask-SocketIO application.
"""

import threading
import time
from langcolor import create_app
from langcolor.config import Config
from langcolor.services.game_service import initialize_game_service, get_game_service
from langcolor.utils.game_logger import game_logger


def stale_game_cleanup_worker(interval_seconds, max_idle_seconds):
    """
    Background worker that periodically removes idle game sessions.
    Disposing a session also cancels its reveal timer.
    """
    print(f"Stale game cleanup worker started - checking every {interval_seconds} seconds")
    while True:
        try:
            game_service = get_game_service()
            if game_service:
                expired = game_service.cleanup_stale_games(max_idle_seconds)
                if expired:
                    game_logger.logger.info(f"Stale game cleanup: Removed {len(expired)} idle game(s)")
        except Exception as e:
            game_logger.logger.error(f"Error in stale game cleanup worker: {e}")

        time.sleep(interval_seconds)


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        game_service = initialize_game_service(Config)
        print(f"✓ Game service initialized with {len(game_service.catalog)} languages")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        cleanup_thread = threading.Thread(
            target=stale_game_cleanup_worker,
            args=(Config.CLEANUP_INTERVAL_SECONDS, Config.GAME_IDLE_TIMEOUT_SECONDS),
            daemon=True
        )
        cleanup_thread.start()

        game_logger.logger.info("Language Color Server Starting")

        print(f"\nStarting Language Color Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Reveal window: {Config.REVEAL_SECONDS}s, attempt cap: {Config.MAX_ATTEMPTS}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Language Color Server shutting down (KeyboardInterrupt)")
        service = get_game_service()
        if service:
            service.shutdown()
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
