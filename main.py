"""
Timed Wordle Game Server - Main Entry Point

This is the main entry point for the game server.
It initializes the game service, starts the clock worker and runs the
Flask-SocketIO application.
"""

import threading
import time
from timed_wordle import create_app
from timed_wordle.config import Config
from timed_wordle.services.game_service import initialize_game_service, get_game_service
from timed_wordle.utils.game_logger import game_logger


def timer_tick_worker(interval_seconds, stop_event=None):
    """
    Background worker that advances every running game clock.

    Elapsed time is measured with a monotonic clock, so a late wake-up is
    charged in full on the next tick rather than lost.
    """
    print("Timer tick worker started")
    last = time.monotonic()
    while stop_event is None or not stop_event.is_set():
        time.sleep(interval_seconds)
        now = time.monotonic()
        delta = now - last
        last = now

        try:
            game_service = get_game_service()
            if game_service:
                game_service.tick(delta)
        except Exception as e:
            game_logger.logger.error(f"Error in timer tick worker: {e}")


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        # Word list problems are fatal: no game can start without them
        game_service = initialize_game_service(Config)
        print(f"✓ Game service initialized with {len(game_service.word_bank.solutions)} solutions "
              f"and {len(game_service.word_bank.valid_words)} valid words")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        tick_thread = threading.Thread(
            target=timer_tick_worker, args=(Config.TICK_INTERVAL_SECONDS,), daemon=True
        )
        tick_thread.start()
        print(f"✓ Timer tick worker started - ticking every {Config.TICK_INTERVAL_SECONDS}s")

        game_logger.logger.info("Timed Wordle Server Starting")

        print(f"\nStarting Timed Wordle Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Clock: {Config.TIMER_START_SECONDS}s, invalid word penalty: {Config.INVALID_WORD_PENALTY_SECONDS}s")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Timed Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
