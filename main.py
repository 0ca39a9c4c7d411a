"""
WheelWord Server - Main Entry Point

This is the main entry point for the WheelWord game server.
It initializes the game service and starts the Flask application.
"""

import os
import sys
from wheelword import create_app
from wheelword.config import config
from wheelword.exceptions import ConfigurationError
from wheelword.services.wheelword_service import initialize_wheelword_service
from wheelword.utils.game_logger import wheelword_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('FLASK_ENV', 'default')]

    try:
        print("Initializing services...")

        wheelword_service = initialize_wheelword_service(config_class)
        print("✓ WheelWord service initialized successfully")
        print(f"Persistence available: {wheelword_service.repository is not None}")

        # Fails here rather than serving a wrong word later
        todays_game = wheelword_service.get_todays_game()
        print(f"✓ Today's game: #{todays_game.game_number} ({todays_game.word_length} letters)")

        print("Creating Flask application...")
        app = create_app(config_class)
        print("✓ Flask application created successfully")

        wheelword_logger.logger.info("WheelWord Server Starting")

        print(f"\nStarting WheelWord Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        wheelword_logger.logger.info("WheelWord Server shutting down (KeyboardInterrupt)")
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        wheelword_logger.logger.error(f"Configuration error, refusing to start: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"Error starting server: {e}")
        wheelword_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
