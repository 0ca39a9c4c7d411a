"""
WheelWord Service Application Package

Backend for the Wheels House daily word-guessing game: deterministic daily
words, guess scoring, per-player game state and statistics.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    # Register blueprints
    from .controllers.wheelword_controller import wheelword_bp

    app.register_blueprint(wheelword_bp, url_prefix='/wheelword')

    return app
