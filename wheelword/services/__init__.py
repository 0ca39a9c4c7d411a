"""
Services Package

Contains all business logic and service classes.
"""

from .daily_selector import DailySelector
from .game_session import GameSession
from .player_repository import PlayerRepository
from .scoring import Dictionary, normalize_word, score_guess
from .wheelword_service import WheelwordService, get_wheelword_service, initialize_wheelword_service

__all__ = [
    'DailySelector', 'GameSession', 'PlayerRepository',
    'Dictionary', 'normalize_word', 'score_guess',
    'WheelwordService', 'get_wheelword_service', 'initialize_wheelword_service'
]
