"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    LetterFeedback, SessionStatus, WordEntry, DailyGame, GuessFeedback, GameState, GuessResult
)
from .stats import WheelwordStats
from .requests import GuessRequest, ShareRequest

__all__ = [
    'LetterFeedback', 'SessionStatus', 'WordEntry', 'DailyGame', 'GuessFeedback',
    'GameState', 'GuessResult', 'WheelwordStats', 'GuessRequest', 'ShareRequest'
]
