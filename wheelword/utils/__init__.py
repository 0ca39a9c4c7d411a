"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_auth, optional_auth
from .helpers import get_user_identity, current_user_id
from .game_logger import wheelword_logger

__all__ = ['require_auth', 'optional_auth', 'get_user_identity', 'current_user_id', 'wheelword_logger']
