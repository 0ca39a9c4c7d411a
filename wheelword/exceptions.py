"""
WheelWord Exceptions

Every failure the game can report to a caller. Each error carries the HTTP
status and the machine-readable code the controllers put in the response.
"""


class WheelwordError(Exception):
    """Base class for all WheelWord errors."""
    status_code = 400
    code = "wheelword_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {
            'success': False,
            'error': self.message,
            'code': self.code
        }


class InvalidRequest(WheelwordError):
    """Malformed request body."""
    code = "invalid_request"


class InvalidGuessCharacters(WheelwordError):
    """Guess contains something other than letters."""
    code = "invalid_guess_characters"


class InvalidGuessLength(WheelwordError):
    """Guess length differs from the target word length."""
    code = "invalid_guess_length"


class WordNotInDictionary(WheelwordError):
    """Guess is not an accepted word."""
    code = "word_not_in_dictionary"


class DuplicateGuess(WheelwordError):
    """Guess was already tried in this game."""
    code = "duplicate_guess"


class GameAlreadyFinished(WheelwordError):
    """Today's game is already won or lost."""
    status_code = 409
    code = "game_already_finished"


class ConcurrentUpdateError(WheelwordError):
    """Another submission kept winning the write race for the same player."""
    status_code = 409
    code = "concurrent_update"


class PersistenceUnavailable(WheelwordError):
    """No database is configured for player state."""
    status_code = 503
    code = "persistence_unavailable"


class ConfigurationError(WheelwordError):
    """Word bank or game settings are unusable. Not user-recoverable."""
    status_code = 503
    code = "configuration_error"
