"""
Request Data Models

Typed request bodies for the WheelWord endpoints. Each body is validated
field by field before any service call.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..exceptions import InvalidRequest
from .game import LetterFeedback


def _require_body(data: Any) -> Dict:
    if not isinstance(data, dict):
        raise InvalidRequest("Request body must be a JSON object")
    return data


def _string_list(data: Dict, name: str, required: bool = True) -> List[str]:
    value = data.get(name)
    if value is None:
        if required:
            raise InvalidRequest(f"'{name}' is required")
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise InvalidRequest(f"'{name}' must be a list of strings")
    return list(value)


@dataclass(frozen=True)
class GuessRequest:
    """POST /wheelword/guess"""
    guess: str
    session_attempts: List[str]

    @classmethod
    def from_json(cls, data: Any) -> "GuessRequest":
        data = _require_body(data)
        guess = data.get('guess')
        if not isinstance(guess, str) or not guess.strip():
            raise InvalidRequest("Guess is required")
        return cls(guess=guess, session_attempts=_string_list(data, 'sessionAttempts', required=False))


@dataclass(frozen=True)
class ShareRequest:
    """POST /wheelword/share"""
    game_number: int
    attempts: List[str]
    feedbacks: List[List[LetterFeedback]]
    won: bool

    @classmethod
    def from_json(cls, data: Any) -> "ShareRequest":
        data = _require_body(data)

        game_number = data.get('gameNumber')
        # bool is an int subclass; reject it explicitly
        if not isinstance(game_number, int) or isinstance(game_number, bool) or game_number < 1:
            raise InvalidRequest("'gameNumber' must be a positive integer")

        won = data.get('won')
        if not isinstance(won, bool):
            raise InvalidRequest("'won' must be a boolean")

        attempts = _string_list(data, 'attempts')

        raw_feedbacks = data.get('feedbacks')
        if not isinstance(raw_feedbacks, list):
            raise InvalidRequest("'feedbacks' must be a list of feedback rows")
        feedbacks = [cls._parse_row(row) for row in raw_feedbacks]

        return cls(game_number=game_number, attempts=attempts, feedbacks=feedbacks, won=won)

    @staticmethod
    def _parse_row(row: Optional[Any]) -> List[LetterFeedback]:
        if not isinstance(row, list):
            raise InvalidRequest("Each feedback row must be a list")
        try:
            return [LetterFeedback.parse(cell) for cell in row]
        except (ValueError, AttributeError):
            raise InvalidRequest(f"Unknown feedback value in row {row!r}")
