"""
Game Session

State machine for one player's daily game:
NOT_STARTED -> IN_PROGRESS -> WON | LOST. WON and LOST are terminal.
"""

from typing import Dict, Iterable, List, Optional

from ..exceptions import DuplicateGuess, GameAlreadyFinished, InvalidGuessLength, WordNotInDictionary
from ..models.game import (
    FEEDBACK_PRIORITY, DailyGame, GameState, GuessFeedback, LetterFeedback, SessionStatus
)
from .scoring import Dictionary, normalize_word, score_guess


class GameSession:
    """
    One player's attempts at one daily game.

    submit() validates completely before it touches any state, so a rejected
    guess never consumes an attempt.
    """

    def __init__(self, game: DailyGame, target: str, max_attempts: int,
                 dictionary: Optional[Dictionary] = None):
        self.game = game
        self.target = target
        self.max_attempts = max_attempts
        self.dictionary = dictionary
        self.history: List[GuessFeedback] = []

    @classmethod
    def restore(cls, game: DailyGame, target: str, max_attempts: int, attempts: Iterable[str],
                dictionary: Optional[Dictionary] = None) -> "GameSession":
        """
        Rebuild a session from previously accepted attempts. Feedback is
        recomputed from the target; dictionary membership is not re-checked.
        """
        session = cls(game, target, max_attempts, dictionary)
        for attempt in attempts:
            if session.status.is_terminal:
                break
            word = normalize_word(attempt)
            if word in session.attempts:
                continue
            session.history.append(GuessFeedback(word, tuple(score_guess(target, word))))
        return session

    @property
    def attempts(self) -> List[str]:
        return [entry.guess for entry in self.history]

    @property
    def status(self) -> SessionStatus:
        if not self.history:
            return SessionStatus.NOT_STARTED
        if self.history[-1].is_correct:
            return SessionStatus.WON
        if len(self.history) >= self.max_attempts:
            return SessionStatus.LOST
        return SessionStatus.IN_PROGRESS

    @property
    def game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def won(self) -> bool:
        return self.status == SessionStatus.WON

    def validate(self, guess: str) -> str:
        """Return the normalized guess or raise why it cannot be played."""
        if self.game_over:
            raise GameAlreadyFinished("Today's game is already finished")

        word = normalize_word(guess)
        if len(word) != len(self.target):
            raise InvalidGuessLength(f"The word must have {len(self.target)} letters")

        if self.dictionary is not None and word not in self.dictionary:
            raise WordNotInDictionary(f"'{word}' is not in the word list")

        if word in self.attempts:
            raise DuplicateGuess(f"You already tried '{word}'")

        return word

    def submit(self, guess: str) -> GuessFeedback:
        word = self.validate(guess)
        result = GuessFeedback(word, tuple(score_guess(self.target, word)))
        self.history.append(result)
        return result

    def letter_status(self) -> Dict[str, str]:
        """Best status seen for each guessed letter."""
        best: Dict[str, LetterFeedback] = {}
        for entry in self.history:
            for letter, status in zip(entry.guess, entry.feedback):
                current = best.get(letter)
                if current is None or FEEDBACK_PRIORITY[status] > FEEDBACK_PRIORITY[current]:
                    best[letter] = status
        return {letter: status.value for letter, status in sorted(best.items())}

    def to_state(self) -> GameState:
        return GameState(
            game_number=self.game.game_number,
            word_length=self.game.word_length,
            game_date=self.game.game_date,
            attempts=self.attempts,
            feedbacks=[entry.values() for entry in self.history],
            game_over=self.game_over,
            won=self.won,
            letter_status=self.letter_status(),
            correct_word=self.target if self.game_over else None
        )
