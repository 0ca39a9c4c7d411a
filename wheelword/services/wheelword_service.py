"""
WheelWord Service

Contains the daily game flow: today's game, guess submission for anonymous and
registered players, saved game state, statistics and share text.
"""

import datetime
import hashlib
from typing import Dict, List, Optional, Sequence

from pymongo import MongoClient
from pymongo.server_api import ServerApi

from ..config.game_settings import ACCEPTED_WORDS, MAX_ATTEMPTS, WORD_BANK
from ..exceptions import (
    ConcurrentUpdateError, ConfigurationError, InvalidGuessCharacters, InvalidGuessLength,
    InvalidRequest, PersistenceUnavailable
)
from ..models.game import DailyGame, GameState, GuessResult, LetterFeedback, WordEntry
from ..models.stats import WheelwordStats
from ..utils.game_logger import wheelword_logger
from .daily_selector import DailySelector
from .game_session import GameSession
from .player_repository import PlayerRepository
from .scoring import Dictionary

DEFAULT_SHARE_URL = 'https://wheelshouse.com/wheelword'


class WheelwordService:
    """
    Core WheelWord service.

    This class handles:
    - Today's game without exposing the target word
    - Guess validation and scoring through a GameSession
    - Persisting registered players' progress with optimistic concurrency
    - Recording each finished game in the player's statistics exactly once
    """

    def __init__(self, selector: DailySelector, dictionary: Optional[Dictionary] = None,
                 repository: Optional[PlayerRepository] = None,
                 max_attempts: int = MAX_ATTEMPTS, max_write_retries: int = 5,
                 share_url: str = DEFAULT_SHARE_URL):
        self.selector = selector
        self.dictionary = dictionary
        self.repository = repository
        self.max_attempts = max_attempts
        self.max_write_retries = max_write_retries
        self.share_url = share_url

    def get_todays_game(self) -> DailyGame:
        return self.selector.get_todays_game()

    def submit_guess(self, guess: str, user_id: Optional[str] = None,
                     session_attempts: Sequence[str] = ()) -> GuessResult:
        """
        Processes a guess for today's game.

        Anonymous players (user_id None) are scored against the attempts they
        echo back in session_attempts; nothing is stored. Registered players
        continue their stored game.

        Raises:
            WheelwordError subclasses for rejected guesses; state is unchanged
        """
        game, entry = self.selector.todays_puzzle()

        if user_id is None:
            try:
                session = GameSession.restore(game, entry.word, self.max_attempts,
                                              session_attempts, self.dictionary)
            except (InvalidGuessCharacters, InvalidGuessLength) as e:
                raise InvalidRequest("'sessionAttempts' contains an invalid word") from e
            result = session.submit(guess)
            return self._build_result(session, result.guess, result.values())

        return self._submit_registered_guess(game, entry, guess, user_id)

    def _submit_registered_guess(self, game: DailyGame, entry: WordEntry,
                                 guess: str, user_id: str) -> GuessResult:
        repository = self._require_repository()

        for _ in range(self.max_write_retries):
            # New players get a document only once a guess is accepted
            document = repository.find_player(user_id) or {"version": 0}
            session = self._session_from_document(document, game, entry)

            # Raises before anything is written
            result = session.submit(guess)

            stats_document = None
            stats = None
            if session.game_over:
                stats = WheelwordStats.from_document(document.get('stats'), self.max_attempts)
                stats.record_result(session.won, len(session.history), played_on=game.game_date)
                stats_document = stats.to_document()

            saved = repository.save_player(
                user_id, document['version'], self._game_document(session), stats_document
            )
            if not saved:
                wheelword_logger.logger.info(
                    f"Write conflict for player {user_id} on game #{game.game_number}, retrying"
                )
                continue

            return self._build_result(session, result.guess, result.values(),
                                      stats.to_dict() if stats else None)

        raise ConcurrentUpdateError("Another guess is being processed, please try again")

    def get_user_game_state(self, user_id: str) -> Optional[GameState]:
        """Today's game for a registered player, or None if not started."""
        repository = self._require_repository()
        game, entry = self.selector.todays_puzzle()

        document = repository.find_player(user_id)
        if not document or not self._is_todays_game(document.get('game'), game):
            return None
        return self._session_from_document(document, game, entry).to_state()

    def get_user_stats(self, user_id: str) -> WheelwordStats:
        repository = self._require_repository()
        document = repository.find_player(user_id) or {}
        return WheelwordStats.from_document(document.get('stats'), self.max_attempts)

    def generate_share_text(self, game_number: int, attempts: List[str],
                            feedbacks: List[List[LetterFeedback]], won: bool) -> str:
        """
        Formats the emoji-grid summary players paste into chats. Pure
        formatting: the arguments are not checked against stored games.
        """
        score = f"{len(attempts)}/{self.max_attempts}" if won else f"X/{self.max_attempts}"
        lines = [f"🏎️ WheelWord #{game_number} {score}", ""]
        lines.extend(''.join(status.emoji for status in row) for row in feedbacks)
        lines.extend(["", self.share_url])
        return '\n'.join(lines)

    def _require_repository(self) -> PlayerRepository:
        if self.repository is None:
            raise PersistenceUnavailable("Player storage is not configured")
        return self.repository

    @staticmethod
    def _is_todays_game(game_document: Optional[Dict], game: DailyGame) -> bool:
        return bool(game_document) and game_document.get('game_number') == game.game_number

    def _session_from_document(self, document: Dict, game: DailyGame, entry: WordEntry) -> GameSession:
        # A stored game from an earlier day is replaced by today's on first guess
        attempts = []
        game_document = document.get('game')
        if self._is_todays_game(game_document, game):
            self._check_same_target(game_document, game, entry)
            attempts = game_document.get('attempts') or []
        return GameSession.restore(game, entry.word, self.max_attempts, attempts, self.dictionary)

    @staticmethod
    def _check_same_target(game_document: Dict, game: DailyGame, entry: WordEntry):
        """A stored game must still resolve to the word it was played against."""
        stored_length = game_document.get('word_length')
        stored_fingerprint = game_document.get('target_fingerprint')
        if stored_length is None and stored_fingerprint is None:
            return
        if stored_length != entry.length or stored_fingerprint != target_fingerprint(entry.word):
            raise ConfigurationError(
                f"Word bank changed during game #{game.game_number}: "
                f"the stored game no longer matches today's word"
            )

    @staticmethod
    def _game_document(session: GameSession) -> Dict:
        return {
            "game_number": session.game.game_number,
            "game_date": session.game.game_date.isoformat(),
            "word_length": len(session.target),
            "target_fingerprint": target_fingerprint(session.target),
            "attempts": session.attempts,
            "attempts_count": len(session.history),
            "game_over": session.game_over,
            "won": session.won,
            "completed_at": datetime.datetime.now(datetime.timezone.utc) if session.game_over else None
        }

    @staticmethod
    def _build_result(session: GameSession, guess: str, feedback: List[str],
                      stats: Optional[Dict] = None) -> GuessResult:
        return GuessResult(
            game_number=session.game.game_number,
            guess=guess,
            feedback=feedback,
            is_correct=session.won,
            attempts_used=len(session.history),
            game_over=session.game_over,
            won=session.won,
            correct_word=session.target if session.game_over else None,
            stats=stats
        )


def target_fingerprint(word: str) -> str:
    """Short digest recorded with a stored game to pin the word it was played against."""
    return hashlib.sha256(word.encode('utf-8')).hexdigest()[:16]


def build_dictionary(word_bank: Sequence[WordEntry], check_enabled: bool = True,
                     dictionary_path: Optional[str] = None) -> Optional[Dictionary]:
    """
    Accepted guesses: the word bank, the bundled accepted words and an
    optional extra file. None disables dictionary checking.
    """
    if not check_enabled:
        return None
    base_words = [entry.word for entry in word_bank] + list(ACCEPTED_WORDS)
    if dictionary_path:
        return Dictionary.from_file(dictionary_path, extra_words=base_words)
    return Dictionary(base_words)


def connect_database(mongo_uri: str, db_name: str):
    """Open a MongoDB database handle and check the connection."""
    client = MongoClient(mongo_uri, server_api=ServerApi('1'))
    client.admin.command('ping')
    return client[db_name]


# Global service instance
_wheelword_service = None


def get_wheelword_service() -> Optional[WheelwordService]:
    """Get the global WheelWord service instance."""
    return _wheelword_service


def initialize_wheelword_service(config_class, database=None,
                                 word_bank: Sequence[WordEntry] = WORD_BANK,
                                 today_fn=None) -> WheelwordService:
    """
    Initialize the global WheelWord service instance.

    Args:
        config_class: Configuration class to read settings from
        database: pymongo Database to use; when omitted, one is opened from
            MONGO_URI if that is configured
        word_bank: Word bank for the daily selector
        today_fn: Date source override for the daily selector

    Returns:
        The initialized service
    """
    global _wheelword_service

    if database is None and config_class.MONGO_URI:
        database = connect_database(config_class.MONGO_URI, config_class.MONGO_DB_NAME)
    if database is None:
        wheelword_logger.logger.warning("No database configured: only anonymous games are available")

    selector = DailySelector(word_bank, config_class.WHEELWORD_EPOCH, today_fn=today_fn)
    dictionary = build_dictionary(word_bank, config_class.WHEELWORD_DICTIONARY_CHECK,
                                  config_class.WHEELWORD_DICTIONARY_PATH)

    _wheelword_service = WheelwordService(
        selector,
        dictionary=dictionary,
        repository=PlayerRepository(database) if database is not None else None,
        max_write_retries=config_class.WHEELWORD_MAX_WRITE_RETRIES,
        share_url=config_class.SHARE_URL
    )
    return _wheelword_service
