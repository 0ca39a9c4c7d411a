"""
Player Repository

MongoDB persistence for WheelWord players. Each player has one document that
holds the current daily game and the statistics, so finishing a game and
recording its result is a single atomic document write.
"""

import datetime
from typing import Any, Dict, Optional

from pymongo.errors import DuplicateKeyError
from pymongo.database import Database


class PlayerRepository:
    """
    Stores one document per player in the ``wheelword_players`` collection:

        {user_id, version, game, stats, created_at, updated_at}

    ``version`` is the optimistic concurrency token. Every successful save
    increments it, and a save only applies if the version it read is still
    current.
    """

    def __init__(self, database: Database):
        self.db = database
        self.players_collection = database.wheelword_players

        # One document, and therefore one open game, per player
        self.players_collection.create_index("user_id", unique=True)

    def find_player(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Read a player document without creating it."""
        return self.players_collection.find_one({"user_id": user_id}, {"_id": 0})

    def save_player(self, user_id: str, expected_version: int,
                    game: Dict[str, Any], stats: Optional[Dict[str, Any]] = None) -> bool:
        """
        Write the player's game (and stats, when a game just finished).

        A new player's document is created by their first accepted guess,
        saved with ``expected_version`` 0.

        Args:
            user_id: Player identifier
            expected_version: Version of the document the change was computed from
            game: New game sub-document
            stats: New stats sub-document, or None to leave stats untouched

        Returns:
            True if the write applied, False if another write got there first
        """
        now = datetime.datetime.now(datetime.timezone.utc)
        changes: Dict[str, Any] = {
            "game": game,
            "updated_at": now
        }
        if stats is not None:
            changes["stats"] = stats

        try:
            result = self.players_collection.update_one(
                {"user_id": user_id, "version": expected_version},
                {
                    "$set": changes,
                    "$inc": {"version": 1},
                    "$setOnInsert": {"created_at": now}
                },
                upsert=expected_version == 0
            )
        except DuplicateKeyError:
            # Another first guess created the document in the meantime
            return False
        return result.matched_count == 1 or result.upserted_id is not None

    def count_players(self) -> int:
        return self.players_collection.count_documents({})
