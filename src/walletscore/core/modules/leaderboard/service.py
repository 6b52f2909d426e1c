from typing import Any

from pymongo.asynchronous.database import AsyncDatabase

from walletscore.config import Config
from walletscore.core.core import Service
from walletscore.core.modules.score.models import ScoreRecord
from walletscore.errors import MissingFieldsError

LEADERBOARD_LIMIT = 50


class LeaderboardService(Service):
    """Read-only views over submitted scores."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]], config: Config) -> None:
        super().__init__(database, config)
        self._collection = database.get_collection("scores")

    async def get_best_score(self, wallet: str, game: str) -> ScoreRecord | None:
        """Get the highest score a wallet has submitted for a game."""
        if not wallet or not game:
            raise MissingFieldsError("Missing wallet or game query parameter")
        doc = await self._collection.find_one({"wallet": wallet, "game": game}, sort=[("score", -1)])
        if doc is None:
            return None
        return ScoreRecord.model_validate(doc)

    async def get_leaderboard(self, game: str, limit: int = LEADERBOARD_LIMIT) -> list[ScoreRecord]:
        """Get top scores for a game, highest first. `limit` is clamped to 1..LEADERBOARD_LIMIT."""
        if not game:
            raise MissingFieldsError("Missing game query parameter")
        cursor = self._collection.find({"game": game}).sort("score", -1).limit(max(1, min(limit, LEADERBOARD_LIMIT)))
        return await ScoreRecord.list_cursor(cursor)
