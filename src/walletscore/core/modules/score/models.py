from datetime import datetime

from pydantic import Field

from walletscore.core.db import MongoModel
from walletscore.utils import now


class ScoreRecord(MongoModel):
    """Submitted game score, append-only.

    `name` is a copy of the user's display name at submission time.
    Indexed on (game, score) and (wallet, game, score).
    """

    wallet: str
    game: str
    score: int | float
    name: str = ""
    timestamp: datetime = Field(default_factory=now)
