from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from walletscore.config import Config
from walletscore.core.core import Service
from walletscore.core.modules.score.models import ScoreRecord
from walletscore.core.modules.signature.verifier import message_bytes, verify_signature
from walletscore.errors import InvalidSignatureError, MissingFieldsError, SessionMismatchError

logger = structlog.get_logger(__name__)


class ScoreService(Service):
    """Accepts scores backed by a live session token and a fresh wallet signature."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]], config: Config) -> None:
        super().__init__(database, config)
        self._collection = database.get_collection("scores")

    async def on_start(self) -> None:
        """Create indexes for leaderboard and best-score lookups."""
        await self._collection.create_index([("game", 1), ("score", -1)])
        await self._collection.create_index([("wallet", 1), ("game", 1), ("score", -1)])

    async def submit_score(
        self,
        wallet: str | None,
        game: str | None,
        score: float | None,
        session_token: str | None,
        signature: str | None,
        signature_message: str | None,
    ) -> ScoreRecord:
        """Validate a submission and persist a new score record.

        Checks run in order and stop at the first failure: required fields,
        session token, token scope, wallet signature. The signed message is not
        tied to the score value; any message signed by the wallet key passes.

        Raises:
            MissingFieldsError: A required field is absent or empty
            InvalidTokenError, ExpiredTokenError: Session token rejected
            SessionMismatchError: Token was issued for another wallet or game
            InvalidSignatureError: Signature does not verify against the wallet
        """
        if not wallet or not game or score is None or not session_token or not signature or not signature_message:
            raise MissingFieldsError

        claims = self.core.services.session.verify_session_token(session_token)
        if claims.wallet != wallet or claims.game != game:
            logger.warning("score_rejected", wallet=wallet, game=game, reason="session_mismatch")
            raise SessionMismatchError

        if not verify_signature(message_bytes(signature_message), signature, wallet):
            logger.warning("score_rejected", wallet=wallet, game=game, reason="invalid_signature")
            raise InvalidSignatureError("Invalid client signature")

        user = await self.core.services.user.find_user_by_wallet(wallet)
        record = ScoreRecord(wallet=wallet, game=game, score=score, name=user.name if user else "")
        await self._collection.insert_one(record.to_mongo())
        logger.info("score_saved", wallet=wallet, game=game, score=score)
        return record
