from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from pymongo.asynchronous.database import AsyncDatabase

from walletscore.config import Config
from walletscore.core.core import Core
from walletscore.core.modules.score.models import ScoreRecord
from walletscore.core.modules.session.models import SessionToken
from walletscore.core.modules.user.models import RegistrationProof, UserStatus, UserView
from walletscore.errors import MissingFieldsError


class App:
    """Facade for all application operations, delegating to Core services."""

    def __init__(self, config: Config, database: AsyncDatabase[dict[str, Any]] | None = None) -> None:
        self._core = Core(config, database)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    async def register(self, wallet: str, name: str | None, proof: RegistrationProof) -> UserView:
        """Register a wallet (idempotent)."""
        user = await self._core.services.user.register(wallet, name, proof)
        return UserView.from_domain(user)

    async def get_user_status(self, wallet: str) -> UserStatus:
        """Check whether a wallet is registered."""
        return await self._core.services.user.get_user_status(wallet)

    async def create_session(self, wallet: str, game: str) -> SessionToken:
        """Issue a session token for one wallet and game."""
        if not wallet or not game:
            raise MissingFieldsError("Missing wallet or game")
        return self._core.services.session.issue_session_token(wallet, game)

    async def submit_score(
        self,
        wallet: str | None,
        game: str | None,
        score: float | None,
        session_token: str | None,
        signature: str | None,
        signature_message: str | None,
    ) -> ScoreRecord:
        """Submit a score authorized by a session token and wallet signature."""
        return await self._core.services.score.submit_score(
            wallet, game, score, session_token, signature, signature_message
        )

    async def get_best_score(self, wallet: str, game: str) -> ScoreRecord | None:
        return await self._core.services.leaderboard.get_best_score(wallet, game)

    async def get_leaderboard(self, game: str) -> list[ScoreRecord]:
        return await self._core.services.leaderboard.get_leaderboard(game)
