from typing import Any

import structlog
from itsdangerous import BadData, URLSafeSerializer
from pydantic import ValidationError as PydanticValidationError
from pymongo.asynchronous.database import AsyncDatabase

from walletscore.config import Config
from walletscore.core.core import Service
from walletscore.core.modules.session.models import SESSION_DURATION, SessionClaims, SessionToken
from walletscore.errors import ExpiredTokenError, InvalidTokenError
from walletscore.utils import now

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """Issues and verifies stateless session tokens scoped to one (wallet, game) pair.

    Tokens are never stored: validity is the HMAC signature plus the embedded expiry.
    """

    def __init__(self, database: AsyncDatabase[dict[str, Any]], config: Config) -> None:
        super().__init__(database, config)
        self._serializer = URLSafeSerializer(config.session_secret_key, salt="walletscore.session")

    def issue_session_token(self, wallet: str, game: str) -> SessionToken:
        issued_at = int(now().timestamp())
        claims = SessionClaims(wallet=wallet, game=game, issued_at=issued_at, expires_at=issued_at + SESSION_DURATION)
        token = self._serializer.dumps(claims.model_dump(by_alias=True))
        logger.debug("session_issued", wallet=wallet, game=game, expires_at=claims.expires_at)
        return SessionToken(token)

    def verify_session_token(self, token: str) -> SessionClaims:
        """Decode a token and check its signature and expiry.

        Raises:
            InvalidTokenError: Bad signature, malformed or unencodable text, or unexpected payload
            ExpiredTokenError: Current time is at or past the embedded expiry
        """
        try:
            payload = self._serializer.loads(token)
            claims = SessionClaims.model_validate(payload)
        except (BadData, UnicodeEncodeError, PydanticValidationError) as e:
            raise InvalidTokenError from e

        if now().timestamp() >= claims.expires_at:
            raise ExpiredTokenError
        return claims
