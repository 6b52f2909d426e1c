from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError

from walletscore.config import Config
from walletscore.core.core import Service
from walletscore.core.modules.signature.verifier import message_bytes, verify_signature
from walletscore.core.modules.user.models import RegistrationProof, SignedProof, User, UserStatus
from walletscore.core.modules.user.validators import validate_name
from walletscore.errors import InvalidSignatureError, MissingFieldsError

logger = structlog.get_logger(__name__)


class UserService(Service):
    """Registers wallets. At most one user per wallet, names are never overwritten."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]], config: Config) -> None:
        super().__init__(database, config)
        self._collection = database.get_collection("users")

    async def on_start(self) -> None:
        """Create indexes on startup."""
        await self._collection.create_index([("wallet", 1)], unique=True)

    async def find_user_by_wallet(self, wallet: str) -> User | None:
        doc = await self._collection.find_one({"wallet": wallet})
        if doc is None:
            return None
        return User.model_validate(doc)

    async def get_user_status(self, wallet: str) -> UserStatus:
        if not wallet:
            raise MissingFieldsError("Missing wallet parameter")
        user = await self.find_user_by_wallet(wallet)
        if user is None:
            return UserStatus(registered=False)
        return UserStatus(registered=True, name=user.name)

    async def register(self, wallet: str, name: str | None, proof: RegistrationProof) -> User:
        """Register a wallet, or return the existing user if already registered.

        A SignedProof must carry a non-empty message and signature that verify
        against the wallet key. A SkippedProof registers without any check.
        """
        if not wallet:
            raise MissingFieldsError("Missing wallet")

        if isinstance(proof, SignedProof):
            if not proof.signature or not proof.message:
                raise MissingFieldsError
            if not verify_signature(message_bytes(proof.message), proof.signature, wallet):
                logger.warning("registration_rejected", wallet=wallet, reason="invalid_signature")
                raise InvalidSignatureError

        existing = await self.find_user_by_wallet(wallet)
        if existing is not None:
            logger.info("user_already_registered", wallet=wallet)
            return existing

        name = name or ""
        validate_name(name)
        user = User(wallet=wallet, name=name)
        try:
            await self._collection.insert_one(user.to_mongo())
        except DuplicateKeyError:
            # Lost a race with a concurrent registration of the same wallet
            stored = await self.find_user_by_wallet(wallet)
            if stored is None:
                raise
            return stored

        logger.info("user_registered", wallet=wallet, name=name)
        return user
