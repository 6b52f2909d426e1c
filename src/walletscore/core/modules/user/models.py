from datetime import datetime

from pydantic import BaseModel, Field

from walletscore.core.db import MongoModel
from walletscore.utils import now

NAME_MAX_LENGTH = 10


class User(MongoModel):
    """Registered wallet. Indexed on wallet - unique."""

    wallet: str
    name: str = ""
    created_at: datetime = Field(default_factory=now)


class UserView(BaseModel):
    """Registered wallet (API representation)."""

    wallet: str = Field(..., description="Wallet address (base-58 public key)")
    name: str = Field(..., description="Display name chosen at registration")
    created_at: datetime = Field(..., description="Registration time")

    @classmethod
    def from_domain(cls, user: User) -> "UserView":
        """Create view model from domain model."""
        return cls(wallet=user.wallet, name=user.name, created_at=user.created_at)


class UserStatus(BaseModel):
    """Registration status of a wallet."""

    registered: bool = Field(..., description="Whether the wallet has registered")
    name: str | None = Field(None, description="Display name, present only when registered")


class SkippedProof(BaseModel):
    """Registration without proof of key ownership."""


class SignedProof(BaseModel):
    """Registration proven by a signature from the wallet key over `message`."""

    message: str
    signature: str


RegistrationProof = SkippedProof | SignedProof
