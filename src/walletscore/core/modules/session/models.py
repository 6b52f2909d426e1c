"""Session token models."""

from typing import NewType

from pydantic import BaseModel, ConfigDict, Field

SessionToken = NewType("SessionToken", str)

SESSION_DURATION = 10 * 60  # seconds


class SessionClaims(BaseModel):
    """Payload carried inside a signed session token.

    Timestamps are integer epoch seconds.
    """

    wallet: str
    game: str
    issued_at: int = Field(alias="iat")
    expires_at: int = Field(alias="exp")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")
