from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from walletscore.web.deps import AppDep
from walletscore.web.openapi import ErrorResponse

router = APIRouter(tags=["sessions"])


class SessionRequest(BaseModel):
    """Session token request."""

    wallet: str = Field("", description="Wallet address the session is scoped to")
    game: str = Field("", description="Game the session is scoped to")


class SessionResponse(BaseModel):
    """Issued session token."""

    session_token: str = Field(..., alias="sessionToken", description="Signed token valid for 10 minutes")

    model_config = ConfigDict(populate_by_name=True)


@router.post(
    "/session",
    summary="Start game session",
    description="Issue a signed session token valid for 10 minutes for one wallet and game.",
    operation_id="createSession",
    responses={
        200: {"description": "Session token issued"},
        400: {"model": ErrorResponse, "description": "Missing wallet or game"},
    },
)
async def create_session(request: SessionRequest, app: AppDep) -> SessionResponse:
    token = await app.create_session(request.wallet, request.game)
    return SessionResponse(session_token=token)
