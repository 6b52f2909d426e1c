from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from walletscore.core.modules.score.models import ScoreRecord
from walletscore.web.deps import AppDep
from walletscore.web.openapi import ErrorResponse

router = APIRouter(tags=["scores"])


class SubmitScoreRequest(BaseModel):
    """Score submission. All fields are required; presence is checked by the service."""

    wallet: str | None = None
    game: str | None = None
    score: int | float | None = None
    session_token: str | None = Field(None, alias="sessionToken")
    client_signature: str | None = Field(None, alias="clientSignature")
    signature_message: str | None = Field(None, alias="signatureMessage")

    model_config = ConfigDict(populate_by_name=True)


class SubmitScoreResponse(BaseModel):
    success: bool


class BestScoreResponse(BaseModel):
    best: ScoreRecord | None


class LeaderboardResponse(BaseModel):
    scores: list[ScoreRecord]


@router.post(
    "/score",
    summary="Submit score",
    description=(
        "Submit a score for a game. Requires a live session token for the same wallet and game, "
        "and a signature by the wallet key over `signatureMessage`."
    ),
    operation_id="submitScore",
    responses={
        200: {"description": "Score saved"},
        400: {"model": ErrorResponse, "description": "Missing required fields"},
        401: {"model": ErrorResponse, "description": "Invalid, expired or mismatched session, or invalid signature"},
    },
)
async def submit_score(request: SubmitScoreRequest, app: AppDep) -> SubmitScoreResponse:
    await app.submit_score(
        request.wallet,
        request.game,
        request.score,
        request.session_token,
        request.client_signature,
        request.signature_message,
    )
    return SubmitScoreResponse(success=True)


@router.get(
    "/bestscore",
    summary="Get best score",
    description="Get the highest score submitted by a wallet for a game.",
    operation_id="getBestScore",
    responses={
        200: {"description": "Best score, or null if none"},
        400: {"model": ErrorResponse, "description": "Missing wallet or game"},
    },
)
async def get_best_score(app: AppDep, wallet: str = "", game: str = "") -> BestScoreResponse:
    return BestScoreResponse(best=await app.get_best_score(wallet, game))


@router.get(
    "/leaderboard",
    summary="Get leaderboard",
    description="Get the top 50 scores for a game, highest first.",
    operation_id="getLeaderboard",
    responses={
        200: {"description": "Top scores"},
        400: {"model": ErrorResponse, "description": "Missing game"},
    },
)
async def get_leaderboard(app: AppDep, game: str = "") -> LeaderboardResponse:
    return LeaderboardResponse(scores=await app.get_leaderboard(game))
