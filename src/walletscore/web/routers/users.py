from fastapi import APIRouter
from pydantic import BaseModel, Field

from walletscore.core.modules.user.models import SignedProof, SkippedProof, UserStatus, UserView
from walletscore.web.deps import AppDep
from walletscore.web.openapi import ErrorResponse

router = APIRouter(tags=["users"])


class RegisterRequest(BaseModel):
    """Wallet registration request."""

    wallet: str = Field("", description="Wallet address (base-58 public key)")
    signature: str | None = Field(None, description="Base-58 signature over `message` by the wallet key")
    message: str | None = Field(None, description="Message that was signed")
    name: str | None = Field(None, description="Display name")
    skip: bool = Field(False, description="Register without proving key ownership")


class RegisterResponse(BaseModel):
    success: bool = Field(..., description="Always true on success")
    user: UserView = Field(..., description="Registered user")


@router.post(
    "/register",
    summary="Register wallet",
    description=(
        "Register a wallet with an optional display name. Unless `skip` is set, a signature over "
        "`message` by the wallet key is required. Registering an already registered wallet returns "
        "the existing user unchanged."
    ),
    operation_id="register",
    responses={
        200: {"description": "Wallet registered or already registered"},
        400: {"model": ErrorResponse, "description": "Missing or invalid fields"},
        401: {"model": ErrorResponse, "description": "Invalid signature"},
    },
)
async def register(request: RegisterRequest, app: AppDep) -> RegisterResponse:
    if request.skip:
        proof: SkippedProof | SignedProof = SkippedProof()
    else:
        proof = SignedProof(message=request.message or "", signature=request.signature or "")
    user = await app.register(request.wallet, request.name, proof)
    return RegisterResponse(success=True, user=user)


@router.get(
    "/user",
    summary="Get registration status",
    description="Check whether a wallet is registered and return its display name.",
    operation_id="getUserStatus",
    response_model_exclude_none=True,
    responses={
        200: {"description": "Registration status"},
        400: {"model": ErrorResponse, "description": "Missing wallet parameter"},
    },
)
async def get_user_status(app: AppDep, wallet: str = "") -> UserStatus:
    return await app.get_user_status(wallet)
