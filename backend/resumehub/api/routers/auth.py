from fastapi import APIRouter, Depends
from resumehub.api.deps import get_account_service
from resumehub.schemas.auth import AccountIdentity, LoginRequest, LoginResponse, RegisterIn
from resumehub.services.account_service import AccountService

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", response_model=AccountIdentity)
async def register(body: RegisterIn, service: AccountService = Depends(get_account_service)):
    """
    Register a new account.

    Args:
        body: Request body containing:
            - name: str (required)
            - email: str (required, must be unique)
            - password: str (required, hashed before storage)
            - title, bio: str | None (optional, default "")

    Returns:
        AccountIdentity: id, name and email of the new account

    Error codes (HTTP 400):
        - VALIDATION_ERROR: name, email or password missing
        - EMAIL_EXISTS: Email already registered
    """
    return await service.register(body.name, body.email, body.password, body.title, body.bio)

@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, service: AccountService = Depends(get_account_service)):
    """
    Authenticate with email and password.

    Returns:
        LoginResponse: bearer token plus the public profile
        (id, name, email, title, bio, hasAttachment)

    Error codes (HTTP 400):
        - INVALID_CREDENTIALS: unknown email or wrong password (same body for both)
    """
    return await service.login(body.email, body.password)
