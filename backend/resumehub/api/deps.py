from fastapi import Depends, Header, Request
from resumehub.core.errors import AuthRequired, Forbidden
from resumehub.core.security import decode_access_token
from resumehub.services.account_service import AUTH_MODE_JWT, AccountService

def get_account_service(request: Request) -> AccountService:
    """
    FastAPI dependency returning the AccountService built at startup.

    The service (and with it the database-backed repository and the upload
    directory) lives on app.state so the process entry point owns its
    lifecycle and tests can inject their own instance.
    """
    return request.app.state.accounts

async def require_account_owner(
    user_id: int,
    authorization: str | None = Header(default=None),
    service: AccountService = Depends(get_account_service),
) -> int:
    """
    FastAPI dependency guarding writes to /users/{user_id}.

    Self-asserted mode (default): the path id is trusted as-is. Anyone who
    knows an id may act on that account; this is the documented demo
    behaviour, not an oversight.

    JWT mode: an Authorization: Bearer token is required and its subject
    must be the path id.

    Raises:
        AuthRequired (401): Missing or invalid/expired token
        Forbidden (403): Token belongs to another account
    """
    if service.auth_mode != AUTH_MODE_JWT:
        return user_id

    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
    if not token:
        raise AuthRequired()

    try:
        payload = decode_access_token(token)
        subject = payload.get("sub")
    except Exception:
        raise AuthRequired("Invalid or expired token", code="AUTH_INVALID_TOKEN")

    if subject != str(user_id):
        raise Forbidden()
    return user_id
