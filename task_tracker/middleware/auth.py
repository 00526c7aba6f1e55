"""Access guard: resolves the bearer credential to an owner before any task operation."""
from fastapi import Depends, Request
from pydantic import BaseModel

from task_tracker.errors import Unauthorized
from task_tracker.services.identity_service import IdentityProvider, get_identity_provider
from task_tracker.utils.logger import get_logger

audit = get_logger("task_tracker.access")

BEARER_PREFIX = "bearer "


class CurrentUser(BaseModel):
    """Owner identity resolved for the current request."""
    owner_id: str


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token of a `Bearer <token>` header value, or None."""
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


async def get_current_user(
    request: Request,
    identity: IdentityProvider = Depends(get_identity_provider),
) -> CurrentUser:
    """
    Validate the credential from the Authorization header.

    Args:
        request: FastAPI request object to extract Authorization header
        identity: Identity collaborator used to validate the token

    Returns:
        CurrentUser with the resolved owner id

    Raises:
        Unauthorized: If the header is missing or the token is rejected
    """
    token = extract_bearer_token(request.headers.get("authorization"))
    if token is None:
        audit.warning("access.rejected", reason="missing_credential", path=request.url.path)
        raise Unauthorized("Missing or invalid Authorization header")

    owner_id = identity.validate(token)
    if owner_id is None:
        audit.warning("access.rejected", reason="invalid_credential", path=request.url.path)
        raise Unauthorized("Invalid or expired token")

    request.state.owner_id = owner_id
    return CurrentUser(owner_id=owner_id)
