"""Bearer token authentication dependencies and ownership checks"""

import logging
from uuid import UUID

from fastapi import Depends, Request

from app.services.auth.credentials import TokenClaims, credential_service
from app.utils.exceptions import AuthError, ForbiddenError
from app.utils.sentry_utils import set_user_context

logger = logging.getLogger(__name__)


def get_token_from_header(request: Request) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    auth_header = request.headers.get("Authorization")

    if not auth_header or not auth_header.startswith("Bearer "):
        raise AuthError("Authentication required")

    return auth_header[len("Bearer "):]


async def get_current_user(request: Request) -> TokenClaims:
    """FastAPI dependency returning the caller's verified token claims.

    The account row is not loaded here; handlers that need plan or usage
    fields read them through the services.
    """
    token = get_token_from_header(request)
    claims = credential_service.verify_token(token)

    if claims is None:
        logger.debug(f"Rejected bearer token on {request.url.path}")
        raise AuthError("Invalid or expired token")

    set_user_context(claims.id, claims.email)
    return claims


async def require_admin(user: TokenClaims = Depends(get_current_user)) -> TokenClaims:
    if not user.is_admin:
        raise ForbiddenError("Admin access required")
    return user


def can_access(user: TokenClaims, owner_id: UUID | str) -> bool:
    """True when the caller owns the resource or is an admin."""
    return user.is_admin or str(owner_id) == user.id
