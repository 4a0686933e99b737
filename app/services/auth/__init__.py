"""Authentication: credentials, bearer tokens and access checks"""

from app.services.auth.credentials import (
    CredentialService,
    TokenClaims,
    credential_service,
)
from app.services.auth.dependencies import (
    get_current_user,
    require_admin,
    can_access,
)

__all__ = [
    "CredentialService",
    "TokenClaims",
    "credential_service",
    "get_current_user",
    "require_admin",
    "can_access",
]
