"""Password hashing and bearer token issuance/verification"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config import Settings, settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    """Decoded bearer token claims"""

    id: str
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "ADMIN"


class CredentialService:
    """Hashes passwords with bcrypt and signs HS256 JWTs.

    Secret, algorithm, expiry and bcrypt cost all come from the settings the
    service is constructed with.
    """

    def __init__(self, config: Settings):
        self._secret = config.jwt_secret
        self._algorithm = config.jwt_algorithm
        self._expires = timedelta(days=config.jwt_expires_days)
        self._pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=config.bcrypt_rounds,
        )

    def hash_password(self, password: str) -> str:
        return self._pwd_context.hash(password)

    def verify_password(self, password: str, password_hash: str) -> bool:
        try:
            return self._pwd_context.verify(password, password_hash)
        except ValueError:
            # Unknown or malformed hash
            logger.warning("Stored password hash could not be identified")
            return False

    def issue_token(self, claims: TokenClaims) -> str:
        payload = {
            "id": claims.id,
            "email": claims.email,
            "role": claims.role,
            "exp": datetime.now(timezone.utc) + self._expires,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify_token(self, token: str) -> TokenClaims | None:
        """Return the token's claims, or None when it is invalid or expired."""
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError:
            return None

        user_id = payload.get("id")
        email = payload.get("email")
        role = payload.get("role")
        if not user_id or not email or role not in ("ADMIN", "CLIENT"):
            return None

        return TokenClaims(id=str(user_id), email=email, role=role)


credential_service = CredentialService(settings)
