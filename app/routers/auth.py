"""Authentication router: signup, login and the current user"""

import asyncio
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_db
from app.schemas.user import AuthResponse, LoginRequest, SignupRequest, UserResponse
from app.services.account_service import account_service
from app.services.auth import TokenClaims, credential_service, get_current_user
from app.utils.exceptions import AuthError, ConflictError, NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _issue(user) -> AuthResponse:
    token = credential_service.issue_token(TokenClaims(id=str(user.id), email=user.email, role=user.role))
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    request: SignupRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Register a new client account and return a bearer token for it.
    """
    if await account_service.get_by_email(db, request.email):
        raise ConflictError("Email already registered")

    # bcrypt is CPU bound; keep it off the event loop
    password_hash = await asyncio.to_thread(credential_service.hash_password, request.password)
    user = await account_service.create(db, request.email, password_hash, request.name)

    return _issue(user)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Exchange email and password for a bearer token.

    Unknown email and wrong password produce the same response.
    """
    user = await account_service.get_by_email(db, request.email)
    if user is None:
        raise AuthError("Invalid email or password")

    valid = await asyncio.to_thread(credential_service.verify_password, request.password, user.password)
    if not valid:
        logger.info(f"Failed login for user {user.id}")
        raise AuthError("Invalid email or password")

    return _issue(user)


@router.get("/me", response_model=UserResponse)
async def get_me(
    user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    account = await account_service.get(db, user.id)
    if account is None:
        raise NotFoundError("User not found")
    return account
