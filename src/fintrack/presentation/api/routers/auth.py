"""Authentication router for registration, login and profile management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from fintrack.presentation.api.config import get_api_settings
from fintrack.presentation.api.dependencies import AuthService, CurrentUser, DBSession
from fintrack.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    UserResponse,
)
from fintrack_config.settings import Settings
from fintrack_identity import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    User,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)

router = APIRouter()

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


def _user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        first_name=user.first_name,
        last_name=user.last_name,
        display_name=user.display_name,
        created_at=user.created_at,
    )


def _create_auth_response(
    user: User,
    access_token: str,
    settings: Settings,
) -> AuthResponse:
    return AuthResponse(
        user=_user_to_response(user),
        access_token=access_token,
        expires_in=settings.jwt_access_token_expire_hours * 3600,
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Password too weak"},
        409: {"description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    try:
        user, access_token = await auth_service.register(
            email=request.email,
            password=request.password,
            name=request.name,
            first_name=request.first_name,
            last_name=request.last_name,
        )
        await session.commit()
    except EmailAlreadyExistsError as e:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email address is already registered",
        ) from e
    except WeakPasswordError as e:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e
    except Exception:
        await session.rollback()
        raise

    return _create_auth_response(user, access_token, settings)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    try:
        user, access_token = await auth_service.login(
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except InvalidCredentialsError as e:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        ) from e
    except Exception:
        await session.rollback()
        raise

    return _create_auth_response(user, access_token, settings)


@router.get("/me", summary="Get current user")
async def get_me(user: CurrentUser) -> UserResponse:
    return _user_to_response(user)


@router.patch("/profile", summary="Update profile names")
async def update_profile(
    request: ProfileUpdateRequest,
    user: CurrentUser,
    auth_service: AuthService,
    session: DBSession,
) -> UserResponse:
    try:
        updated = await auth_service.update_profile(
            user_id=user.id,
            name=request.name,
            first_name=request.first_name,
            last_name=request.last_name,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return _user_to_response(updated)


@router.delete(
    "/account",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete account and all data",
)
async def delete_account(
    user: CurrentUser,
    auth_service: AuthService,
    session: DBSession,
) -> None:
    """Permanently delete the user with all transactions, rules and favorites."""
    try:
        await auth_service.delete_account(user.id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    logger.info("Account deleted: %s", user.email)
