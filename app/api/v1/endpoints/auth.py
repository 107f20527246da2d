"""Auth API: register, activate, login, logout and current user.

Anonymous-only routes are guarded by require_anonymous and protected
routes by require_session; both run before the handler body.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from app.api.v1.dependencies import (
    CurrentSession,
    get_auth_service,
    require_anonymous,
)
from app.application.services.auth_service import AuthService
from app.core.config import get_settings
from app.core.limiter import limit_activation, limit_auth, limit_resend, limit_writes
from app.schemas.auth import (
    ActivateRequest,
    ActivationResponse,
    LoginRequest,
    RegisterRequest,
    ResendActivationRequest,
    TokenResponse,
)
from app.schemas.user import CurrentUserResponse, UserResponse

router = APIRouter()

Auth = Annotated[AuthService, Depends(get_auth_service)]


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=201,
    dependencies=[Depends(require_anonymous)],
)
@limit_auth
async def register(request: Request, body: RegisterRequest, auth: Auth):
    """Create an unvalidated account and email its activation code."""
    user = await auth.register(body.email, body.password)
    return UserResponse.model_validate(user)


@router.post(
    "/activate",
    response_model=ActivationResponse,
    dependencies=[Depends(require_anonymous)],
)
@limit_activation
async def activate(request: Request, body: ActivateRequest, auth: Auth):
    """Submit the emailed code. Wrong codes are counted; the account locks at the maximum."""
    state = await auth.verify_activation(body.email, body.code)
    return ActivationResponse(status=state.value)


@router.post(
    "/activate/resend",
    status_code=202,
    dependencies=[Depends(require_anonymous)],
)
@limit_resend
async def resend_activation(request: Request, body: ResendActivationRequest, auth: Auth):
    """Issue a fresh code (also clears a lockout). Always 202 so existence is not revealed."""
    await auth.resend_activation(body.email)
    return Response(status_code=202)


@router.post(
    "/login",
    response_model=TokenResponse,
    dependencies=[Depends(require_anonymous)],
)
@limit_auth
async def login(request: Request, response: Response, body: LoginRequest, auth: Auth):
    """Authenticate and start a new session (token in body and httponly cookie)."""
    settings = get_settings()
    issued = await auth.login(body.email, body.password)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=issued.token,
        max_age=settings.session_ttl_minutes * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return TokenResponse(access_token=issued.token, expires_at=issued.expires_at)


@router.post("/logout", status_code=204)
async def logout(session: CurrentSession, auth: Auth):
    """Revoke the current session and clear the cookie."""
    settings = get_settings()
    await auth.logout(session)
    response = Response(status_code=204)
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return response


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(session: CurrentSession):
    """Return the user behind the current session."""
    user = session.user
    return CurrentUserResponse(
        email=user.email,
        validated=user.validated,
        created_at=user.created_at,
        session_expires_at=session.expires_at,
    )


@router.delete("/me", status_code=204)
@limit_writes
async def delete_me(request: Request, session: CurrentSession, auth: Auth):
    """Delete the current account with its categories and expenses."""
    settings = get_settings()
    await auth.delete_account(session.user.email)
    response = Response(status_code=204)
    response.delete_cookie(key=settings.session_cookie_name)
    return response
