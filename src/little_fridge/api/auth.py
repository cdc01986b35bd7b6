"""Account endpoints delegating to the identity provider."""

from fastapi import APIRouter, Depends, status

from little_fridge.api.dependencies import bearer_token, get_container, require_user
from little_fridge.api.models import SignInRequest, SignUpRequest
from little_fridge.api.serializers import serialize_session, serialize_user
from little_fridge.containers import AppContainer
from little_fridge.domain.models import AuthUser

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def sign_up(
    body: SignUpRequest, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Create an account and its user row."""
    user, session = container.auth_service.sign_up(
        body.email, body.password, body.name
    )
    return {
        "message": "Account created successfully",
        "user": serialize_user(user),
        "session": serialize_session(session),
    }


@router.post("/signin")
def sign_in(
    body: SignInRequest, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Sign in with email and password."""
    user, session = container.auth_service.sign_in(body.email, body.password)
    return {
        "message": "Signed in successfully",
        "user": serialize_user(user),
        "session": serialize_session(session),
    }


@router.post("/signout", dependencies=[Depends(require_user)])
def sign_out(
    token: str | None = Depends(bearer_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Revoke the caller's session."""
    container.auth_service.sign_out(token or "")
    return {"message": "Signed out successfully"}


@router.get("/me")
def me(
    user: AuthUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the authenticated user."""
    return {"user": serialize_user(container.auth_service.me(user))}
