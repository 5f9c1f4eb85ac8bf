# portfolio/api/v1/auth.py
from fastapi import APIRouter, Depends, status

from portfolio.api.response import success_response
from portfolio.middleware.auth import clear_session_cookie, get_current_user, set_session_cookie
from portfolio.models import LoginRequest, RegisterRequest, User, UserResponse
from portfolio.services import AuthService, get_auth_service

router = APIRouter()


@router.post("/login")
async def login(payload: LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    user = await auth_service.login(payload)

    response = success_response("Login successful", UserResponse.from_user(user))
    set_session_cookie(response, user)
    return response


@router.post("/logout")
async def logout():
    """Clear the session cookie. The token itself is not revoked."""
    response = success_response("Logout successful")
    clear_session_cookie(response)
    return response


@router.get("/me")
async def me(current_user: User = Depends(get_current_user)):
    return success_response("User retrieved successfully", UserResponse.from_user(current_user))


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    current_user: User = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service)
):
    """Create another admin account. Only signed-in admins may do this."""
    user = await auth_service.register(payload)
    return success_response("User registered successfully", UserResponse.from_user(user), status.HTTP_201_CREATED)
