# portfolio/web/public.py
"""Public page plus the login, logout and 401 pages."""

from typing import Optional
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from portfolio.core.exceptions import AuthError, ValidationError
from portfolio.middleware.auth import clear_session_cookie, get_optional_user, set_session_cookie
from portfolio.models import LoginRequest, User
from portfolio.services import AuthService, PortfolioService, get_auth_service, get_portfolio_service
from portfolio.web.templating import templates

router = APIRouter(include_in_schema=False)
logger = logging.getLogger(__name__)


@router.get("/", response_class=HTMLResponse)
async def portfolio_page(request: Request, service: PortfolioService = Depends(get_portfolio_service)):
    data = await service.get_portfolio_data()
    return templates.TemplateResponse(request, "index.html", {"data": data})


@router.get("/login", response_class=HTMLResponse)
async def login_page(request: Request, user: Optional[User] = Depends(get_optional_user)):
    if user is not None:
        return RedirectResponse("/admin/dashboard", status_code=status.HTTP_303_SEE_OTHER)
    return templates.TemplateResponse(request, "login.html", {})


@router.post("/login", response_class=HTMLResponse)
async def login_submit(request: Request, auth_service: AuthService = Depends(get_auth_service)):
    form = await request.form()
    payload = LoginRequest(email=str(form.get("email", "")), password=str(form.get("password", "")))

    try:
        user = await auth_service.login(payload)
    except (AuthError, ValidationError) as e:
        return templates.TemplateResponse(
            request,
            "login.html",
            {"error": e.message, "email": payload.email},
            status_code=e.status_code,
        )

    response = RedirectResponse("/admin/dashboard", status_code=status.HTTP_303_SEE_OTHER)
    set_session_cookie(response, user)
    return response


@router.get("/logout", response_class=HTMLResponse)
async def logout_page(request: Request):
    return templates.TemplateResponse(request, "logout.html", {})


@router.post("/logout")
async def logout_submit():
    response = RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)
    clear_session_cookie(response)
    logger.info("User logged out")
    return response


@router.get("/page401", response_class=HTMLResponse)
async def unauthorized_page(request: Request):
    return templates.TemplateResponse(request, "page401.html", {}, status_code=status.HTTP_401_UNAUTHORIZED)
