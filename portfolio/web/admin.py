# portfolio/web/admin.py
"""
Admin panel: HTML forms over the same services the JSON API uses.

Forms post back with a hidden ``id`` field (empty or 0 means create). A
successful save or delete redirects with 303 so a reload never re-submits;
a failed save re-renders the form with the submitted values and the error.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple, Type
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import BaseModel
from starlette.datastructures import FormData, UploadFile

from portfolio.core.exceptions import NotFoundError, UploadError, ValidationError
from portfolio.db.database import Database, get_database
from portfolio.middleware.auth import require_admin
from portfolio.models import (
    ExperienceRequest,
    ProfileRequest,
    ProjectRequest,
    PublicationRequest,
    SkillRequest,
    User,
)
from portfolio.models.experience import EXPERIENCE_TYPES
from portfolio.models.skill import SKILL_LEVELS
from portfolio.services import LocalStorageService, ProfileService, get_local_storage_service
from portfolio.services.content import SkillService, experience_service, project_service, publication_service
from portfolio.services.entity_service import EntityService
from portfolio.web.templating import templates

router = APIRouter(prefix="/admin", include_in_schema=False)
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityPage:
    slug: str
    singular: str
    request_model: Type[BaseModel]
    make_service: Callable[[Database], EntityService]
    int_fields: Tuple[str, ...] = ()
    image_field: Optional[str] = None
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def list_template(self) -> str:
        return f"admin/{self.slug}_list.html"

    @property
    def form_template(self) -> str:
        return f"admin/{self.singular}_form.html"


ENTITY_PAGES = (
    EntityPage("experiences", "experience", ExperienceRequest, experience_service,
               options={"types": EXPERIENCE_TYPES}),
    EntityPage("skills", "skill", SkillRequest, SkillService,
               options={"levels": SKILL_LEVELS}),
    EntityPage("projects", "project", ProjectRequest, project_service,
               image_field="image_url"),
    EntityPage("publications", "publication", PublicationRequest, publication_service,
               int_fields=("year",), image_field="image_url"),
)

ERROR_NOTICES = {
    "delete": "Could not delete the item.",
    "notfound": "That item no longer exists.",
    "profile": "That profile no longer exists.",
}


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


def _parse_int(value: Any) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return 0


def _form_id(form: FormData) -> int:
    return _parse_int(form.get("id", ""))


def _uploaded_file(form: FormData, name: str) -> Optional[UploadFile]:
    upload = form.get(name)
    # Browsers send an empty part when no file was chosen
    if isinstance(upload, UploadFile) and upload.filename:
        return upload
    return None


def _error_notice(request: Request) -> Optional[str]:
    return ERROR_NOTICES.get(request.query_params.get("error", ""))


def _build_request(page: EntityPage, form: FormData) -> BaseModel:
    values: Dict[str, Any] = {}
    for name in page.request_model.model_fields:
        raw = form.get(name)
        if name in page.int_fields:
            values[name] = _parse_int(raw)
        elif isinstance(raw, str):
            values[name] = raw
    return page.request_model(**values)


@router.get("")
async def admin_root(user: User = Depends(require_admin)):
    return _redirect("/admin/dashboard")


@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard(
    request: Request,
    user: User = Depends(require_admin),
    db: Database = Depends(get_database)
):
    profile = await ProfileService(db).get_profile_or_none()
    counts = {}
    for page in ENTITY_PAGES:
        counts[page.slug] = len(await page.make_service(db).get_all())

    return templates.TemplateResponse(request, "admin/dashboard.html", {
        "user": user,
        "profile": profile,
        "counts": counts,
        "success": request.query_params.get("success"),
        "error": _error_notice(request),
    })


@router.get("/profile", response_class=HTMLResponse)
async def profile_form(
    request: Request,
    user: User = Depends(require_admin),
    db: Database = Depends(get_database)
):
    profile = await ProfileService(db).get_profile_or_none()
    return templates.TemplateResponse(request, "admin/profile_form.html", {
        "user": user,
        "item": profile,
        "item_id": profile.id if profile else 0,
    })


@router.post("/profile", response_class=HTMLResponse)
async def profile_save(
    request: Request,
    user: User = Depends(require_admin),
    db: Database = Depends(get_database),
    storage: LocalStorageService = Depends(get_local_storage_service)
):
    form = await request.form()
    profile_id = _form_id(form)
    values = {name: str(form.get(name, "")) for name in ProfileRequest.model_fields if name != "photo_url"}
    payload = ProfileRequest(photo_url=str(form.get("existing_photo", "")), **values)
    service = ProfileService(db)
    previous_photo = payload.photo_url
    stored_photo = ""

    try:
        # Fields are checked before the upload touches disk
        service.validate(payload)
        photo = _uploaded_file(form, "photo")
        if photo is not None:
            stored_photo = await storage.save_image(photo, "profile")
            payload.photo_url = stored_photo

        if profile_id > 0:
            await service.update(profile_id, payload)
        else:
            await service.create(payload)
    except NotFoundError as e:
        storage.delete_file(stored_photo)
        logger.warning(f"Profile form rejected: {e.message}")
        return _redirect("/admin/dashboard?error=profile")
    except (ValidationError, UploadError) as e:
        storage.delete_file(stored_photo)
        payload.photo_url = previous_photo
        logger.info(f"Profile form rejected: {e.message}")
        return templates.TemplateResponse(request, "admin/profile_form.html", {
            "user": user,
            "item": payload,
            "item_id": profile_id,
            "error": e.message,
        }, status_code=e.status_code)

    # Only files under /public are removed; external URLs are left alone
    if previous_photo and previous_photo != payload.photo_url:
        storage.delete_file(previous_photo)

    return _redirect("/admin/dashboard?success=profile")


def _register_entity_pages(page: EntityPage) -> None:
    base = f"/{page.slug}"

    async def list_view(
        request: Request,
        user: User = Depends(require_admin),
        db: Database = Depends(get_database)
    ):
        items = await page.make_service(db).get_all()
        return templates.TemplateResponse(request, page.list_template, {
            "user": user,
            "items": items,
            "success": request.query_params.get("success"),
            "error": _error_notice(request),
        })

    def render_form(request: Request, user: User, item: Any, item_id: int,
                    error: Optional[str] = None, status_code: int = 200):
        return templates.TemplateResponse(request, page.form_template, {
            "user": user,
            "item": item,
            "item_id": item_id,
            "error": error,
            **page.options,
        }, status_code=status_code)

    async def new_form(request: Request, user: User = Depends(require_admin)):
        return render_form(request, user, None, 0)

    async def edit_form(
        request: Request,
        entity_id: int,
        user: User = Depends(require_admin),
        db: Database = Depends(get_database)
    ):
        try:
            item = await page.make_service(db).get_by_id(entity_id)
        except (NotFoundError, ValidationError) as e:
            logger.info(f"Cannot edit {page.singular} {entity_id}: {e.message}")
            return _redirect(f"/admin{base}?error=notfound")
        return render_form(request, user, item, item.id)

    async def save(
        request: Request,
        user: User = Depends(require_admin),
        db: Database = Depends(get_database),
        storage: LocalStorageService = Depends(get_local_storage_service)
    ):
        form = await request.form()
        entity_id = _form_id(form)
        payload = _build_request(page, form)
        service = page.make_service(db)
        stored_image = ""

        try:
            service.validate(payload)
            if page.image_field:
                image = _uploaded_file(form, "image")
                if image is not None:
                    stored_image = await storage.save_image(image, page.slug)
                    setattr(payload, page.image_field, stored_image)

            if isinstance(payload, ProjectRequest) and not payload.profile_id:
                profile = await ProfileService(db).get_profile_or_none()
                payload.profile_id = profile.id if profile else None

            if entity_id > 0:
                await service.update(entity_id, payload)
            else:
                await service.create(payload)
        except NotFoundError as e:
            storage.delete_file(stored_image)
            logger.warning(f"{page.singular.capitalize()} form rejected: {e.message}")
            return _redirect(f"/admin{base}?error=notfound")
        except (ValidationError, UploadError) as e:
            storage.delete_file(stored_image)
            logger.info(f"{page.singular.capitalize()} form rejected: {e.message}")
            return render_form(request, user, payload, entity_id, e.message, e.status_code)

        return _redirect(f"/admin{base}?success=saved")

    async def delete(
        entity_id: int,
        user: User = Depends(require_admin),
        db: Database = Depends(get_database)
    ):
        try:
            await page.make_service(db).delete(entity_id)
        except ValidationError as e:
            logger.warning(f"Failed to delete {page.singular} {entity_id}: {e.message}")
            return _redirect(f"/admin{base}?error=delete")
        return _redirect(f"/admin{base}?success=deleted")

    router.add_api_route(base, list_view, methods=["GET"], response_class=HTMLResponse)
    router.add_api_route(f"{base}/new", new_form, methods=["GET"], response_class=HTMLResponse)
    router.add_api_route(f"{base}/{{entity_id}}/edit", edit_form, methods=["GET"], response_class=HTMLResponse)
    router.add_api_route(base, save, methods=["POST"], response_class=HTMLResponse)
    router.add_api_route(f"{base}/{{entity_id}}/delete", delete, methods=["POST"])


for _page in ENTITY_PAGES:
    _register_entity_pages(_page)
