# portfolio/api/v1/upload.py
from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from portfolio.api.response import success_response
from portfolio.core.exceptions import ValidationError
from portfolio.middleware.auth import get_current_user
from portfolio.services import LocalStorageService, get_local_storage_service

router = APIRouter()

UPLOAD_FOLDERS = ("profile", "projects", "publications")


@router.post("/upload", status_code=status.HTTP_201_CREATED, dependencies=[Depends(get_current_user)])
async def upload_image(
    file: UploadFile = File(...),
    folder: str = Form("profile"),
    storage: LocalStorageService = Depends(get_local_storage_service)
):
    """
    Store an image and return its public URL.

    The URL can then be sent as ``photo_url`` or ``image_url`` in a create or
    update request.
    """
    if folder not in UPLOAD_FOLDERS:
        raise ValidationError(f"folder must be one of: {', '.join(UPLOAD_FOLDERS)}", field="folder")

    url = await storage.save_image(file, folder)
    return success_response("File uploaded successfully", {"url": url}, status.HTTP_201_CREATED)
