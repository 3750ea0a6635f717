# backend/securechat/api/routes/files.py
from __future__ import annotations

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from securechat.core.security import get_current_user
from securechat.models.user import User
from securechat.schemas.common import ApiResponse
from securechat.schemas.file import FileUploadOut
from securechat.services.files import FileTooLarge, store_upload

router = APIRouter(prefix="/files", tags=["files"])


@router.post("/upload", response_model=ApiResponse[FileUploadOut])
async def upload_file(
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
):
    content = await file.read()

    try:
        path = store_upload(file.filename, content)
    except FileTooLarge as e:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    out = FileUploadOut(
        filename=path.name,
        size_bytes=len(content),
        content_type=file.content_type or "application/octet-stream",
    )
    return ApiResponse[FileUploadOut].ok("File uploaded successfully", out)
