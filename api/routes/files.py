"""File endpoints: upload, lookup, verify"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from api.deps import get_vault
from core.models import (
    FileRecord,
    UploadRequest,
    UploadResponse,
    VerifyFileRequest,
    VerifyFileResponse,
)
from core.vault import FileVault

router = APIRouter(prefix="/files", tags=["files"])


@router.post("", status_code=201, response_model=UploadResponse)
async def upload_file(
    body: UploadRequest,
    vault: FileVault = Depends(get_vault),
) -> UploadResponse:
    # Uploaded files are never overwritten
    result = vault.upload_strict(body.path, verify_extension=body.verify_extension)
    return UploadResponse(content_id=result.content_id, record=result.record)


@router.get("/{content_id}", response_model=FileRecord)
async def get_file(
    content_id: str,
    vault: FileVault = Depends(get_vault),
) -> FileRecord:
    return vault.lookup(content_id)


@router.post("/{content_id}/verify", response_model=VerifyFileResponse)
async def verify_file(
    content_id: str,
    body: VerifyFileRequest,
    vault: FileVault = Depends(get_vault),
) -> VerifyFileResponse:
    matches = vault.verify_file(body.path, content_id)
    return VerifyFileResponse(content_id=content_id.lower(), matches=matches)
