"""URL validation endpoint"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from api.deps import get_vault
from core.models import UrlValidationRequest, UrlValidationResponse
from core.vault import FileVault

router = APIRouter(prefix="/urls", tags=["urls"])


@router.post("/validate", response_model=UrlValidationResponse)
async def validate_url(
    body: UrlValidationRequest,
    vault: FileVault = Depends(get_vault),
) -> UrlValidationResponse:
    valid = vault.check_url(body.url, body.whitelist)
    return UrlValidationResponse(url=body.url, valid=valid)
