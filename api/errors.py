"""Exception handlers for the FastAPI app"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from core.errors import ErrorKind, VaultError

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.invalid_path: 400,
    ErrorKind.invalid_uuid_format: 400,
    ErrorKind.invalid_whitelist_entry: 400,
    ErrorKind.not_found: 404,
    ErrorKind.already_exists: 409,
    ErrorKind.read_error: 422,
    ErrorKind.invalid_content_group: 422,
    ErrorKind.invalid_content_type: 422,
    ErrorKind.extension_mismatch: 422,
}


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(VaultError)
    async def vault_error_handler(request: Request, exc: VaultError) -> JSONResponse:
        status_code = _STATUS_BY_KIND.get(exc.kind, 400)
        return JSONResponse(status_code=status_code, content=exc.to_response_body())
