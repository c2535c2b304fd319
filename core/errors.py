"""Error taxonomy for input validation and the file registry."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    invalid_path = "invalid_path"
    read_error = "read_error"
    invalid_content_group = "invalid_content_group"
    invalid_content_type = "invalid_content_type"
    extension_mismatch = "extension_mismatch"
    invalid_uuid_format = "invalid_uuid_format"
    invalid_whitelist_entry = "invalid_whitelist_entry"
    already_exists = "already_exists"
    not_found = "not_found"


_DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.invalid_path: "File path given is invalid",
    ErrorKind.read_error: "An error occurred while reading the file",
    ErrorKind.invalid_content_group: "File content is neither an image nor a video",
    ErrorKind.invalid_content_type: "File content type could not be resolved",
    ErrorKind.extension_mismatch: "File extension does not match its content",
    ErrorKind.invalid_uuid_format: "Identifier given is not a well-formed UUID",
    ErrorKind.invalid_whitelist_entry: "A top level domain given in the whitelist is not valid",
    ErrorKind.already_exists: "A file with the same content is already registered",
    ErrorKind.not_found: "No file registered under this identifier",
}


class VaultError(Exception):
    """Typed failure raised by every validation step and by the registry.

    Callers branch on ``kind``; ``context`` carries the offending input
    (path, content_id, entry, ...) so nothing has to be parsed out of the
    message.
    """

    def __init__(self, kind: ErrorKind, message: str | None = None, **context: object):
        self.kind = kind
        self.message = message or _DEFAULT_MESSAGES[kind]
        self.context = context
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"VaultError(kind={self.kind.value!r}, message={self.message!r}, context={self.context!r})"

    def to_dict(self) -> dict:
        d: dict = {"kind": self.kind.value, "message": self.message}
        if self.context:
            d["context"] = {k: v if isinstance(v, (str, int, bool)) else repr(v) for k, v in self.context.items()}
        return d

    def to_response_body(self) -> dict:
        return {"detail": self.message, "error": self.to_dict()}
