"""Content-addressed identifiers: generation and format validation"""

from __future__ import annotations

import hashlib
import re
import uuid

from core.errors import ErrorKind, VaultError

# Fixed namespace so identifiers stay stable across process runs
CONTENT_ID_NAMESPACE = uuid.UUID("6f1d3c2a-9b8e-5d47-a0c3-2e5f7b914d86")

# Canonical hyphenated UUID text form, 8-4-4-4-12 hex digits
_ID_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def generate_id(data: bytes) -> str:
    """Derive the identifier for ``data``: uuid5(namespace, sha256 hex digest)."""
    digest = hashlib.sha256(data).hexdigest()
    return str(uuid.uuid5(CONTENT_ID_NAMESPACE, digest))


def validate_id_format(candidate: str) -> bool:
    if not isinstance(candidate, str):
        return False
    return _ID_RE.fullmatch(candidate) is not None


def parse_id(candidate: str) -> str:
    """Validate ``candidate`` and return its lowercase canonical form."""
    if not validate_id_format(candidate):
        raise VaultError(ErrorKind.invalid_uuid_format, content_id=candidate)
    return candidate.lower()


def verify_content_id(data: bytes, candidate: str) -> bool:
    """Check that ``candidate`` is the identifier of ``data``.

    The candidate's format is checked before anything is hashed.
    """
    content_id = parse_id(candidate)
    return generate_id(data) == content_id
