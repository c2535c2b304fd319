"""Signature-based content classification and extension reconciliation"""

from __future__ import annotations

import logging

import filetype

from core.errors import ErrorKind, VaultError
from core.models import ContentGroup, ContentSubtype

logger = logging.getLogger(__name__)

# Canonical extension -> extra suffix accepted for the same MIME type
EXTENSION_ALIASES: dict[str, str] = {
    "jpg": "jpeg",
    "tif": "tiff",
}


def _sniff_group(data: bytes) -> ContentGroup | None:
    if filetype.is_image(data):
        return ContentGroup.image
    if filetype.is_video(data):
        return ContentGroup.video
    return None


def classify_content(data: bytes) -> tuple[ContentGroup, ContentSubtype]:
    """Classify a byte buffer from its signature bytes, never from a filename.

    The group (image / video) and the subtype are resolved independently:
    the group decides storage routing, the subtype carries the canonical
    extension used by ``extension_matches``.

    Raises:
        VaultError(invalid_content_group): content is neither image nor video.
        VaultError(invalid_content_type): group matched but no concrete
            subtype consistent with it could be resolved.
    """
    group = _sniff_group(data) if data else None
    if group is None:
        raise VaultError(ErrorKind.invalid_content_group)

    kind = filetype.guess(data)
    if kind is None or not kind.extension or not kind.mime:
        raise VaultError(ErrorKind.invalid_content_type, group=group.value)

    # A subtype from another family (e.g. application/dicom) is not trusted
    if kind.mime.split("/", 1)[0] != group.value:
        raise VaultError(ErrorKind.invalid_content_type, group=group.value, mime=kind.mime)

    subtype = ContentSubtype(extension=kind.extension.lower(), mime=kind.mime)
    logger.debug("Classified content as %s (%s)", group.value, subtype.mime)
    return group, subtype


def _suffix(file_path: str) -> str:
    name = file_path.strip().lower().replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1]


def extension_matches(file_path: str, subtype: ContentSubtype) -> bool:
    """Check the path's trailing extension against the subtype, case-insensitively.

    Only jpg -> jpeg and tif -> tiff are accepted as aliases.
    """
    suffix = _suffix(file_path)
    if not suffix:
        return False
    canonical = subtype.extension.lower()
    return suffix == canonical or suffix == EXTENSION_ALIASES.get(canonical)
