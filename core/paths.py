"""Path syntax validation and byte reading for candidate upload paths"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from core.errors import ErrorKind, VaultError

logger = logging.getLogger(__name__)

# Only classical characters for a file name / path
_PATH_RE = re.compile(r"[a-zA-Z0-9/.\\_-]+")


def validate_path(path: str) -> bool:
    """Return True if ``path`` is non-empty and made only of whitelisted characters.

    This is a character-class filter only. ``..`` segments pass; confinement
    to a directory is handled by ``read_content(root=...)``.
    """
    if not isinstance(path, str):
        return False
    return _PATH_RE.fullmatch(path) is not None


def _is_within(path: Path, root: Path) -> bool:
    try:
        path.relative_to(root)
    except ValueError:
        return False
    return True


def read_content(path: str, root: str | Path | None = None) -> bytes:
    """Read the file at ``path`` into memory.

    When ``root`` is given, a relative ``path`` is taken relative to it and
    the resolved target must stay under the resolved root.

    Raises:
        VaultError(invalid_path): the path fails the character whitelist, or
            resolves outside ``root`` when one is given. The filesystem is not
            read in that case.
        VaultError(read_error): any OS-level failure while resolving or
            reading, symlink loops included. The cause is logged and chained,
            but all causes share this one kind.
    """
    if not validate_path(path):
        logger.debug("Rejected path with disallowed characters: %r", path)
        raise VaultError(ErrorKind.invalid_path, path=path)

    target = Path(path)
    if root is not None:
        target = Path(root) / target
        try:
            resolved_root = Path(root).resolve()
            within = _is_within(target.resolve(), resolved_root)
        except (OSError, RuntimeError) as exc:
            # RuntimeError: symlink loop on Python < 3.13
            logger.warning("Failed to resolve %r: %s", path, exc)
            raise VaultError(ErrorKind.read_error, path=path) from exc
        if not within:
            logger.debug("Rejected path %r outside upload root %s", path, resolved_root)
            raise VaultError(ErrorKind.invalid_path, "File path escapes the upload root", path=path)

    try:
        return target.read_bytes()
    except OSError as exc:
        logger.warning("Failed to read %r: %s", path, exc)
        raise VaultError(ErrorKind.read_error, path=path) from exc
