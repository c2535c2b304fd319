"""File vault service: accept path, lookup, file/id verification and URL checks.

Wires the validators around an injected ``FileRegistry``. Only a source path
and the storage bucket for its content group are recorded; bytes are never
copied.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from core.config import Settings, settings as default_settings
from core.content import classify_content, extension_matches
from core.content_id import generate_id, parse_id
from core.errors import ErrorKind, VaultError
from core.models import ContentGroup, FileRecord, InsertOutcome, UploadResult
from core.paths import read_content
from core.registry import FileRegistry
from core.urls import UrlValidator

logger = logging.getLogger(__name__)


class FileVault:
    def __init__(self, registry: FileRegistry, settings: Settings | None = None) -> None:
        self.registry = registry
        self.settings = settings or default_settings
        self._url_validator = UrlValidator(
            strict_tld=self.settings.URL_STRICT_TLD,
            max_length=self.settings.URL_MAX_LENGTH,
        )

    def _storage_group_path(self, group: ContentGroup) -> str:
        if group is ContentGroup.image:
            return self.settings.IMAGE_STORAGE_PATH
        return self.settings.VIDEO_STORAGE_PATH

    def _read(self, path: str) -> bytes:
        return read_content(path, root=self.settings.UPLOAD_ROOT)

    def upload(self, path: str, verify_extension: bool | None = None) -> UploadResult:
        """Validate the file at ``path`` and register it under its content id.

        When the same content is already registered, the existing record is
        returned with outcome ``already_exists``; it is never replaced.

        Raises:
            VaultError: invalid_path, read_error, invalid_content_group,
                invalid_content_type or extension_mismatch.
        """
        if verify_extension is None:
            verify_extension = self.settings.VERIFY_EXTENSION

        # Read strictly before the registry lock is taken
        data = self._read(path)
        group, subtype = classify_content(data)

        if verify_extension and not extension_matches(path, subtype):
            logger.debug("Extension of %r does not match sniffed type %s", path, subtype.mime)
            raise VaultError(
                ErrorKind.extension_mismatch,
                path=path,
                expected=subtype.extension,
            )

        content_id = generate_id(data)
        record = FileRecord(
            source_path=path,
            storage_group_path=self._storage_group_path(group),
            content_group=group,
        )
        outcome = self.registry.insert(content_id, record)

        if outcome is InsertOutcome.already_exists:
            logger.info("Content of %r already registered as %s", path, content_id)
            record = self.registry.lookup(content_id)
        else:
            logger.info("Registered %r as %s (%s)", path, content_id, group.value)

        return UploadResult(content_id=content_id, record=record, outcome=outcome)

    def upload_strict(self, path: str, verify_extension: bool | None = None) -> UploadResult:
        """Like ``upload``, but raises ``already_exists`` for known content."""
        result = self.upload(path, verify_extension=verify_extension)
        if result.outcome is InsertOutcome.already_exists:
            raise VaultError(ErrorKind.already_exists, content_id=result.content_id, path=path)
        return result

    def lookup(self, content_id: str) -> FileRecord:
        return self.registry.lookup(parse_id(content_id))

    def verify_file(self, path: str, content_id: str) -> bool:
        """Check that the file at ``path`` has identifier ``content_id``.

        The identifier format is checked before the file is read.
        """
        expected = parse_id(content_id)
        data = self._read(path)
        return generate_id(data) == expected

    def check_url(self, url: str, whitelist: Sequence[str] | None = None) -> bool:
        if whitelist is None:
            whitelist = self.settings.URL_TLD_WHITELIST
        return self._url_validator.validate(url, whitelist)
