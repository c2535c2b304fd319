"""Pydantic models for file records, content classification and API bodies"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ContentGroup(str, Enum):
    image = "image"
    video = "video"


class InsertOutcome(str, Enum):
    inserted = "inserted"
    already_exists = "already_exists"


# ---------------------------------------------------------------------------
# Core records
# ---------------------------------------------------------------------------

class ContentSubtype(BaseModel):
    """Concrete format resolved from signature bytes, e.g. png / image/png."""

    model_config = ConfigDict(frozen=True)

    extension: str
    mime: str


class FileRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    source_path: str
    storage_group_path: str
    content_group: ContentGroup


class UploadResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    content_id: str
    record: FileRecord
    outcome: InsertOutcome


# ---------------------------------------------------------------------------
# API request / response bodies
# ---------------------------------------------------------------------------

class UploadRequest(BaseModel):
    path: str = Field(..., min_length=1)
    verify_extension: bool | None = None


class UploadResponse(BaseModel):
    content_id: str
    record: FileRecord


class VerifyFileRequest(BaseModel):
    path: str = Field(..., min_length=1)


class VerifyFileResponse(BaseModel):
    content_id: str
    matches: bool


class UrlValidationRequest(BaseModel):
    url: str
    whitelist: list[str] | None = None


class UrlValidationResponse(BaseModel):
    url: str
    valid: bool
