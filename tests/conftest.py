"""Shared fixtures: minimal signature-bearing files for content sniffing"""

from __future__ import annotations

import struct
import zlib
from pathlib import Path

import pytest

from core.config import Settings
from core.registry import FileRegistry
from core.vault import FileVault


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(kind + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", crc)


def png_bytes(width: int = 1, height: int = 1) -> bytes:
    # 8-bit greyscale, one filter byte per row
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 0, 0, 0, 0)
    raw = b"".join(b"\x00" + b"\x7f" * width for _ in range(height))
    return (
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", ihdr)
        + _png_chunk(b"IDAT", zlib.compress(raw))
        + _png_chunk(b"IEND", b"")
    )


JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00" + b"\x00" * 32 + b"\xff\xd9"
GIF_BYTES = b"GIF89a\x01\x00\x01\x00\x80\x00\x00\xff\xff\xff\x00\x00\x00!\xf9\x04\x01\x00\x00\x00\x00,\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"
TIFF_BYTES = b"II*\x00\x08\x00\x00\x00" + b"\x00" * 24
AVI_BYTES = b"RIFF" + struct.pack("<I", 36) + b"AVI LIST" + struct.pack("<I", 4) + b"hdrl" + b"\x00" * 20
MP4_BYTES = b"\x00\x00\x00\x18ftypisom\x00\x00\x02\x00isomiso2" + b"\x00\x00\x00\x08free" + b"\x00" * 16
MOV_BYTES = b"\x00\x00\x00\x14ftypqt  \x00\x00\x02\x00qt  " + b"\x00\x00\x00\x08wide" + b"\x00" * 16
WEBM_BYTES = b"\x1a\x45\xdf\xa3\x9f\x42\x86\x81\x01\x42\xf7\x81\x01\x42\x82\x84webm\x42\x87\x81\x04" + b"\x00" * 16
# ASF header object GUID
WMV_BYTES = b"\x30\x26\xb2\x75\x8e\x66\xcf\x11\xa6\xd9\x00\xaa\x00\x62\xce\x6c" + b"\x00" * 24
TEXT_BYTES = b"just some plain text, no signature here\n"
PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\ntrailer\n<< >>\n%%EOF\n"


@pytest.fixture()
def png_data() -> bytes:
    return png_bytes()


@pytest.fixture()
def write_file(tmp_path: Path):
    # Write bytes under tmp_path and return the path as a string
    def _write(name: str, data: bytes) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return str(path)

    return _write


@pytest.fixture()
def vault_settings() -> Settings:
    return Settings(
        IMAGE_STORAGE_PATH="/vault/images",
        VIDEO_STORAGE_PATH="/vault/videos",
        UPLOAD_ROOT=None,
        VERIFY_EXTENSION=True,
        URL_TLD_WHITELIST=None,
        URL_STRICT_TLD=True,
        _env_file=None,
    )


@pytest.fixture()
def vault(vault_settings: Settings) -> FileVault:
    return FileVault(registry=FileRegistry(), settings=vault_settings)
