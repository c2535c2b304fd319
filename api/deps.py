"""Shared FastAPI dependencies"""

from __future__ import annotations

from core.registry import FileRegistry
from core.vault import FileVault

_vault: FileVault | None = None


def get_vault() -> FileVault:
    global _vault
    if _vault is None:
        _vault = FileVault(registry=FileRegistry())
    return _vault
