"""Asset base class, asset kinds and the metadata kept for each imported asset."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Any

from .ids import UUID

__all__ = [
    "AssetHandle",
    "AssetError",
    "AssetType",
    "asset_type_to_string",
    "string_to_asset_type",
    "Asset",
    "AssetMetadata",
]

AssetHandle = UUID


class AssetError(Exception):
    """Raised when an asset cannot be registered, found or loaded."""


class AssetType(IntEnum):
    NONE = 0
    MESH = 1
    SCRIPT = 2


_TYPE_NAMES = {
    AssetType.NONE: "None",
    AssetType.MESH: "Mesh",
    AssetType.SCRIPT: "Script",
}

_TYPES_BY_NAME = {
    "Mesh": AssetType.MESH,
    "Script": AssetType.SCRIPT,
}


def asset_type_to_string(asset_type: AssetType) -> str:
    """Name of an asset type as written to metadata files."""
    return _TYPE_NAMES.get(asset_type, "Unknown")


def string_to_asset_type(text: str) -> AssetType:
    """Parse a metadata type name; anything unrecognised is NONE."""
    return _TYPES_BY_NAME.get(text, AssetType.NONE)


class Asset:
    """Base of every loaded asset; identity is its handle."""

    def __init__(self, handle: UUID | None = None) -> None:
        self.handle = handle if handle is not None else UUID(0)

    def asset_type(self) -> AssetType:
        return AssetType.NONE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Asset):
            return NotImplemented
        return self.handle == other.handle

    def __hash__(self) -> int:
        return hash(self.handle)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(handle={self.handle})"


@dataclass
class AssetMetadata:
    """What the asset manager knows about an asset file; file_path is project-relative."""

    handle: UUID = field(default_factory=lambda: UUID(0))
    asset_type: AssetType = AssetType.NONE
    name: str = ""
    file_path: Path | None = None
    memory_only: bool = False
    specialized_config: Any = None

    def __post_init__(self) -> None:
        if self.file_path is not None and not isinstance(self.file_path, Path):
            text = str(self.file_path)
            self.file_path = Path(text) if text else None