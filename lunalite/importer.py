"""Asset importers and the metadata files they keep next to each asset."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import yaml

from .asset import (
    AssetError,
    AssetMetadata,
    AssetType,
    asset_type_to_string,
    string_to_asset_type,
)
from .ids import UUID
from .project import ProjectManager

__all__ = [
    "META_FILE_SUFFIX",
    "get_project_root",
    "make_project_relative",
    "get_meta_file_path",
    "serialize_metadata",
    "deserialize_metadata",
    "create_metadata",
    "Importer",
    "MeshAssetImporter",
    "ScriptAssetImporter",
]

META_FILE_SUFFIX = ".lunameta"

_TRUE_WORDS = {"y", "Y", "yes", "Yes", "YES", "true", "True", "TRUE", "on", "On", "ON"}
_FALSE_WORDS = {"n", "N", "no", "No", "NO", "false", "False", "FALSE", "off", "Off", "OFF"}


def get_project_root() -> Path:
    """Root of the open project, or the working directory when none is open."""
    root = ProjectManager.instance().project_root_path()
    return root if root is not None else Path.cwd()


def make_project_relative(path: str | os.PathLike[str]) -> Path:
    """Express a path relative to the project root, normalized."""
    root = get_project_root()
    path = Path(path)
    absolute = path if path.is_absolute() else root / path
    try:
        relative = os.path.relpath(absolute.resolve(), root.resolve())
    except (ValueError, OSError):
        return Path(os.path.normpath(absolute))
    return Path(os.path.normpath(relative))


def get_meta_file_path(metadata: AssetMetadata) -> Path:
    """Location of the metadata file that belongs to the asset."""
    if metadata.file_path is None:
        raise AssetError("Asset metadata has no file path")
    target = get_project_root() / metadata.file_path
    return target.with_name(target.name + META_FILE_SUFFIX)


def serialize_metadata(metadata: AssetMetadata) -> Path:
    """Write the metadata file for an asset and return its path."""
    meta_path = get_meta_file_path(metadata)
    try:
        meta_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise AssetError(f"Failed to create metadata directory '{meta_path.parent}': {exc}") from exc

    section: dict[str, Any] = {
        "Handle": int(metadata.handle),
        "Type": asset_type_to_string(metadata.asset_type),
        "Name": metadata.name,
        "FilePath": metadata.file_path.as_posix() if metadata.file_path is not None else "",
        "MemoryOnly": metadata.memory_only,
    }
    if metadata.specialized_config is not None:
        section["Config"] = metadata.specialized_config

    try:
        text = yaml.safe_dump({"Asset": section}, sort_keys=False, allow_unicode=True)
    except yaml.YAMLError as exc:
        raise AssetError(f"Failed to write metadata file '{meta_path}': {exc}") from exc
    try:
        meta_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise AssetError(f"Failed to write metadata file '{meta_path}': {exc}") from exc
    return meta_path


def _as_int(value: Any, key: str, source: Path) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise AssetError(f"Failed to deserialize metadata '{source}': '{key}' is not an unsigned integer")


def _as_str(value: Any, key: str, source: Path) -> str:
    if value is None or isinstance(value, (dict, list)):
        raise AssetError(f"Failed to deserialize metadata '{source}': '{key}' is not a scalar")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_bool(value: Any, key: str, source: Path) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value in _TRUE_WORDS:
            return True
        if value in _FALSE_WORDS:
            return False
    raise AssetError(f"Failed to deserialize metadata '{source}': '{key}' is not a boolean")


def deserialize_metadata(meta_path: str | os.PathLike[str]) -> AssetMetadata:
    """Read an asset metadata file."""
    meta_path = Path(meta_path)
    try:
        with meta_path.open(encoding="utf-8") as stream:
            root = yaml.safe_load(stream)
    except (OSError, yaml.YAMLError) as exc:
        raise AssetError(f"Failed to deserialize metadata '{meta_path}': {exc}") from exc

    section = root.get("Asset") if isinstance(root, dict) else None
    if not isinstance(section, dict):
        raise AssetError(f"Failed to deserialize metadata '{meta_path}': missing Asset")

    metadata = AssetMetadata()
    if "Handle" in section:
        try:
            metadata.handle = UUID(_as_int(section["Handle"], "Handle", meta_path))
        except ValueError as exc:
            raise AssetError(f"Failed to deserialize metadata '{meta_path}': {exc}") from exc
    if "Type" in section:
        metadata.asset_type = string_to_asset_type(_as_str(section["Type"], "Type", meta_path))
    if "Name" in section:
        metadata.name = _as_str(section["Name"], "Name", meta_path)
    if "FilePath" in section:
        text = _as_str(section["FilePath"], "FilePath", meta_path)
        metadata.file_path = Path(text) if text else None
    if "MemoryOnly" in section:
        metadata.memory_only = _as_bool(section["MemoryOnly"], "MemoryOnly", meta_path)
    if "Config" in section:
        metadata.specialized_config = section["Config"]
    elif "SpecializedConfig" in section:
        metadata.specialized_config = section["SpecializedConfig"]
    return metadata


def create_metadata(asset_path: str | os.PathLike[str], asset_type: AssetType) -> AssetMetadata:
    """Fresh metadata with a new handle for the asset at asset_path."""
    asset_path = Path(asset_path)
    return AssetMetadata(
        handle=UUID(),
        asset_type=asset_type,
        name=asset_path.stem,
        file_path=make_project_relative(asset_path),
        memory_only=False,
    )


class Importer(ABC):
    """Turns asset files of some extensions into registered metadata."""

    @abstractmethod
    def import_asset(self, asset_path: str | os.PathLike[str]) -> AssetMetadata: ...

    @abstractmethod
    def supported_extensions(self) -> list[str]: ...

    def supports(self, asset_path: str | os.PathLike[str]) -> bool:
        """Whether the file's extension is handled, ignoring case."""
        extension = Path(asset_path).suffix.lower()
        return any(extension == supported.lower() for supported in self.supported_extensions())

    def _import_as(self, asset_path: str | os.PathLike[str], asset_type: AssetType) -> AssetMetadata:
        metadata = create_metadata(asset_path, asset_type)
        meta_path = get_meta_file_path(metadata)
        if meta_path.exists():
            try:
                previous = deserialize_metadata(meta_path)
            except AssetError:
                previous = AssetMetadata()
            if previous.handle.is_valid():
                metadata.handle = previous.handle
            metadata.memory_only = previous.memory_only
            metadata.specialized_config = previous.specialized_config

        serialize_metadata(metadata)
        return metadata


class MeshAssetImporter(Importer):
    """Imports Wavefront OBJ meshes."""

    def import_asset(self, asset_path: str | os.PathLike[str]) -> AssetMetadata:
        return self._import_as(asset_path, AssetType.MESH)

    def supported_extensions(self) -> list[str]:
        return [".obj"]


class ScriptAssetImporter(Importer):
    """Imports Lua scripts."""

    def import_asset(self, asset_path: str | os.PathLike[str]) -> AssetMetadata:
        return self._import_as(asset_path, AssetType.SCRIPT)

    def supported_extensions(self) -> list[str]:
        return [".lua"]