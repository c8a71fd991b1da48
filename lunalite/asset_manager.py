"""Discovery, registration and loading of the assets of the open project."""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from types import MappingProxyType
from typing import ClassVar, Mapping, TypeVar

from .asset import Asset, AssetError, AssetMetadata, AssetType
from .database import AssetDatabase
from .ids import UUID
from .importer import (
    META_FILE_SUFFIX,
    Importer,
    MeshAssetImporter,
    ScriptAssetImporter,
    deserialize_metadata,
)
from .mesh_loader import load_obj
from .project import ProjectManager

__all__ = ["AssetManager"]

A = TypeVar("A", bound=Asset)


def _is_meta_file(path: Path) -> bool:
    return path.suffix == META_FILE_SUFFIX


def _path_key(path: str | os.PathLike[str]) -> str:
    return PurePath(os.path.normpath(os.fspath(path))).as_posix()


class AssetManager:
    """Scans the project for asset files, keeps their metadata and loads them."""

    _instance: ClassVar[AssetManager | None] = None

    def __init__(self) -> None:
        self._importers: list[Importer] = []
        self._metadata_registry: dict[UUID, AssetMetadata] = {}
        self._path_handle_map: dict[str, UUID] = {}

    @classmethod
    def instance(cls) -> AssetManager:
        """Return the process-wide asset manager."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def load_project_assets(self) -> None:
        """Import every supported file under the project root and load the assets."""
        self._register_default_importers()
        self.clear()

        assets_root = ProjectManager.instance().project_root_path()
        if assets_root is None:
            raise AssetError("Failed to load project assets: no project is loaded")
        if not assets_root.exists():
            raise AssetError(f"Failed to load project assets: '{assets_root}' does not exist")

        self._scan_assets_directory(assets_root)
        self._load_all_assets()

    def clear(self) -> None:
        """Forget all metadata and drop every loaded asset."""
        self._metadata_registry.clear()
        self._path_handle_map.clear()
        AssetDatabase.instance().clear()

    def handle_by_relative_path(self, asset_path: str | os.PathLike[str]) -> UUID | None:
        """Handle of the asset at a project-relative path, or None if unknown."""
        path = Path(asset_path)
        if path.is_absolute():
            raise AssetError(
                f"Failed to get asset: path must be relative to the project root: '{path}'"
            )
        return self._path_handle_map.get(_path_key(path))

    def handle_by_file_name(self, asset_name: str) -> UUID | None:
        """Handle of an asset with the given file name, or None if there is none."""
        matched: str | None = None
        for path in self._path_handle_map:
            if PurePath(path).name == asset_name:
                matched = path
        if matched is None:
            return None
        return self.handle_by_relative_path(matched)

    def metadata(self, handle: UUID) -> AssetMetadata | None:
        return self._metadata_registry.get(handle)

    def metadata_registry(self) -> Mapping[UUID, AssetMetadata]:
        """Read-only view of all registered metadata."""
        return MappingProxyType(self._metadata_registry)

    def get_asset(self, handle: UUID, asset_class: type[A] = Asset) -> A | None:  # type: ignore[assignment]
        """The loaded asset for a handle if it is an instance of asset_class."""
        return AssetDatabase.instance().get(handle, asset_class)

    def _register_default_importers(self) -> None:
        if self._importers:
            return
        self._importers.append(MeshAssetImporter())
        self._importers.append(ScriptAssetImporter())

    def _find_importer(self, asset_path: Path) -> Importer | None:
        return next((imp for imp in self._importers if imp.supports(asset_path)), None)

    def _scan_assets_directory(self, assets_root: Path) -> None:
        def on_error(exc: OSError) -> None:
            raise AssetError(f"Failed to scan assets directory '{assets_root}': {exc}") from exc

        for directory, subdirectories, files in os.walk(assets_root, onerror=on_error):
            subdirectories.sort()
            for file_name in sorted(files):
                path = Path(directory) / file_name
                if not path.is_file() or _is_meta_file(path):
                    continue
                if self._find_importer(path) is None:
                    continue
                self._import_if_needed(path)

    def _import_if_needed(self, asset_path: Path) -> None:
        importer = self._find_importer(asset_path)
        if importer is None:
            return

        meta_path = asset_path.with_name(asset_path.name + META_FILE_SUFFIX)
        if meta_path.exists():
            metadata = deserialize_metadata(meta_path)
        else:
            metadata = importer.import_asset(asset_path)
        self._register_metadata(metadata)

    def _register_metadata(self, metadata: AssetMetadata) -> None:
        if not metadata.handle.is_valid():
            raise AssetError(
                f"Failed to register asset metadata '{metadata.file_path}': invalid handle"
            )
        if metadata.handle in self._metadata_registry:
            raise AssetError(
                f"Failed to register asset metadata '{metadata.file_path}': "
                f"duplicate handle {metadata.handle}"
            )

        self._metadata_registry[metadata.handle] = metadata
        key = _path_key(metadata.file_path) if metadata.file_path is not None else ""
        self._path_handle_map.setdefault(key, metadata.handle)

    def _load_all_assets(self) -> None:
        for metadata in list(self._metadata_registry.values()):
            self._load_asset(metadata)

    def _load_asset(self, metadata: AssetMetadata) -> None:
        database = AssetDatabase.instance()
        if metadata.handle in database:
            return

        if metadata.asset_type is AssetType.MESH:
            database.add(load_obj(metadata))
        elif metadata.asset_type is AssetType.SCRIPT:
            return
        else:
            raise AssetError(
                f"Failed to load asset '{metadata.file_path}': unsupported asset type"
            )