"""Project description and the manager that creates, loads and saves project files."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, ClassVar

import yaml

__all__ = ["PROJECT_FILE_SUFFIX", "ProjectError", "ProjectInfo", "ProjectManager"]

PROJECT_FILE_SUFFIX = ".lunaproj"


class ProjectError(Exception):
    """Raised when a project cannot be created, loaded or saved."""


def _optional_path(value: Any) -> Path | None:
    if value is None:
        return None
    text = os.fspath(value)
    return Path(text) if text else None


def _path_text(path: Path | None) -> str:
    return "" if path is None else path.as_posix()


@dataclass
class ProjectInfo:
    """Descriptive project data; paths are relative to the project root."""

    name: str = "Unknown"
    version: str = "0.1.0"
    author: str = "Unknown"
    description: str = "A simple Luna project."
    start_scene: Path | None = None
    assets_path: Path | None = None

    def __post_init__(self) -> None:
        self.start_scene = _optional_path(self.start_scene)
        self.assets_path = _optional_path(self.assets_path)


def _scalar(section: dict[str, Any], key: str, default: str, source: Path) -> str:
    if key not in section:
        return default
    value = section[key]
    if value is None or isinstance(value, (dict, list)):
        raise ProjectError(f"Failed to deserialize project '{source}': '{key}' is not a scalar")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ProjectManager:
    """Holds the currently open project and its location on disk."""

    _instance: ClassVar[ProjectManager | None] = None

    def __init__(self) -> None:
        self._project_info: ProjectInfo | None = None
        self._project_root_path: Path | None = None
        self._project_file_path: Path | None = None

    @classmethod
    def instance(cls) -> ProjectManager:
        """Return the process-wide project manager."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def load_project(self, project_file_path: str | os.PathLike[str]) -> None:
        """Open a project file; its directory becomes the project root."""
        self._project_file_path = Path(project_file_path).absolute()
        self._project_root_path = self._project_file_path.parent
        self._deserialize()

    def project_root_path(self) -> Path | None:
        return self._project_root_path

    def project_info(self) -> ProjectInfo | None:
        return self._project_info

    def set_project_info(self, info: ProjectInfo) -> None:
        self._project_info = replace(info)

    def save_project(self) -> None:
        self._serialize()

    def create_project(self, project_root_path: str | os.PathLike[str], info: ProjectInfo) -> None:
        """Create the project directory, its assets directory and the project file."""
        if not info.name:
            raise ProjectError("Failed to create project: project name is empty")

        root = Path(project_root_path).absolute()
        self._project_root_path = root
        self._project_file_path = root / f"{info.name}{PROJECT_FILE_SUFFIX}"
        self._project_info = replace(info)

        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ProjectError(f"Failed to create project directory '{root}': {exc}") from exc

        if info.assets_path is not None:
            assets_dir = root / info.assets_path
            try:
                assets_dir.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise ProjectError(f"Failed to create assets directory '{assets_dir}': {exc}") from exc

        self._serialize()

    def _serialize(self) -> None:
        info = self._project_info
        path = self._project_file_path
        if info is None or path is None:
            raise ProjectError("Failed to serialize project: no project is loaded")

        root = {
            "Project": {
                "Name": info.name,
                "Version": info.version,
                "Author": info.author,
                "Description": info.description,
                "StartScene": _path_text(info.start_scene),
                "AssetsPath": _path_text(info.assets_path),
            }
        }
        try:
            path.write_text(yaml.safe_dump(root, sort_keys=False, allow_unicode=True), encoding="utf-8")
        except OSError as exc:
            raise ProjectError(f"Failed to write project file '{path}': {exc}") from exc

    def _deserialize(self) -> None:
        path = self._project_file_path
        if path is None:
            raise ProjectError("Failed to deserialize project: project file path is empty")

        try:
            with path.open(encoding="utf-8") as stream:
                root = yaml.safe_load(stream)
        except OSError as exc:
            raise ProjectError(f"Failed to deserialize project '{path}': {exc}") from exc
        except yaml.YAMLError as exc:
            raise ProjectError(f"Failed to deserialize project '{path}': {exc}") from exc

        section = root.get("Project") if isinstance(root, dict) else None
        if not isinstance(section, dict) or section.get("Name") is None:
            raise ProjectError(f"Failed to deserialize project '{path}': missing Project/Name")

        defaults = ProjectInfo()
        self._project_info = ProjectInfo(
            name=_scalar(section, "Name", defaults.name, path),
            version=_scalar(section, "Version", defaults.version, path),
            author=_scalar(section, "Author", defaults.author, path),
            description=_scalar(section, "Description", defaults.description, path),
            start_scene=_optional_path(_scalar(section, "StartScene", "", path)),
            assets_path=_optional_path(_scalar(section, "AssetsPath", "", path)),
        )