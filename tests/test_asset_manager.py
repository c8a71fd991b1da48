import shutil
from pathlib import Path

import pytest

from lunalite.asset import AssetError, AssetType
from lunalite.asset_manager import AssetManager
from lunalite.ids import UUID
from lunalite.mesh_loader import Mesh
from lunalite.project import ProjectInfo, ProjectManager

CUBE_OBJ = """\
# unit cube
v -1 -1 -1
v 1 -1 -1
v 1 1 -1
v -1 1 -1
v -1 -1 1
v 1 -1 1
v 1 1 1
v -1 1 1
f 1 2 3 4
f 5 8 7 6
f 1 5 6 2
f 2 6 7 3
f 3 7 8 4
f 5 1 4 8
"""


def _make_project(root: Path, name: str = "AssetManagerTestProject") -> Path:
    info = ProjectInfo(name=name, assets_path=Path("Assets"))
    ProjectManager.instance().create_project(root, info)
    return root


def _write_meta(path: Path, handle: int, type_name: str, file_path: str) -> None:
    path.write_text(
        "Asset:\n"
        f"  Handle: {handle}\n"
        f"  Type: {type_name}\n"
        f"  Name: {Path(file_path).stem}\n"
        f"  FilePath: {file_path}\n"
        "  MemoryOnly: false\n",
        encoding="utf-8",
    )


@pytest.fixture
def project(tmp_path):
    root = _make_project(tmp_path / "asset_manager_test_project")
    yield root
    AssetManager.instance().clear()


@pytest.fixture
def manager():
    result = AssetManager()
    yield result
    result.clear()


def test_imports_and_loads_mesh(project, manager):
    (project / "Assets" / "cube.obj").write_text(CUBE_OBJ, encoding="utf-8")

    manager.load_project_assets()

    handle = manager.handle_by_relative_path("Assets/cube.obj")
    assert handle is not None and handle.is_valid()

    file_name_handle = manager.handle_by_file_name("cube.obj")
    assert file_name_handle == handle

    mesh = manager.get_asset(handle, Mesh)
    assert mesh is not None
    assert len(mesh.vertices) == 36
    assert mesh.indices == list(range(36))


def test_singleton_instance_loads_project(project):
    (project / "Assets" / "cube.obj").write_text(CUBE_OBJ, encoding="utf-8")
    manager = AssetManager.instance()
    assert AssetManager.instance() is manager

    manager.load_project_assets()
    handle = manager.handle_by_relative_path("Assets/cube.obj")
    assert manager.metadata(handle).asset_type is AssetType.MESH


def test_metadata_file_is_written_and_handle_reused(project, manager):
    (project / "Assets" / "cube.obj").write_text(CUBE_OBJ, encoding="utf-8")

    manager.load_project_assets()
    first = manager.handle_by_relative_path("Assets/cube.obj")
    assert (project / "Assets" / "cube.obj.lunameta").is_file()

    manager.load_project_assets()
    second = manager.handle_by_relative_path("Assets/cube.obj")
    assert first == second


def test_script_asset_registered(project, manager):
    scripts = project / "Scripts"
    scripts.mkdir()
    (scripts / "rotate.lua").write_text("return {}\n", encoding="utf-8")

    manager.load_project_assets()

    handle = manager.handle_by_relative_path("Scripts/rotate.lua")
    assert handle is not None
    metadata = manager.metadata(handle)
    assert metadata.asset_type is AssetType.SCRIPT
    assert metadata.name == "rotate"
    assert metadata.file_path.as_posix() == "Scripts/rotate.lua"


def test_unsupported_files_are_ignored(project, manager):
    (project / "Assets" / "readme.txt").write_text("hello", encoding="utf-8")
    (project / "Assets" / "cube.obj").write_text(CUBE_OBJ, encoding="utf-8")

    manager.load_project_assets()

    registry = manager.metadata_registry()
    assert len(registry) == 1
    assert manager.handle_by_file_name("readme.txt") is None


def test_absolute_path_rejected(project, manager):
    manager.load_project_assets()
    with pytest.raises(AssetError):
        manager.handle_by_relative_path(project / "Assets" / "cube.obj")


def test_unknown_path_returns_none(project, manager):
    manager.load_project_assets()
    assert manager.handle_by_relative_path("Assets/missing.obj") is None
    assert manager.handle_by_file_name("missing.obj") is None
    assert manager.metadata(UUID(12345)) is None


def test_missing_project_root_raises(tmp_path, manager):
    root = _make_project(tmp_path / "gone")
    shutil.rmtree(root)
    with pytest.raises(AssetError):
        manager.load_project_assets()


def test_duplicate_handle_raises(project, manager):
    assets = project / "Assets"
    (assets / "a.lua").write_text("return {}\n", encoding="utf-8")
    (assets / "b.lua").write_text("return {}\n", encoding="utf-8")
    _write_meta(assets / "a.lua.lunameta", 42, "Script", "Assets/a.lua")
    _write_meta(assets / "b.lua.lunameta", 42, "Script", "Assets/b.lua")

    with pytest.raises(AssetError, match="duplicate handle"):
        manager.load_project_assets()


def test_invalid_handle_in_metadata_raises(project, manager):
    assets = project / "Assets"
    (assets / "a.lua").write_text("return {}\n", encoding="utf-8")
    _write_meta(assets / "a.lua.lunameta", 0, "Script", "Assets/a.lua")

    with pytest.raises(AssetError, match="invalid handle"):
        manager.load_project_assets()


def test_unknown_asset_type_fails_to_load(project, manager):
    assets = project / "Assets"
    (assets / "a.lua").write_text("return {}\n", encoding="utf-8")
    _write_meta(assets / "a.lua.lunameta", 7, "Bogus", "Assets/a.lua")

    with pytest.raises(AssetError, match="unsupported asset type"):
        manager.load_project_assets()


def test_empty_mesh_fails_to_load(project, manager):
    (project / "Assets" / "empty.obj").write_text("# nothing here\n", encoding="utf-8")
    with pytest.raises(AssetError):
        manager.load_project_assets()


def test_existing_metadata_handle_is_used(project, manager):
    assets = project / "Assets"
    (assets / "cube.obj").write_text(CUBE_OBJ, encoding="utf-8")
    _write_meta(assets / "cube.obj.lunameta", 987654321, "Mesh", "Assets/cube.obj")

    manager.load_project_assets()

    handle = manager.handle_by_relative_path("Assets/cube.obj")
    assert int(handle) == 987654321
    assert manager.get_asset(handle, Mesh).handle == handle


def test_clear_forgets_everything(project, manager):
    (project / "Assets" / "cube.obj").write_text(CUBE_OBJ, encoding="utf-8")
    manager.load_project_assets()
    handle = manager.handle_by_relative_path("Assets/cube.obj")

    manager.clear()

    assert len(manager.metadata_registry()) == 0
    assert manager.handle_by_relative_path("Assets/cube.obj") is None
    with pytest.raises(AssetError):
        manager.get_asset(handle, Mesh)