# lunalite

Core building blocks of a small game engine, in plain Python. The only
runtime dependency is PyYAML.

## What is in it

- **`lunalite.codes`** has the `KeyCode`, `MouseCode` and `CursorMode` enums.
- **`lunalite.ids`** has `UUID`, an unsigned 64-bit handle.
  - `UUID()` draws a random non-zero value.
  - `UUID(0)` is the null handle, and its `is_valid()` is `False`.
  - Values outside the 64-bit range raise `ValueError`.
- **`lunalite.timestep`** has `Timestep`, a frame duration. It offers `seconds`, `milliseconds` and `float()`.
- **`lunalite.events`** has the window, application, keyboard and mouse event dataclasses.
  - Each event has an `event_type`, a `name`, a `category_flags` value (`EventCategory`) and a `handled` flag.
  - `EventDispatcher(event).dispatch(EventClass, func)` calls `func` only when the event is of that class's type. It ORs the handler's result into `event.handled`.
- **`lunalite.layers`** has `Layer` and `LayerStack`.
  - Layers are kept below overlays.
  - `pop_layer` and `pop_overlay` return whether the entry was found.
  - `detach_all` detaches the entries topmost first.
  - A stack used as a context manager detaches everything when the block ends.
- **`lunalite.input`** has `Input`, process-wide input state.
  - It reads keys, buttons, mouse position and cursor mode from an optional `InputProvider`.
  - It accumulates per-frame mouse delta and scroll offset through `record_mouse_moved` and `record_mouse_scrolled`.
  - `reset_frame_state` clears the per-frame values. `reset` returns everything to its initial state.
- **`lunalite.log`** sets up two loggers from the standard `logging` module: `LunaCore` (`core()`) and `LunaRHI` (`rhi()`).
  - They write to stdout and, if you give a file, to that file. The file is truncated on `init`.
  - Levels are set with `LogLevel`.
  - The first call to `get_logger` initializes logging if it has not been initialized yet.
- **`lunalite.project`** has `ProjectInfo` and `ProjectManager`.
  - `ProjectManager` creates, loads and saves `.lunaproj` YAML files.
  - Failures raise `ProjectError`.
- **`lunalite.asset`** has `Asset`, `AssetType`, `AssetMetadata` and `AssetError`.
- **`lunalite.database`** has `AssetDatabase`, a handle-to-asset store.
  - `add` gives a fresh handle to an asset that has none. It raises `AssetError` for a duplicate handle.
  - `get` raises `AssetError` for an invalid or unknown handle. It returns `None` when the asset is not of the class you asked for.
- **`lunalite.importer`** has `MeshAssetImporter` (`.obj`) and `ScriptAssetImporter` (`.lua`).
  - Each writes a `.lunameta` YAML sidecar next to the asset.
  - Re-importing keeps the handle, the memory-only flag and the config from an existing sidecar.
- **`lunalite.mesh_loader`** has `load_obj`.
  - It reads a Wavefront OBJ file into a `Mesh` of `Vertex` triangles.
  - Faces with more than three corners are fan-triangulated.
  - A triangle without normals gets its surface normal.
- **`lunalite.asset_manager`** has `AssetManager`.
  - It walks the whole project root and imports every `.obj` and `.lua` file. If a file already has a sidecar, the sidecar is read instead.
  - It registers the metadata and loads the meshes into `AssetDatabase`.
  - You can look assets up by project-relative path or by file name. Both lookups return `None` when nothing matches.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from pathlib import Path

from lunalite.asset_manager import AssetManager
from lunalite.mesh_loader import Mesh
from lunalite.project import ProjectInfo, ProjectManager

ProjectManager.instance().create_project(
    Path("my_project"), ProjectInfo(name="MyProject", assets_path=Path("Assets"))
)
# ... copy cube.obj into my_project/Assets ...

manager = AssetManager.instance()
manager.load_project_assets()

handle = manager.handle_by_relative_path(Path("Assets/cube.obj"))
assert handle == manager.handle_by_file_name("cube.obj")

mesh = manager.get_asset(handle, Mesh)
print(len(mesh.vertices), "vertices")
```

### Events and layers

```python
from lunalite.events import EventDispatcher, WindowResizeEvent
from lunalite.layers import Layer, LayerStack


class Game(Layer):
    def on_event(self, event):
        EventDispatcher(event).dispatch(WindowResizeEvent, lambda e: True)


stack = LayerStack()
stack.push_layer(Game("game"))

event = WindowResizeEvent(800, 600)
for layer in reversed(stack):
    if event.handled:
        break
    layer.on_event(event)

print(event.handled)  # True
```

## What it does not do

- There is no window, application main loop, renderer or UI. Events and input state are fed in by your own code, or by an `InputProvider` you write.
- Script assets (`.lua`) are imported and registered, but they are not executed or loaded as objects.
- There is no scene or entity system.
- There are no command-line tools.