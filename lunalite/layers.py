"""Application layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Iterator, Optional

from .events import Event
from .timestep import Timestep

__all__ = ["Layer", "LayerStack"]


class Layer:
    """A slice of the application receiving update, render and event callbacks.

    The default hooks keep simple bookkeeping: whether the layer is attached,
    the total time it has been updated for, the last event it saw and how many
    scene and UI frames it has been asked to draw.  Subclasses override the
    hooks to do real work.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.elapsed = 0.0
        self.last_event: Optional[Event] = None
        self.render_count = 0
        self.imgui_render_count = 0

    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is removed from a stack."""
        self.attached = False

    def on_update(self, dt: Timestep) -> None:
        """Called once per frame with the frame time."""
        self.elapsed += float(dt)

    def on_event(self, event: Event) -> None:
        """Called for events not yet handled by layers above."""
        self.last_event = event

    def on_imgui_render(self) -> None:
        """Called when the immediate-mode UI is drawn."""
        self.imgui_render_count += 1

    def on_render(self) -> None:
        """Called when the scene is drawn."""
        self.render_count += 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class LayerStack:
    """Layers come first in pushing order; overlays always sit after all layers."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def push_layer(self, layer: Layer) -> None:
        layer.on_attach()
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        overlay.on_attach()
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> bool:
        """Detach and remove a (non-overlay) layer; return whether it was found."""
        for position, candidate in enumerate(self._layers[: self._insert_index]):
            if candidate is layer:
                candidate.on_detach()
                del self._layers[position]
                self._insert_index -= 1
                return True
        return False

    def pop_overlay(self, overlay: Layer) -> bool:
        """Detach and remove an overlay; return whether it was found."""
        for offset, candidate in enumerate(self._layers[self._insert_index :]):
            if candidate is overlay:
                candidate.on_detach()
                del self._layers[self._insert_index + offset]
                return True
        return False

    def detach_all(self) -> None:
        """Detach every entry, topmost first, and empty the stack."""
        for layer in reversed(self._layers):
            layer.on_detach()
        self._layers.clear()
        self._insert_index = 0

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)

    def __enter__(self) -> LayerStack:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.detach_all()