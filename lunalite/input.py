"""Polled input state backed by an optional platform input provider."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from .codes import CursorMode, KeyCode, MouseCode

__all__ = ["InputProvider", "Input"]

Vec2 = tuple[float, float]


class InputProvider(ABC):
    """A platform source of key, mouse and cursor state."""

    @abstractmethod
    def is_key_pressed(self, key: KeyCode) -> bool: ...

    @abstractmethod
    def is_mouse_button_pressed(self, button: MouseCode) -> bool: ...

    @abstractmethod
    def mouse_position(self) -> Vec2: ...

    @abstractmethod
    def cursor_mode(self) -> CursorMode: ...

    @abstractmethod
    def set_cursor_mode(self, mode: CursorMode) -> None: ...

    @abstractmethod
    def set_mouse_position(self, x: float, y: float) -> None: ...

    @abstractmethod
    def set_raw_mouse_motion(self, enabled: bool) -> None: ...


def _vec(x: float, y: float) -> Vec2:
    return (float(x), float(y))


class Input:
    """Process-wide input state; per-frame deltas are accumulated from recorded events."""

    _provider: ClassVar[InputProvider | None] = None
    _mouse_position: ClassVar[Vec2] = (0.0, 0.0)
    _mouse_delta: ClassVar[Vec2] = (0.0, 0.0)
    _mouse_scroll_offset: ClassVar[Vec2] = (0.0, 0.0)
    _has_mouse_position: ClassVar[bool] = False
    _cursor_mode: ClassVar[CursorMode] = CursorMode.NORMAL

    @classmethod
    def is_key_pressed(cls, key: KeyCode) -> bool:
        return cls._provider is not None and bool(cls._provider.is_key_pressed(key))

    @classmethod
    def is_mouse_button_pressed(cls, button: MouseCode) -> bool:
        return cls._provider is not None and bool(cls._provider.is_mouse_button_pressed(button))

    @classmethod
    def mouse_position(cls) -> Vec2:
        if cls._provider is not None:
            cls._mouse_position = _vec(*cls._provider.mouse_position())
        return cls._mouse_position

    @classmethod
    def mouse_delta(cls) -> Vec2:
        return cls._mouse_delta

    @classmethod
    def mouse_scroll_offset(cls) -> Vec2:
        return cls._mouse_scroll_offset

    @classmethod
    def set_cursor_mode(cls, mode: CursorMode) -> None:
        cls._cursor_mode = CursorMode(mode)
        if cls._provider is not None:
            cls._provider.set_cursor_mode(cls._cursor_mode)

    @classmethod
    def cursor_mode(cls) -> CursorMode:
        if cls._provider is not None:
            cls._cursor_mode = CursorMode(cls._provider.cursor_mode())
        return cls._cursor_mode

    @classmethod
    def set_mouse_position(cls, x: float, y: float) -> None:
        cls._mouse_position = _vec(x, y)
        cls._has_mouse_position = True
        if cls._provider is not None:
            cls._provider.set_mouse_position(float(x), float(y))

    @classmethod
    def set_raw_mouse_motion(cls, enabled: bool) -> None:
        if cls._provider is not None:
            cls._provider.set_raw_mouse_motion(bool(enabled))

    @classmethod
    def reset_frame_state(cls) -> None:
        """Clear the per-frame mouse delta and scroll offset."""
        cls._mouse_delta = (0.0, 0.0)
        cls._mouse_scroll_offset = (0.0, 0.0)

    @classmethod
    def record_mouse_moved(cls, x: float, y: float) -> None:
        if cls._has_mouse_position:
            dx, dy = cls._mouse_delta
            px, py = cls._mouse_position
            cls._mouse_delta = (dx + (float(x) - px), dy + (float(y) - py))
        else:
            cls._has_mouse_position = True
        cls._mouse_position = _vec(x, y)

    @classmethod
    def record_mouse_scrolled(cls, x_offset: float, y_offset: float) -> None:
        sx, sy = cls._mouse_scroll_offset
        cls._mouse_scroll_offset = (sx + float(x_offset), sy + float(y_offset))

    @classmethod
    def set_provider(cls, provider: InputProvider | None) -> None:
        """Install or remove the provider; a new provider seeds position and cursor mode."""
        cls._provider = provider
        if provider is not None:
            cls._mouse_position = _vec(*provider.mouse_position())
            cls._cursor_mode = CursorMode(provider.cursor_mode())
            cls._has_mouse_position = True

    @classmethod
    def reset(cls) -> None:
        """Forget the provider and return all state to its initial values."""
        cls._provider = None
        cls._mouse_position = (0.0, 0.0)
        cls._mouse_delta = (0.0, 0.0)
        cls._mouse_scroll_offset = (0.0, 0.0)
        cls._has_mouse_position = False
        cls._cursor_mode = CursorMode.NORMAL