"""Window, application, keyboard and mouse events and their dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag
from typing import Callable, ClassVar, TypeVar

from .codes import KeyCode, MouseCode

__all__ = [
    "EventType",
    "EventCategory",
    "Event",
    "EventDispatcher",
    "WindowResizeEvent",
    "WindowCloseEvent",
    "WindowFocusEvent",
    "WindowLostFocusEvent",
    "AppTickEvent",
    "AppUpdateEvent",
    "AppRenderEvent",
    "KeyEvent",
    "KeyPressedEvent",
    "KeyReleasedEvent",
    "KeyTypedEvent",
    "MouseMovedEvent",
    "MouseScrolledEvent",
    "MouseButtonEvent",
    "MouseButtonPressedEvent",
    "MouseButtonReleasedEvent",
]


class EventType(Enum):
    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_PRESSED = 9
    KEY_RELEASED = 10
    KEY_TYPED = 11
    MOUSE_BUTTON_PRESSED = 12
    MOUSE_BUTTON_RELEASED = 13
    MOUSE_MOVED = 14
    MOUSE_SCROLLED = 15


class EventCategory(IntFlag):
    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass
class Event:
    """Base of all events; subclasses set the class-level type, name and categories."""

    event_type: ClassVar[EventType] = EventType.NONE
    name: ClassVar[str] = "Event"
    category_flags: ClassVar[EventCategory] = EventCategory.NONE

    handled: bool = field(default=False, kw_only=True)

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to a handler chosen by event class."""

    def __init__(self, event: Event) -> None:
        self._event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], bool]) -> bool:
        """Call func if the event is of event_class's type; return whether it was called."""
        if self._event.event_type is not event_class.event_type:
            return False
        self._event.handled |= bool(func(self._event))  # type: ignore[arg-type]
        return True


@dataclass
class WindowResizeEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_RESIZE
    name: ClassVar[str] = "WindowResize"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION

    width: int
    height: int

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


@dataclass
class WindowCloseEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_CLOSE
    name: ClassVar[str] = "WindowClose"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class WindowFocusEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_FOCUS
    name: ClassVar[str] = "WindowFocus"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class WindowLostFocusEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_LOST_FOCUS
    name: ClassVar[str] = "WindowLostFocus"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppTickEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_TICK
    name: ClassVar[str] = "AppTick"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppUpdateEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_UPDATE
    name: ClassVar[str] = "AppUpdate"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppRenderEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_RENDER
    name: ClassVar[str] = "AppRender"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class KeyEvent(Event):
    """Base of keyboard events."""

    category_flags: ClassVar[EventCategory] = EventCategory.KEYBOARD | EventCategory.INPUT

    key_code: KeyCode


@dataclass
class KeyPressedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_PRESSED
    name: ClassVar[str] = "KeyPressed"

    is_repeat: bool = False

    def __str__(self) -> str:
        return f"KeyPressedEvent: {int(self.key_code)} (repeat = {int(self.is_repeat)})"


@dataclass
class KeyReleasedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_RELEASED
    name: ClassVar[str] = "KeyReleased"

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {int(self.key_code)}"


@dataclass
class KeyTypedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_TYPED
    name: ClassVar[str] = "KeyTyped"

    key_code: KeyCode = field(default=KeyCode.NONE, init=False)
    codepoint: int = 0

    def __str__(self) -> str:
        return f"KeyTypedEvent: {self.codepoint}"


@dataclass
class MouseMovedEvent(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_MOVED
    name: ClassVar[str] = "MouseMoved"
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    x: float
    y: float

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_num(self.x)}, {_num(self.y)}"


@dataclass
class MouseScrolledEvent(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_SCROLLED
    name: ClassVar[str] = "MouseScrolled"
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    x_offset: float
    y_offset: float

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {_num(self.x_offset)}, {_num(self.y_offset)}"


@dataclass
class MouseButtonEvent(Event):
    """Base of mouse button events."""

    category_flags: ClassVar[EventCategory] = (
        EventCategory.MOUSE | EventCategory.INPUT | EventCategory.MOUSE_BUTTON
    )

    button: MouseCode


@dataclass
class MouseButtonPressedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_PRESSED
    name: ClassVar[str] = "MouseButtonPressed"

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {int(self.button)}"


@dataclass
class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_RELEASED
    name: ClassVar[str] = "MouseButtonReleased"

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {int(self.button)}"