import pytest

from lunalite.codes import KeyCode, MouseCode
from lunalite.events import (
    AppRenderEvent,
    AppTickEvent,
    AppUpdateEvent,
    EventCategory,
    EventDispatcher,
    EventType,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowFocusEvent,
    WindowLostFocusEvent,
    WindowResizeEvent,
)


@pytest.mark.parametrize(
    "event, name",
    [
        (WindowCloseEvent(), "WindowClose"),
        (WindowFocusEvent(), "WindowFocus"),
        (WindowLostFocusEvent(), "WindowLostFocus"),
        (AppTickEvent(), "AppTick"),
        (AppUpdateEvent(), "AppUpdate"),
        (AppRenderEvent(), "AppRender"),
    ],
)
def test_plain_events_print_their_name(event, name):
    assert str(event) == name
    assert event.name == name
    assert event.is_in_category(EventCategory.APPLICATION)
    assert not event.is_in_category(EventCategory.INPUT)


def test_window_resize_text():
    event = WindowResizeEvent(1280, 720)
    assert str(event) == "WindowResizeEvent: 1280, 720"
    assert event.event_type is EventType.WINDOW_RESIZE


def test_key_pressed_text_and_categories():
    event = KeyPressedEvent(KeyCode.A, is_repeat=True)
    assert str(event) == "KeyPressedEvent: 65 (repeat = 1)"
    assert event.is_in_category(EventCategory.KEYBOARD)
    assert event.is_in_category(EventCategory.INPUT)
    assert not event.is_in_category(EventCategory.MOUSE)


def test_key_pressed_defaults_to_not_repeat():
    assert KeyPressedEvent(KeyCode.W).is_repeat is False


def test_key_released_text_uses_code_value():
    event = KeyReleasedEvent(KeyCode.Z)
    assert str(event) == f"KeyReleasedEvent: {int(KeyCode.Z)}"


def test_key_typed_has_no_key_code():
    event = KeyTypedEvent(97)
    assert event.key_code is KeyCode.NONE
    assert event.codepoint == 97
    assert str(event) == "KeyTypedEvent: 97"


def test_mouse_moved_text():
    assert str(MouseMovedEvent(1.5, 2.0)) == "MouseMovedEvent: 1.5, 2"


def test_mouse_scrolled_fields():
    event = MouseScrolledEvent(0.0, -1.0)
    assert (event.x_offset, event.y_offset) == (0.0, -1.0)
    assert event.is_in_category(EventCategory.MOUSE)
    assert not event.is_in_category(EventCategory.MOUSE_BUTTON)


def test_mouse_button_events():
    pressed = MouseButtonPressedEvent(MouseCode.LEFT)
    released = MouseButtonReleasedEvent(MouseCode.RIGHT)
    assert pressed.is_in_category(EventCategory.MOUSE_BUTTON)
    assert released.button is MouseCode.RIGHT
    assert str(pressed) == f"MouseButtonPressedEvent: {int(MouseCode.LEFT)}"
    assert pressed.event_type is not released.event_type


def test_events_start_unhandled():
    assert WindowCloseEvent().handled is False


def test_dispatch_matching_type_marks_handled():
    event = WindowCloseEvent()
    seen = []

    def handler(e):
        seen.append(e)
        return True

    assert EventDispatcher(event).dispatch(WindowCloseEvent, handler) is True
    assert seen == [event]
    assert event.handled is True


def test_dispatch_other_type_does_nothing():
    event = WindowResizeEvent(10, 20)
    calls = []
    result = EventDispatcher(event).dispatch(WindowCloseEvent, lambda e: calls.append(e) or True)
    assert result is False
    assert calls == []
    assert event.handled is False


def test_handled_flag_is_sticky():
    event = KeyPressedEvent(KeyCode.SPACE)
    dispatcher = EventDispatcher(event)
    dispatcher.dispatch(KeyPressedEvent, lambda e: True)
    dispatcher.dispatch(KeyPressedEvent, lambda e: False)
    assert event.handled is True


def test_handler_returning_false_leaves_unhandled():
    event = MouseMovedEvent(3.0, 4.0)
    assert EventDispatcher(event).dispatch(MouseMovedEvent, lambda e: False) is True
    assert event.handled is False