import pytest

from greed.application_events import (
    AppEvent,
    AppRenderEvent,
    AppTickEvent,
    AppUpdateEvent,
    WindowCloseEvent,
    WindowEvent,
    WindowResizeEvent,
)
from greed.event import EventCategory, EventType


def test_resize_keeps_size():
    event = WindowResizeEvent(800, 600)
    assert (event.width, event.height) == (800, 600)
    assert event.event_type is EventType.WINDOW_RESIZE


def test_resize_text():
    assert str(WindowResizeEvent(800, 600)) == "WindowResizeEvent: 800, 600"


def test_close_text_is_its_name():
    assert str(WindowCloseEvent()) == "WindowCloseEvent"


@pytest.mark.parametrize(
    "event, base, expected_type",
    [
        (WindowCloseEvent(), WindowEvent, EventType.WINDOW_CLOSE),
        (WindowResizeEvent(1, 1), WindowEvent, EventType.WINDOW_RESIZE),
        (AppTickEvent(), AppEvent, EventType.APP_TICK),
        (AppUpdateEvent(), AppEvent, EventType.APP_UPDATE),
        (AppRenderEvent(), AppEvent, EventType.APP_RENDER),
    ],
)
def test_application_category_only(event, base, expected_type):
    assert isinstance(event, base)
    assert event.event_type is expected_type
    assert event.category_flags == EventCategory.APPLICATION
    assert event.is_in_category(EventCategory.APPLICATION) is True
    assert event.is_in_category(EventCategory.INPUT) is False
    assert event.is_in_category(EventCategory.MOUSE) is False


@pytest.mark.parametrize(
    "cls", [WindowCloseEvent, AppTickEvent, AppUpdateEvent, AppRenderEvent]
)
def test_unit_events_text_matches_type(cls):
    event = cls()
    assert str(event) == f"{event.event_type.value}Event"
    assert event == cls()


def test_resize_size_must_fit_u32():
    assert WindowResizeEvent(2**32 - 1, 0).width == 2**32 - 1
    with pytest.raises(ValueError):
        WindowResizeEvent(2**32, 1)
    with pytest.raises(ValueError):
        WindowResizeEvent(1, -1)


def test_resize_rejects_non_integers():
    with pytest.raises(TypeError):
        WindowResizeEvent(800.0, 600)