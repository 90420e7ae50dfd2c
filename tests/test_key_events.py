import pytest

from greed.event import Event, EventCategory, EventType
from greed.key_events import KeyEvent, KeyPressedEvent, KeyReleasedEvent


def test_pressed_keeps_its_fields():
    event = KeyPressedEvent(65, 3)
    assert event.keycode == 65
    assert event.repeat_count == 3
    assert event.handled is False


def test_pressed_type_and_text():
    event = KeyPressedEvent(65, 3)
    assert event.event_type is EventType.KEY_PRESSED
    assert str(event) == "KeyPressedEvent: 65 (3 times)"


def test_released_type_and_text():
    event = KeyReleasedEvent(65)
    assert event.keycode == 65
    assert event.event_type is EventType.KEY_RELEASED
    assert str(event) == "KeyReleasedEvent: 65"


@pytest.mark.parametrize("event", [KeyPressedEvent(1, 0), KeyReleasedEvent(1)])
def test_key_categories(event):
    assert isinstance(event, KeyEvent) and isinstance(event, Event)
    assert event.is_in_category(EventCategory.KEYBOARD) is True
    assert event.is_in_category(EventCategory.INPUT) is True
    assert event.is_in_category(EventCategory.MOUSE) is False
    assert event.is_in_category(EventCategory.APPLICATION) is False
    assert event.category_flags == EventCategory.KEYBOARD | EventCategory.INPUT


def test_events_compare_by_value():
    assert KeyPressedEvent(10, 2) == KeyPressedEvent(10, 2)
    assert KeyReleasedEvent(10) == KeyReleasedEvent(10)
    assert KeyReleasedEvent(10) != KeyReleasedEvent(11)


def test_negative_keycode_rejected():
    with pytest.raises(ValueError):
        KeyReleasedEvent(-1)


def test_repeat_count_must_fit_sixteen_bits():
    assert KeyPressedEvent(1, 2**16 - 1).repeat_count == 2**16 - 1
    with pytest.raises(ValueError):
        KeyPressedEvent(1, 2**16)


def test_non_integer_keycode_rejected():
    with pytest.raises(TypeError):
        KeyPressedEvent(1.5, 0)