"""Keyboard events."""

from __future__ import annotations

from dataclasses import dataclass

from greed.core import _U16_BITS, _USIZE_BITS, _require_unsigned
from greed.event import Event, EventCategory, EventType


@dataclass
class KeyEvent(Event):
    """Base of every keyboard event; carries the key code."""

    EVENT_CATEGORY = EventCategory.KEYBOARD | EventCategory.INPUT

    keycode: int

    def __post_init__(self) -> None:
        self.keycode = _require_unsigned("keycode", self.keycode, _USIZE_BITS)


@dataclass
class KeyPressedEvent(KeyEvent):
    """A key went down, possibly as an auto-repeat."""

    EVENT_TYPE = EventType.KEY_PRESSED

    repeat_count: int

    def __post_init__(self) -> None:
        super().__post_init__()
        self.repeat_count = _require_unsigned(
            "repeat_count", self.repeat_count, _U16_BITS
        )

    def __str__(self) -> str:
        return (
            f"{self.EVENT_TYPE.value}Event: {self.keycode} "
            f"({self.repeat_count} times)"
        )


@dataclass
class KeyReleasedEvent(KeyEvent):
    """A key went up."""

    EVENT_TYPE = EventType.KEY_RELEASED

    def __str__(self) -> str:
        return f"{self.EVENT_TYPE.value}Event: {self.keycode}"