"""Mouse movement, scroll and button events."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from decimal import Decimal

from greed.core import _USIZE_BITS, _require_unsigned
from greed.event import Event, EventCategory, EventType


def _as_float(name: str, value: object) -> float:
    if not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, not {type(value).__name__}")
    return float(value)


def _format_float(value: float) -> str:
    """Render a float without exponent and without a trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return format(Decimal(repr(value)), "f")


class MouseEvent(Event):
    """Base of the pointer movement and scroll events."""

    EVENT_CATEGORY = EventCategory.INPUT | EventCategory.MOUSE


@dataclass
class MouseMovedEvent(MouseEvent):
    """The pointer moved to a new position."""

    EVENT_TYPE = EventType.MOUSE_MOVED

    x: float
    y: float

    def __post_init__(self) -> None:
        self.x = _as_float("x", self.x)
        self.y = _as_float("y", self.y)

    def __str__(self) -> str:
        return (
            f"{self.EVENT_TYPE.value}Event: "
            f"{_format_float(self.x)} {_format_float(self.y)}"
        )


@dataclass
class MouseScrolledEvent(MouseEvent):
    """The scroll wheel or touchpad scrolled by an offset."""

    EVENT_TYPE = EventType.MOUSE_SCROLLED

    x_offset: float
    y_offset: float

    def __post_init__(self) -> None:
        self.x_offset = _as_float("x_offset", self.x_offset)
        self.y_offset = _as_float("y_offset", self.y_offset)

    def __str__(self) -> str:
        return (
            f"{self.EVENT_TYPE.value}Event: "
            f"{_format_float(self.x_offset)} {_format_float(self.y_offset)}"
        )


@dataclass
class MouseButtonEvent(Event):
    """Base of the mouse button events; carries the button number."""

    EVENT_CATEGORY = (
        EventCategory.INPUT | EventCategory.MOUSE | EventCategory.MOUSE_BUTTON
    )

    button: int

    def __post_init__(self) -> None:
        self.button = _require_unsigned("button", self.button, _USIZE_BITS)

    def __str__(self) -> str:
        return f"{self.EVENT_TYPE.value}Event: {self.button}"


@dataclass
class MouseButtonPressedEvent(MouseButtonEvent):
    """A mouse button went down."""

    EVENT_TYPE = EventType.MOUSE_BUTTON_PRESSED


@dataclass
class MouseButtonReleasedEvent(MouseButtonEvent):
    """A mouse button went up."""

    EVENT_TYPE = EventType.MOUSE_BUTTON_RELEASED