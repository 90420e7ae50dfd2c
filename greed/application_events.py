"""Window and application life-cycle events."""

from __future__ import annotations

from dataclasses import dataclass

from greed.core import _U32_BITS, _require_unsigned
from greed.event import Event, EventCategory, EventType


class WindowEvent(Event):
    """Base of the window events."""

    EVENT_CATEGORY = EventCategory.APPLICATION


@dataclass
class WindowCloseEvent(WindowEvent):
    """The window was asked to close."""

    EVENT_TYPE = EventType.WINDOW_CLOSE


@dataclass
class WindowResizeEvent(WindowEvent):
    """The window was resized."""

    EVENT_TYPE = EventType.WINDOW_RESIZE

    width: int
    height: int

    def __post_init__(self) -> None:
        self.width = _require_unsigned("width", self.width, _U32_BITS)
        self.height = _require_unsigned("height", self.height, _U32_BITS)

    def __str__(self) -> str:
        return f"{self.EVENT_TYPE.value}Event: {self.width}, {self.height}"


class AppEvent(Event):
    """Base of the application loop events."""

    EVENT_CATEGORY = EventCategory.APPLICATION


@dataclass
class AppTickEvent(AppEvent):
    """A fixed-rate tick of the application loop."""

    EVENT_TYPE = EventType.APP_TICK


@dataclass
class AppUpdateEvent(AppEvent):
    """The application should update its state."""

    EVENT_TYPE = EventType.APP_UPDATE


@dataclass
class AppRenderEvent(AppEvent):
    """The application should render a frame."""

    EVENT_TYPE = EventType.APP_RENDER