"""Event types, category flags, the event base class and the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Callable, ClassVar, Generic, TypeVar

from greed.core import bit


class EventType(Enum):
    """The concrete kind of an event."""

    NONE = "None"
    WINDOW_CLOSE = "WindowClose"
    WINDOW_RESIZE = "WindowResize"
    WINDOW_FOCUS = "WindowFocus"
    WINDOW_LOST_FOCUS = "WindowLostFocus"
    WINDOW_MOVED = "WindowMoved"
    APP_TICK = "AppTick"
    APP_UPDATE = "AppUpdate"
    APP_RENDER = "AppRender"
    KEY_PRESSED = "KeyPressed"
    KEY_RELEASED = "KeyReleased"
    MOUSE_BUTTON_PRESSED = "MouseButtonPressed"
    MOUSE_BUTTON_RELEASED = "MouseButtonReleased"
    MOUSE_MOVED = "MouseMoved"
    MOUSE_SCROLLED = "MouseScrolled"

    def __str__(self) -> str:
        return self.value


class EventCategory(IntFlag):
    """Bit flags grouping events into broad categories."""

    NONE = 0
    APPLICATION = bit(0)
    INPUT = bit(1)
    KEYBOARD = bit(2)
    MOUSE = bit(3)
    MOUSE_BUTTON = bit(4)


class Event:
    """Base class of every event; subclasses fix the type and category."""

    EVENT_TYPE: ClassVar[EventType] = EventType.NONE
    EVENT_CATEGORY: ClassVar[EventCategory] = EventCategory.NONE

    handled: bool = False

    @property
    def event_type(self) -> EventType:
        return self.EVENT_TYPE

    @property
    def category_flags(self) -> EventCategory:
        return self.EVENT_CATEGORY

    def is_in_category(self, category: EventCategory) -> bool:
        """Whether this event shares any flag with ``category``."""
        return bool(self.EVENT_CATEGORY & category)

    def __str__(self) -> str:
        return type(self).__name__


E = TypeVar("E", bound=Event)


@dataclass
class EventDispatcher(Generic[E]):
    """Hands a single event to a handler function."""

    event: E

    def __post_init__(self) -> None:
        if not isinstance(self.event, Event):
            raise TypeError(
                f"EventDispatcher needs an Event, not {type(self.event).__name__}"
            )

    def dispatch(self, func: Callable[[E], bool]) -> bool:
        """Call ``func`` with the event and return its verdict."""
        return func(self.event)