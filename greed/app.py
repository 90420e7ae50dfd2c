"""The application base class that drives the engine."""

from __future__ import annotations

import logging
import time
from typing import NoReturn

from greed.event import EventCategory
from greed.mouse_events import MouseButtonPressedEvent

_logger = logging.getLogger("engine.app")

_IDLE_SECONDS = 0.1


class App:
    """Base class for an application run by the engine."""

    def report_categories(self) -> list[EventCategory]:
        """Check a sample button event against the categories and log the result.

        Returns the checked categories the event belongs to.
        """
        event = MouseButtonPressedEvent(10)
        _logger.debug("%s", event)
        matched: list[EventCategory] = []
        if event.is_in_category(EventCategory.APPLICATION):
            _logger.error("Wrong category")
            matched.append(EventCategory.APPLICATION)
        for category in (
            EventCategory.MOUSE,
            EventCategory.INPUT,
            EventCategory.MOUSE_BUTTON,
        ):
            if event.is_in_category(category):
                _logger.info("Correct category")
                _logger.debug("%s", event)
                matched.append(category)
        return matched

    def run(self) -> NoReturn:
        """Start the application and keep it running until interrupted."""
        _logger.info("App has started")
        print("Running the application...")
        self.report_categories()
        while True:
            time.sleep(_IDLE_SECONDS)