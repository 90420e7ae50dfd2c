"""A small game engine core: events, dispatching, console logging and the application loop."""

__version__ = "0.1.0"