# greed

The core of a small game engine. It provides:

- **Events** with a type and a set of category flags: keyboard events
  (`greed.key_events`), mouse events (`greed.mouse_events`) and window and
  application events (`greed.application_events`), all built on `Event`,
  `EventType` and `EventCategory` in `greed.event`.
- **Dispatching** through `EventDispatcher`, which hands one event to a handler
  function and returns whatever the handler returns.
- **Console logging** through `Log.init_non_blocking_console()` in `greed.log`,
  which sends everything logged under the `engine` and `greed` loggers to
  stdout, in colour and through a background thread.
- **An application base class**, `App` in `greed.app`, whose `run()` starts the
  main loop.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
greed
```

This sets up the console logger, logs a start-up message, starts the
`GreedApp` application and keeps running until it is stopped with Ctrl+C, after
which it exits with status 130. It takes no options besides `--help`.

## Using the events

```python
from greed.event import EventCategory, EventDispatcher
from greed.mouse_events import MouseButtonPressedEvent

event = MouseButtonPressedEvent(1)
event.is_in_category(EventCategory.MOUSE)        # True
event.is_in_category(EventCategory.APPLICATION)  # False
event.event_type                                 # EventType.MOUSE_BUTTON_PRESSED

handled = EventDispatcher(event).dispatch(lambda e: True)  # True
```

The categories are `NONE`, `APPLICATION`, `INPUT`, `KEYBOARD`, `MOUSE` and
`MOUSE_BUTTON`. An event is in a category when it shares any flag with it:

| Events | Categories |
| --- | --- |
| `KeyPressedEvent`, `KeyReleasedEvent` | `KEYBOARD`, `INPUT` |
| `MouseMovedEvent`, `MouseScrolledEvent` | `INPUT`, `MOUSE` |
| `MouseButtonPressedEvent`, `MouseButtonReleasedEvent` | `INPUT`, `MOUSE`, `MOUSE_BUTTON` |
| `WindowCloseEvent`, `WindowResizeEvent`, `AppTickEvent`, `AppUpdateEvent`, `AppRenderEvent` | `APPLICATION` |

Constructor arguments are checked: key codes and button numbers must be
non-negative integers below 2**64, repeat counts below 2**16, window sizes
below 2**32, and mouse positions and offsets real numbers. Anything else
raises `TypeError` or `ValueError`.

`str()` of an event gives its type followed by its data, for example
`WindowResizeEvent: 1280, 720` for `WindowResizeEvent(1280, 720)`,
`KeyPressedEvent: 65 (2 times)` for `KeyPressedEvent(65, 2)` and
`MouseMovedEvent: 1.5 2` for `MouseMovedEvent(1.5, 2.0)`.

## Logging

```python
import logging
from greed.log import Log

with Log.init_non_blocking_console():
    logging.getLogger("greed").info("hello")
```

`Log.init_non_blocking_console()` may be called only once at a time; a second
call before `close()` raises `RuntimeError`. Closing the `Log`, or leaving the
`with` block, writes out any messages still queued and gives the loggers back
their earlier level and propagation settings.

## What it does not do

There is no window, renderer or input source. Events are only created and
dispatched by your own code, and `App.run()` checks a sample mouse-button event
against the categories, logs the result and then idles until interrupted.