"""Entry point of the Greed game."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from greed.app import App
from greed.log import Log

_logger = logging.getLogger(__name__)

_INTERRUPTED = 130


class GreedApp(App):
    """The Greed game application."""


def main(argv: Sequence[str] | None = None) -> int:
    """Set up logging and run the game until it is interrupted."""
    parser = argparse.ArgumentParser(prog="greed", description="Run the Greed game.")
    parser.parse_args(argv)
    with Log.init_non_blocking_console():
        _logger.info("Logger has been initialized %d", 24)
        try:
            GreedApp().run()
        except KeyboardInterrupt:
            _logger.info("Interrupted, shutting down")
    return _INTERRUPTED


if __name__ == "__main__":
    raise SystemExit(main())