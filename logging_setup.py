# logging_setup.py

from __future__ import annotations

import logging
import sys

# the handler installed by the last call, replaced on the next one
_handler: logging.Handler | None = None


def setup_logging(level: int | str = logging.INFO, *, quiet_werkzeug: bool = True) -> None:
    """
    Attach a single stderr handler to the root logger.

    Safe to call more than once (tests build several apps): our own handler
    is replaced, not stacked. Handlers installed by anyone else (the host
    server, pytest's log capture) are left alone.
    """
    global _handler

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    if _handler is not None:
        root.removeHandler(_handler)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setLevel(level)
    _handler.setFormatter(fmt)
    root.addHandler(_handler)

    # werkzeug prints its own access line for every request; ours is enough
    if quiet_werkzeug:
        logging.getLogger("werkzeug").setLevel(logging.WARNING)

    logging.captureWarnings(True)
