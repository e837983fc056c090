from __future__ import annotations

import sys

import logbook

from logbook import StreamHandler

LOGGING_SET_UP = False
_HANDLER: StreamHandler | None = None


def set_up_logger(logLevel: int = logbook.INFO):
    """
    Pushes a stderr handler as the application wide logbook handler. Calling again just adjusts the level of
    the existing handler.
    """
    global LOGGING_SET_UP
    global _HANDLER

    if LOGGING_SET_UP:
        _HANDLER.level = logLevel
        logbook.debug('logging already set up')
        return

    _HANDLER = StreamHandler(sys.stderr, logLevel)
    _HANDLER.push_application()

    LOGGING_SET_UP = True


def tear_down_logger():
    global LOGGING_SET_UP
    global _HANDLER

    if not LOGGING_SET_UP:
        return

    _HANDLER.pop_application()
    _HANDLER = None
    LOGGING_SET_UP = False
