#!/usr/bin/env python3
# vim: sts=4 sw=4 et

import logging

class Logger:
    """Thin wrapper over stdlib logger with str.format style arguments

    Message is formatted only when level is enabled, resulting record carries
    already formatted text in msg field.
    """
    __slots__ = ['_log']

    def __init__(self, name):
        self._log = logging.getLogger(name)

    @property
    def name(self):
        return self._log.name

    def _emit(self, level, fmt, a, kw):
        if not self._log.isEnabledFor(level):
            return
        if a or kw:
            fmt = fmt.format(*a, **kw)
        self._log.log(level, fmt)

    def debug(self, fmt, *a, **kw): self._emit(logging.DEBUG, fmt, a, kw)
    def warning(self, fmt, *a, **kw): self._emit(logging.WARNING, fmt, a, kw)
