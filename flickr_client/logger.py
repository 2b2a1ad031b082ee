"""
Logging
The package logger and the sinks used for verbose request/response logging.

Verbose output goes to a sink handed to the client, not to a global. The default
sink drops everything; ``StdoutLogger`` prints and ``LoggingLogger`` forwards to
the package logger.
"""

import logging
import sys
from typing import Optional, TextIO

logger = logging.getLogger('flickr_client')


class LogInterface:
    """A sink for verbose client output."""

    def log(self, message: str) -> None:
        raise NotImplementedError


class NullLogger(LogInterface):
    """Discards every message."""

    def log(self, message: str) -> None:
        pass


class StdoutLogger(LogInterface):
    """Writes each message on its own line to standard output."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def log(self, message: str) -> None:
        print(message, file=self.stream or sys.stdout)


class LoggingLogger(LogInterface):
    """Forwards messages to a ``logging`` logger."""

    def __init__(self, target: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        self.target = target or logger
        self.level = level

    def log(self, message: str) -> None:
        self.target.log(self.level, message)
