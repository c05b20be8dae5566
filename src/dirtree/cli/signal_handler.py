"""Signal handling utilities for the dirtree CLI.

Piping a large tree into ``head`` or pressing Ctrl+C must stop output cleanly
instead of dumping a traceback. The handlers here only record which signal arrived;
the writer checks the flags before each write and the entry point maps them to exit
codes.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Optional

# SIGPIPE does not exist on Windows
SIGPIPE: Optional[int] = getattr(signal, "SIGPIPE", None)


class SignalHandler:
    """Records SIGPIPE and SIGINT so output can stop cleanly.

    Attributes:
        sigpipe_received: Event that is set when a SIGPIPE signal is received.
        sigint_received: Event that is set when a SIGINT signal is received.
        original_sigpipe_handler: Original SIGPIPE handler, or None where SIGPIPE does not exist.
        original_sigint_handler: Original SIGINT handler.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler: Any = signal.getsignal(SIGPIPE) if SIGPIPE is not None else None
        self.original_sigint_handler: Any = signal.getsignal(signal.SIGINT)

    @property
    def interrupted(self) -> bool:
        """Whether either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        if SIGPIPE is not None:
            signal.signal(SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the SIGPIPE (where available) and SIGINT handlers."""
    if SIGPIPE is not None:
        signal.signal(SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Redirect stdout to the null device after an interruption.

    Registered with atexit so that flushing stdout during shutdown does not produce
    a second broken-pipe error.
    """
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
