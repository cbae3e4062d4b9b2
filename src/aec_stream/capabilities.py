"""Terminal capability detection.

Two coarse checks only: whether TERM names an ANSI-capable terminal type, and
whether sys.stdout / sys.stderr are attached to a terminal device.
"""
from __future__ import annotations

import logging
import os
import sys
import threading
from typing import Any, Mapping

__all__ = [
    "Capabilities",
    "PLATFORM_SUPPORTED",
    "STANDARD_STREAMS",
    "TERM_SUBSTRINGS",
    "stream_is_terminal",
    "term_supports_styling",
]

logger = logging.getLogger(__name__)

# Terminal detection relies on POSIX tty semantics
PLATFORM_SUPPORTED = os.name == "posix"

# Checked in this order, so a stream bound to both sys.stdout and
# sys.__stdout__ resolves to the stdout slot
STANDARD_STREAMS = ("stdout", "stderr", "__stdout__", "__stderr__")

TERM_SUBSTRINGS = (
    "ansi",
    "color",
    "console",
    "cygwin",
    "gnome",
    "konsole",
    "kterm",
    "linux",
    "msys",
    "putty",
    "rxvt",
    "screen",
    "vt100",
    "xterm",
)


def term_supports_styling(term: str | None) -> bool:
    """Return True if a TERM value contains a known ANSI-capable terminal name."""
    if not term:
        return False
    return any(name in term for name in TERM_SUBSTRINGS)


def stream_is_terminal(stream: Any) -> bool:
    """Ask a stream whether it is a tty. Closed or tty-less streams are not."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (ValueError, OSError):
        return False


class Capabilities:
    """
    Cached capability checks for one process.

    The TERM heuristic is computed once and kept for the object's lifetime.
    The terminal flags of the standard streams (sys.stdout, sys.stderr and
    the interpreter's original sys.__stdout__, sys.__stderr__) are kept one
    per stream slot, computed on first use and refreshed only by
    recheck_terminal_status().
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        platform_supported: bool | None = None,
    ) -> None:
        self._environ = environ
        self.platform_supported = PLATFORM_SUPPORTED if platform_supported is None else platform_supported
        self._lock = threading.Lock()
        self._env_supported: bool | None = None
        self._tty_flags: dict[str, bool] = {}

    def environment_supports_styling(self) -> bool:
        supported = self._env_supported
        if supported is not None:
            return supported
        with self._lock:
            if self._env_supported is None:
                environ = os.environ if self._environ is None else self._environ
                term = environ.get("TERM")
                self._env_supported = self.platform_supported and term_supports_styling(term)
                logger.debug("TERM=%r, styling supported: %s", term, self._env_supported)
            return self._env_supported

    def is_interactive_terminal(self, destination: Any) -> bool:
        """
        Check whether a destination is attached to a terminal.

        Args:
            destination: Output stream to check

        Returns:
            The cached tty flag of the standard stream slot holding
            destination; False for any other destination and on unsupported
            platforms.
        """
        if not self.platform_supported or destination is None:
            return False
        for slot in STANDARD_STREAMS:
            if destination is getattr(sys, slot, None):
                flag = self._tty_flags.get(slot)
                if flag is None:
                    flag = stream_is_terminal(destination)
                    self._tty_flags[slot] = flag
                return flag
        return False

    def recheck_terminal_status(self) -> None:
        """Re-evaluate the standard stream terminal flags, e.g. after redirection."""
        if not self.platform_supported:
            return
        for slot in STANDARD_STREAMS:
            self._tty_flags[slot] = stream_is_terminal(getattr(sys, slot, None))
        logger.debug("Terminal status rechecked: %s", self._tty_flags)
