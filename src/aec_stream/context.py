"""Process-wide styling state and the emission decision."""
from __future__ import annotations

import logging
from typing import Any

from .capabilities import Capabilities
from .modes import Mode, parse_mode

__all__ = [
    "StyleContext",
    "get_context",
    "get_mode",
    "recheck_terminal_status",
    "set_context",
    "set_mode",
    "should_emit",
]

logger = logging.getLogger(__name__)


class StyleContext:
    """Mode plus capability cache; decides whether sequences are written."""

    def __init__(
        self,
        mode: Mode | str | None = Mode.AUTO,
        capabilities: Capabilities | None = None,
    ) -> None:
        self._mode = parse_mode(mode)
        self.capabilities = capabilities if capabilities is not None else Capabilities()

    @property
    def mode(self) -> Mode:
        return self._mode

    @mode.setter
    def mode(self, mode: Mode | str) -> None:
        mode = parse_mode(mode)
        logger.debug("Color mode set to %s", mode.value)
        self._mode = mode

    def should_emit(self, destination: Any) -> bool:
        """
        Decide whether escape sequences should be written to destination.

        Args:
            destination: Output stream the sequences would go to

        Returns:
            True under ALWAYS; False under NEVER; the TERM heuristic under
            SEMI; the TERM heuristic and the destination's terminal status
            under AUTO.
        """
        mode = self._mode
        if mode is Mode.ALWAYS:
            return True
        if mode is Mode.NEVER:
            return False
        if not self.capabilities.environment_supports_styling():
            return False
        if mode is Mode.SEMI:
            return True
        return self.capabilities.is_interactive_terminal(destination)


_context = StyleContext()


def get_context() -> StyleContext:
    return _context


def set_context(context: StyleContext) -> StyleContext:
    """Replace the process-wide context. Returns the previous one."""
    global _context
    previous = _context
    _context = context
    logger.debug("Style context replaced (mode=%s)", context.mode.value)
    return previous


def set_mode(mode: Mode | str) -> None:
    _context.mode = mode


def get_mode() -> Mode:
    return _context.mode


def recheck_terminal_status() -> None:
    _context.capabilities.recheck_terminal_status()


def should_emit(destination: Any, context: StyleContext | None = None) -> bool:
    return (context or _context).should_emit(destination)
