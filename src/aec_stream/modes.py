from __future__ import annotations

from enum import Enum

__all__ = ["Mode", "parse_mode"]


class Mode(Enum):
    """Emission policy for escape sequences."""

    ALWAYS = "always"
    AUTO = "auto"
    SEMI = "semi"
    NEVER = "never"


def parse_mode(mode: str | Mode | None) -> Mode:
    """
    Resolve a mode from its configuration name.

    Args:
        mode: "always", "auto", "semi" or "never" (case-insensitive), a Mode,
            or None for the default.

    Returns:
        The matching Mode; Mode.AUTO when mode is None or blank.

    Raises:
        ValueError: if the name matches no mode.
    """
    if isinstance(mode, Mode):
        return mode
    m = (mode or "auto").lower().strip() or "auto"
    try:
        return Mode(m)
    except ValueError:
        valid = ", ".join(item.value for item in Mode)
        raise ValueError(f"Unknown color mode {mode!r}. Expected one of: {valid}") from None
