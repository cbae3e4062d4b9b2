"""Escape sequence serialization and conditional output."""
from __future__ import annotations

import io
from typing import Any

from .codes import Code, Reset, is_code
from .context import StyleContext, get_context
from .style import Style, StyleLike

__all__ = [
    "CSI",
    "StyledStream",
    "serialize",
    "serialize_code",
    "serialize_style",
    "write",
]

CSI = "\x1b["


def _sgr(*codes: int) -> str:
    """Generate SGR (Select Graphic Rendition) escape sequence."""
    return f"{CSI}{';'.join(str(c) for c in codes)}m"


def serialize_code(code: Code) -> str:
    return _sgr(code.value)


def serialize_style(style: Style) -> str:
    """
    Render a Style as escape sequences.

    A reset comes first as its own sequence; the remaining categories share
    one combined sequence, which is left out when none of them is set.
    """
    out = serialize_code(Reset.RESET) if style.reset else ""
    params = style.parameters()
    if params:
        out += _sgr(*params)
    return out


def serialize(payload: StyleLike) -> str:
    if isinstance(payload, Style):
        return serialize_style(payload)
    if is_code(payload):
        return serialize_code(payload)
    raise TypeError(f"Expected an escape code or Style, got {type(payload).__name__}")


def _is_binary(destination: Any) -> bool:
    return isinstance(destination, (io.RawIOBase, io.BufferedIOBase))


def write(destination: Any, payload: StyleLike, *, context: StyleContext | None = None) -> int:
    """
    Write the escape sequences for payload to destination, if enabled.

    Args:
        destination: Stream to write to; binary streams receive ASCII bytes
        payload: Raw code or Style
        context: Decision state; the process-wide context when omitted

    Returns:
        Number of characters written, 0 when styling is disabled for
        destination.
    """
    ctx = context if context is not None else get_context()
    if not ctx.should_emit(destination):
        return 0
    seq = serialize(payload)
    if not seq:
        return 0
    if _is_binary(destination):
        destination.write(seq.encode("ascii"))
    else:
        destination.write(seq)
    return len(seq)


class StyledStream:
    """
    Wraps an output stream so codes and text can be written in sequence.

    Text parts are always written; codes and Styles are written only when
    the context allows styling for the wrapped stream.
    """

    def __init__(self, destination: Any, context: StyleContext | None = None) -> None:
        self.destination = destination
        self.context = context

    @property
    def enabled(self) -> bool:
        ctx = self.context if self.context is not None else get_context()
        return ctx.should_emit(self.destination)

    def emit(self, payload: StyleLike) -> int:
        return write(self.destination, payload, context=self.context)

    def write(self, *parts: Any) -> StyledStream:
        for part in parts:
            if isinstance(part, Style) or is_code(part):
                self.emit(part)
            elif isinstance(part, (bytes, bytearray)):
                self.destination.write(part if _is_binary(self.destination) else part.decode())
            elif _is_binary(self.destination):
                self.destination.write(str(part).encode())
            else:
                self.destination.write(str(part))
        return self

    def flush(self) -> None:
        flush = getattr(self.destination, "flush", None)
        if flush is not None:
            flush()
