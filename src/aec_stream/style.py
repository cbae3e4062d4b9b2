from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Union

from .codes import BGColor, Code, Color, Effect, Reset, is_code

__all__ = ["Style", "StyleLike", "combine"]


@dataclass
class Style:
    """
    At most one effect, one foreground and one background color, plus a reset flag.

    Styles combine left to right: a later value replaces an earlier one in the
    same category, and a reset drops everything accumulated before it while
    later values still apply on top.
    """

    reset: bool = False
    effect: Effect | None = None
    color: Color | None = None
    bgcolor: BGColor | None = None

    @classmethod
    def of(cls, code: Code) -> Style:
        if isinstance(code, Reset):
            return cls(reset=True)
        if isinstance(code, Effect):
            return cls(effect=code)
        if isinstance(code, Color):
            return cls(color=code)
        if isinstance(code, BGColor):
            return cls(bgcolor=code)
        raise TypeError(f"Expected an escape code, got {type(code).__name__}")

    def merge(self, other: StyleLike) -> Style:
        """Return a new Style with other applied on top of this one."""
        result = replace(self)
        result.update(other)
        return result

    def update(self, other: StyleLike) -> None:
        """Apply other on top of this Style in place."""
        if not isinstance(other, Style):
            other = Style.of(other)
        if other.reset:
            self.set_reset()
        if other.effect is not None:
            self.effect = other.effect
        if other.color is not None:
            self.color = other.color
        if other.bgcolor is not None:
            self.bgcolor = other.bgcolor

    def __add__(self, other: Any) -> Style:
        if not (isinstance(other, Style) or is_code(other)):
            return NotImplemented
        return self.merge(other)

    def __radd__(self, other: Any) -> Style:
        if not is_code(other):
            return NotImplemented
        return Style.of(other).merge(self)

    def __iadd__(self, other: Any) -> Style:
        if not (isinstance(other, Style) or is_code(other)):
            return NotImplemented
        self.update(other)
        return self

    def set_reset(self) -> None:
        self.reset = True
        self.effect = None
        self.color = None
        self.bgcolor = None

    def set_effect(self, effect: Effect) -> None:
        self.effect = effect

    def unset_effect(self) -> None:
        self.effect = None

    def set_color(self, color: Color) -> None:
        self.color = color

    def unset_color(self) -> None:
        self.color = None

    def set_bgcolor(self, bgcolor: BGColor) -> None:
        self.bgcolor = bgcolor

    def unset_bgcolor(self) -> None:
        self.bgcolor = None

    def is_empty(self) -> bool:
        return not self.reset and not self.parameters()

    def parameters(self) -> list[int]:
        """SGR parameters of the combined sequence, in effect, color, bgcolor order."""
        return [code.value for code in (self.effect, self.color, self.bgcolor) if code is not None]


StyleLike = Union[Style, Reset, Effect, Color, BGColor]


def combine(*parts: StyleLike) -> Style:
    """
    Fold codes and styles left to right into a single Style.

    Args:
        parts: Raw codes or Styles, earliest first

    Returns:
        The merged Style; an empty Style when no parts are given.
    """
    result = Style()
    for part in parts:
        result.update(part)
    return result
