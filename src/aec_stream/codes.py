"""SGR (Select Graphic Rendition) parameter catalog."""
from __future__ import annotations

from enum import Enum
from typing import Any, Union

__all__ = [
    "BGColor",
    "Code",
    "Color",
    "Effect",
    "Reset",
    "code_value",
    "is_code",
    "BG_BLACK",
    "BG_BLUE",
    "BG_BRIGHT_BLACK",
    "BG_BRIGHT_BLUE",
    "BG_BRIGHT_CYAN",
    "BG_BRIGHT_GRAY",
    "BG_BRIGHT_GREEN",
    "BG_BRIGHT_MAGENTA",
    "BG_BRIGHT_RED",
    "BG_BRIGHT_YELLOW",
    "BG_CRESET",
    "BG_CYAN",
    "BG_GRAY",
    "BG_GREEN",
    "BG_MAGENTA",
    "BG_RED",
    "BG_YELLOW",
    "BLACK",
    "BLINK",
    "BLUE",
    "BOLD",
    "BRIGHT_BLACK",
    "BRIGHT_BLUE",
    "BRIGHT_CYAN",
    "BRIGHT_GRAY",
    "BRIGHT_GREEN",
    "BRIGHT_MAGENTA",
    "BRIGHT_RED",
    "BRIGHT_YELLOW",
    "CONCEAL",
    "CRESET",
    "CROSSOUT",
    "CYAN",
    "DIM",
    "GRAY",
    "GREEN",
    "ITALIC",
    "MAGENTA",
    "RAPID_BLINK",
    "RED",
    "RESET",
    "REVERSE_VIDEO",
    "UNDERLINE",
    "YELLOW",
]


class Reset(Enum):
    RESET = 0


class Effect(Enum):
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    RAPID_BLINK = 6
    REVERSE_VIDEO = 7
    CONCEAL = 8
    CROSSOUT = 9


class Color(Enum):
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    GRAY = 37
    CRESET = 39

    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_GRAY = 97


class BGColor(Enum):
    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_GRAY = 47
    BG_CRESET = 49

    BG_BRIGHT_BLACK = 100
    BG_BRIGHT_RED = 101
    BG_BRIGHT_GREEN = 102
    BG_BRIGHT_YELLOW = 103
    BG_BRIGHT_BLUE = 104
    BG_BRIGHT_MAGENTA = 105
    BG_BRIGHT_CYAN = 106
    BG_BRIGHT_GRAY = 107


Code = Union[Reset, Effect, Color, BGColor]

_CODE_TYPES = (Reset, Effect, Color, BGColor)


def is_code(value: Any) -> bool:
    """Return True if value is a raw code of any attribute kind."""
    return isinstance(value, _CODE_TYPES)


def code_value(code: Code) -> int:
    """Numeric SGR parameter for a raw code."""
    return code.value


# Flat aliases, e.g. combine(BOLD, RED, BG_BLUE)
RESET = Reset.RESET

BOLD = Effect.BOLD
DIM = Effect.DIM
ITALIC = Effect.ITALIC
UNDERLINE = Effect.UNDERLINE
BLINK = Effect.BLINK
RAPID_BLINK = Effect.RAPID_BLINK
REVERSE_VIDEO = Effect.REVERSE_VIDEO
CONCEAL = Effect.CONCEAL
CROSSOUT = Effect.CROSSOUT

BLACK = Color.BLACK
RED = Color.RED
GREEN = Color.GREEN
YELLOW = Color.YELLOW
BLUE = Color.BLUE
MAGENTA = Color.MAGENTA
CYAN = Color.CYAN
GRAY = Color.GRAY
CRESET = Color.CRESET
BRIGHT_BLACK = Color.BRIGHT_BLACK
BRIGHT_RED = Color.BRIGHT_RED
BRIGHT_GREEN = Color.BRIGHT_GREEN
BRIGHT_YELLOW = Color.BRIGHT_YELLOW
BRIGHT_BLUE = Color.BRIGHT_BLUE
BRIGHT_MAGENTA = Color.BRIGHT_MAGENTA
BRIGHT_CYAN = Color.BRIGHT_CYAN
BRIGHT_GRAY = Color.BRIGHT_GRAY

BG_BLACK = BGColor.BG_BLACK
BG_RED = BGColor.BG_RED
BG_GREEN = BGColor.BG_GREEN
BG_YELLOW = BGColor.BG_YELLOW
BG_BLUE = BGColor.BG_BLUE
BG_MAGENTA = BGColor.BG_MAGENTA
BG_CYAN = BGColor.BG_CYAN
BG_GRAY = BGColor.BG_GRAY
BG_CRESET = BGColor.BG_CRESET
BG_BRIGHT_BLACK = BGColor.BG_BRIGHT_BLACK
BG_BRIGHT_RED = BGColor.BG_BRIGHT_RED
BG_BRIGHT_GREEN = BGColor.BG_BRIGHT_GREEN
BG_BRIGHT_YELLOW = BGColor.BG_BRIGHT_YELLOW
BG_BRIGHT_BLUE = BGColor.BG_BRIGHT_BLUE
BG_BRIGHT_MAGENTA = BGColor.BG_BRIGHT_MAGENTA
BG_BRIGHT_CYAN = BGColor.BG_BRIGHT_CYAN
BG_BRIGHT_GRAY = BGColor.BG_BRIGHT_GRAY
