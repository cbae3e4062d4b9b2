from .capabilities import Capabilities
from . import codes
from .codes import *  # noqa: F401,F403
from .context import (
    StyleContext,
    get_context,
    get_mode,
    recheck_terminal_status,
    set_context,
    set_mode,
    should_emit,
)
from .modes import Mode, parse_mode
from .style import Style, StyleLike, combine
from .writer import StyledStream, serialize, serialize_code, serialize_style, write

__all__ = [
    "BGColor",
    "Capabilities",
    "Code",
    "Color",
    "Effect",
    "Mode",
    "Reset",
    "Style",
    "StyleContext",
    "StyleLike",
    "StyledStream",
    "code_value",
    "combine",
    "get_context",
    "get_mode",
    "is_code",
    "parse_mode",
    "recheck_terminal_status",
    "serialize",
    "serialize_code",
    "serialize_style",
    "set_context",
    "set_mode",
    "should_emit",
    "write",
]
__all__ += [name for name in codes.__all__ if name not in __all__]
