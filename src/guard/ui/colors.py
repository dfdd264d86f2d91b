"""ANSI styles for console messages.

Style names map to SGR codes; a decorated message looks like
`ESC[0;31;1m` + text + `ESC[0m`.
"""

from __future__ import annotations

import importlib
import os
import sys
from collections.abc import Callable, Iterable, Mapping

from guard.errors import UnknownColorName
from guard.logging import get_logger

log = get_logger(__name__)

# =============================================================================
# ANSI Escape Codes
# =============================================================================

ESC = "\033"
ANSI_RESET = f"{ESC}[0m"

ANSI_ESCAPE_BRIGHT = "1"

ANSI_ESCAPE_BLACK = "30"
ANSI_ESCAPE_RED = "31"
ANSI_ESCAPE_GREEN = "32"
ANSI_ESCAPE_YELLOW = "33"
ANSI_ESCAPE_BLUE = "34"
ANSI_ESCAPE_MAGENTA = "35"
ANSI_ESCAPE_CYAN = "36"
ANSI_ESCAPE_WHITE = "37"

ANSI_ESCAPE_BGBLACK = "40"
ANSI_ESCAPE_BGRED = "41"
ANSI_ESCAPE_BGGREEN = "42"
ANSI_ESCAPE_BGYELLOW = "43"
ANSI_ESCAPE_BGBLUE = "44"
ANSI_ESCAPE_BGMAGENTA = "45"
ANSI_ESCAPE_BGCYAN = "46"
ANSI_ESCAPE_BGWHITE = "47"

STYLES: dict[str, str] = {
    "bright": ANSI_ESCAPE_BRIGHT,
    "black": ANSI_ESCAPE_BLACK,
    "red": ANSI_ESCAPE_RED,
    "green": ANSI_ESCAPE_GREEN,
    "yellow": ANSI_ESCAPE_YELLOW,
    "blue": ANSI_ESCAPE_BLUE,
    "magenta": ANSI_ESCAPE_MAGENTA,
    "cyan": ANSI_ESCAPE_CYAN,
    "white": ANSI_ESCAPE_WHITE,
    "bgblack": ANSI_ESCAPE_BGBLACK,
    "bgred": ANSI_ESCAPE_BGRED,
    "bggreen": ANSI_ESCAPE_BGGREEN,
    "bgyellow": ANSI_ESCAPE_BGYELLOW,
    "bgblue": ANSI_ESCAPE_BGBLUE,
    "bgmagenta": ANSI_ESCAPE_BGMAGENTA,
    "bgcyan": ANSI_ESCAPE_BGCYAN,
    "bgwhite": ANSI_ESCAPE_BGWHITE,
}

WINDOWS_COLOR_HINT = "You must 'pip install colorama' to use color on Windows"


def resolve_color_code(tokens: Iterable[object]) -> str:
    """Build the SGR sequence for a list of style tokens.

    Numeric tokens are used as-is, names are looked up in STYLES and empty
    tokens are skipped.

    Raises:
        UnknownColorName: a token is neither numeric nor a known style.
    """
    code = ""
    for token in tokens:
        option = str(token).strip()
        if not option:
            continue
        if not option.isdigit():
            try:
                option = STYLES[option.lower()]
            except KeyError:
                raise UnknownColorName(option) from None
        code += ";" + option
    return f"{ESC}[0{code}m"


def colorize(text: str, *tokens: object, enabled: bool = True) -> str:
    """Wrap `text` in the escape sequence for `tokens`, followed by a reset."""
    code = resolve_color_code(tokens)
    return f"{code}{text}{ANSI_RESET}" if enabled else text


def is_windows(platform: str | None = None) -> bool:
    platform = sys.platform if platform is None else platform
    return platform.startswith(("win", "cygwin"))


def detect_color_support(
    *,
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
    import_module: Callable[[str], object] = importlib.import_module,
) -> bool:
    """Whether the terminal can show ANSI colors.

    Windows consoles need either ANSICON or colorama to translate escape
    codes. Every other platform is assumed to support them.
    """
    environ = os.environ if environ is None else environ
    if not is_windows(platform):
        return True
    if environ.get("ANSICON"):
        return True

    try:
        colorama = import_module("colorama")
    except ImportError:
        log.debug("colorama unavailable, disabling color")
        return False

    colorama.just_fix_windows_console()
    return True
