"""ANSI escape tokens and a one-line styled printer.

Example::

    from hardware_checker import colours

    colours.styles(colours.CYAN).println("Current time: %d msec", now_ms)

Each ``println`` writes the concatenated style tokens, the (optionally
interpolated) text, and :data:`RESET`, so styling never leaks into the next
line.
"""

from __future__ import annotations

import re

import click

ESC = "\x1b["

# Reset
RESET = ESC + "0m"

# Regular colours (30-37)
BLACK = ESC + "30m"
RED = ESC + "31m"
GREEN = ESC + "32m"
YELLOW = ESC + "33m"
BLUE = ESC + "34m"
PURPLE = ESC + "35m"
CYAN = ESC + "36m"
WHITE = ESC + "37m"

# Bright colours (90-97)
BRIGHT_BLACK = ESC + "90m"
BRIGHT_RED = ESC + "91m"
BRIGHT_GREEN = ESC + "92m"
BRIGHT_YELLOW = ESC + "93m"
BRIGHT_BLUE = ESC + "94m"
BRIGHT_PURPLE = ESC + "95m"
BRIGHT_CYAN = ESC + "96m"
BRIGHT_WHITE = ESC + "97m"

# Background colours (40-47)
BLACK_BG = ESC + "40m"
RED_BG = ESC + "41m"
GREEN_BG = ESC + "42m"
YELLOW_BG = ESC + "43m"
BLUE_BG = ESC + "44m"
PURPLE_BG = ESC + "45m"
CYAN_BG = ESC + "46m"
WHITE_BG = ESC + "47m"

# Bright background colours (100-107)
BRIGHT_BLACK_BG = ESC + "100m"
BRIGHT_RED_BG = ESC + "101m"
BRIGHT_GREEN_BG = ESC + "102m"
BRIGHT_YELLOW_BG = ESC + "103m"
BRIGHT_BLUE_BG = ESC + "104m"
BRIGHT_PURPLE_BG = ESC + "105m"
BRIGHT_CYAN_BG = ESC + "106m"
BRIGHT_WHITE_BG = ESC + "107m"

# Text styles
BOLD = ESC + "1m"
DIM = ESC + "2m"
ITALIC = ESC + "3m"
UNDERLINE = ESC + "4m"
SLOW_BLINK = ESC + "5m"
RAPID_BLINK = ESC + "6m"
REVERSE = ESC + "7m"
STRIKETHROUGH = ESC + "9m"

# Not widely supported by terminals
DOUBLE_UNDERLINE = ESC + "21m"
OVERLINE = ESC + "53m"

# Reset specific styles (bold and dim share SGR 22)
RESET_BOLD = ESC + "22m"
RESET_DIM = ESC + "22m"
RESET_ITALIC = ESC + "23m"
RESET_UNDERLINE = ESC + "24m"
RESET_BLINK = ESC + "25m"
RESET_REVERSE = ESC + "27m"
RESET_STRIKETHROUGH = ESC + "29m"


class Builder:
    """Accumulated style prefix for a single printed line."""

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix

    def println(self, fmt: str, *args: object) -> None:
        """Write ``fmt`` (interpolated with ``args`` if any) to stdout.

        Parameters
        ----------
        fmt : str
            Text to print.  Only interpolated printf-style when ``args`` is
            non-empty, so a bare ``%`` is safe without arguments.
        *args : object
            Positional values for ``fmt``.  A placeholder mismatch raises
            ``TypeError`` or ``ValueError`` from ``%`` formatting; an integer
            conversion given a float or bool raises ``TypeError`` instead of
            truncating it.
        """
        if args:
            _check_integer_args(fmt, args)
            text = fmt % args
        else:
            text = fmt
        click.echo(self.prefix + text + RESET, color=True)


# printf-style conversion: optional width/precision (``*`` takes an argument)
_CONVERSION = re.compile(r"%[-#0 +]*(\*|\d+)?(?:\.(\*|\d*))?[hlL]?([diouxXeEfFgGcrsa%])")
_INTEGER_CONVERSIONS = frozenset("diouxX")


def _check_integer_args(fmt: str, args: tuple[object, ...]) -> None:
    """Raise ``TypeError`` if an integer conversion would receive a non-int."""
    index = 0
    for match in _CONVERSION.finditer(fmt):
        width, precision, conversion = match.groups()
        if conversion == "%":
            continue
        index += (width == "*") + (precision == "*")
        if index >= len(args):
            return
        value = args[index]
        if conversion in _INTEGER_CONVERSIONS and (isinstance(value, bool) or not isinstance(value, int)):
            raise TypeError(f"%{conversion} format: an integer is required, not {type(value).__name__}")
        index += 1


def styles(*tokens: str) -> Builder:
    """Return a :class:`Builder` prefixing output with ``tokens`` in order."""
    return Builder("".join(tokens))


def colour256(code: int) -> str:
    """Foreground from the 256-colour palette."""
    return f"{ESC}38;5;{code}m"


def background256(code: int) -> str:
    """Background from the 256-colour palette."""
    return f"{ESC}48;5;{code}m"


def rgb(r: int, g: int, b: int) -> str:
    """24-bit true colour foreground."""
    return f"{ESC}38;2;{r};{g};{b}m"


def rgb_background(r: int, g: int, b: int) -> str:
    """24-bit true colour background."""
    return f"{ESC}48;2;{r};{g};{b}m"
