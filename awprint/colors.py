"""
Color functions and color-mode resolution for awprint output.

The palette holds *native* color functions: each accepts the text and an optional
``html`` flag, producing either an ANSI-styled string (via yachalk) or an inline
``<kbd style="color:...">`` HTML fragment. Externally supplied colorizers, for example a
plain ``yachalk`` builder, know nothing about HTML; the formatter detects the difference
by looking for the ``html`` keyword in the function signature.

Bold palette names (``red``, ``green``, ...) have a regular-weight ``...ish`` twin which
maps to a darker shade in HTML output. ``black`` aliases ``grayish`` and ``pale`` aliases
``whiteish``.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import inspect
import os
import sys

from enum import StrEnum, unique
from typing import Callable, Protocol

# Third-party ----------------------------------------------------------------------------------------------------------
from yachalk import ChalkFactory, ColorMode as ChalkColorMode

# Palette styles are always emitted; Inspector.colorize_supported() is the only gate
_chalk = ChalkFactory(ChalkColorMode.Basic16)

# @formatter:off

# Palette name, yachalk color attribute, HTML shade used by the '...ish' variant
_PALETTE_BASE = (
    ("gray",   "gray",    "black"),
    ("red",    "red",     "darkred"),
    ("green",  "green",   "darkgreen"),
    ("yellow", "yellow",  "brown"),
    ("blue",   "blue",    "navy"),
    ("purple", "magenta", "darkmagenta"),
    ("cyan",   "cyan",    "darkcyan"),
    ("white",  "white",   "slategray"),
)

# Category colors used when none are configured
DEFAULT_COLORS: dict[str, str] = {
    "args":      "pale",
    "list":      "white",
    "bytes":     "yellowish",
    "class":     "yellow",
    "complex":   "blue",
    "date":      "greenish",
    "datetime":  "greenish",
    "decimal":   "blue",
    "dict":      "pale",
    "false":     "red",
    "float":     "blue",
    "fraction":  "blue",
    "int":       "blue",
    "keyword":   "cyan",
    "method":    "purpleish",
    "none":      "red",
    "str":       "yellowish",
    "struct":    "pale",
    "time":      "greenish",
    "true":      "green",
    "variable":  "cyanish",
}

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Native palette colorizers also accept ``html``; foreign ones (yachalk builders,
    user functions) are called with the text only.
    """

    def __call__(self, text: str, /) -> str: ...


@unique
class ColorMode(StrEnum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


# Methods --------------------------------------------------------------------------------------------------------------

def html_aware(fn: Callable) -> bool:
    """
    Return True if color function fn accepts an ``html`` keyword argument.

    Callables whose signature can not be inspected are treated as HTML-unaware.
    """
    try:
        params = inspect.signature(fn).parameters
    except (TypeError, ValueError):
        return False
    if "html" in params:
        return params["html"].kind is not inspect.Parameter.POSITIONAL_ONLY
    return any(p.kind is inspect.Parameter.VAR_KEYWORD for p in params.values())


def resolve_color(color: str | Callable | None) -> Callable | None:
    """Return the color function for a palette name or callable, None if unknown."""
    if color is None:
        return None
    if callable(color):
        return color
    return PALETTE.get(str(color))


def resolve_color_mode(mode: ColorMode | str | None = None, *, stdout_isatty: bool | None = None) -> bool:
    """Determine whether ANSI color output should be enabled.

    Args:
        mode: Explicit color mode (auto, always, never). None means auto.
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors explicit always/never first, then the FORCE_COLOR and NO_COLOR
        environment variables, then TERM=dumb. Defaults to color on a TTY.
    """
    mode = ColorMode(mode) if mode is not None else ColorMode.AUTO
    if mode == ColorMode.ALWAYS:
        return True
    if mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("TERM") == "dumb":
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


# Private Methods ------------------------------------------------------------------------------------------------------

def _make_color(name: str, builder: Callable[..., str], html_color: str) -> Callable[..., str]:
    def color(text: str, html: bool = False) -> str:
        if html:
            return f'<kbd style="color:{html_color}">{text}</kbd>'
        return builder(text)

    color.__name__ = color.__qualname__ = name
    return color


def _build_palette() -> dict[str, Callable[..., str]]:
    palette = {}
    for name, color, shade in _PALETTE_BASE:
        # Builders are mutated by chaining, each variant needs a fresh one
        palette[name] = _make_color(name, getattr(_chalk, color).bold, name)
        palette[f"{name}ish"] = _make_color(f"{name}ish", getattr(_chalk, color), shade)
    palette["black"] = palette["grayish"]
    palette["pale"] = palette["whiteish"]
    return palette


PALETTE: dict[str, Callable[..., str]] = _build_palette()
