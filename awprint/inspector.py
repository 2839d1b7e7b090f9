"""
Top-level awprint API: the Inspector and the ai()/ap() helpers.

Examples:
    >>> print(ai({"a": 1, "bb": [1, 2]}, plain=True))
    {
         'a': 1,
        'bb': [
            [0] 1,
            [1] 2
        ]
    }
"""

# Standard library -----------------------------------------------------------------------------------------------------
import sys

from contextlib import contextmanager
from typing import IO, Any, Iterator

# Local ----------------------------------------------------------------------------------------------------------------
from .categories import printable
from .colors import resolve_color_mode
from .formatter import Formatter
from .options import FormatOptions, get_options


# Classes --------------------------------------------------------------------------------------------------------------

class Inspector:
    """
    Resolve options once and render values with a dedicated Formatter.

    Args:
        options: Base options; the module-level defaults (see options.configure) when None.
        **kwargs: FormatOptions fields overriding the base options.
    """

    def __init__(self, options: FormatOptions | None = None, **kwargs: Any):
        base = options if options is not None else get_options()
        self.options = base.merge(**kwargs)
        self._colorize = self.options.html or resolve_color_mode(self.options.color_mode)
        self._visiting: list[int] = []
        self.formatter = Formatter(self)

    def awesome(self, value: Any) -> str:
        """Render value as text."""
        return self.formatter.format(value, printable(value))

    def colorize_supported(self) -> bool:
        """Whether colors can be shown: always for HTML, per color mode for terminals."""
        return self._colorize

    @contextmanager
    def visiting(self, value: Any) -> Iterator[None]:
        """Mark value as being rendered for the duration of the block."""
        self._visiting.append(id(value))
        try:
            yield
        finally:
            self._visiting.pop()

    def is_visiting(self, value: Any) -> bool:
        return id(value) in self._visiting


# Methods --------------------------------------------------------------------------------------------------------------

def ai(value: Any, **kwargs: Any) -> str:
    """
    Render value as text with the default options, overridden by kwargs.

    See FormatOptions for the accepted keyword arguments.
    """
    return Inspector(**kwargs).awesome(value)


def ap(value: Any, file: IO[str] | None = None, **kwargs: Any) -> Any:
    """Print the rendering of value and return value unchanged."""
    print(ai(value, **kwargs), file=file or sys.stdout)
    return value
