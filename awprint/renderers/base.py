"""
Base class for per-type renderers.

A renderer is built with the formatter and the value, and exposes call() -> str.
Nested values go back through the formatter via nested(), which also stops on
reference cycles: a value already being rendered further up is shown as a short
marker instead.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import TYPE_CHECKING, Any

# Local ----------------------------------------------------------------------------------------------------------------
from ..categories import Category, printable

if TYPE_CHECKING:
    from ..formatter import Formatter

CYCLE_MARKERS = {
    Category.LIST: "[...]",
    Category.DICT: "{...}",
    Category.SET: "{...}",
}


# Classes --------------------------------------------------------------------------------------------------------------

class BaseRenderer:
    """
    Render one value with access to the formatter's indentation, colors and limits.

    Subclasses implement render(); call() registers the value as being rendered for
    the duration so nested references to it are detected.
    """

    def __init__(self, formatter: "Formatter", value: Any):
        self.formatter = formatter
        self.value = value

    @property
    def options(self):
        return self.formatter.options

    @property
    def inspector(self):
        return self.formatter.inspector

    def call(self) -> str:
        with self.inspector.visiting(self.value):
            return self.render()

    def render(self) -> str:
        raise NotImplementedError

    def nested(self, value: Any) -> str:
        """
        Format a nested value, or a cycle marker if it is already being rendered.

        Values converted through to_dict() count as being rendered while their
        converted mapping is, so such a value is never converted twice on one path.
        """
        if self.inspector.is_visiting(value):
            return self.colorize(CYCLE_MARKERS.get(printable(value), "#<...>"), None)
        return self.formatter.format(value)

    # Formatter delegates ----------------------------------------------------------------------------------------------

    def colorize(self, text: str, category: Any) -> str:
        return self.formatter.colorize(text, category)

    def indent(self) -> str:
        return self.formatter.indent()

    def outdent(self) -> str:
        return self.formatter.outdent()

    def indented(self):
        return self.formatter.indented()

    def align(self, value: str, width: int) -> str:
        return self.formatter.align(value, width)

    def plain_single_line(self):
        return self.formatter.plain_single_line()

    def left_aligned(self):
        return self.formatter.left_aligned()

    def should_be_limited(self) -> bool:
        return self.formatter.should_be_limited()

    def limited(self, data: list[str], width: int, is_keyed: bool = False) -> list[str]:
        return self.formatter.limited(data, width, is_keyed)

    @staticmethod
    def index_width(items: list[Any]) -> int:
        """Digits needed for the largest index of items."""
        return len(str(len(items) - 1))
