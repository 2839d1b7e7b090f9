"""
Renderers for lists, tuples and sets.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from ..categories import Category
from ..methods import MethodNames
from ..utils import sort_if_orderable
from .base import BaseRenderer


# Classes --------------------------------------------------------------------------------------------------------------

class SequenceRenderer(BaseRenderer):
    """
    Render a list or tuple, one indexed item per line in multiline mode::

        [
            [0] 1,
            [1] "two"
        ]

    A MethodNames list renders as a method table instead.
    """

    show_index = True

    def brackets(self) -> tuple[str, str]:
        return ("(", ")") if isinstance(self.value, tuple) else ("[", "]")

    def empty(self) -> str:
        return "".join(self.brackets())

    def items(self) -> list[Any]:
        return list(self.value)

    def render(self) -> str:
        if isinstance(self.value, MethodNames):
            return self.formatter.methods_array(self.value)

        items = self.items()
        if not items:
            return self.empty()

        opening, closing = self.brackets()
        if self.options.multiline:
            data = self._printable(items)
            return f"{opening}\n" + ",\n".join(data) + f"\n{self.outdent()}{closing}"
        return f"{opening} " + ", ".join(self.nested(item) for item in items) + f" {closing}"

    def prefix(self, index: int, width: int) -> str:
        if self.show_index and self.options.index:
            return self.indent() + self.colorize(f"[{str(index).rjust(width)}] ", Category.LIST)
        return self.indent()

    def _printable(self, items: list[Any]) -> list[str]:
        width = self.index_width(items)
        data = []
        for index, item in enumerate(items):
            prefix = self.prefix(index, width)
            with self.indented():
                data.append(prefix + self.nested(item))

        if self.should_be_limited():
            data = self.limited(data, width)
        return data


class SetRenderer(SequenceRenderer):
    """Render a set or frozenset with braces and without indices; orderable elements are sorted."""

    show_index = False

    def brackets(self) -> tuple[str, str]:
        return "{", "}"

    def empty(self) -> str:
        return f"{type(self.value).__name__}()"

    def items(self) -> list[Any]:
        return sort_if_orderable(self.value)
