"""
Renderer for mappings and mapping-like objects (anything with keys() and item lookup).
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from ..categories import Category
from ..utils import sort_if_orderable
from .base import BaseRenderer


# Classes --------------------------------------------------------------------------------------------------------------

class MappingRenderer(BaseRenderer):
    """
    Render a mapping with aligned keys::

        {
               'name': 'Alice',
            'country': 'NL'
        }

    A positive indent right-aligns keys, zero or negative indent left-aligns them.
    Keys are always rendered plain and on a single line.
    """

    def keys(self) -> list[Any]:
        keys = list(self.value.keys())
        if self.options.sort_keys:
            keys = sort_if_orderable(keys)
        return keys

    def render(self) -> str:
        keys = self.keys()
        if not keys:
            return "{}"

        data = self._printable(keys)
        if self.options.multiline:
            return "{\n" + ",\n".join(data) + f"\n{self.outdent()}}}"
        return "{ " + ", ".join(data) + " }"

    def left_width(self, keys: list[str]) -> int:
        width = max(len(key) for key in keys)
        if self.options.indent > 0:
            width += self.formatter.indentation
        return width

    def _printable(self, keys: list[Any]) -> list[str]:
        with self.plain_single_line():
            rendered = [self.nested(key) for key in keys]

        width = self.left_width(rendered)
        data = []
        for text, key in zip(rendered, keys):
            with self.indented():
                data.append(self.align(text, width) + self.colorize(": ", Category.DICT) + self.nested(self.value[key]))

        if self.should_be_limited():
            data = self.limited(data, width, is_keyed=True)
        return data
