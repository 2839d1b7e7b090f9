"""
Renderers for arbitrary objects (raw mode), record types and classes.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import dataclasses

from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from ..categories import Category
from ..utils import class_name, instance_state, is_namedtuple
from .base import BaseRenderer


# Classes --------------------------------------------------------------------------------------------------------------

class _FieldsRenderer(BaseRenderer):
    """Shared layout for '#<Header\\n    name = value,...>' style output."""

    def header(self) -> str:
        raise NotImplementedError

    def fields(self) -> list[tuple[str, str, Any]]:
        """(declaration, attribute name, value) triples in display order."""
        raise NotImplementedError

    def render(self) -> str:
        data = []
        for declaration, attr, value in self.fields():
            with self.left_aligned():
                key = self.align(declaration, len(declaration))
            if not self.options.plain:
                key = key.replace(declaration, self.colorize_declaration(declaration, attr), 1)
            with self.indented():
                data.append(key + self.colorize(" = ", Category.DICT) + self.nested(value))

        header = self.header()
        if not data:
            return f"#<{header}>"
        if self.options.multiline:
            return f"#<{header}\n" + ",\n".join(data) + f"\n{self.outdent()}>"
        return f"#<{header} " + ", ".join(data) + ">"

    def colorize_declaration(self, declaration: str, attr: str) -> str:
        return self.colorize(declaration, "variable")


class ObjectRenderer(_FieldsRenderer):
    """
    Render an object by its instance attributes::

        #<User:0x7f3a2c1d4e50
            _email = 'a@b.c',
            property name = 'Alice'
        >

    A private attribute backing a public property of the same name shows as
    ``property <name>``.
    """

    def header(self) -> str:
        return self.formatter.instance_label(self.value)

    def fields(self) -> list[tuple[str, str, Any]]:
        cls = type(self.value)
        result = []
        for attr, value in sorted(instance_state(self.value).items()):
            public = attr.lstrip("_")
            if public != attr and isinstance(getattr(cls, public, None), property):
                result.append((f"property {public}", public, value))
            else:
                result.append((attr, attr, value))
        return result

    def colorize_declaration(self, declaration: str, attr: str) -> str:
        if declaration.startswith("property "):
            return f"{self.colorize('property', 'keyword')} {self.colorize(attr, 'method')}"
        return super().colorize_declaration(declaration, attr)


class StructRenderer(_FieldsRenderer):
    """Render a namedtuple or dataclass instance field by field, in declaration order."""

    def header(self) -> str:
        kind = "namedtuple" if is_namedtuple(self.value) else "dataclass"
        return f"{kind} {class_name(self.value)}"

    def fields(self) -> list[tuple[str, str, Any]]:
        if is_namedtuple(self.value):
            names = list(type(self.value)._fields)
        else:
            names = [f.name for f in dataclasses.fields(self.value)]
        return [(name, name, getattr(self.value, name)) for name in names]


class ClassRenderer(BaseRenderer):
    """Render a class with its base classes: 'Child < Base'."""

    def render(self) -> str:
        text = class_name(self.value)
        bases = [base for base in getattr(self.value, "__bases__", ()) if base is not object]
        if bases:
            text += " < " + ", ".join(class_name(base) for base in bases)
        return self.colorize(text, Category.CLASS)
