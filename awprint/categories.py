"""
Value categories: the closed set the formatter dispatches on, and the classifier
that maps a runtime value to a category name.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import inspect
import io
import os

from decimal import Decimal
from enum import StrEnum, unique
from fractions import Fraction
from pathlib import Path
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .methods import is_unbound
from .utils import is_dataclass_instance, is_namedtuple


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Category(StrEnum):
    """
    Categories with a dedicated rendering strategy.

    ``SELF`` is the fallback: render by repr() under the value's own color category.
    """

    LIST = "list"
    DICT = "dict"
    OBJECT = "object"
    SET = "set"
    STRUCT = "struct"
    CLASS = "class"
    FILE = "file"
    DIR = "dir"
    DECIMAL = "decimal"
    FRACTION = "fraction"
    METHOD = "method"
    UNBOUNDMETHOD = "unboundmethod"
    SELF = "self"

    @classmethod
    def cast(cls, type_hint: Any) -> "Category":
        """
        Match type_hint against the known categories, SELF when nothing matches.

        Examples:
            >>> Category.cast("dict")
            <Category.DICT: 'dict'>
            >>> Category.cast("int")
            <Category.SELF: 'self'>
            >>> Category.cast(None)
            <Category.SELF: 'self'>
        """
        for category in cls:
            if category is not cls.SELF and category == type_hint:
                return category
        return cls.SELF


# Methods --------------------------------------------------------------------------------------------------------------

def printable(value: Any) -> str:
    """
    Classify value into a category name.

    Returns a Category value for values with a dedicated strategy, otherwise a color
    category name: 'true', 'false', 'none' or the lowercase type name ('int', 'str', ...).

    Examples:
        >>> printable([1, 2])
        'list'
        >>> printable(True)
        'true'
        >>> printable(3.5)
        'float'
    """
    if value is None:
        return "none"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        return Category.DECIMAL
    if isinstance(value, Fraction):
        return Category.FRACTION
    if isinstance(value, type):
        return Category.CLASS
    if isinstance(value, abc.Mapping):
        return Category.DICT
    if isinstance(value, (set, frozenset, abc.Set)):
        return Category.SET
    if is_namedtuple(value) or is_dataclass_instance(value):
        return Category.STRUCT
    if isinstance(value, (list, tuple)):
        return Category.LIST
    if _is_file(value):
        return Category.FILE
    if inspect.isroutine(value):
        return Category.UNBOUNDMETHOD if is_unbound(value) else Category.METHOD
    return type(value).__name__.lower()


# Private Methods ------------------------------------------------------------------------------------------------------

def _is_file(value: Any) -> bool:
    """Open files with a path name and Path objects, judged by type alone."""
    if isinstance(value, io.IOBase):
        return isinstance(getattr(value, "name", None), (str, bytes, os.PathLike))
    return isinstance(value, Path)
