"""
Awprint utilities shared across the package.

Contains functions used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import dataclasses

from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself.
    For example, both `class_name(10)` and `class_name(int)` return 'int'.
    Builtins are never module-qualified.

    Parameters:
        obj (Any): An object or a class.
        fully_qualified (bool): If true, returns the module-qualified name for user objects or classes.

    Returns:
        str: The class name.

    Examples:
        >>> class_name(10)
        'int'

        >>> class C: ...
        >>> class_name(C())
        'C'
        >>> class_name(C, fully_qualified=True)
        'awprint.utils.C'
    """
    cls = obj if isinstance(obj, type) else type(obj)

    if fully_qualified and cls.__module__ != "builtins":
        return f"{cls.__module__}.{cls.__name__}"
    return cls.__name__


def is_namedtuple(obj: Any) -> bool:
    """Returns True if obj is a namedtuple instance (not the class)"""
    return isinstance(obj, tuple) and isinstance(getattr(type(obj), "_fields", None), tuple)


def is_dataclass_instance(obj: Any) -> bool:
    """Returns True if obj is a dataclass instance (not the class)"""
    return dataclasses.is_dataclass(obj) and not isinstance(obj, type)


def instance_state(obj: Any) -> dict[str, Any]:
    """
    Return the instance attributes of obj from __dict__ and populated __slots__.

    Never raises; objects without instance state yield an empty dict.
    """
    state: dict[str, Any] = {}
    try:
        state.update(vars(obj))
    except TypeError:
        pass

    for cls in type(obj).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__") or name in state:
                continue
            try:
                state[name] = getattr(obj, name)
            except AttributeError:
                continue  # Declared but unset slot

    return state


def sort_if_orderable(items: abc.Iterable[Any]) -> list[Any]:
    """Return items sorted when they are mutually comparable, in iteration order otherwise."""
    items = list(items)
    try:
        return sorted(items)
    except TypeError:
        return items


def safe_repr(obj: Any) -> str:
    """
    Defensive repr() call - handle broken __repr__ methods gracefully
    """
    try:
        return repr(obj)
    except Exception as e:
        # Fallback for broken __repr__: show type and exception info
        return f"<{type(obj).__name__} object (repr failed: {type(e).__name__})>"
