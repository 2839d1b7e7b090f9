"""
Method introspection: turn a callable into a displayable (name, args, owner) tuple.

Parameters are first normalized into ``ParamKind`` pairs, then rendered the way
method listings show them::

    required    -> x
    optional    -> *x       (has a default)
    variadic    -> *args
    keywords    -> **kwargs
    block       -> &block   (trailing callback, only produced by external reflections)
    unknown     -> ?

Owner labels come from structured reflection (bound receiver, defining class,
``__objclass__`` of descriptors). ``repr()`` pattern matching is kept as a fallback
for opaque callables only.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import inspect
import logging
import re

from enum import StrEnum, unique
from typing import Any, Callable, Iterable

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import class_name

logger = logging.getLogger(__name__)

MethodTuple = tuple[str, str, str]

# '(id: int, name: str)' style field listing following a record type name
_FIELDS_SUFFIX = re.compile(r"(\(\w+:\s.*?\))")

# '<bound method Owner.name of ...>', '<function Owner.name at ...>', '<unbound method Owner.name>'
_REPR_OWNER = re.compile(r"<(?P<unbound>unbound )?(?:bound )?(?:method|function) (?P<owner>[^<>]+?)[.]\w+(?: of | at |>)")

_MISSING = object()


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class ParamKind(StrEnum):
    """Normalized parameter binding kind."""

    REQ = "req"
    OPT = "opt"
    REST = "rest"
    KEYREST = "keyrest"
    BLOCK = "block"


class MethodNames(list):
    """
    List of member names that remembers the object they were collected from.

    Sequence renderers detect this type and print a method table instead of plain
    strings.

    Examples:
        >>> names = MethodNames(["upper", "lower"], source="text")
        >>> names.source
        'text'
    """

    def __init__(self, names: Iterable[Any] = (), source: Any = None):
        super().__init__(names)
        self.source = source


# Methods --------------------------------------------------------------------------------------------------------------

def default_tuple(name: Any) -> MethodTuple:
    """Tuple used when a member can not be reflected as a method."""
    return str(name), "(?)", "?"


def format_params(params: Iterable[tuple[ParamKind | str, str | None]]) -> str:
    """
    Render normalized parameters as a parenthesized, comma-joined argument list.

    Parameters without a name are called ``block`` (block kind) or ``argN`` with
    N the 1-based position.

    Examples:
        >>> format_params([(ParamKind.REQ, "x"), (ParamKind.OPT, "y")])
        '(x, *y)'
        >>> format_params([(ParamKind.BLOCK, None)])
        '(&block)'
        >>> format_params([])
        '()'
    """
    args: list[str] = []
    for kind, name in params:
        if not name:
            name = "block" if kind == ParamKind.BLOCK else f"arg{len(args) + 1}"
        if kind == ParamKind.REQ:
            args.append(name)
        elif kind in (ParamKind.OPT, ParamKind.REST):
            args.append(f"*{name}")
        elif kind == ParamKind.BLOCK:
            args.append(f"&{name}")
        elif kind == ParamKind.KEYREST:
            args.append(f"**{name}")
        else:
            args.append("?")
    return f"({', '.join(args)})"


def reflect_params(fn: Callable) -> list[tuple[ParamKind | str, str | None]]:
    """
    Return the normalized (kind, name) parameter list of fn.

    Uses inspect.signature() and falls back to the code object's arity when no
    signature is available. A leading ``self`` of unbound callables is dropped.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return _arity_params(fn)

    params: list[tuple[ParamKind | str, str | None]] = []
    for p in signature.parameters.values():
        if p.kind is inspect.Parameter.VAR_POSITIONAL:
            kind = ParamKind.REST
        elif p.kind is inspect.Parameter.VAR_KEYWORD:
            kind = ParamKind.KEYREST
        elif p.default is inspect.Parameter.empty:
            kind = ParamKind.REQ
        else:
            kind = ParamKind.OPT
        params.append((kind, p.name))

    if params and params[0][1] == "self" and is_unbound(fn):
        params = params[1:]
    return params


def is_unbound(fn: Any) -> bool:
    """
    Return True for methods accessed from their class rather than an instance.

    Covers functions defined in a class body (``Hello.world``) and builtin method
    descriptors (``str.upper``). Static methods are plain functions either way and
    are never unbound.

    Examples:
        >>> is_unbound(str.upper)
        True
        >>> is_unbound("abc".upper)
        False
    """
    if inspect.ismethod(fn) or inspect.isbuiltin(fn):
        return False
    if inspect.ismethoddescriptor(fn):
        return hasattr(fn, "__objclass__")
    if inspect.isfunction(fn):
        return _defining_class(fn) is not None and not _is_static(fn)
    return False


def owner_label(fn: Any) -> str:
    """
    Return the display name of the type fn belongs to, or '' when unknown.

    A receiver inheriting the method shows both names, ``'Child (Base)'``;
    unbound callables get an ``' (unbound)'`` qualifier.

    Examples:
        >>> owner_label([].append)
        'list'
        >>> owner_label(str.upper)
        'str (unbound)'
    """
    owner, unbound = _reflect_owner(fn)
    if owner is None:
        owner, unbound = _match_owner(fn)
    if owner is None:
        return ""

    match = _FIELDS_SUFFIX.search(owner)
    if match:
        owner = owner.replace(match.group(1), "", 1)
    label = f"{owner}(unbound)" if unbound else owner
    return label.replace("(", " (")


def method_tuple(fn: Callable) -> MethodTuple:
    """
    Return the (name, args, owner) tuple for a callable.

    Examples:
        >>> method_tuple(str.center)
        ('center', '(width, *fillchar)', 'str (unbound)')
    """
    name = getattr(fn, "__name__", None)
    if not isinstance(name, str):
        name = class_name(fn)
    return name, format_params(reflect_params(fn)), owner_label(fn)


def lookup_method_tuple(source: Any, name: Any) -> MethodTuple:
    """
    Reflect member `name` of source as a method tuple.

    Tries the member as an attribute of source first, then as an unbound member of
    a class found by static lookup. Non-string names, missing members, members that
    are not callable and attribute access that raises all yield default_tuple().
    """
    if not isinstance(name, str):
        return default_tuple(name)

    try:
        member = getattr(source, name)
    except Exception as exc:
        logger.debug("Can not access %s.%s: %s", class_name(source), name, type(exc).__name__)
        member = _MISSING

    if member is _MISSING and isinstance(source, type):
        try:
            member = inspect.getattr_static(source, name)
        except AttributeError:
            member = _MISSING
        if isinstance(member, (staticmethod, classmethod)):
            member = member.__func__

    if member is _MISSING or not callable(member):
        return default_tuple(name)

    try:
        return method_tuple(member)
    except Exception as exc:
        logger.debug("Can not reflect %s.%s: %s", class_name(source), name, exc)
        return default_tuple(name)


def methods_of(obj: Any, private: bool = False) -> MethodNames:
    """
    Collect the names of callable members of obj.

    Members whose access raises are kept; they render with the default tuple.

    Args:
        obj: Instance, class or module to collect from.
        private: Include names starting with an underscore.
    """
    names = []
    for name in dir(obj):
        if name.startswith("_") and not private:
            continue
        try:
            member = getattr(obj, name)
        except Exception:
            names.append(name)
            continue
        if callable(member):
            names.append(name)
    return MethodNames(names, source=obj)


# Private Methods ------------------------------------------------------------------------------------------------------

def _arity_params(fn: Callable) -> list[tuple[ParamKind | str, str | None]]:
    """Unnamed parameters from the code object argument count, '?' when there is none."""
    code = getattr(fn, "__code__", None)
    if code is None:
        return [("unknown", None)]

    count = code.co_argcount + code.co_kwonlyargcount
    has_varargs = bool(code.co_flags & inspect.CO_VARARGS)
    if has_varargs:
        count += 1

    params: list[tuple[ParamKind | str, str | None]] = [(ParamKind.REQ, None)] * count
    if has_varargs:
        params[-1] = (ParamKind.REST, None)
    return params


def _defining_class(fn: Any) -> str | None:
    """Class name segment of fn.__qualname__, None for module-level and local functions."""
    qualname = getattr(fn, "__qualname__", None)
    if not isinstance(qualname, str) or "." not in qualname:
        return None
    owner = qualname.rsplit(".", 1)[0].rsplit(".", 1)[-1]
    return None if owner == "<locals>" else owner


def _is_static(fn: Any) -> bool:
    """True when fn is stored as a staticmethod in the class its __qualname__ names."""
    qualname = getattr(fn, "__qualname__", None)
    if not isinstance(qualname, str):
        return False
    parts = qualname.split(".")
    if len(parts) < 2 or "<locals>" in parts:
        return False

    owner = getattr(fn, "__globals__", {}).get(parts[0])
    for part in parts[1:-1]:
        owner = getattr(owner, part, None)
    if not isinstance(owner, type):
        return False

    try:
        member = inspect.getattr_static(owner, parts[-1])
    except AttributeError:
        return False
    return isinstance(member, staticmethod)


def _reflect_owner(fn: Any) -> tuple[str | None, bool]:
    """Owner name and unbound flag from structured reflection, (None, False) if opaque."""
    if inspect.ismethoddescriptor(fn) and hasattr(fn, "__objclass__"):
        return class_name(fn.__objclass__), True

    if inspect.isfunction(fn):
        definer = _defining_class(fn)
        if definer is not None:
            return definer, not _is_static(fn)
        return getattr(fn, "__module__", None), False

    receiver = getattr(fn, "__self__", _MISSING)
    if receiver is _MISSING:
        return None, False
    if receiver is None or inspect.ismodule(receiver):
        module = getattr(fn, "__module__", None) or getattr(receiver, "__name__", None)
        return module, False

    receiver_name = class_name(receiver)
    definer = _defining_class(getattr(fn, "__func__", fn))
    if definer is not None and definer != receiver_name:
        return f"{receiver_name}({definer})", False
    return receiver_name, False


def _match_owner(fn: Any) -> tuple[str | None, bool]:
    """Owner name and unbound flag parsed from repr(fn), (None, False) when it does not match."""
    try:
        text = repr(fn)
    except Exception:
        return None, False
    match = _REPR_OWNER.search(text)
    if not match:
        return None, False
    return match.group("owner"), match.group("unbound") is not None
