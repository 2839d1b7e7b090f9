"""
Awprint formatting engine.

The Formatter routes a value to its rendering strategy, tracks the indentation of
nested blocks, condenses long collections and applies colors. Renderers for
containers and objects live in ``awprint.renderers``; they receive the formatter
and call back into ``format()`` for nested values.

Limited output, for example::

    >>> print(ai(list("abcdefghijklmnopqrstuvwxyz"), limit=3, plain=True))
    [
        [ 0] 'a',
        [ 1] .. [24],
        [25] 'z'
    ]

    >>> print(ai(list(range(1, 101)), limit=True, plain=True))
    [
        [ 0] 1,
        [ 1] 2,
        [ 2] 3,
        [ 3] .. [96],
        [97] 98,
        [98] 99,
        [99] 100
    ]
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import inspect
import logging

from contextlib import contextmanager
from html import escape as html_escape
from typing import Any, Callable, Iterator, TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .categories import Category, printable
from .colors import html_aware, resolve_color
from .methods import lookup_method_tuple, method_tuple
from .renderers.files import DirRenderer, FileRenderer
from .renderers.mapping import MappingRenderer
from .renderers.objects import ClassRenderer, ObjectRenderer, StructRenderer
from .renderers.sequence import SequenceRenderer, SetRenderer
from .utils import class_name, instance_state, safe_repr

logger = logging.getLogger(__name__)

T = TypeVar("T")


# Classes --------------------------------------------------------------------------------------------------------------

class Formatter:
    """
    Recursive, type-dispatching formatter bound to one Inspector.

    State:
        indentation: Current depth in spaces, always a multiple of abs(options.indent).
            Starts at one unit so top-level items are indented and the closing bracket
            sits at column zero.

    The formatter mutates its indentation and, within scoped overrides, its options;
    an instance is not safe for concurrent use from several threads.
    """

    def __init__(self, inspector: Any):
        self.inspector = inspector
        self.options = inspector.options
        self.indentation = abs(self.options.indent)

    # Dispatch ---------------------------------------------------------------------------------------------------------

    def format(self, value: Any, type_hint: Any = None) -> str:
        """
        Main entry point to format a value.

        Args:
            value: Any Python object.
            type_hint: Category or color category name; classified with printable()
                when None.

        Returns:
            The rendered text. Never raises for unrecognized values.
        """
        if type_hint is None:
            type_hint = printable(value)

        category = self.cast(value, type_hint)
        if category is Category.SELF:
            return self._format_self(value, type_hint)
        return getattr(self, f"_format_{category}")(value)

    def cast(self, value: Any, type_hint: Any) -> Category:
        """Override this to route values to custom categories."""
        return Category.cast(type_hint)

    # Colors -----------------------------------------------------------------------------------------------------------

    def colorize(self, text: str, category: Any) -> str:
        """
        Pick the color for category and apply it to text as necessary.

        HTML output is escaped first. Palette colors receive the html flag and
        produce their own markup; foreign color functions get the text wrapped
        in a ``<kbd>`` tag in HTML mode.
        """
        if self.options.html:
            text = html_escape(text)

        color = self.options.color.get(str(category)) if category is not None else None
        if self.options.plain or color is None or not self.inspector.colorize_supported():
            return text

        fn = resolve_color(color)
        if fn is None:
            return text

        if html_aware(fn):
            return fn(text, html=self.options.html)

        if self.options.html:
            name = color if isinstance(color, str) else getattr(fn, "__name__", "inherit")
            text = f'<kbd style="color:{name}">{text}</kbd>'
        return fn(text)

    # Indentation ------------------------------------------------------------------------------------------------------

    def indent(self) -> str:
        return " " * self.indentation

    def outdent(self) -> str:
        return " " * (self.indentation - abs(self.options.indent))

    @contextmanager
    def indented(self) -> Iterator[None]:
        """Increase indentation by one unit for the duration of the block."""
        step = abs(self.options.indent)
        self.indentation += step
        try:
            yield
        finally:
            self.indentation -= step

    def scoped_indent(self, action: Callable[[], T]) -> T:
        """Run action one indentation unit deeper and return its result."""
        with self.indented():
            return action()

    def align(self, value: str, width: int) -> str:
        """
        Pad value to width according to the sign of the indent option.

        Positive indent right-aligns, zero and negative indent left-align at the
        current (or one unit shallower) indentation. Single-line output is not padded.
        """
        if not self.options.multiline:
            return value
        if self.options.indent > 0:
            return value.rjust(width)
        if self.options.indent == 0:
            return self.indent() + value.ljust(width)
        return self.indent()[: self.indentation + self.options.indent] + value.ljust(width)

    # Scoped option overrides ------------------------------------------------------------------------------------------

    @contextmanager
    def overrides(self, **changes: Any) -> Iterator[None]:
        """Temporarily replace option values, restoring the previous ones on exit."""
        saved = {name: getattr(self.options, name) for name in changes}
        for name, value in changes.items():
            setattr(self.options, name, value)
        try:
            yield
        finally:
            for name, value in saved.items():
                setattr(self.options, name, value)

    def plain_single_line(self):
        """Render mapping keys as plain strings regardless of their type."""
        return self.overrides(plain=True, multiline=False)

    def left_aligned(self):
        return self.overrides(indent=0)

    # Limiting ---------------------------------------------------------------------------------------------------------

    def should_be_limited(self) -> bool:
        return self.options.should_be_limited

    def limit_size(self) -> int:
        return self.options.limit_size

    def limited(self, data: list[str], width: int, is_keyed: bool = False) -> list[str]:
        """
        Condense rendered rows to the head, a separator row and the tail.

        With limit K and more than K rows, keeps K // 2 head rows and one row less
        at the tail when K is even, so the output always has exactly K rows.

        Args:
            data: Rendered rows.
            width: Index column width for the separator of indexed rows.
            is_keyed: Rows are 'key: value' lines; the separator shows the first and
                last omitted lines instead of indices.
        """
        limit = self.limit_size()
        length = len(data)
        if length <= limit:
            return data

        head = limit // 2
        tail = head - (limit - 1) % 2

        temp = list(data[:head]) + [""] + list(data[length - tail:])
        if is_keyed:
            temp[head] = f"{self.indent()}{data[head].strip()} .. {data[length - tail - 1].strip()}"
        else:
            temp[head] = f"{self.indent()}[{str(head).rjust(width)}] .. [{length - tail - 1}]"
        return temp

    # Methods listing --------------------------------------------------------------------------------------------------

    def methods_array(self, names: abc.Iterable[Any], source: Any = None) -> str:
        """
        Format member names of source as an aligned method table.

        Each row shows the index, the right-aligned method name, the left-aligned
        argument list and the owner, e.g. ``[0]  upper() str``.
        """
        if source is None:
            source = getattr(names, "source", None)

        tuples = [lookup_method_tuple(source, name) for name in sorted(names, key=str)]
        if not tuples:
            return "[]"

        width = len(str(len(tuples) - 1))
        name_width = max(len(item[0]) for item in tuples)
        args_width = max(len(item[1]) for item in tuples)

        data = []
        for index, (name, args, owner) in enumerate(tuples):
            prefix = self.indent()
            if self.options.index:
                prefix += f"[{str(index).rjust(width)}]"
            with self.indented():
                data.append(
                    f"{prefix} {self.colorize(name.rjust(name_width), 'method')}"
                    f"{self.colorize(args.ljust(args_width), 'args')} {self.colorize(owner, 'class')}"
                )

        if self.should_be_limited():
            data = self.limited(data, width)
        return "[\n" + "\n".join(data) + f"\n{self.outdent()}]"

    # Utility methods --------------------------------------------------------------------------------------------------

    def instance_label(self, obj: Any) -> str:
        return f"{class_name(obj)}:0x{id(obj):08x}"

    def convert_to_hash(self, value: Any) -> Any:
        """
        Return value.to_dict() when it yields a mapping-like object, None otherwise.

        The to_dict attribute must be callable without arguments and its result must
        provide keys() and item lookup. Never raises.
        """
        try:
            fn = getattr(value, "to_dict", None)
        except Exception:
            return None
        if not callable(fn):
            return None

        try:
            params = inspect.signature(fn).parameters.values()
        except (TypeError, ValueError):
            return None
        if any(p.default is p.empty and p.kind not in (p.VAR_POSITIONAL, p.VAR_KEYWORD) for p in params):
            return None

        try:
            hash_ = fn()
        except Exception as exc:
            logger.debug("%s.to_dict() failed: %s", class_name(value), exc)
            return None

        if not callable(getattr(hash_, "keys", None)) or not hasattr(hash_, "__getitem__"):
            return None
        return hash_

    # Private Methods --------------------------------------------------------------------------------------------------

    def _format_self(self, value: Any, type_hint: Any) -> str:
        """Catch-all: raw object, hash-like conversion or repr()."""
        if self.options.raw and instance_state(value):
            return self._format_object(value)

        # The source object is marked too, so to_dict() results that lead back to it stop
        with self.inspector.visiting(value):
            hash_ = self.convert_to_hash(value)
            if hash_ is not None:
                return self._format_dict(hash_)

        return self.colorize(safe_repr(value), type_hint)

    def _format_list(self, value: Any) -> str:
        return SequenceRenderer(self, value).call()

    def _format_dict(self, value: Any) -> str:
        return MappingRenderer(self, value).call()

    def _format_object(self, value: Any) -> str:
        return ObjectRenderer(self, value).call()

    def _format_set(self, value: Any) -> str:
        return SetRenderer(self, value).call()

    def _format_struct(self, value: Any) -> str:
        return StructRenderer(self, value).call()

    def _format_class(self, value: Any) -> str:
        return ClassRenderer(self, value).call()

    def _format_file(self, value: Any) -> str:
        return FileRenderer(self, value).call()

    def _format_dir(self, value: Any) -> str:
        return DirRenderer(self, value).call()

    def _format_decimal(self, value: Any) -> str:
        return self.colorize(format(value, "f"), Category.DECIMAL)

    def _format_fraction(self, value: Any) -> str:
        return self.colorize(str(value), Category.FRACTION)

    def _format_method(self, value: Any) -> str:
        name, args, owner = method_tuple(value)
        text = f"{self.colorize(name, 'method')}{self.colorize(args, 'args')}"
        if owner:
            text = f"{self.colorize(owner, 'class')}.{text}"
        return text

    _format_unboundmethod = _format_method
