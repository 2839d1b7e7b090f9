"""
Awprint configuration: render options, presets, and module-level defaults.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, field, fields, replace as dataclasses_replace
from typing import Any, Callable, Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .colors import DEFAULT_COLORS, ColorMode, PALETTE
from .utils import class_name

DEFAULT_LIMIT_SIZE = 7

Preset = Literal["default", "compact", "html", "plain"]


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass
class FormatOptions:
    """
    Render options resolved once per Inspector.

    Attributes:
        indent: Indentation unit in spaces. The sign controls alignment of mapping keys:
            positive right-aligns keys, zero and negative left-align them.
        index: Show ``[i]`` index prefixes for sequence items.
        multiline: Render collections one item per line.
        plain: Disable colors entirely.
        html: Produce HTML: escape text and color with ``<kbd>`` tags.
        raw: Render arbitrary objects by their instance attributes.
        sort_keys: Sort mapping keys before rendering.
        limit: True for the default limit of 7 items, a positive int for a custom
            limit, False or 0 to show every item.
        color: Category to color mapping; values are palette names or callables.
        color_mode: Terminal color intent, see ``awprint.colors.ColorMode``.

    Examples:
        >>> opts = FormatOptions(indent=2, limit=True)
        >>> opts.limit_size
        7
        >>> FormatOptions().merge(plain=True).plain
        True
    """

    indent: int = 4
    index: bool = True
    multiline: bool = True
    plain: bool = False
    html: bool = False
    raw: bool = False
    sort_keys: bool = False
    limit: bool | int = False
    color: dict[str, str | Callable] = field(default_factory=lambda: dict(DEFAULT_COLORS))
    color_mode: ColorMode = ColorMode.AUTO

    def __post_init__(self) -> None:
        """Validate field types and values."""
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise TypeError(f"FormatOptions.indent must be an int, got {class_name(self.indent)}")

        for name in ("index", "multiline", "plain", "html", "raw", "sort_keys"):
            if not isinstance(getattr(self, name), bool):
                raise TypeError(f"FormatOptions.{name} must be a bool, got {class_name(getattr(self, name))}")

        if not isinstance(self.limit, (bool, int)):
            raise TypeError(f"FormatOptions.limit must be a bool or int, got {class_name(self.limit)}")
        if not isinstance(self.limit, bool) and self.limit < 0:
            raise ValueError(f"FormatOptions.limit must be >=0, but got {self.limit}")

        if not isinstance(self.color, dict):
            raise TypeError(f"FormatOptions.color must be a dict, got {class_name(self.color)}")
        for category, color in self.color.items():
            if color is not None and not callable(color) and color not in PALETTE:
                raise ValueError(f"Unknown color {color!r} for category {category!r}")

        self.color_mode = ColorMode(self.color_mode)

    @property
    def should_be_limited(self) -> bool:
        """Whether collections are condensed to head and tail."""
        if self.limit is True:
            return True
        return not isinstance(self.limit, bool) and self.limit > 0

    @property
    def limit_size(self) -> int:
        """Number of rows shown when limiting, DEFAULT_LIMIT_SIZE for ``limit=True``."""
        if self.limit is True:
            return DEFAULT_LIMIT_SIZE
        return int(self.limit)

    def merge(self, **kwargs: Any) -> "FormatOptions":
        """
        Return a copy with the given fields replaced.

        The ``color`` mapping is merged key by key so a partial mapping only
        overrides the listed categories.
        """
        names = {f.name for f in fields(self)}
        unknown = set(kwargs) - names
        if unknown:
            raise TypeError(f"Unknown FormatOptions field(s): {', '.join(sorted(unknown))}")

        if "color" in kwargs and kwargs["color"] is not None:
            kwargs["color"] = {**self.color, **kwargs["color"]}
        else:
            kwargs["color"] = dict(self.color)
        return dataclasses_replace(self, **kwargs)

    @classmethod
    def compact(cls) -> "FormatOptions":
        """Single-line output without index prefixes."""
        return cls(multiline=False, index=False)

    @classmethod
    def html_output(cls) -> "FormatOptions":
        """HTML output with inline color tags."""
        return cls(html=True)

    @classmethod
    def plain_text(cls) -> "FormatOptions":
        """Uncolored multiline output."""
        return cls(plain=True)


# Module-level defaults ------------------------------------------------------------------------------------------------

_PRESETS: dict[str, Callable[[], FormatOptions]] = {
    "default": FormatOptions,
    "compact": FormatOptions.compact,
    "html": FormatOptions.html_output,
    "plain": FormatOptions.plain_text,
}

_options = FormatOptions()


def configure(preset: Preset | None = None, **kwargs: Any) -> FormatOptions:
    """
    Update module-level default options.

    With a preset, start from that preset; otherwise merge into the current defaults.

    Examples:
        >>> configure(preset="plain", indent=2).indent
        2
        >>> configure(limit=3).plain   # merges into the current state
        True
    """
    global _options
    if preset is not None:
        if preset not in _PRESETS:
            valid = ", ".join(f"'{p}'" for p in _PRESETS)
            raise ValueError(f"Unknown preset {preset!r}. Expected: {valid}")
        base = _PRESETS[preset]()
    else:
        base = _options
    _options = base.merge(**kwargs)
    return get_options()


def get_options() -> FormatOptions:
    """Return a copy of the module-level default options."""
    return _options.merge()


def reset_options() -> None:
    """Restore the module-level defaults to FormatOptions()."""
    global _options
    _options = FormatOptions()
