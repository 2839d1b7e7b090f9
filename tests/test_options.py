#
# Awprint - Options Tests
#

# Third Party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from awprint.colors import DEFAULT_COLORS, ColorMode
from awprint.inspector import ai
from awprint.options import DEFAULT_LIMIT_SIZE, FormatOptions, configure, get_options, reset_options


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFormatOptions:
    def test_defaults(self):
        opts = FormatOptions()
        assert opts.indent == 4
        assert opts.index is True
        assert opts.multiline is True
        assert opts.plain is False
        assert opts.html is False
        assert opts.raw is False
        assert opts.sort_keys is False
        assert opts.limit is False
        assert opts.color == DEFAULT_COLORS
        assert opts.color is not DEFAULT_COLORS
        assert opts.color_mode is ColorMode.AUTO

    def test_color_mode_from_string(self):
        assert FormatOptions(color_mode="never").color_mode is ColorMode.NEVER

    @pytest.mark.parametrize(
        "kwargs, error",
        [
            pytest.param({"indent": "4"}, TypeError, id="indent_str"),
            pytest.param({"indent": True}, TypeError, id="indent_bool"),
            pytest.param({"plain": "yes"}, TypeError, id="plain_str"),
            pytest.param({"multiline": 1}, TypeError, id="multiline_int"),
            pytest.param({"limit": "3"}, TypeError, id="limit_str"),
            pytest.param({"limit": -1}, ValueError, id="limit_negative"),
            pytest.param({"color": ["red"]}, TypeError, id="color_not_dict"),
            pytest.param({"color": {"str": "mauve"}}, ValueError, id="color_unknown_name"),
            pytest.param({"color_mode": "sometimes"}, ValueError, id="color_mode_unknown"),
        ],
    )
    def test_invalid(self, kwargs, error):
        with pytest.raises(error):
            FormatOptions(**kwargs)

    def test_color_values(self):
        opts = FormatOptions(color={"str": None, "int": str.upper, "float": "purpleish"})
        assert opts.color["str"] is None

    @pytest.mark.parametrize(
        "limit, limited, size",
        [
            pytest.param(False, False, 0, id="false"),
            pytest.param(0, False, 0, id="zero"),
            pytest.param(True, True, DEFAULT_LIMIT_SIZE, id="true"),
            pytest.param(3, True, 3, id="int"),
        ],
    )
    def test_limit(self, limit, limited, size):
        opts = FormatOptions(limit=limit)
        assert opts.should_be_limited is limited
        assert opts.limit_size == size


class TestMerge:
    def test_replaces_fields(self):
        base = FormatOptions()
        merged = base.merge(indent=2, plain=True)
        assert (merged.indent, merged.plain) == (2, True)
        assert (base.indent, base.plain) == (4, False)

    def test_partial_color(self):
        merged = FormatOptions().merge(color={"str": "red"})
        assert merged.color["str"] == "red"
        assert merged.color["int"] == DEFAULT_COLORS["int"]

    def test_copies_color(self):
        base = FormatOptions()
        assert base.merge().color is not base.color

    def test_unknown_field(self):
        with pytest.raises(TypeError, match="colour"):
            FormatOptions().merge(colour={})

    def test_validates(self):
        with pytest.raises(ValueError):
            FormatOptions().merge(limit=-5)


class TestPresets:
    def test_compact(self):
        opts = FormatOptions.compact()
        assert opts.multiline is False
        assert opts.index is False

    def test_html(self):
        assert FormatOptions.html_output().html is True

    def test_plain(self):
        assert FormatOptions.plain_text().plain is True


class TestConfigure:
    def test_preset_with_overrides(self):
        opts = configure(preset="plain", indent=2)
        assert opts.plain is True
        assert opts.indent == 2

    def test_merges_into_current(self):
        configure(preset="plain")
        opts = configure(limit=3)
        assert opts.plain is True
        assert opts.limit == 3

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown preset"):
            configure(preset="fancy")

    def test_get_options_returns_copy(self):
        get_options().indent = 8
        assert get_options().indent == 4

    def test_reset(self):
        configure(indent=2)
        reset_options()
        assert get_options().indent == 4

    def test_used_by_ai(self):
        configure(preset="compact", plain=True)
        assert ai([1, 2]) == "[ 1, 2 ]"
        assert ai([1, 2], multiline=True) == "[\n    1,\n    2\n]"
