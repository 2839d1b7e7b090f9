#
# Awprint - Method Introspection Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import functools

# Third Party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from awprint.methods import (
    MethodNames,
    ParamKind,
    _arity_params,
    default_tuple,
    format_params,
    is_unbound,
    lookup_method_tuple,
    method_tuple,
    methods_of,
    owner_label,
    reflect_params,
)


# Helpers --------------------------------------------------------------------------------------------------------------

class Greeter:
    label = "hello"

    def greet(self, name, greeting="hi", *args, **kwargs):
        return f"{greeting} {name}"

    @classmethod
    def create(cls, value):
        return cls()

    @staticmethod
    def shout(text):
        return text.upper()

    def _secret(self):
        return None


class LoudGreeter(Greeter):
    pass


class Exploding:
    @property
    def boom(self):
        raise RuntimeError("boom")


class Opaque:
    """Callable whose owner can only be read from its repr()."""

    def __init__(self, text):
        self.text = text

    def __call__(self):
        return None

    def __repr__(self):
        return self.text


def module_function(a, b=1, *rest, key, **options):
    return a


def make_local():
    def local(x):
        return x

    return local


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFormatParams:
    @pytest.mark.parametrize(
        "params, expected",
        [
            pytest.param([], "()", id="empty"),
            pytest.param([(ParamKind.REQ, "x"), (ParamKind.OPT, "y")], "(x, *y)", id="req_opt"),
            pytest.param([(ParamKind.REST, "args")], "(*args)", id="rest"),
            pytest.param([(ParamKind.KEYREST, "kwargs")], "(**kwargs)", id="keyrest"),
            pytest.param([(ParamKind.BLOCK, None)], "(&block)", id="block_unnamed"),
            pytest.param([(ParamKind.BLOCK, "cb")], "(&cb)", id="block_named"),
            pytest.param([(ParamKind.REQ, None), (ParamKind.REQ, None)], "(arg1, arg2)", id="unnamed"),
            pytest.param([(ParamKind.REQ, "a"), (ParamKind.REST, None)], "(a, *arg2)", id="unnamed_rest"),
            pytest.param([("unknown", None)], "(?)", id="unknown_kind"),
            pytest.param([("req", "x")], "(x)", id="plain_string_kind"),
        ],
    )
    def test_render(self, params, expected):
        assert format_params(params) == expected


class TestReflectParams:
    def test_all_kinds(self):
        assert reflect_params(module_function) == [
            (ParamKind.REQ, "a"),
            (ParamKind.OPT, "b"),
            (ParamKind.REST, "rest"),
            (ParamKind.REQ, "key"),
            (ParamKind.KEYREST, "options"),
        ]

    def test_unbound_drops_self(self):
        assert format_params(reflect_params(Greeter.greet)) == "(name, *greeting, *args, **kwargs)"

    def test_bound(self):
        assert format_params(reflect_params(Greeter().greet)) == "(name, *greeting, *args, **kwargs)"

    def test_builtin_descriptor(self):
        assert format_params(reflect_params(str.center)) == "(width, *fillchar)"

    def test_arity_fallback(self):
        def fn(a, b, *c):
            return a

        assert format_params(_arity_params(fn)) == "(arg1, arg2, *arg3)"

    def test_arity_without_code(self):
        assert format_params(_arity_params(object())) == "(?)"


class TestIsUnbound:
    @pytest.mark.parametrize(
        "fn, expected",
        [
            pytest.param(str.upper, True, id="method_descriptor"),
            pytest.param("abc".upper, False, id="bound_builtin"),
            pytest.param(Greeter.greet, True, id="class_function"),
            pytest.param(Greeter().greet, False, id="bound_method"),
            pytest.param(Greeter.create, False, id="classmethod"),
            pytest.param(Greeter.shout, False, id="staticmethod"),
            pytest.param(Greeter().shout, False, id="staticmethod_on_instance"),
            pytest.param(module_function, False, id="module_function"),
            pytest.param(make_local(), False, id="local_function"),
            pytest.param(len, False, id="builtin_function"),
        ],
    )
    def test_detect(self, fn, expected):
        assert is_unbound(fn) is expected


class TestOwnerLabel:
    @pytest.mark.parametrize(
        "fn, expected",
        [
            pytest.param([].append, "list", id="bound_builtin"),
            pytest.param("abc".upper, "str", id="bound_str"),
            pytest.param(str.upper, "str (unbound)", id="descriptor"),
            pytest.param(Greeter.greet, "Greeter (unbound)", id="class_function"),
            pytest.param(Greeter().greet, "Greeter", id="bound"),
            pytest.param(LoudGreeter().greet, "LoudGreeter (Greeter)", id="inherited"),
            pytest.param(Greeter.create, "Greeter", id="classmethod"),
            pytest.param(Greeter.shout, "Greeter", id="staticmethod"),
            pytest.param(LoudGreeter.shout, "Greeter", id="inherited_staticmethod"),
            pytest.param(len, "builtins", id="builtin_function"),
        ],
    )
    def test_reflected(self, fn, expected):
        assert owner_label(fn) == expected

    def test_module_function(self):
        assert owner_label(module_function) == module_function.__module__

    @pytest.mark.parametrize(
        "text, expected",
        [
            pytest.param("<bound method Widget.draw of <Widget>>", "Widget", id="bound"),
            pytest.param("<unbound method Widget.draw>", "Widget (unbound)", id="unbound"),
            pytest.param("<bound method Point(x: int, y: int).norm of p>", "Point", id="fields_suffix"),
            pytest.param("<Opaque thing>", "", id="no_match"),
        ],
    )
    def test_repr_fallback(self, text, expected):
        assert owner_label(Opaque(text)) == expected


class TestMethodTuple:
    def test_descriptor(self):
        assert method_tuple(str.center) == ("center", "(width, *fillchar)", "str (unbound)")

    def test_bound(self):
        assert method_tuple(Greeter().greet) == ("greet", "(name, *greeting, *args, **kwargs)", "Greeter")

    def test_nameless_callable(self):
        name, _, owner = method_tuple(functools.partial(module_function, 1))
        assert name == "partial"
        assert owner == ""

    def test_default_tuple(self):
        assert default_tuple("missing") == ("missing", "(?)", "?")
        assert default_tuple(42) == ("42", "(?)", "?")


class TestLookupMethodTuple:
    def test_instance_member(self):
        assert lookup_method_tuple(Greeter(), "create") == ("create", "(value)", "Greeter")

    def test_staticmethod(self):
        assert lookup_method_tuple(Greeter, "shout") == ("shout", "(text)", "Greeter")

    @pytest.mark.parametrize(
        "source, name",
        [
            pytest.param(Greeter(), "missing", id="missing"),
            pytest.param(Greeter(), "label", id="not_callable"),
            pytest.param(Greeter(), 42, id="not_a_string"),
            pytest.param(Exploding(), "boom", id="access_raises"),
            pytest.param(None, "greet", id="no_source"),
        ],
    )
    def test_default(self, source, name):
        assert lookup_method_tuple(source, name) == default_tuple(name)


class TestMethodsOf:
    def test_public(self):
        names = methods_of(Greeter())
        assert isinstance(names, MethodNames)
        assert {"greet", "create", "shout"} <= set(names)
        assert "label" not in names
        assert "_secret" not in names

    def test_private(self):
        assert "_secret" in methods_of(Greeter(), private=True)

    def test_source(self):
        obj = Greeter()
        assert methods_of(obj).source is obj

    def test_raising_member_kept(self):
        assert "boom" in methods_of(Exploding())
