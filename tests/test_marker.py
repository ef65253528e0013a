"""Tests for the lua_global marker."""

from dataclasses import FrozenInstanceError

import pytest

from hosts import Calculator
from luaglobals.scripting.marker import LuaGlobal, get_lua_globals, lua_global


class TestLuaGlobal:
    def test_defaults(self):
        marker = LuaGlobal()
        assert marker.name is None
        assert marker.description is None

    def test_immutable(self):
        marker = LuaGlobal(name="x")
        with pytest.raises(FrozenInstanceError):
            marker.name = "y"


class TestLuaGlobalDecorator:
    def test_returns_original_function(self):
        def f():
            return 1

        assert lua_global()(f) is f

    def test_marker_attached(self):
        @lua_global(name="alias", description="Does things")
        def f():
            pass

        assert get_lua_globals(f) == (LuaGlobal("alias", "Does things"),)

    def test_stacked_markers_in_source_order(self):
        assert [m.name for m in get_lua_globals(Calculator.twice)] == [
            "first",
            "second",
        ]

    def test_untagged_has_no_markers(self):
        assert get_lua_globals(Calculator.untagged) == ()

    def test_below_staticmethod(self):
        raw = Calculator.__dict__["version"]
        assert isinstance(raw, staticmethod)
        assert get_lua_globals(raw) == (LuaGlobal(),)

    def test_above_staticmethod(self):
        raw = Calculator.__dict__["hello"]
        assert isinstance(raw, staticmethod)
        assert get_lua_globals(raw) == (LuaGlobal(name="greet"),)

    def test_classmethod(self):
        assert get_lua_globals(Calculator.__dict__["kind"]) == (LuaGlobal(),)

    def test_bound_method_sees_markers(self, calculator):
        assert get_lua_globals(calculator.multiply)[0].name == "mul"

    def test_bare_form_attaches_default_marker(self):
        @lua_global
        def f():
            return 1

        assert f() == 1
        assert get_lua_globals(f) == (LuaGlobal(),)

    def test_bare_form_on_method(self):
        class Host:
            @lua_global
            def hi(self):
                return "hi"

        assert Host().hi() == "hi"
        assert get_lua_globals(Host.hi) == (LuaGlobal(),)

    def test_bare_form_above_staticmethod(self):
        class Host:
            @lua_global
            @staticmethod
            def hi():
                return "hi"

        assert Host.hi() == "hi"
        assert get_lua_globals(Host.__dict__["hi"]) == (LuaGlobal(),)

    def test_bare_and_called_forms_stack(self):
        @lua_global
        @lua_global(name="alias")
        def f():
            pass

        assert [m.name for m in get_lua_globals(f)] == [None, "alias"]
