"""Lua registration helpers built on lupa."""

from luaglobals.scripting.environment import LuaEnvironment, create_environment
from luaglobals.scripting.marker import LuaGlobal, get_lua_globals, lua_global
from luaglobals.scripting.registration import (
    MethodFilter,
    TaggedMethod,
    collect_tagged,
    register_enum,
    register_tagged,
    register_tagged_instance_methods,
    register_tagged_static_methods,
)
from luaglobals.scripting.sandbox import create_sandboxed_lua

__all__ = [
    "LuaEnvironment",
    "create_environment",
    "LuaGlobal",
    "get_lua_globals",
    "lua_global",
    "MethodFilter",
    "TaggedMethod",
    "collect_tagged",
    "register_enum",
    "register_tagged",
    "register_tagged_instance_methods",
    "register_tagged_static_methods",
    "create_sandboxed_lua",
]
