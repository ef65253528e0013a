"""Expose tagged Python methods and enums to an embedded Lua runtime."""

from luaglobals.core.exceptions import (
    InvalidArgumentError,
    LuaGlobalsError,
    LuaPathError,
)
from luaglobals.scripting import (
    LuaEnvironment,
    LuaGlobal,
    MethodFilter,
    TaggedMethod,
    collect_tagged,
    create_environment,
    lua_global,
    register_enum,
    register_tagged,
    register_tagged_instance_methods,
    register_tagged_static_methods,
)

__all__ = [
    "InvalidArgumentError",
    "LuaGlobalsError",
    "LuaPathError",
    "LuaEnvironment",
    "LuaGlobal",
    "MethodFilter",
    "TaggedMethod",
    "collect_tagged",
    "create_environment",
    "lua_global",
    "register_enum",
    "register_tagged",
    "register_tagged_instance_methods",
    "register_tagged_static_methods",
]
