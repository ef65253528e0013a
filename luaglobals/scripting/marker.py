"""Declarative marker for methods that should be exposed to Lua."""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

MARKER_ATTRIBUTE = "__lua_globals__"


@dataclass(frozen=True)
class LuaGlobal:
    """Marks a method for global usage in Lua scripts.

    Attributes:
        name: Alternative name to call the function by in Lua; leave empty
            to use the Python name
        description: Human readable description of the function
    """

    name: Optional[str] = None
    description: Optional[str] = None


def _underlying_function(obj: Any) -> Any:
    if isinstance(obj, (staticmethod, classmethod)):
        return obj.__func__
    return obj


def lua_global(name: Any = None, description: Optional[str] = None) -> Any:
    """Decorator attaching a LuaGlobal marker to a method.

    Usable bare (``@lua_global``) or called (``@lua_global(name="alias")``).
    May be stacked to expose one method under several names, and may be
    placed above or below @staticmethod / @classmethod.
    """
    if callable(name) or isinstance(name, (staticmethod, classmethod)):
        return lua_global()(name)

    marker = LuaGlobal(name=name, description=description)

    def decorator(obj: Any) -> Any:
        func = _underlying_function(obj)
        existing: Tuple[LuaGlobal, ...] = func.__dict__.get(MARKER_ATTRIBUTE, ())
        setattr(func, MARKER_ATTRIBUTE, (marker,) + existing)
        return obj

    return decorator


def get_lua_globals(obj: Any) -> Tuple[LuaGlobal, ...]:
    """Return the markers attached to a function or method descriptor."""
    func = _underlying_function(obj)
    return getattr(func, MARKER_ATTRIBUTE, ())
