"""Registration interface over a lupa Lua runtime."""

import types
from typing import Any, Callable, Optional

from loguru import logger
from lupa import LuaRuntime, lua_type  # type: ignore[import-untyped]

from luaglobals.core.config import get_settings
from luaglobals.core.exceptions import InvalidArgumentError, LuaPathError
from luaglobals.models.config import RuntimeSettings
from luaglobals.scripting.sandbox import create_sandboxed_lua

PATH_SEPARATOR = "."


def _is_lua_runtime(obj: Any) -> bool:
    # Runtimes from other lupa builds (lupa.luajit21, lupa.lua53, ...) are distinct classes
    runtime_type = type(obj)
    return isinstance(obj, LuaRuntime) or (
        runtime_type.__name__ == "LuaRuntime"
        and runtime_type.__module__.startswith("lupa")
    )


class LuaEnvironment:
    """Wraps a LuaRuntime with dotted-path access to its global namespace."""

    def __init__(self, lua: Optional[LuaRuntime] = None) -> None:
        self._lua = lua if lua is not None else create_sandboxed_lua()

    @classmethod
    def wrap(cls, env: Any) -> "LuaEnvironment":
        """Return *env* unchanged if already wrapped, else wrap a raw LuaRuntime."""
        if isinstance(env, cls):
            return env
        if not _is_lua_runtime(env):
            raise InvalidArgumentError(
                "env", "must be a LuaEnvironment or a lupa LuaRuntime"
            )
        return cls(env)

    @property
    def lua(self) -> LuaRuntime:
        return self._lua

    def globals(self) -> Any:
        return self._lua.globals()

    # =========================================================================
    # Registration interface
    # =========================================================================

    def register_function(
        self, key: str, receiver: Optional[Any], function: Callable[..., Any]
    ) -> None:
        """Bind *function* under *key*, bound to *receiver* when one is given."""
        if receiver is not None:
            function = types.MethodType(function, receiver)
        self.set_value_at_path(key, function)

    def create_table(self, name: str) -> None:
        """Create a new, empty Lua table reachable at *name*."""
        self.set_value_at_path(name, self._lua.table())
        logger.debug(f"Created Lua table: {name}")

    def set_value_at_path(self, path: str, value: Any) -> None:
        """Set *value* at a dotted path, creating intermediate tables as needed."""
        *parents, leaf = path.split(PATH_SEPARATOR)
        table = self.globals()
        for segment in parents:
            child = table[segment]
            if child is None:
                child = self._lua.table()
                table[segment] = child
            elif lua_type(child) != "table":
                raise LuaPathError(path, segment)
            table = child
        table[leaf] = value

    def get_value_at_path(self, path: str) -> Any:
        """Read the value at a dotted path, or None if any segment is missing."""
        value = self.globals()
        for segment in path.split(PATH_SEPARATOR):
            if lua_type(value) != "table":
                return None
            value = value[segment]
            if value is None:
                return None
        return value

    def __getitem__(self, path: str) -> Any:
        return self.get_value_at_path(path)

    def __setitem__(self, path: str, value: Any) -> None:
        self.set_value_at_path(path, value)

    # =========================================================================
    # Pass-throughs
    # =========================================================================

    def execute(self, source: str) -> Any:
        return self._lua.execute(source)

    def eval(self, expression: str) -> Any:
        return self._lua.eval(expression)


def create_environment(settings: Optional[RuntimeSettings] = None) -> LuaEnvironment:
    """Create a LuaEnvironment on a fresh runtime configured from *settings*."""
    if settings is None:
        settings = get_settings()
    return LuaEnvironment(create_sandboxed_lua(sandbox=settings.sandbox))
