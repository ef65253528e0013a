"""Lua runtime creation using lupa."""

from lupa import LuaRuntime  # type: ignore[import-untyped]

_DANGEROUS_GLOBALS = ("io", "os", "debug", "loadfile", "dofile", "require")


def create_sandboxed_lua(sandbox: bool = True) -> LuaRuntime:
    """Create a Lua runtime, with dangerous globals removed unless *sandbox* is False."""
    lua = LuaRuntime(unpack_returned_tuples=True)

    if sandbox:
        g = lua.globals()
        for name in _DANGEROUS_GLOBALS:
            g[name] = None

    return lua
