"""Custom exceptions for luaglobals"""


class LuaGlobalsError(Exception):
    """Base class for errors raised by luaglobals"""


class InvalidArgumentError(LuaGlobalsError, ValueError):
    """Raised when a required argument is missing or of the wrong kind"""

    def __init__(self, argument: str, reason: str = "must not be None"):
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument '{argument}': {reason}")


class LuaPathError(LuaGlobalsError):
    """Raised when a dotted Lua path runs through a value that is not a table"""

    def __init__(self, path: str, segment: str):
        self.path = path
        self.segment = segment
        super().__init__(
            f"Cannot resolve Lua path '{path}': '{segment}' is not a table"
        )
