"""Bulk registration of tagged Python methods and enums into a Lua environment.

Methods opt in with the :func:`lua_global` decorator. The registrar scans a
class (static and class methods, registered without a receiver) or an
instance (instance methods, bound to that instance) and registers every
marked method under ``path + name``.
"""

import enum
import inspect
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple, Type, Union

from loguru import logger

from luaglobals.core.exceptions import InvalidArgumentError
from luaglobals.scripting.environment import PATH_SEPARATOR, LuaEnvironment
from luaglobals.scripting.marker import LuaGlobal, get_lua_globals


class MethodFilter(enum.Flag):
    """Selects which members of a class are scanned for markers."""

    INSTANCE = enum.auto()
    STATIC = enum.auto()
    PUBLIC = enum.auto()
    NON_PUBLIC = enum.auto()


PUBLIC_INSTANCE = MethodFilter.INSTANCE | MethodFilter.PUBLIC
PUBLIC_STATIC = MethodFilter.STATIC | MethodFilter.PUBLIC

_INSTANCE_KINDS = ("method",)
_STATIC_KINDS = ("static method", "class method")


@dataclass(frozen=True)
class TypeTarget:
    cls: type


@dataclass(frozen=True)
class InstanceTarget:
    cls: type
    instance: Any


Target = Union[TypeTarget, InstanceTarget]


@dataclass(frozen=True)
class TaggedMethod:
    """A single marker resolved to its registration key and callable."""

    key: str
    name: str
    attribute: str
    receiver: Optional[Any]
    function: Callable[..., Any]
    description: Optional[str] = None


def resolve_target(target: Any) -> Target:
    """Classes register unbound, anything else registers bound to itself."""
    if isinstance(target, type):
        return TypeTarget(target)
    return InstanceTarget(type(target), target)


def normalize_path(path: str) -> str:
    # A trailing separator is not detected, "ns." becomes "ns.."
    if path:
        return path + PATH_SEPARATOR
    return path


def _matches(attr: inspect.Attribute, selection_filter: MethodFilter) -> bool:
    if attr.kind in _INSTANCE_KINDS:
        if not selection_filter & MethodFilter.INSTANCE:
            return False
    elif attr.kind in _STATIC_KINDS:
        if not selection_filter & MethodFilter.STATIC:
            return False
    else:
        return False

    if attr.name.startswith("_"):
        return bool(selection_filter & MethodFilter.NON_PUBLIC)
    return bool(selection_filter & MethodFilter.PUBLIC)


def _bind(attr: inspect.Attribute, target: Target) -> tuple:
    """Return (receiver, function) for a class member."""
    if attr.kind == "class method":
        return target.cls, attr.object.__func__
    if attr.kind == "static method":
        return None, attr.object.__func__
    if isinstance(target, InstanceTarget):
        return target.instance, attr.object
    return None, attr.object


def _markers(attr: inspect.Attribute) -> Tuple[LuaGlobal, ...]:
    """Markers on the member, or on the nearest base it overrides."""
    markers = get_lua_globals(attr.object)
    if markers:
        return markers
    for base in attr.defining_class.__mro__[1:]:
        if attr.name in base.__dict__:
            markers = get_lua_globals(base.__dict__[attr.name])
            if markers:
                return markers
    return ()


def collect_tagged(
    target: Any, selection_filter: MethodFilter, path: str = ""
) -> List[TaggedMethod]:
    """List the registrations register_tagged would perform for *target*."""
    if target is None:
        raise InvalidArgumentError("target")
    if path is None:
        raise InvalidArgumentError("path")

    prefix = normalize_path(path)
    resolved = resolve_target(target)
    tagged: List[TaggedMethod] = []

    for attr in inspect.classify_class_attrs(resolved.cls):
        if not _matches(attr, selection_filter):
            continue
        markers = _markers(attr)
        if not markers:
            continue
        receiver, function = _bind(attr, resolved)
        for marker in markers:
            name = marker.name or attr.name
            tagged.append(
                TaggedMethod(
                    key=prefix + name,
                    name=name,
                    attribute=attr.name,
                    receiver=receiver,
                    function=function,
                    description=marker.description,
                )
            )
    return tagged


def register_tagged(
    env: Any, target: Any, selection_filter: MethodFilter, path: str = ""
) -> None:
    """Register every method of *target* matching *selection_filter* that carries a marker.

    Args:
        env: The LuaEnvironment (or raw LuaRuntime) to add the methods to
        target: A class for unbound methods, or an instance for bound ones
        selection_filter: The MethodFilter to use when scanning members
        path: Table path to register under; empty registers globals
    """
    if env is None:
        raise InvalidArgumentError("env")
    if target is None:
        raise InvalidArgumentError("target")
    if path is None:
        raise InvalidArgumentError("path")

    env = LuaEnvironment.wrap(env)
    for method in collect_tagged(target, selection_filter, path):
        env.register_function(method.key, method.receiver, method.function)
        logger.debug(f"Registered Lua function: {method.key} -> {method.attribute}")


def register_tagged_instance_methods(env: Any, instance: Any, path: str = "") -> None:
    """Register all public instance methods of *instance* tagged with lua_global."""
    register_tagged(env, instance, PUBLIC_INSTANCE, path)


def register_tagged_static_methods(env: Any, cls: Optional[type], path: str = "") -> None:
    """Register all public static and class methods of *cls* tagged with lua_global."""
    register_tagged(env, cls, PUBLIC_STATIC, path)


def register_enum(env: Any, enum_type: Type[enum.Enum]) -> None:
    """Register an enum's members as a Lua table named after the enum."""
    if env is None:
        raise InvalidArgumentError("env")
    if not (isinstance(enum_type, type) and issubclass(enum_type, enum.Enum)):
        raise InvalidArgumentError("enum_type", "must be an Enum subclass")

    env = LuaEnvironment.wrap(env)
    table_name = enum_type.__name__
    env.create_table(table_name)

    for member_name, member in enum_type.__members__.items():
        env.set_value_at_path(table_name + PATH_SEPARATOR + member_name, member.value)

    logger.debug(
        f"Registered Lua enum table: {table_name} ({len(enum_type.__members__)} members)"
    )
