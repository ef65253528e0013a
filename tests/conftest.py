"""Shared test fixtures and configuration"""
import sys

import pytest
from loguru import logger

from hosts import Calculator
from luaglobals.scripting.environment import LuaEnvironment
from luaglobals.scripting.sandbox import create_sandboxed_lua


@pytest.fixture
def env() -> LuaEnvironment:
    """Fresh sandboxed Lua environment"""
    return LuaEnvironment(create_sandboxed_lua())


@pytest.fixture
def calculator() -> Calculator:
    return Calculator(base=10)


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test"""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Clear the settings cache before and after tests"""
    from luaglobals.core.config import clear_settings_cache as clear

    clear()
    yield
    clear()


@pytest.fixture
def restore_logging():
    """Put loguru back to its default stderr sink after a test reconfigures it"""
    yield
    logger.remove()
    logger.add(sys.stderr)
