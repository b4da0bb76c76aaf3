import pytest
from loguru import logger

from lumen_tools.loguru_tools import safe_catch_async
from lumen_tools.stellar.exceptions import ConfigurationError


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(messages.append, level="ERROR", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.mark.asyncio
async def test_safe_catch_async_logs_once_and_returns_none(log_messages):
    @safe_catch_async
    async def broken_command():
        raise ConfigurationError("no public keys configured")

    assert await broken_command() is None
    assert len(log_messages) == 1
    assert "ConfigurationError" in log_messages[0]


@pytest.mark.asyncio
async def test_safe_catch_async_passes_result_through():
    @safe_catch_async
    async def command():
        return ["line"]

    assert await command() == ["line"]
