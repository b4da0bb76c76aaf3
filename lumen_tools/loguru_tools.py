import asyncio
from functools import wraps
from typing import Callable, Optional, TypeVar

import sentry_sdk
from loguru import logger

T = TypeVar('T')


def setup_logging(log_file: Optional[str] = None, level: str = "INFO") -> None:
    """Add a rotating file sink next to loguru's default stderr sink."""
    if log_file:
        logger.add(log_file, rotation="1 MB", level=level)


def init_sentry(dsn: Optional[str]) -> None:
    if not dsn:
        return
    sentry_sdk.init(
        dsn=dsn,
        traces_sample_rate=1.0,
    )


def safe_catch_async(func: Callable[..., T]) -> Callable[..., T]:
    @wraps(func)
    @logger.catch()
    async def wrapper(*args, **kwargs) -> T:
        return await func(*args, **kwargs)

    return wrapper


async def sleep_ms(milliseconds: int) -> None:
    """Default pause between batch items."""
    await asyncio.sleep(milliseconds / 1000)
