"""Shared worker pool for blocking hashing work.

Argon2 is CPU and memory bound and the random source may block on the
kernel, so both run in a thread pool instead of on the event loop. The
argon2 C call releases the GIL, letting several hashes progress at once.
"""

import asyncio
import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

import structlog

from argon2phc.core.config import get_settings

logger = structlog.get_logger(__name__)

T = TypeVar("T")

_executor: ThreadPoolExecutor | None = None
_executor_lock = threading.Lock()


def get_executor() -> ThreadPoolExecutor:
    """Return the shared executor, creating it on first use."""
    global _executor
    with _executor_lock:
        if _executor is None:
            max_workers = get_settings().max_workers
            _executor = ThreadPoolExecutor(
                max_workers=max_workers,
                thread_name_prefix="argon2phc",
            )
            logger.debug("worker_pool_started", max_workers=max_workers)
        return _executor


async def run_blocking(func: Callable[..., T], *args) -> T:
    """Run a blocking callable on the worker pool and await its result."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(get_executor(), func, *args)


def shutdown_workers(wait: bool = True) -> None:
    """Shut down the shared executor.

    A later call to run_blocking() starts a fresh pool.
    """
    global _executor
    with _executor_lock:
        if _executor is not None:
            _executor.shutdown(wait=wait)
            _executor = None
            logger.debug("worker_pool_stopped")
