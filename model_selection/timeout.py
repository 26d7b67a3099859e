"""Deadline helper for pending operations."""

import asyncio
from typing import Awaitable, TypeVar

T = TypeVar("T")


class ProbeTimeoutError(TimeoutError):
    """Raised when an operation does not settle before its deadline."""

    def __init__(self) -> None:
        super().__init__("timeout")


async def with_timeout(operation: Awaitable[T], ms: float) -> T:
    """
    Race an operation against a timer.

    The operation is not cancelled when the timer wins; it keeps running and
    only its outcome is ignored.

    Args:
        operation: Coroutine, task or future to wait for
        ms: Deadline in milliseconds

    Returns:
        The operation's result

    Raises:
        ProbeTimeoutError: If the deadline passes first
    """
    task = asyncio.ensure_future(operation)
    done, _ = await asyncio.wait({task}, timeout=max(ms, 0) / 1000)
    if task in done:
        return task.result()

    # Keep the late outcome from surfacing as "exception was never retrieved"
    task.add_done_callback(_consume_result)
    raise ProbeTimeoutError()


def _consume_result(task: "asyncio.Future") -> None:
    if not task.cancelled():
        task.exception()
