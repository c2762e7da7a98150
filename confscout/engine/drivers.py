"""
Execution Drivers
=================

The search and load procedures are generators yielding :class:`Request`
objects. A driver runs such a procedure to completion: it fulfils each
request through a directory gateway and sends the value back into the
generator. If the gateway raises, the exception is thrown into the generator
at the point of the request, exactly as if the procedure had performed the
I/O itself.

Requests are fulfilled one at a time, in the order they are yielded.
"""

from typing import Any, Generator, Optional, TypeVar

from .gateway import AsyncGateway, SyncGateway
from .requests import Request

T = TypeVar('T')

Procedure = Generator[Request, Any, T]


def _resume(procedure: Procedure, value: Any, error: Optional[BaseException]) -> Request:
    if error is not None:
        return procedure.throw(error)
    return procedure.send(value)


def sync_execute(procedure: Procedure, gateway: SyncGateway) -> T:
    """
    Run a procedure with blocking I/O.

    Args:
        procedure: The generator to run
        gateway: Gateway performing the requests

    Returns:
        The value returned by the procedure
    """
    value, error = None, None
    while True:
        try:
            request = _resume(procedure, value, error)
        except StopIteration as stop:
            return stop.value
        try:
            value, error = getattr(gateway, request.operation)(*request.arguments), None
        except Exception as e:
            value, error = None, e


async def async_execute(procedure: Procedure, gateway: AsyncGateway) -> T:
    """
    Run a procedure with non-blocking I/O.

    Args:
        procedure: The generator to run
        gateway: Gateway performing the requests, as coroutines

    Returns:
        The value returned by the procedure
    """
    value, error = None, None
    while True:
        try:
            request = _resume(procedure, value, error)
        except StopIteration as stop:
            return stop.value
        try:
            value, error = await getattr(gateway, request.operation)(*request.arguments), None
        except Exception as e:
            value, error = None, e
