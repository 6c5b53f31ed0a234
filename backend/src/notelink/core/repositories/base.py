"""Shared plumbing for the SQLAlchemy repositories."""

import asyncio
import functools
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..deadline import remaining_time
from ..exceptions import NoteLinkError, StorageError

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_TIMEOUT = 10.0


def storage_operation(name: str):
    """Run a repository coroutine under the request deadline.

    Driver errors and deadline overruns become ``StorageError``; the
    original exception is logged here and never reaches the caller's
    response. Domain errors raised by the method pass through untouched.
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(self: "SQLRepository", *args, **kwargs):
            timeout = remaining_time(self.timeout)
            if timeout <= 0:
                logger.error(f"Deadline exceeded before storage operation {name}")
                raise StorageError(name, asyncio.TimeoutError())

            try:
                return await asyncio.wait_for(func(self, *args, **kwargs), timeout)
            except NoteLinkError:
                raise
            except asyncio.TimeoutError as e:
                logger.error(f"Storage operation {name} timed out after {timeout:.2f}s")
                await self._rollback()
                raise StorageError(name, e) from e
            except SQLAlchemyError as e:
                logger.error(f"Storage operation {name} failed: {e}")
                await self._rollback()
                raise StorageError(name, e) from e

        return wrapper

    return decorator


class SQLRepository:
    """Base for repositories backed by an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession, timeout: float = DEFAULT_STORAGE_TIMEOUT):
        self.session = session
        self.timeout = timeout

    async def _rollback(self) -> None:
        try:
            await self.session.rollback()
        except SQLAlchemyError as e:
            logger.warning(f"Rollback failed: {e}")
