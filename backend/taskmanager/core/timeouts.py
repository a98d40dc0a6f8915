"""
Request time budget for blocking storage work.

Routes are ``async def`` while the SQLAlchemy session is synchronous, so each
storage call is moved to a worker thread and awaited under a deadline.
"""
import functools
import logging
import anyio
import anyio.to_thread
from taskmanager.core.config import settings
from taskmanager.core.errors import RequestTimeout

logger = logging.getLogger(__name__)


async def run_with_timeout(func, *args, **kwargs):
    """
    Run ``func`` in a worker thread, raising RequestTimeout once
    ``REQUEST_TIMEOUT_SECONDS`` has passed.

    On timeout the thread is abandoned, not interrupted; its result is dropped.
    """
    timeout = settings.REQUEST_TIMEOUT_SECONDS
    try:
        with anyio.fail_after(timeout):
            return await anyio.to_thread.run_sync(
                functools.partial(func, *args, **kwargs),
                abandon_on_cancel=True,
            )
    except TimeoutError:
        logger.warning(f"{getattr(func, '__name__', func)} exceeded {timeout}s")
        raise RequestTimeout()
