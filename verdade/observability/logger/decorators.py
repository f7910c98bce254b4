"""
logging decorators.
"""

import asyncio
import functools
import time
from typing import Any, Callable, TypeVar

from verdade.observability.logger.logger import get_logger
from verdade.observability.logger.stage import Stage


F = TypeVar('F', bound=Callable[..., Any])


def time_profile(stage: Stage = Stage.SYSTEM) -> Callable[[F], F]:
    """
    decorator that logs how long a sync or async function took.

    the elapsed time is logged at INFO with a "[TIME PROFILE]" tag, also when
    the function raises.

    args:
        stage: stage context for the logger (default: SYSTEM)

    example:
        >>> @time_profile(Stage.AGGREGATION)
        ... async def aggregate_news(category):
        ...     ...
        # logs: [TIME PROFILE] aggregate_news completed in 1.87s
    """
    def decorator(func: F) -> F:
        logger = get_logger(func.__module__, stage)

        def _report(start: float, failed: bool) -> None:
            elapsed = time.perf_counter() - start
            outcome = "failed" if failed else "completed"
            logger.info(f"[TIME PROFILE] {func.__name__} {outcome} in {elapsed:.2f}s")

        if asyncio.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                start = time.perf_counter()
                failed = True
                try:
                    result = await func(*args, **kwargs)
                    failed = False
                    return result
                finally:
                    _report(start, failed)
            return async_wrapper  # type: ignore

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            start = time.perf_counter()
            failed = True
            try:
                result = func(*args, **kwargs)
                failed = False
                return result
            finally:
                _report(start, failed)
        return sync_wrapper  # type: ignore

    return decorator
