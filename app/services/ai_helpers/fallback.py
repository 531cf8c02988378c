# /app/services/ai_helpers/fallback.py

"""
The fallback combinator that pairs an unreliable AI call with a pure,
deterministic alternative.
"""

import logging
from typing import Any, Awaitable, Callable, NamedTuple, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

SOURCE_AI = "ai"
SOURCE_FALLBACK = "fallback"


class Sourced(NamedTuple):
    value: Any
    source: str


async def with_fallback(
    primary: Callable[[], Awaitable[T]],
    fallback: Callable[[], T],
    recover_on: Tuple[Type[BaseException], ...] = (Exception,),
    context: str = "AI call",
) -> Sourced:
    """
    Awaits `primary()`; if it raises one of `recover_on`, logs the reason and
    returns `fallback()` instead. Exceptions outside `recover_on` propagate.
    """
    try:
        return Sourced(await primary(), SOURCE_AI)
    except recover_on as e:
        logger.warning("%s failed (%s: %s); using deterministic fallback.", context, type(e).__name__, e)
        return Sourced(fallback(), SOURCE_FALLBACK)
