# inventory/domain/services/sku_svc.py
"""
SKU codes look like "STA-4821-007":
  <first 3 chars of category, upper-cased>-<last 4 digits of epoch ms>-<random 000..999>
Uniqueness is not guaranteed by construction, so every candidate is checked
against the store and regenerated on collision, up to `max_attempts` times.
"""
from __future__ import annotations
import logging
import random
import time
from typing import Awaitable, Callable, Optional

from inventory.domain.errors import ConflictError

logger = logging.getLogger(__name__)

PREFIX_LEN = 3
DEFAULT_MAX_ATTEMPTS = 10

SkuExists = Callable[[str], Awaitable[bool]]


def make_sku(category: str, *, now_ms: Optional[int] = None, rng: Optional[random.Random] = None) -> str:
    """Build one candidate code. Categories shorter than 3 chars are used as-is."""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    draw = (rng or random).randint(0, 999)
    prefix = category[:PREFIX_LEN].upper()
    stamp = str(now_ms)[-4:].zfill(4)
    return f"{prefix}-{stamp}-{draw:03d}"


async def generate_sku(
    category: str,
    sku_exists: SkuExists,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    clock: Callable[[], int] = lambda: time.time_ns() // 1_000_000,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Return a code not present in the store.
    Raises ConflictError once `max_attempts` candidates have all collided.
    """
    for attempt in range(1, max_attempts + 1):
        candidate = make_sku(category, now_ms=clock(), rng=rng)
        if not await sku_exists(candidate):
            logger.debug("sku generated sku=%s attempt=%s", candidate, attempt)
            return candidate
        logger.info("sku collision sku=%s attempt=%s/%s", candidate, attempt, max_attempts)

    logger.warning("sku attempts exhausted category=%r attempts=%s", category, max_attempts)
    raise ConflictError(
        "Error creating product. Please try again.",
        error="Could not generate a unique SKU",
    )
