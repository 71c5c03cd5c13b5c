import asyncio
from collections.abc import Sequence
from typing import Awaitable, Callable, Dict

from loguru import logger

from lixtools.commons.errors import ToolArgumentError
from lixtools.pipeline.config import LINKS_REQUIRED_MESSAGE, FETCH_FALLBACK_ERROR, LOG_MESSAGE_PREVIEW_TRUNCATE

FetchOne = Callable[[str], Awaitable[dict]]


def ensure_target_list(targets) -> list:
    if targets is None or isinstance(targets, (str, bytes)) or not isinstance(targets, Sequence) or len(targets) == 0:
        logger.warning("[Batch] Rejected call without a non-empty list of targets")
        raise ToolArgumentError(LINKS_REQUIRED_MESSAGE)
    return list(targets)


async def fetch_all(targets, fetch_one: FetchOne) -> Dict[str, dict]:
    """Run ``fetch_one`` for every target concurrently and key the outcomes by target.

    Every target gets exactly one entry. Repeated targets share a key, so the
    fetch that settles last owns it.
    """
    targets = ensure_target_list(targets)
    results: Dict[str, dict] = {}

    async def run(target: str):
        # Keys are target strings; anything else is keyed by its str() form
        key = target if isinstance(target, str) else str(target)
        try:
            outcome = await fetch_one(target)
        except Exception as e:
            logger.error(f"[Batch] Unhandled failure for {key}: {e}")
            outcome = {"error": str(e) or FETCH_FALLBACK_ERROR}
        results[key] = outcome

    logger.info(f"[Batch] Fetching {len(targets)} target(s) concurrently")
    await asyncio.gather(*[asyncio.ensure_future(run(target)) for target in targets])

    failed = sum(1 for outcome in results.values() if "error" in outcome)
    logger.info(
        f"[Batch] Settled {len(results)} key(s), {failed} with errors: "
        f"{', '.join(results)[:LOG_MESSAGE_PREVIEW_TRUNCATE]}"
    )
    return results
