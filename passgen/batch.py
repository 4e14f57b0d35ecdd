"""
passgen.batch
Generate many passwords under one policy, optionally all distinct.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from .entropy import EntropySource, default_source
from .errors import InsufficientKeyspace, InvalidArgument
from .generator import GenerationResult, synthesize
from .policy import ValidatedPolicy
from .strength import keyspace_at_least

logger = logging.getLogger(__name__)


def generate_batch(
    validated: ValidatedPolicy,
    count: int,
    unique: bool = False,
    source: Optional[EntropySource] = None,
    workers: int = 1,
) -> List[GenerationResult]:
    """
    Return exactly ``count`` independent results.

    With ``unique`` the keyspace is checked up front, so an impossible request
    fails with InsufficientKeyspace instead of looping forever. Duplicates are
    rejected through a set owned by the calling thread and redrawn.
    """
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise InvalidArgument(f"count must be a non-negative integer, got {count!r}")
    source = source or default_source()

    if unique:
        if not keyspace_at_least(validated, count):
            raise InsufficientKeyspace(
                f"policy allows fewer than {count} distinct passwords"
            )
        seen = set()
        results: List[GenerationResult] = []
        collisions = 0
        while len(results) < count:
            result = synthesize(validated, source)
            if result.password in seen:
                collisions += 1
                continue
            seen.add(result.password)
            results.append(result)
        if collisions:
            logger.info("batch of %d: redrew %d duplicates", count, collisions)
        return results

    if workers > 1 and count > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(lambda _: synthesize(validated, source), range(count)))
    return [synthesize(validated, source) for _ in range(count)]
