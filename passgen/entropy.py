"""
passgen.entropy
Bias-free bounded random indices on top of the OS CSPRNG (secrets module).
"""

import logging
import random
import secrets
import threading
from typing import Optional

from .errors import EntropyUnavailable, InvalidArgument

logger = logging.getLogger(__name__)

RAW_BITS = 64
_RAW_SPAN = 1 << RAW_BITS
# each attempt is rejected with probability < 1/2, so this never trips in practice
MAX_ATTEMPTS = 128


class EntropySource:
    """
    Produces uniformly distributed indices in ``[0, bound)``.

    Raw 64-bit values are drawn from the OS random source. Raw values that
    fall into the remainder range ``[2**64 - 2**64 % bound, 2**64)`` are
    discarded and redrawn, so the final modulo reduction is unbiased.
    Access to the underlying stream is serialised with a lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def _raw(self) -> int:
        try:
            return secrets.randbits(RAW_BITS)
        except OSError as e:
            raise EntropyUnavailable(f"OS random source unavailable: {e}") from e

    def next_index(self, bound: int) -> int:
        if isinstance(bound, bool) or not isinstance(bound, int) or bound <= 0:
            raise InvalidArgument(f"bound must be a positive integer, got {bound!r}")
        if bound > _RAW_SPAN:
            raise InvalidArgument(f"bound must not exceed 2**{RAW_BITS}")

        limit = _RAW_SPAN - (_RAW_SPAN % bound)
        with self._lock:
            for _ in range(MAX_ATTEMPTS):
                raw = self._raw()
                if raw < limit:
                    return raw % bound
        logger.error("rejection sampling exhausted %d attempts (bound=%d)", MAX_ATTEMPTS, bound)
        raise EntropyUnavailable("random source kept producing out-of-range values")

    def shuffle(self, items: list) -> None:
        """In-place Fisher-Yates shuffle driven by ``next_index``."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_index(i + 1)
            items[i], items[j] = items[j], items[i]


class SeededEntropySource(EntropySource):
    """
    Deterministic source for tests. NOT cryptographically secure; never use it
    to produce real passwords.
    """

    def __init__(self, seed: int = 0) -> None:
        super().__init__()
        self._rng = random.Random(seed)

    def _raw(self) -> int:
        return self._rng.getrandbits(RAW_BITS)


_default: Optional[EntropySource] = None
_default_lock = threading.Lock()


def default_source() -> EntropySource:
    """Return the process-wide OS-backed source, creating it on first use."""
    global _default
    with _default_lock:
        if _default is None:
            _default = EntropySource()
        return _default
