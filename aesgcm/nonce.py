"""
Nonce generation for AES-256-GCM.

Layout: timestamp(5) || random(7)

The leading 5 bytes are the top 40 bits of a big-endian nanosecond
timestamp, so the nonce's hex prefix matches the hex of time.time_ns()
(a tick of about 16.7 ms). The trailing 7 bytes come from the operating
system's CSPRNG. Uniqueness rests on those 56 random bits alone: two
generators reading the same tick, in one process or many, collide only
when their random parts do.
"""

import os
import time
import logging
from typing import Callable

from .cipher import NONCE_SIZE
from .errors import RandomSourceUnavailable

logger = logging.getLogger(__name__)

TIME_PREFIX_SIZE = 5
RANDOM_SUFFIX_SIZE = NONCE_SIZE - TIME_PREFIX_SIZE

_TIME_SHIFT = 64 - 8 * TIME_PREFIX_SIZE
_TIME_MASK = (1 << (8 * TIME_PREFIX_SIZE)) - 1


class NonceGenerator:
    """
    Time-seeded nonce source.

    random_source(n) must return n cryptographically secure bytes.
    clock() must return the current time in nanoseconds.
    Both default to the system sources; tests inject deterministic ones.
    The generator holds no mutable state, so one instance may be shared
    between threads.
    """

    NONCE_SIZE = NONCE_SIZE
    TIME_PREFIX_SIZE = TIME_PREFIX_SIZE

    def __init__(self,
                 random_source: Callable[[int], bytes] = os.urandom,
                 clock: Callable[[], int] = time.time_ns):
        self._random = random_source
        self._clock = clock

    def _timestamp(self) -> bytes:
        stamp = (self._clock() >> _TIME_SHIFT) & _TIME_MASK
        return stamp.to_bytes(TIME_PREFIX_SIZE, "big")

    def _random_suffix(self) -> bytes:
        try:
            suffix = self._random(RANDOM_SUFFIX_SIZE)
        except (OSError, NotImplementedError) as exc:
            logger.warning(f"Secure random source failed: {exc}")
            raise RandomSourceUnavailable(
                "Secure random source unavailable; refusing to build a nonce."
            ) from exc
        if len(suffix) != RANDOM_SUFFIX_SIZE:
            logger.warning(
                f"Secure random source returned {len(suffix)}B, "
                f"wanted {RANDOM_SUFFIX_SIZE}B"
            )
            raise RandomSourceUnavailable(
                f"Random source returned {len(suffix)} bytes, "
                f"expected {RANDOM_SUFFIX_SIZE}."
            )
        return bytes(suffix)

    def generate(self) -> bytes:
        """Return a fresh NONCE_SIZE-byte nonce."""
        suffix = self._random_suffix()
        return self._timestamp() + suffix


_default = NonceGenerator()


def generate_nonce() -> bytes:
    """Fresh 12-byte nonce from the process-wide generator."""
    return _default.generate()
