"""
------------------------------------------------------------------------------
Project:        ADUserManager
File:           adcore/random_source.py
Version:        1.0.0
Producer:       ADUserManager Team
Description:    Randomness providers for credential generation. Prefers the
                operating system CSPRNG and degrades to a time-seeded PRNG,
                loudly, when no OS entropy source is available.
------------------------------------------------------------------------------
"""

import os
import random
import secrets
import threading
import time
import warnings
from abc import ABC
from typing import List, Optional, Sequence, TypeVar

from adcore.logger import get_logger

logger = get_logger("password.random")

T = TypeVar("T")


class RandomSource(ABC):
    """
    Common interface of all randomness providers.
    'name' and 'is_secure' expose which source is active.
    """

    name: str = "abstract"
    is_secure: bool = False

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def randint(self, low: int, high: int) -> int:
        """Uniform integer in [low, high]."""
        return self._rng.randint(low, high)

    def choice(self, seq: Sequence[T]) -> T:
        return self._rng.choice(seq)

    def sample(self, population: Sequence[T], k: int) -> List[T]:
        return self._rng.sample(population, k)


class SecureRandomSource(RandomSource):
    """OS entropy via secrets.SystemRandom; stateless and thread-safe."""

    name = "system"
    is_secure = True

    def __init__(self) -> None:
        super().__init__(secrets.SystemRandom())


class FallbackRandomSource(RandomSource):
    """
    Mersenne Twister seeded from the clock. NOT suitable for credentials;
    only used when the platform has no entropy source.
    """

    name = "time-seeded-prng"
    is_secure = False

    def __init__(self, seed: Optional[int] = None) -> None:
        super().__init__(random.Random(time.time_ns() if seed is None else seed))
        self._lock = threading.Lock()

    def randint(self, low: int, high: int) -> int:
        with self._lock:
            return super().randint(low, high)

    def choice(self, seq: Sequence[T]) -> T:
        with self._lock:
            return super().choice(seq)

    def sample(self, population: Sequence[T], k: int) -> List[T]:
        with self._lock:
            return super().sample(population, k)


def secure_source_available() -> bool:
    """Capability probe: does the OS provide urandom()?"""
    try:
        os.urandom(1)
    except NotImplementedError:
        return False
    return True


def detect_random_source() -> RandomSource:
    """
    Selects the best available source.
    The fallback emits a RuntimeWarning and a warning log record since
    passwords generated from it are predictable.
    """
    if secure_source_available():
        logger.debug("Using OS entropy for password generation")
        return SecureRandomSource()

    msg = ("No cryptographically secure random source available; "
           "falling back to a time-seeded PRNG. Generated passwords are weak.")
    warnings.warn(msg, RuntimeWarning, stacklevel=2)
    logger.warning(msg)
    return FallbackRandomSource()
