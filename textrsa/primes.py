import logging
import math
import random

from textrsa.config import MAX_PRIME_ATTEMPTS
from textrsa.errors import PrimeSearchExhaustedError

logger = logging.getLogger(__name__)


def CheckPrime(n: int) -> bool:
    if n < 2:
        return False
    for i in range(2, math.isqrt(n) + 1):
        if n % i == 0:
            return False
    return True


def GeneratePrime(low: int, high: int, rng=None, max_attempts: int = MAX_PRIME_ATTEMPTS) -> int:
    """
    Draw random integers in [low, high] until one is prime.

    rng is any object with a randint(a, b) method (a random.Random instance,
    or the random module itself when omitted).
    """
    if low < 1 or high < low:
        raise ValueError(f"Invalid prime range [{low}, {high}].")
    if max_attempts < 1:
        raise ValueError("max_attempts must be positive.")
    rng = rng or random

    for attempt in range(1, max_attempts + 1):
        candidate = rng.randint(low, high)
        if CheckPrime(candidate):
            logger.debug("prime %d found in [%d, %d] after %d draws", candidate, low, high, attempt)
            return candidate

    raise PrimeSearchExhaustedError(low, high, max_attempts)
