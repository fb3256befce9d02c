import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from textrsa.config import MAX_PRIME_ATTEMPTS, PRIME_MAX, PRIME_MIN
from textrsa.errors import NoCoprimeError, PrimeSearchExhaustedError
from textrsa.primes import CheckPrime, GeneratePrime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublicKey:
    exponent: int
    modulus: int

    def AsTuple(self) -> Tuple[int, int]:
        return (self.exponent, self.modulus)


@dataclass(frozen=True)
class PrivateKey:
    exponent: int
    modulus: int

    def AsTuple(self) -> Tuple[int, int]:
        return (self.exponent, self.modulus)


@dataclass(frozen=True)
class KeyPair:
    public_key: PublicKey
    private_key: PrivateKey
    p: int
    q: int
    phi: int

    def __post_init__(self):
        if self.public_key.modulus != self.private_key.modulus:
            raise ValueError("Public and private key must share the same modulus.")

    @property
    def modulus(self) -> int:
        return self.public_key.modulus

    def AsTuples(self):
        return self.public_key.AsTuple(), self.private_key.AsTuple()


@dataclass(frozen=True)
class CoprimeResult:
    """Outcome of FindCoprime: either a value or the reason there is none."""

    found: bool
    value: Optional[int] = None
    error: Optional[str] = None
    phi: Optional[int] = None

    @classmethod
    def Ok(cls, value: int, phi: int) -> "CoprimeResult":
        return cls(found=True, value=value, phi=phi)

    @classmethod
    def Fail(cls, phi: int) -> "CoprimeResult":
        return cls(found=False, error=f"no coprime found for phi={phi}", phi=phi)

    def Unwrap(self) -> int:
        if not self.found:
            raise NoCoprimeError(self.phi)
        return self.value


def Gcd(a: int, b: int) -> int:
    while b != 0:
        a, b = b, a % b
    return a


def FindCoprime(phi: int) -> CoprimeResult:
    for candidate in range(2, phi):
        if Gcd(candidate, phi) == 1:
            return CoprimeResult.Ok(candidate, phi)
    return CoprimeResult.Fail(phi)


def MultiplicativeInverse(a: int, m: int) -> int:
    """
    Inverse of a modulo m via the iterative extended Euclidean algorithm.

    Returns 0 for the degenerate m == 1.
    """
    if m < 1:
        raise ValueError(f"Modulus must be positive, got {m}.")
    if m == 1:
        return 0
    a %= m
    if Gcd(a, m) != 1:
        raise ValueError(f"{a} has no inverse modulo {m}.")

    m0 = m
    x, y = 1, 0
    while a > 1:
        quotient = a // m
        a, m = m, a % m
        x, y = y, x - quotient * y

    if x < 0:
        x += m0
    return x


def KeyPairFromPrimes(p: int, q: int) -> KeyPair:
    if not CheckPrime(p) or not CheckPrime(q):
        raise ValueError("p and q must be prime number.")

    n = p * q
    phi = (p - 1) * (q - 1)

    e = FindCoprime(phi).Unwrap()
    d = MultiplicativeInverse(e, phi)

    logger.debug("key pair built from p=%d q=%d: n=%d phi=%d e=%d", p, q, n, phi, e)
    return KeyPair(
        public_key=PublicKey(e, n),
        private_key=PrivateKey(d, n),
        p=p,
        q=q,
        phi=phi,
    )


def GenerateKeyPair(
    rng=None,
    low: int = PRIME_MIN,
    high: int = PRIME_MAX,
    distinct: bool = True,
    max_attempts: int = MAX_PRIME_ATTEMPTS,
) -> KeyPair:
    p = GeneratePrime(low, high, rng, max_attempts)
    q = GeneratePrime(low, high, rng, max_attempts)

    if distinct:
        retries = 0
        while q == p:
            retries += 1
            if retries > max_attempts:
                raise PrimeSearchExhaustedError(low, high, max_attempts)
            q = GeneratePrime(low, high, rng, max_attempts)
    elif p == q:
        logger.warning("p == q == %d; the key is degenerate and may not round-trip", p)

    return KeyPairFromPrimes(p, q)


def GenerateKeys(rng=None, low: int = PRIME_MIN, high: int = PRIME_MAX):
    """Tuple form of GenerateKeyPair: ((e, n), (d, n))."""
    return GenerateKeyPair(rng, low, high).AsTuples()
