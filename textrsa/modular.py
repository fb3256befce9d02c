import logging
from typing import Iterable, List

from textrsa.errors import MessageUnitOverflowError
from textrsa.keygen import PrivateKey, PublicKey
from textrsa.text_codec import TextToUnits, UnitsToText

logger = logging.getLogger(__name__)


def Transform(value: int, exponent: int, modulus: int) -> int:
    """
    value ** exponent mod modulus.

    Used for both directions: exponent e encrypts, exponent d decrypts.
    A value >= modulus is reduced first, so it does not survive a round trip.
    """
    if modulus < 1:
        raise ValueError(f"Modulus must be positive, got {modulus}.")
    if exponent < 0:
        raise ValueError(f"Exponent must be non-negative, got {exponent}.")
    return pow(value, exponent, modulus)


def Encrypt(units: Iterable[int], public_key: PublicKey, strict: bool = True) -> List[int]:
    e, n = public_key.exponent, public_key.modulus
    cipher_block = []

    for index, m in enumerate(units):
        if m >= n:
            if strict:
                raise MessageUnitOverflowError(m, index, n)
            logger.warning("unit %d at position %d is >= n=%d and will wrap", m, index, n)
        cipher_block.append(Transform(m, e, n))
    return cipher_block


def Decrypt(cipher_block: Iterable[int], private_key: PrivateKey) -> List[int]:
    d, n = private_key.exponent, private_key.modulus
    return [Transform(c, d, n) for c in cipher_block]


def EncryptText(plaintext: str, public_key: PublicKey) -> List[int]:
    return Encrypt(TextToUnits(plaintext), public_key)


def DecryptText(cipher_block: Iterable[int], private_key: PrivateKey) -> str:
    return UnitsToText(Decrypt(cipher_block, private_key))
