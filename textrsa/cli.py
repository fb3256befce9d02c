"""
Interactive textbook-RSA run: read a line, generate a key pair, encrypt each
character code, decrypt it again and print every intermediate step.
"""

import argparse
import logging
import random
import sys

from textrsa.config import PRIME_MAX, PRIME_MIN
from textrsa.errors import RSATextError
from textrsa.keygen import GenerateKeyPair
from textrsa.modular import Decrypt, Encrypt
from textrsa.text_codec import (
    CharsToText,
    CharsToUnits,
    TextToChars,
    UnitsToBinary,
    UnitsToChars,
)

logger = logging.getLogger("textrsa")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="textrsa",
        description="Encrypt and decrypt a line of text one character at a time with textbook RSA.",
    )
    ap.add_argument("--text", help="text to encrypt (prompted for when omitted)")
    ap.add_argument("--seed", type=int, help="seed the prime generator for a reproducible key")
    ap.add_argument("--min", dest="low", type=int, default=PRIME_MIN, help="smallest prime candidate")
    ap.add_argument("--max", dest="high", type=int, default=PRIME_MAX, help="largest prime candidate")
    ap.add_argument("--allow-equal-primes", action="store_true",
                    help="do not redraw q when it equals p")
    ap.add_argument("--binary", action="store_true", help="also print the code units in base 2")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return ap


def run(text, rng=None, low=PRIME_MIN, high=PRIME_MAX, distinct=True, binary=False, out=None):
    out = out or sys.stdout

    def emit(line):
        print(line, file=out)

    key_pair = GenerateKeyPair(rng, low, high, distinct=distinct)
    public_key, private_key = key_pair.public_key, key_pair.private_key
    emit(f"Public Key (e, n): {public_key.exponent}, {public_key.modulus}")
    emit(f"Private Key (d, n): {private_key.exponent}, {private_key.modulus}")

    chars = TextToChars(text)
    emit(f"String to List: {chars}")

    units = CharsToUnits(chars)
    emit(f"List to ASCII: {units}")
    if binary:
        emit(f"ASCII to Binary: {UnitsToBinary(units)}")

    encrypted = Encrypt(units, public_key)
    emit(f"Encrypted List: {encrypted}")

    decrypted = Decrypt(encrypted, private_key)
    emit(f"Decrypted List: {decrypted}")

    chars_out = UnitsToChars(decrypted)
    emit(f"ASCII to List: {chars_out}")

    result = CharsToText(chars_out)
    emit(f"List to String: {result}")
    return result


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    text = args.text
    if text is None:
        try:
            text = input("Enter a string: ")
        except EOFError:
            text = ""

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        run(text, rng, args.low, args.high,
            distinct=not args.allow_equal_primes, binary=args.binary)
    except (RSATextError, ValueError) as err:
        logger.debug("run aborted", exc_info=True)
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
