import random

from flask import Flask, jsonify, request

from textrsa import config
from textrsa.errors import RSATextError
from textrsa.keygen import GenerateKeyPair, KeyPairFromPrimes, PrivateKey, PublicKey
from textrsa.modular import Decrypt, Encrypt
from textrsa.text_codec import TextToUnits, UnitsToText

app = Flask(__name__)
app.config.from_mapping(
    PRIME_MIN=config.PRIME_MIN,
    PRIME_MAX=config.PRIME_MAX,
    PRIME_CEILING=config.PRIME_CEILING,
    MAX_PRIME_ATTEMPTS=config.MAX_PRIME_ATTEMPTS,
)
# TEXTRSA_SECRET_KEY, TEXTRSA_PRIME_MAX, ...
app.config.from_prefixed_env("TEXTRSA")


def read_body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


def as_int(value, name):
    # bool is an int subclass; floats would be truncated silently.
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    raise ValueError(f"{name} must be an integer, got {value!r}")


def parse_key(raw, name):
    # Accepts "e,n" (as typed in a form) or [e, n].
    if isinstance(raw, str):
        parts = raw.replace(" ", "").split(",")
    elif isinstance(raw, (list, tuple)):
        parts = [str(x) for x in raw]
    else:
        raise ValueError(f"{name} must look like e,n (for example 17,3233)")

    if len(parts) != 2 or not parts[0].isdigit() or not parts[1].isdigit():
        raise ValueError(f"{name} is invalid. Use the form exponent,modulus")
    exponent, modulus = map(int, parts)
    if modulus < 1:
        raise ValueError(f"{name} modulus must be positive")
    return exponent, modulus


def parse_cipher(raw):
    if isinstance(raw, str):
        raw = raw.split()
    if not isinstance(raw, list):
        raise ValueError("cipher must be a list of integers or a space-separated string")
    return [as_int(x, f"cipher[{i}]") for i, x in enumerate(raw)]


def key_pair_payload(key_pair):
    public_key, private_key = key_pair.AsTuples()
    return {
        "success": True,
        "public_key": list(public_key),
        "private_key": list(private_key),
        "e": key_pair.public_key.exponent,
        "d": key_pair.private_key.exponent,
        "n": key_pair.modulus,
        "p": key_pair.p,
        "q": key_pair.q,
        "phi": key_pair.phi,
    }


def error_response(err):
    app.logger.info("request rejected: %s", err)
    return jsonify({"success": False, "error": str(err)}), 400


@app.route("/generate_keys", methods=["POST"])
def generate_keys():
    try:
        data = read_body()
        seed = data.get("seed")
        rng = random.Random(as_int(seed, "seed")) if seed is not None else None
        low = as_int(data.get("min", app.config["PRIME_MIN"]), "min")
        high = as_int(data.get("max", app.config["PRIME_MAX"]), "max")

        ceiling = int(app.config["PRIME_CEILING"])
        if high > ceiling:
            raise ValueError(f"max must not exceed {ceiling}")

        key_pair = GenerateKeyPair(
            rng, low, high, max_attempts=int(app.config["MAX_PRIME_ATTEMPTS"])
        )
    except (RSATextError, ValueError) as err:
        return error_response(err)

    return jsonify(key_pair_payload(key_pair))


@app.route("/generate_keys_manual", methods=["POST"])
def generate_keys_manual():
    try:
        data = read_body()
        if "p" not in data or "q" not in data:
            raise ValueError("missing field: p and q are required")
        p = as_int(data["p"], "p")
        q = as_int(data["q"], "q")

        ceiling = int(app.config["PRIME_CEILING"])
        if p > ceiling or q > ceiling:
            raise ValueError(f"p and q must not exceed {ceiling}")

        key_pair = KeyPairFromPrimes(p, q)
    except (RSATextError, ValueError) as err:
        return error_response(err)

    return jsonify(key_pair_payload(key_pair))


@app.route("/encrypt", methods=["POST"])
def encrypt():
    try:
        data = read_body()
        e, n = parse_key(data.get("public_key"), "Public key")
        text = data.get("text", "")
        if not isinstance(text, str):
            raise ValueError("text must be a string")
        units = TextToUnits(text)
        cipher_block = Encrypt(units, PublicKey(e, n))
    except (RSATextError, ValueError) as err:
        return error_response(err)

    return jsonify({"success": True, "units": units, "cipher": cipher_block})


@app.route("/decrypt", methods=["POST"])
def decrypt():
    try:
        data = read_body()
        d, n = parse_key(data.get("private_key"), "Private key")
        cipher_block = parse_cipher(data.get("cipher", []))
        units = Decrypt(cipher_block, PrivateKey(d, n))
        plaintext = UnitsToText(units)
    except (RSATextError, ValueError) as err:
        return error_response(err)

    return jsonify({"success": True, "units": units, "text": plaintext})


if __name__ == "__main__":
    app.run(debug=True)
