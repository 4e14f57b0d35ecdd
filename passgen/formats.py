"""Output encodings for generated passwords, and a small hashing helper."""

import base64
import hashlib

from .errors import UnsupportedFormat

FORMATS = ("plain", "base64", "hex")
HASH_ALGORITHMS = ("sha256", "sha512", "base64")


def format_password(password: str, fmt: str = "plain") -> str:
    fmt = fmt.lower()
    data = password.encode("utf-8")
    if fmt == "plain":
        return password
    if fmt == "base64":
        return base64.b64encode(data).decode("ascii")
    if fmt == "hex":
        return data.hex()
    raise UnsupportedFormat(f"Unsupported format: {fmt} (choose from {', '.join(FORMATS)})")


def generate_hash(text: str, algorithm: str = "sha256") -> str:
    algorithm = algorithm.lower()
    data = text.encode("utf-8")
    if algorithm in ("sha256", "sha512"):
        return hashlib.new(algorithm, data).hexdigest()
    if algorithm == "base64":
        return base64.b64encode(data).decode("ascii")
    raise UnsupportedFormat(
        f"Unsupported hash algorithm: {algorithm} (choose from {', '.join(HASH_ALGORITHMS)})"
    )
