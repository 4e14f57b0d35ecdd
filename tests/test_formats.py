import hashlib

import pytest

from passgen.errors import UnsupportedFormat
from passgen.formats import format_password, generate_hash


def test_format_password():
    assert format_password("abc") == "abc"
    assert format_password("abc", "base64") == "YWJj"
    assert format_password("abc", "HEX") == "616263"
    with pytest.raises(UnsupportedFormat):
        format_password("abc", "rot13")


def test_generate_hash():
    assert generate_hash("hello") == hashlib.sha256(b"hello").hexdigest()
    assert generate_hash("hello", "sha512") == hashlib.sha512(b"hello").hexdigest()
    assert generate_hash("hello", "base64") == "aGVsbG8="
    with pytest.raises(UnsupportedFormat):
        generate_hash("hello", "md5")
