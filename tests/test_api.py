from __future__ import annotations

import random

import pytest

from rc4kit.api import (
    decrypt_from_hex,
    decrypt_text_from_hex,
    encrypt_or_decrypt,
    encrypt_to_hex,
    from_hex,
    to_hex,
)
from rc4kit.errors import AllocationFailure, InvalidKey, MalformedHex

_rng = random.Random(20251123)


def randbytes(n: int) -> bytes:
    return bytes(_rng.randrange(0, 256) for _ in range(n))


def xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


# ===========================================================
# encrypt_or_decrypt
# ===========================================================


def test_known_vector_text_inputs():
    assert to_hex(encrypt_or_decrypt("Plaintext", "Key")) == "bbf316e8d940af0ad3"


def test_known_vector_decrypts():
    ct = from_hex("bbf316e8d940af0ad3")
    assert encrypt_or_decrypt(ct, "Key") == b"Plaintext"


def test_empty_input():
    assert encrypt_or_decrypt("", "k") == b""


@pytest.mark.parametrize("data", ["", "x", b"", b"\x00\x01"])
def test_empty_key_rejected(data):
    with pytest.raises(InvalidKey):
        encrypt_or_decrypt(data, "")
    with pytest.raises(InvalidKey):
        encrypt_or_decrypt(data, b"")


@pytest.mark.parametrize("n", [0, 1, 17, 256, 1024])
def test_self_inverse_and_length(n):
    key = randbytes(9)
    msg = randbytes(n)
    ct = encrypt_or_decrypt(msg, key)

    assert len(ct) == n
    assert encrypt_or_decrypt(ct, key) == msg


def test_keystream_independent_of_plaintext():
    key = b"fixed key"
    a = randbytes(64)
    b = randbytes(64)
    assert xor(encrypt_or_decrypt(a, key), a) == xor(encrypt_or_decrypt(b, key), b)


def test_input_not_mutated():
    data = bytearray(b"Plaintext")
    out = encrypt_or_decrypt(data, b"Key")
    assert data == bytearray(b"Plaintext")
    assert isinstance(out, bytes)


def test_non_ascii_text_uses_encoding():
    text = "héllo wörld"
    ct = encrypt_or_decrypt(text, "ключ")
    assert len(ct) == len(text.encode("utf-8"))
    assert encrypt_or_decrypt(ct, "ключ".encode()) == text.encode("utf-8")

    latin = encrypt_or_decrypt(text, "k", encoding="latin-1")
    assert len(latin) == len(text)


def test_allocation_failure(monkeypatch):
    def boom(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr("rc4kit.api.bytearray", boom, raising=False)

    with pytest.raises(AllocationFailure) as exc:
        encrypt_or_decrypt(b"data", b"key")
    assert isinstance(exc.value.__cause__, MemoryError)


class _UnencodableText(str):
    def encode(self, *args, **kwargs):
        raise MemoryError


def test_allocation_failure_while_encoding_text():
    with pytest.raises(AllocationFailure):
        encrypt_or_decrypt(_UnencodableText("data"), b"key")
    with pytest.raises(AllocationFailure):
        encrypt_or_decrypt(b"data", _UnencodableText("key"))


def test_allocation_failure_on_result_copy(monkeypatch):
    def boom(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr("rc4kit.api.bytes", boom, raising=False)

    with pytest.raises(AllocationFailure):
        encrypt_or_decrypt(b"data", b"key")


def test_empty_key_not_reported_as_allocation_failure():
    with pytest.raises(InvalidKey):
        encrypt_or_decrypt(b"data", b"")


# ===========================================================
# hex helpers
# ===========================================================


def test_encrypt_to_hex():
    assert encrypt_to_hex("Plaintext", "Key") == "bbf316e8d940af0ad3"
    assert encrypt_to_hex("", "k") == ""


def test_decrypt_from_hex_strips_whitespace():
    assert decrypt_from_hex("  BBF316E8D940AF0AD3\n", "Key") == b"Plaintext"


def test_decrypt_text_from_hex():
    assert decrypt_text_from_hex("bbf316e8d940af0ad3", "Key") == "Plaintext"


def test_text_roundtrip_unicode():
    text = "Attack at dawn ☀"
    assert decrypt_text_from_hex(encrypt_to_hex(text, "Secret"), "Secret") == text


@pytest.mark.parametrize("bad", ["abc", "zz", "bb f3"])
def test_decrypt_from_hex_rejects_malformed(bad):
    with pytest.raises(MalformedHex):
        decrypt_from_hex(bad, "Key")


def test_decrypt_text_invalid_utf8():
    # lone continuation bytes are not valid UTF-8
    ct = encrypt_to_hex(bytes(range(128, 160)), "key")
    with pytest.raises(UnicodeDecodeError):
        decrypt_text_from_hex(ct, "key")
    assert decrypt_text_from_hex(ct, "key", errors="replace") == "\ufffd" * 32
