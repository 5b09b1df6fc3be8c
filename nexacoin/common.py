"""Hashes, addresses and the encodings used for them."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import ClassVar

from Crypto.Hash import RIPEMD160

HASH_LENGTH = 32
ADDRESS_LENGTH = 20

_BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


def base58_encode(data: bytes) -> str:
    """Encode bytes with the Bitcoin base58 alphabet."""
    raw = bytes(data)
    stripped = raw.lstrip(b"\x00")
    leading_zeros = len(raw) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_BASE58_ALPHABET[remainder])
    return _BASE58_ALPHABET[0] * leading_zeros + "".join(reversed(digits))


@dataclass(frozen=True)
class _FixedBytes:
    """An immutable byte string of a fixed length; all zeros by default."""

    length: ClassVar[int] = 0
    data: bytes | None = None

    def __post_init__(self) -> None:
        value = bytes(self.length) if self.data is None else bytes(self.data)
        if len(value) != self.length:
            raise ValueError(
                f"{type(self).__name__} must be {self.length} bytes, got {len(value)}"
            )
        object.__setattr__(self, "data", value)

    def __bytes__(self) -> bytes:
        return self.data

    def is_zero(self) -> bool:
        """Tell whether every byte is zero."""
        return not any(self.data)


@dataclass(frozen=True)
class Hash(_FixedBytes):
    """A 32-byte SHA-256 digest."""

    length: ClassVar[int] = HASH_LENGTH

    def hex(self) -> str:
        """Return the hash as lower-case hexadecimal."""
        return self.data.hex()

    def base58(self) -> str:
        """Return the hash in base58."""
        return base58_encode(self.data)


@dataclass(frozen=True)
class Address(_FixedBytes):
    """A 20-byte account address."""

    length: ClassVar[int] = ADDRESS_LENGTH

    def hex(self) -> str:
        """Return the address as lower-case hexadecimal."""
        return self.data.hex()


def sha256(data: bytes) -> Hash:
    """Return the SHA-256 digest of data as a Hash."""
    return Hash(hashlib.sha256(bytes(data)).digest())


def make_addr(pub_key_bytes: bytes) -> Address:
    """Derive an address from public key bytes with RIPEMD-160."""
    digest = RIPEMD160.new(bytes(pub_key_bytes)).digest()
    return Address(digest[:ADDRESS_LENGTH])