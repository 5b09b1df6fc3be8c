"""P-256 key pairs that own an address, stored on disk as hex."""

from __future__ import annotations

import binascii
import os
from dataclasses import dataclass
from pathlib import Path

from Crypto.PublicKey import ECC

from nexacoin.common import Address, make_addr

DEFAULT_WALLET_PATH = Path("wallet.key")
_CURVE = "P-256"


class WalletError(Exception):
    """A wallet could not be created, read or decoded."""


def _minimal_bytes(number: int) -> bytes:
    return number.to_bytes((number.bit_length() + 7) // 8, "big")


@dataclass(frozen=True)
class Wallet:
    """A private key, its public key and the address derived from it."""

    public_key: bytes
    private_key: bytes
    address: Address

    @classmethod
    def _from_key(cls, key: ECC.EccKey, private_key: bytes | None = None) -> Wallet:
        point = key.pointQ
        public_key = _minimal_bytes(int(point.x)) + _minimal_bytes(int(point.y))
        if private_key is None:
            private_key = _minimal_bytes(int(key.d))
        return cls(
            public_key=public_key,
            private_key=private_key,
            address=make_addr(public_key),
        )

    @classmethod
    def generate(cls) -> Wallet:
        """Create a wallet with a fresh random key."""
        return cls._from_key(ECC.generate(curve=_CURVE))

    @classmethod
    def from_private_key(cls, private_key: bytes) -> Wallet:
        """Rebuild a wallet from the big-endian bytes of its private key."""
        raw = bytes(private_key)
        scalar = int.from_bytes(raw, "big")
        try:
            key = ECC.construct(curve=_CURVE, d=scalar)
        except ValueError as exc:
            raise WalletError("invalid private key") from exc
        return cls._from_key(key, private_key=raw)

    def save(self, path: str | Path = DEFAULT_WALLET_PATH) -> None:
        """Write the private key as hex to path, readable by the owner only."""
        fd = os.open(Path(path), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="ascii") as handle:
            handle.write(self.private_key.hex())

    @classmethod
    def load(cls, path: str | Path = DEFAULT_WALLET_PATH) -> Wallet:
        """Read a wallet written by save."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise WalletError(
                "wallet not found; create a wallet and save it first"
            ) from exc
        try:
            private_key = binascii.unhexlify(data)
        except (binascii.Error, ValueError) as exc:
            raise WalletError("failed to decode private key") from exc
        return cls.from_private_key(private_key)