"""Transactions and their binary encoding."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import ClassVar

from nexacoin.common import ADDRESS_LENGTH, HASH_LENGTH, Address, Hash

_LAYOUT = struct.Struct(f">qQ{ADDRESS_LENGTH}s{ADDRESS_LENGTH}sq{HASH_LENGTH}s")


@dataclass
class Transaction:
    """A transfer of an amount from a sender to a recipient."""

    time: int
    sender: Address
    recipient: Address
    amount: int
    fee: int = 0
    hash: Hash = field(default_factory=Hash)

    SIZE: ClassVar[int] = _LAYOUT.size

    def to_bytes(self) -> bytes:
        """Encode the transaction as fixed-size big-endian bytes."""
        try:
            return _LAYOUT.pack(
                self.time,
                self.fee,
                bytes(self.sender),
                bytes(self.recipient),
                self.amount,
                bytes(self.hash),
            )
        except struct.error as exc:
            raise ValueError(f"cannot encode transaction: {exc}") from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> Transaction:
        """Decode a transaction written by to_bytes."""
        if len(data) != cls.SIZE:
            raise ValueError(
                f"transaction must be {cls.SIZE} bytes, got {len(data)}"
            )
        time, fee, sender, recipient, amount, tx_hash = _LAYOUT.unpack(bytes(data))
        return cls(
            time=time,
            sender=Address(sender),
            recipient=Address(recipient),
            amount=amount,
            fee=fee,
            hash=Hash(tx_hash),
        )