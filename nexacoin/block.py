"""Blocks and their binary encoding."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from dataclasses import dataclass, field

from nexacoin.common import HASH_LENGTH, Hash, sha256
from nexacoin.transaction import Transaction

NO_TX_HASH = sha256(b"000000000000000000000000000000")

_HEADER = struct.Struct(f">q{HASH_LENGTH}s{HASH_LENGTH}s{HASH_LENGTH}s{HASH_LENGTH}sqI")


@dataclass
class Block:
    """A block of transactions linked to its parent by hash."""

    time: int
    parent_hash: Hash
    transactions: list[Transaction] = field(default_factory=list)
    hash: Hash = field(default_factory=Hash)
    uncle_hash: Hash = field(default_factory=Hash)
    tx_hash: Hash = field(default_factory=Hash)
    height: int = 0

    @classmethod
    def create(
        cls, time: int, parent_hash: Hash, transactions: Iterable[Transaction]
    ) -> Block:
        """Build a block and fill in its hash from its encoded contents."""
        block = cls(time=time, parent_hash=parent_hash, transactions=list(transactions))
        block.hash = sha256(block.to_bytes())
        if not block.transactions:
            block.tx_hash = NO_TX_HASH
        return block

    def to_bytes(self) -> bytes:
        """Encode the block header followed by its transactions."""
        try:
            header = _HEADER.pack(
                self.time,
                bytes(self.hash),
                bytes(self.parent_hash),
                bytes(self.uncle_hash),
                bytes(self.tx_hash),
                self.height,
                len(self.transactions),
            )
        except struct.error as exc:
            raise ValueError(f"cannot encode block: {exc}") from exc
        return header + b"".join(tx.to_bytes() for tx in self.transactions)

    @classmethod
    def from_bytes(cls, data: bytes) -> Block:
        """Decode a block written by to_bytes."""
        raw = bytes(data)
        if len(raw) < _HEADER.size:
            raise ValueError("block data is shorter than its header")
        time, block_hash, parent, uncle, tx_hash, height, count = _HEADER.unpack_from(raw)
        body = raw[_HEADER.size:]
        size = Transaction.SIZE
        if len(body) != count * size:
            raise ValueError(
                f"block declares {count} transactions but carries {len(body)} bytes"
            )
        transactions = [
            Transaction.from_bytes(body[start:start + size])
            for start in range(0, len(body), size)
        ]
        return cls(
            time=time,
            parent_hash=Hash(parent),
            transactions=transactions,
            hash=Hash(block_hash),
            uncle_hash=Hash(uncle),
            tx_hash=Hash(tx_hash),
            height=height,
        )