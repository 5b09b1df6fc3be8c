"""Validators that check blocks, and the pool they are chosen from."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path

from nexacoin.block import Block
from nexacoin.common import Address, sha256
from nexacoin.errors import ChainError, NoValidatorsError
from nexacoin.memorydb import MemoryDatabase
from nexacoin.wallet import DEFAULT_WALLET_PATH, Wallet

# How far ahead of the current time a block's timestamp may lie.
MAX_FUTURE_DRIFT = 10 * 60 * 1_000_000_000


@dataclass
class Validator:
    """A wallet holder who checks blocks and remembers those it accepted."""

    wallet: Wallet | None
    current_block: Block | None = None
    validated_blocks: list[Block] = field(default_factory=list)

    @classmethod
    def load(cls, path: str | Path = DEFAULT_WALLET_PATH) -> Validator:
        """Create a validator from the wallet saved at path."""
        return cls(wallet=Wallet.load(path))

    def address(self) -> str:
        """Return the hex address of the validator's wallet."""
        if self.wallet is None:
            raise ChainError("failed to get validators address as wallet is nil")
        return self.wallet.address.hex()

    def validate_block(self, block: Block | None) -> bool:
        """Accept block unless its time is out of range or its height is taken."""
        if block is None:
            return False
        now = int(time.time())
        if block.time > now + MAX_FUTURE_DRIFT or block.time < 0:
            return False
        if any(
            seen.height == block.height and seen.hash != block.hash
            for seen in self.validated_blocks
        ):
            return False
        self.validated_blocks.append(block)
        return True


@dataclass
class ValidatorPool:
    """Validators keyed by their hex address."""

    database: MemoryDatabase = field(default_factory=MemoryDatabase)
    validators: dict[str, Validator] = field(default_factory=dict)
    selected_validator: Validator | None = None

    def add_validator(self, validator: Validator) -> None:
        """Add validator, replacing one with the same address."""
        self.validators[validator.address()] = validator

    def select_validator(self, seed: bytes) -> Address:
        """Pick a validator from the SHA-256 of seed and return its address."""
        if not self.validators:
            raise NoValidatorsError()
        candidates = list(self.validators.values())
        number = int.from_bytes(bytes(sha256(seed)), "big")
        selected = candidates[number % len(candidates)]
        self.selected_validator = selected
        return selected.wallet.address