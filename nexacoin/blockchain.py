"""The chain of blocks, kept on disk and in memory."""

from __future__ import annotations

import logging
from pathlib import Path

from nexacoin.block import Block
from nexacoin.common import Hash, sha256
from nexacoin.diskdb import DiskDatabase
from nexacoin.errors import (
    BlockChainInsertError,
    ChainDatabaseClosedError,
    ChainError,
    NoValidatorsError,
    ValidatorSelectError,
)
from nexacoin.validator import Validator, ValidatorPool

logger = logging.getLogger(__name__)

CHAIN_DISK_PATH = Path("chaindb-output")
GENESIS_PARENT_HASH = sha256(b"just believe in me")


def delete_disk_folder(path: str | Path = CHAIN_DISK_PATH) -> None:
    """Remove the chain's directory, which must be empty, or a file at path."""
    target = Path(path)
    if target.is_dir():
        target.rmdir()
    else:
        target.unlink()


class BlockChain:
    """Blocks stored by hash on disk, with an in-memory index and validators."""

    def __init__(self, path: str | Path = CHAIN_DISK_PATH) -> None:
        try:
            self.database = DiskDatabase(path)
        except Exception as exc:
            raise ChainDatabaseClosedError() from exc
        self.height = 0
        self.sane = False
        self.last_block: Block | None = None
        self.blocks_memory: dict[Hash, Block] = {}
        self.validators = ValidatorPool()

    def __enter__(self) -> BlockChain:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def first(self) -> Block:
        """Return the stored block with the smallest key."""
        _, value = self.database.first()
        return Block.from_bytes(value)

    def last(self) -> Block:
        """Return the stored block with the largest key."""
        _, value = self.database.last()
        block = Block.from_bytes(value)
        self.last_block = block
        return block

    def previous(self) -> Block:
        """Return the stored block just before the last one."""
        _, value = self.database.previous()
        block = Block.from_bytes(value)
        self.last_block = block
        return block

    def insert(self, block: Block) -> None:
        """Store block on disk and in memory."""
        try:
            self.database.put(bytes(block.hash), block.to_bytes())
        except Exception as exc:
            raise BlockChainInsertError() from exc
        self.blocks_memory[block.hash] = block

    def locate_block(self, hash_hex: str) -> Block | None:
        """Return the block whose hash has this hex form, or None."""
        return next(
            (block for block in self.blocks_memory.values() if block.hash.hex() == hash_hex),
            None,
        )

    def sanity_check(self) -> bool:
        """Tell whether every parent from the last block back is known."""
        self.sane = self._walk_parents()
        return self.sane

    def _walk_parents(self) -> bool:
        try:
            current = self.last()
        except Exception:
            return False
        while not current.parent_hash.is_zero():
            parent = self.blocks_memory.get(current.parent_hash)
            if parent is None or parent.hash != current.parent_hash:
                return False
            current = parent
        return True

    def _pick_validator(self) -> Validator:
        try:
            self.last_block = self.previous()
        except Exception as exc:
            raise ChainError("error fetching second to last block") from exc
        try:
            address = self.validators.select_validator(bytes(self.last_block.hash))
        except NoValidatorsError as exc:
            raise ValidatorSelectError() from exc
        validator = self.validators.validators.get(address.hex())
        if validator is None:
            raise ChainError(f"validator with address {address.hex()} not found")
        self.validators.selected_validator = validator
        return validator

    def validate_last_block(self) -> bool:
        """Have a chosen validator check the latest block."""
        try:
            validator = self._pick_validator()
        except ChainError as exc:
            logger.error("Failed to pick validator: %s", exc)
            return False
        try:
            last_block = self.last()
        except Exception as exc:
            logger.error("Failed to load last block: %s", exc)
            return False
        try:
            address = validator.address()
        except ChainError as exc:
            logger.error("Failed to get validator address: %s", exc)
            address = ""
        logger.info("validator has been chosen: %s", address)
        return validator.validate_block(last_block)

    def close(self) -> None:
        """Close the on-disk store."""
        self.database.close()