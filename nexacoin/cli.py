"""Command that creates a wallet, builds a short chain and validates it."""

from __future__ import annotations

import argparse
import logging
import time

from nexacoin.block import Block
from nexacoin.blockchain import CHAIN_DISK_PATH, GENESIS_PARENT_HASH, BlockChain
from nexacoin.validator import Validator
from nexacoin.wallet import DEFAULT_WALLET_PATH, Wallet

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="nexacoin", description="Build a small chain and validate its last block."
    )
    parser.add_argument("--wallet", default=str(DEFAULT_WALLET_PATH),
                        help="where to save the wallet key")
    parser.add_argument("--chain-dir", default=str(CHAIN_DISK_PATH),
                        help="directory of the chain database")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration; return 0 when the last block validates."""
    logging.basicConfig(level=logging.INFO)
    args = _parse_args(argv)
    try:
        Wallet.generate().save(args.wallet)
        chain = BlockChain(args.chain_dir)
    except Exception as exc:
        logger.error("%s", exc)
        return 1
    with chain:
        try:
            chain.validators.add_validator(Validator.load(args.wallet))
            parent = GENESIS_PARENT_HASH
            for _ in range(3):
                block = Block.create(int(time.time()), parent, [])
                chain.insert(block)
                parent = block.hash
        except Exception as exc:
            logger.error("%s", exc)
            return 1
        if not chain.validate_last_block():
            logger.error("chain validator has found an invalid block")
            return 1
    logger.info("chain validated using validator")
    return 0