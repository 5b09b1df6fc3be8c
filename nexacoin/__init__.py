"""Wallets, blocks, transactions, a disk-backed block chain and validators."""

__version__ = "0.1.0"