"""Errors raised by the chain."""

from __future__ import annotations


class ChainError(Exception):
    """Base class for chain errors."""

    default_message = "blockchain error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ChainDatabaseClosedError(ChainError):
    """The chain's on-disk database could not be opened or is closed."""

    default_message = "blockchain leveldb database is closed"


class BlockChainInsertError(ChainError):
    """A block could not be inserted into the chain."""

    default_message = "failed to insert block into the chain"


class ValidatorSelectError(ChainError):
    """No validator could be selected for the chain."""

    default_message = "failed to select validator for the chain"


class NoValidatorsError(ChainError):
    """The validator pool is empty."""

    default_message = "no validators"