# nexacoin

A small blockchain framework: P-256 wallets with RIPEMD-160 addresses,
blocks and transactions with a fixed binary encoding, a chain of blocks kept
in an on-disk key-value store, and a pool of validators from which one is
picked deterministically to check the latest block.

## Installing

```
pip install .
```

Run the tests with:

```
pip install ".[test]"
pytest
```

## The command

```
nexacoin [--wallet PATH] [--chain-dir DIR]
```

The command generates a new wallet and saves its private key, as hex, to
`--wallet` (default `wallet.key` in the current directory, readable by the
owner only). It opens the chain store in `--chain-dir` (default
`chaindb-output`), loads the saved wallet back as a validator, and inserts
three blocks, each linked to the one before, the first to the genesis parent
hash. It then picks a validator and has it check the last block.

Progress and problems are logged. The command exits with status 0 when the
last block validates and 1 otherwise.

## Using the library

Hashes and addresses (`nexacoin.common`):

```python
from nexacoin.common import sha256, make_addr, base58_encode

digest = sha256(b"some data")       # a 32-byte Hash
print(digest.hex(), digest.base58())

address = make_addr(b"\x01" * 64)   # RIPEMD-160, a 20-byte Address
print(address.hex())
```

Wallets (`nexacoin.wallet`):

```python
from nexacoin.wallet import Wallet

wallet = Wallet.generate()
wallet.save("wallet.key")

restored = Wallet.load("wallet.key")
assert restored.address == wallet.address
```

`Wallet.from_private_key` rebuilds a wallet from the big-endian bytes of its
private key. A missing key file, undecodable hex or an invalid key raises
`WalletError`.

Blocks and transactions (`nexacoin.block`, `nexacoin.transaction`):

```python
import time
from nexacoin.block import Block
from nexacoin.common import sha256

block = Block.create(int(time.time()), sha256(b"parent"), [])
data = block.to_bytes()
assert Block.from_bytes(data) == block
```

`Block.create` sets the block's hash from its encoded contents, and for a block
without transactions sets `tx_hash` to a fixed "no transactions" hash. A
`Transaction` round-trips the same way through `to_bytes` and
`Transaction.from_bytes`; malformed data raises `ValueError`.

The chain (`nexacoin.blockchain`):

```python
from nexacoin.blockchain import BlockChain, GENESIS_PARENT_HASH
from nexacoin.validator import Validator

with BlockChain("chaindb-output") as chain:
    chain.validators.add_validator(Validator.load("wallet.key"))
    chain.insert(block)
    print(chain.locate_block(block.hash.hex()))
```

`BlockChain` stores blocks on disk keyed by hash and keeps them in memory. It
provides `insert`, `first`, `last`, `previous` (the block before the last,
in key order), `locate_block`, `sanity_check` (follows parent hashes back
from the last block through the blocks in memory), `validate_last_block` and
`close`. `delete_disk_folder` removes an empty directory or a file.

Validators (`nexacoin.validator`): a `Validator` accepts a block unless its
time is negative or too far in the future, or it has already accepted a
different block at the same height. `ValidatorPool.select_validator(seed)`
picks a validator from the SHA-256 of the seed and returns its address; an
empty pool raises `NoValidatorsError`.

Storage: `MemoryDatabase` in `nexacoin.memorydb` is a thread-safe in-memory
store; `DiskDatabase` in `nexacoin.diskdb` keeps byte keys and values in a
directory, in bytewise key order. Chain failures raise subclasses of
`ChainError` from `nexacoin.errors`.

## What it does not do

There is no peer-to-peer network, no mining or staking, no account balances,
and no signing or verification of transactions: blocks are checked only by
their time and height. Block heights are not set by the chain.