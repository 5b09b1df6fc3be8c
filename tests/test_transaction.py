import pytest

from nexacoin.common import Hash, make_addr, sha256
from nexacoin.transaction import Transaction


@pytest.fixture
def tx():
    return Transaction(
        time=1_700_000_000,
        sender=make_addr(b"sender"),
        recipient=make_addr(b"recipient"),
        amount=250,
    )


def test_new_transaction_defaults(tx):
    assert tx.fee == 0
    assert tx.hash == Hash()


def test_round_trip(tx):
    assert Transaction.from_bytes(tx.to_bytes()) == tx


def test_round_trip_with_all_fields():
    original = Transaction(
        time=-5,
        sender=make_addr(b"a"),
        recipient=make_addr(b"b"),
        amount=-42,
        fee=2**64 - 1,
        hash=sha256(b"tx"),
    )
    assert Transaction.from_bytes(original.to_bytes()) == original


def test_encoding_is_fixed_size_and_deterministic(tx):
    encoded = tx.to_bytes()
    assert len(encoded) == Transaction.SIZE
    assert encoded == tx.to_bytes()


def test_different_amounts_encode_differently(tx):
    other = Transaction(tx.time, tx.sender, tx.recipient, tx.amount + 1)
    assert other.to_bytes() != tx.to_bytes()
    assert Transaction.from_bytes(other.to_bytes()).amount == tx.amount + 1


def test_from_bytes_rejects_wrong_length(tx):
    with pytest.raises(ValueError):
        Transaction.from_bytes(tx.to_bytes()[:-1])


def test_to_bytes_rejects_out_of_range_fee(tx):
    tx.fee = -1
    with pytest.raises(ValueError):
        tx.to_bytes()