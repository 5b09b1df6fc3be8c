import pytest

from nexacoin.common import make_addr
from nexacoin.wallet import Wallet, WalletError

P256_GX = "6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296"
P256_GY = "4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5"


def test_generated_address_matches_public_key():
    wallet = Wallet.generate()
    assert wallet.address == make_addr(wallet.public_key)
    assert 0 < len(wallet.private_key) <= 32
    assert len(wallet.public_key) <= 64


def test_generated_wallets_differ():
    wallets = [Wallet.generate(), Wallet.generate()]
    assert len({wallet.private_key for wallet in wallets}) == 2
    assert len({wallet.address for wallet in wallets}) == 2
    for wallet in wallets:
        assert wallet.address == make_addr(wallet.public_key)


def test_from_private_key_reproduces_wallet():
    wallet = Wallet.generate()
    assert Wallet.from_private_key(wallet.private_key) == wallet


def test_private_key_one_gives_generator_point():
    wallet = Wallet.from_private_key(b"\x01")
    assert wallet.public_key.hex() == P256_GX + P256_GY
    assert wallet.address == make_addr(wallet.public_key)


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "wallet.key"
    wallet = Wallet.generate()
    wallet.save(path)
    assert path.read_text() == wallet.private_key.hex()
    assert Wallet.load(path) == wallet


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(WalletError, match="wallet not found"):
        Wallet.load(tmp_path / "missing.key")


def test_load_bad_hex_raises(tmp_path):
    path = tmp_path / "wallet.key"
    path.write_text("not hex at all")
    with pytest.raises(WalletError, match="failed to decode private key"):
        Wallet.load(path)


def test_zero_private_key_is_rejected():
    with pytest.raises(WalletError):
        Wallet.from_private_key(b"\x00")