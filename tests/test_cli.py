from nexacoin.blockchain import BlockChain
from nexacoin.cli import main
from nexacoin.wallet import Wallet


def test_main_builds_and_validates_chain(tmp_path):
    wallet_path = tmp_path / "wallet.key"
    chain_dir = tmp_path / "chain"
    assert main(["--wallet", str(wallet_path), "--chain-dir", str(chain_dir)]) == 0
    wallet = Wallet.load(wallet_path)
    assert len(wallet.private_key) <= 32
    with BlockChain(chain_dir) as chain:
        last = chain.last()
        before = chain.previous()
        assert last.hash != before.hash
        assert chain.first().transactions == []


def test_main_fails_when_wallet_cannot_be_saved(tmp_path):
    wallet_path = tmp_path / "missing" / "wallet.key"
    result = main(["--wallet", str(wallet_path), "--chain-dir", str(tmp_path / "chain")])
    assert result == 1
    assert not wallet_path.exists()