import pytest

from nexacoin.memorydb import DatabaseClosedError, KeyNotFoundError, MemoryDatabase


@pytest.fixture
def db():
    return MemoryDatabase()


def test_put_then_get(db):
    db.put(b"key", b"value")
    assert db.get(b"key") == b"value"


def test_put_overwrites(db):
    db.put(b"key", b"one")
    db.put(b"key", b"two")
    assert db.get(b"key") == b"two"


def test_has(db):
    db.put(b"key", b"value")
    assert db.has(b"key") is True
    assert db.has(b"other") is False


def test_get_missing_raises(db):
    with pytest.raises(KeyNotFoundError):
        db.get(b"missing")


def test_delete(db):
    db.put(b"key", b"value")
    db.delete(b"key")
    assert db.has(b"key") is False


def test_delete_missing_is_harmless(db):
    db.delete(b"missing")
    assert db.has(b"missing") is False


@pytest.mark.parametrize(
    "operation",
    [
        lambda d: d.has(b"k"),
        lambda d: d.get(b"k"),
        lambda d: d.put(b"k", b"v"),
        lambda d: d.delete(b"k"),
    ],
)
def test_operations_after_close_raise(db, operation):
    db.put(b"k", b"v")
    assert db.get(b"k") == b"v"
    db.close()
    with pytest.raises(DatabaseClosedError) as excinfo:
        operation(db)
    assert excinfo.type is DatabaseClosedError


def test_close_twice_keeps_database_closed(db):
    db.close()
    db.close()
    with pytest.raises(DatabaseClosedError):
        db.get(b"k")