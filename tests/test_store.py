import pytest

from storage.db import Database
from storage.repos import CounterRepo, parse_count
from storage.store import PersistentStore


@pytest.fixture
def db(tmp_path):
    database = Database(db_path=str(tmp_path / "state.db"))
    database.init_schema()
    yield database
    database.close()


def test_counter_defaults_to_zero(db):
    assert CounterRepo(db).get_count() == 0


def test_counter_overwrites(db):
    repo = CounterRepo(db)
    repo.set_count(3)
    repo.set_count(5)
    assert repo.get_count() == 5
    row = db.conn.execute("SELECT value FROM app_state WHERE key='count'").fetchone()
    assert row["value"] == "5"


def test_counter_rejects_negative(db):
    with pytest.raises(ValueError):
        CounterRepo(db).set_count(-1)


def test_malformed_row_reads_as_zero(db):
    db.conn.execute("INSERT INTO app_state(key, value) VALUES('count', 'lots')")
    db.conn.commit()
    assert CounterRepo(db).get_count() == 0


@pytest.mark.parametrize(
    "raw,expected", [(None, 0), ("4", 4), (" 7 ", 7), ("abc", 0), ("-2", 0), ("", 0)]
)
def test_parse_count(raw, expected):
    assert parse_count(raw) == expected


def test_init_schema_is_idempotent(db):
    db.init_schema()
    row = db.conn.execute(
        "SELECT value FROM schema_meta WHERE key='schema_version'"
    ).fetchone()
    assert row["value"] == "1"


def test_store_survives_restart(tmp_path):
    path = str(tmp_path / "state.db")

    store = PersistentStore(db_path=path)
    assert store.load_count().result(timeout=5) == 0
    store.save_count(4).result(timeout=5)
    store.close()

    reopened = PersistentStore(db_path=path)
    assert reopened.load_count().result(timeout=5) == 4
    reopened.close()


def test_writes_apply_in_order(tmp_path):
    store = PersistentStore(db_path=str(tmp_path / "state.db"))
    for n in range(1, 6):
        store.save_count(n)
    assert store.load_count().result(timeout=5) == 5
    store.close()


def test_open_failure_reaches_futures(tmp_path):
    store = PersistentStore(db_path=str(tmp_path / "missing" / "state.db"))
    fut = store.load_count()
    assert fut.exception(timeout=5) is not None
    store.close()
