from unittest import mock

import pytest

from uniwar.scorefile import EMPTY_UID, ScoreFile, ScoreRecord


@pytest.fixture
def scores(tmp_path):
    return ScoreFile(tmp_path / "scores", tmp_path / "scores.lock", pid=4242)


def test_record_round_trip():
    record = ScoreRecord(uid=7, name="Captain Kirk", mission=3, total=900, highest=500, timelast=1000)
    data = record.pack()
    assert len(data) == ScoreRecord.SIZE
    assert ScoreRecord.unpack(data) == record


def test_record_unpack_wrong_size():
    with pytest.raises(ValueError):
        ScoreRecord.unpack(b"short")


def test_name_truncated_to_limit():
    record = ScoreRecord(uid=1, name="A" * 40)
    assert ScoreRecord.unpack(record.pack()).name == "A" * 16


def test_lookup_empty_file(scores):
    assert scores.lookup(5) == (None, 0)
    assert scores.path.exists()


def test_store_and_lookup(scores):
    scores.lookup(5)
    first = ScoreRecord(uid=5, name="one")
    assert scores.store(first, 0)
    assert scores.lookup(5) == (first, 0)
    assert scores.lookup(6) == (None, ScoreRecord.SIZE)


def test_lookup_prefers_free_slot(scores):
    scores.lookup(1)
    scores.store(ScoreRecord(uid=EMPTY_UID), 0)
    scores.store(ScoreRecord(uid=2, name="two"), ScoreRecord.SIZE)
    assert scores.lookup(9) == (None, 0)


def test_store_negative_offset_is_noop(scores):
    assert scores.store(ScoreRecord(uid=1), -1) is False
    assert not scores.path.exists()


def test_store_misaligned_offset(scores):
    scores.lookup(1)
    with pytest.raises(ValueError):
        scores.store(ScoreRecord(uid=1), 3)


def test_update_accumulates(scores):
    scores.lookup(3)
    scores.store(ScoreRecord(uid=3, name="old", mission=1, total=100, highest=100), 0)
    record = scores.update(3, "Captain New", 250, now=1234)
    assert record.mission == 2
    assert record.total == 350
    assert record.highest == 250
    assert record.timelast == 1234
    assert scores.lookup(3) == (record, 0)
    again = scores.update(3, "Captain New", 50, now=1300)
    assert again.highest == 250


def test_update_missing_player(scores):
    with pytest.raises(LookupError):
        scores.update(99, "nobody", 10)


def test_lock_writes_pid_and_unlock_removes(scores):
    assert scores.lock() is True
    assert scores.lockpath.read_text() == "4242"
    assert scores.unlock() is True
    assert not scores.lockpath.exists()


def test_unlock_without_lock(scores):
    assert scores.unlock() is False


def test_unlock_leaves_foreign_lock(scores):
    assert scores.lock()
    scores.lockpath.write_text("9999")
    assert scores.unlock() is False
    assert scores.lockpath.exists()


def test_lock_gives_up_when_held(scores):
    scores.lockpath.write_text("1")
    with mock.patch("time.sleep") as fake_sleep:
        assert scores.lock() is False
    assert fake_sleep.call_count == ScoreFile.LOCK_TRIES
    assert scores.lockpath.read_text() == "1"


def test_locked_context(scores):
    with scores.locked():
        assert scores.lockpath.exists()
    assert not scores.lockpath.exists()