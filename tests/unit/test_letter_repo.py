import pytest

from suratlog.models.types import LetterType
from suratlog.repositories.letter_repo import LetterRepository, format_timestamp
from suratlog.sample_data import sample_records


def test_insert_assigns_id_and_created_at(repo):
    record = repo.insert({"type": "Masuk", "reference": "R1", "date": "2024-03-01"})

    assert record.id
    assert record.created_at == "2024-03-15T09:30:00.000Z"
    assert repo.get(record.id) == record
    assert len(repo) == 1


def test_insert_prepends_newest_first(repo):
    first = repo.insert({"reference": "R1"})
    second = repo.insert({"reference": "R2"})

    assert [r.id for r in repo.all()] == [second.id, first.id]


def test_ids_are_unique_across_lifetime(repo):
    issued = set()
    for i in range(50):
        record = repo.insert({"reference": f"R{i}"})
        assert record.id not in issued
        issued.add(record.id)
        if i % 3 == 0:
            repo.remove(record.id)
    assert len(issued) == 50


def test_update_only_changes_officer(repo):
    record = repo.insert({"type": "Keluar", "reference": "R1", "subject": "S", "date": "2024-03-01"})

    repo.update(record.id, "Pn. Siti")

    updated = repo.get(record.id)
    assert updated.assigned_officer == "Pn. Siti"
    assert updated.model_dump(exclude={"assigned_officer"}) == record.model_dump(exclude={"assigned_officer"})


def test_update_unknown_id_is_noop(repo):
    record = repo.insert({"reference": "R1"})
    before = repo.all()

    repo.update("missing", "Someone")

    assert repo.all() == before
    assert repo.get(record.id).assigned_officer == ""


def test_remove_deletes_record(repo):
    keep = repo.insert({"reference": "R1"})
    gone = repo.insert({"reference": "R2"})

    repo.remove(gone.id)

    assert [r.id for r in repo.all()] == [keep.id]
    assert repo.get(gone.id) is None


def test_remove_nonexistent_id_leaves_store_unchanged(repo):
    repo.insert({"reference": "R1"})
    repo.insert({"reference": "R2"})

    repo.remove("does-not-exist")

    assert len(repo) == 2


def test_snapshot_is_detached_from_store(repo):
    repo.insert({"reference": "R1"})
    snapshot = repo.all()
    snapshot.clear()

    assert len(repo) == 1


def test_load_keeps_ids_and_order():
    repo = LetterRepository()
    repo.load(sample_records())

    assert [r.id for r in repo.all()] == ["1", "2", "3"]
    assert repo.get("2").type == LetterType.OUTGOING


def test_load_skips_already_issued_ids():
    repo = LetterRepository()
    repo.load(sample_records())
    repo.load(sample_records())

    assert len(repo) == 3


def test_format_timestamp_naive_and_aware():
    from datetime import datetime, timezone, timedelta

    assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05.000Z"
    plus8 = timezone(timedelta(hours=8))
    assert format_timestamp(datetime(2024, 1, 2, 11, 4, 5, tzinfo=plus8)) == "2024-01-02T03:04:05.000Z"
