import random

from megapick.parsing.line_parser import build_record
from megapick.sampling.sampler import pick_batch, pick_one


def _records(n):
    return [build_record(i, f"/folder{i % 3}/file{i}.jpg", f"h{i}") for i in range(n)]


def test_pick_one_empty_returns_none():
    assert pick_one([]) is None


def test_pick_one_returns_member():
    recs = _records(5)
    rng = random.Random(1)
    for _ in range(20):
        assert pick_one(recs, rng=rng) in recs


def test_pick_batch_empty_for_any_count():
    for n in (0, 1, 10, 1000):
        assert pick_batch([], n) == []


def test_pick_batch_non_positive_count():
    assert pick_batch(_records(3), 0) == []
    assert pick_batch(_records(3), -2) == []


def test_pick_batch_distinct_and_sized():
    recs = _records(50)
    batch = pick_batch(recs, 10, rng=random.Random(3))
    assert len(batch) == 10
    assert len({r.id for r in batch}) == 10
    assert all(r in recs for r in batch)


def test_pick_batch_full_draw_is_permutation():
    recs = _records(7)
    batch = pick_batch(recs, 100, rng=random.Random(0))
    assert sorted(r.id for r in batch) == [r.id for r in recs]


def test_pick_batch_default_count(monkeypatch):
    from config.settings import settings

    monkeypatch.setattr(settings, "DEFAULT_BATCH_SIZE", 10)
    assert len(pick_batch(_records(30))) == 10


def test_pick_batch_repeated_ids_terminates():
    rec = _records(1)[0]
    assert pick_batch([rec, rec, rec], 3) == [rec]


def test_seeded_draws_are_reproducible():
    recs = _records(40)
    a = pick_batch(recs, 8, rng=random.Random(42))
    b = pick_batch(recs, 8, rng=random.Random(42))
    assert [r.id for r in a] == [r.id for r in b]
