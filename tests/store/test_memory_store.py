"""
Tests for the in-memory data store
"""

import threading
from datetime import UTC, datetime

import pytest

from postboard.store import (
    CommentRecord,
    IdSequence,
    InMemoryStore,
    PostRecord,
    StoreException,
    UserRecord,
    normalize_id,
)

CREATED = datetime(2024, 1, 1, tzinfo=UTC)


def make_post(id: int, author_id: int = 1) -> PostRecord:
    return PostRecord(id=id, title=f"Post {id}", text="text", author_id=author_id, created_at=CREATED)


class TestIdSequence:
    def test_sequence_is_monotonic(self):
        seq = IdSequence()
        assert [seq.next() for _ in range(3)] == [1, 2, 3]

    def test_after_starts_above_largest_id(self):
        seq = IdSequence.after([3, 9, 4])
        assert seq.next() == 10

    def test_after_empty_starts_at_one(self):
        assert IdSequence.after([]).next() == 1

    def test_observe_skips_past_external_ids(self):
        seq = IdSequence()
        seq.observe(7)
        assert seq.next() == 8
        seq.observe(2)
        assert seq.next() == 9

    def test_concurrent_next_never_repeats(self):
        seq = IdSequence()
        results: list[int] = []
        lock = threading.Lock()

        def worker():
            ids = [seq.next() for _ in range(200)]
            with lock:
                results.extend(ids)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == len(set(results)) == 1600


class TestNormalizeId:
    @pytest.mark.parametrize(
        "value, expected",
        [("1", 1), (" 42 ", 42), (7, 7), ("abc", None), ("1.5", None), ("", None), (None, None)],
    )
    def test_normalize(self, value, expected):
        assert normalize_id(value) == expected

    def test_bool_is_not_an_id(self):
        assert normalize_id(True) is None


class TestInMemoryStore:
    def test_lists_preserve_insertion_order(self):
        store = InMemoryStore(posts=[make_post(3), make_post(1), make_post(2)])
        assert [p.id for p in store.list_posts()] == [3, 1, 2]

    def test_listing_returns_a_copy(self, store):
        posts = store.list_posts()
        posts.clear()
        assert len(store.list_posts()) == 3

    def test_lookups(self, store):
        assert store.get_user(2).name == "Alan Turing"
        assert store.get_post(3).author_id == 3
        assert store.get_user(999) is None
        assert store.get_post(999) is None

    def test_comments_for_post(self, store):
        assert [c.id for c in store.comments_for_post(2)] == [2, 3]
        assert store.comments_for_post(3) == []

    def test_create_post_assigns_next_id_and_timestamp(self, store):
        before = datetime.now(UTC)
        record = store.create_post(title="New", text="Body", author_id=1)

        assert record.id == 4
        assert record.image is None
        assert record.created_at >= before
        assert record.created_at.tzinfo is not None
        assert store.list_posts()[-1] == record

    def test_ids_are_independent_of_collection_size(self):
        store = InMemoryStore(posts=[make_post(1), make_post(10)])
        assert store.create_post(title="t", text="t", author_id=1).id == 11

    def test_create_comment(self, scenario_store):
        record = scenario_store.create_comment(text="hi", author_id=1, post_id=1)

        assert record.id == 1
        assert scenario_store.comments_for_post(1) == [record]

    def test_append_rejects_duplicate_id(self, store):
        with pytest.raises(StoreException):
            store.append(make_post(1))

    def test_append_advances_sequence(self, store):
        store.append(make_post(20))
        assert store.create_post(title="t", text="t", author_id=1).id == 21

    def test_append_rejects_other_records(self, store):
        with pytest.raises(TypeError):
            store.append(UserRecord(id=9, name="x", email="x@example.com"))  # type: ignore[arg-type]

    def test_duplicate_initial_ids_rejected(self):
        with pytest.raises(StoreException):
            InMemoryStore(posts=[make_post(1), make_post(1)])

    def test_records_are_immutable(self, store):
        comment: CommentRecord = store.list_comments()[0]
        with pytest.raises(AttributeError):
            comment.text = "changed"  # type: ignore[misc]

    def test_concurrent_creates_get_unique_ids(self, scenario_store):
        def worker():
            for _ in range(50):
                scenario_store.create_post(title="t", text="t", author_id=1)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [p.id for p in scenario_store.list_posts()]
        assert len(ids) == len(set(ids)) == 201
