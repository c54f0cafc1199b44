"""Tests for the JSON-backed client stores."""

import json

import pytest

from easydict.errors import StorageError
from easydict.storage.stores import (
    HistoryStore,
    JsonFileBackend,
    KnownWordsStore,
    NotebookStore,
    default_backend
)


@pytest.fixture
def backend(tmp_path):
    return JsonFileBackend(tmp_path / "store.json")


class TestJsonFileBackend:

    def test_missing_file_loads_empty(self, backend):
        assert backend.load() == []

    def test_round_trip_keeps_unicode(self, backend):
        backend.save(["hello", "你好"])

        assert backend.load() == ["hello", "你好"]
        assert "你好" in backend.path.read_text(encoding="utf-8")

    def test_corrupt_file_loads_empty(self, backend):
        backend.path.write_text("{not json", encoding="utf-8")

        assert backend.load() == []

    def test_non_list_loads_empty(self, backend):
        backend.path.write_text(json.dumps({"a": 1}), encoding="utf-8")

        assert backend.load() == []

    def test_save_failure_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        backend = JsonFileBackend(blocker / "store.json")

        with pytest.raises(StorageError):
            backend.save(["hello"])

    def test_default_backend_uses_configured_names(self, tmp_path):
        assert default_backend("history_file", tmp_path).path == tmp_path / "search_history.json"


class TestHistoryStore:

    def test_most_recent_first_and_lowercased(self, backend):
        store = HistoryStore(backend)
        store.add("Hello")
        store.add("world")
        store.add("HELLO")

        assert store.items() == ["hello", "world"]

    def test_truncates_to_max_size(self, backend):
        store = HistoryStore(backend, max_size=3)
        for word in ["a1", "b2", "c3", "d4"]:
            store.add(word)

        assert store.items() == ["d4", "c3", "b2"]

    def test_persists_between_instances(self, backend):
        HistoryStore(backend).add("hello")

        assert HistoryStore(backend).items() == ["hello"]

    def test_remove_and_clear(self, backend):
        store = HistoryStore(backend)
        store.add("one")
        store.add("two")

        assert store.remove("ONE") is True
        assert store.remove("missing") is False
        assert store.items() == ["two"]

        store.clear()
        assert len(store) == 0
        assert backend.load() == []

    def test_blank_word_ignored(self, backend):
        store = HistoryStore(backend)
        store.add("   ")

        assert store.items() == []


class TestNotebookStore:

    def test_add_keeps_casing_and_is_unique(self, backend):
        store = NotebookStore(backend)

        assert store.add("  Serendipity ") is True
        assert store.add("serendipity") is False
        assert store.add("ephemeral") is True
        assert store.items() == ["ephemeral", "Serendipity"]
        assert store.contains("SERENDIPITY")

    def test_remove_is_case_insensitive(self, backend):
        store = NotebookStore(backend)
        store.add("Serendipity")

        assert store.remove("serendipity") is True
        assert store.items() == []
        assert store.remove("serendipity") is False

    def test_toggle(self, backend):
        store = NotebookStore(backend)

        assert store.toggle("word") is True
        assert store.toggle("WORD") is False
        assert store.items() == []

    def test_move(self, backend):
        store = NotebookStore(backend)
        for word in ["c", "b", "a"]:
            store.add(word)
        assert store.items() == ["a", "b", "c"]

        store.move(0, 2)

        assert store.items() == ["b", "c", "a"]
        assert NotebookStore(backend).items() == ["b", "c", "a"]

    def test_move_out_of_range(self, backend):
        store = NotebookStore(backend)
        store.add("a")

        with pytest.raises(IndexError):
            store.move(0, 3)

    def test_clear(self, backend):
        store = NotebookStore(backend)
        store.add("a")
        store.clear()

        assert NotebookStore(backend).items() == []


class TestKnownWordsStore:

    def test_toggle(self, backend):
        store = KnownWordsStore(backend)

        assert store.toggle("Abandon") is True
        assert store.is_known("abandon")
        assert store.toggle("ABANDON ") is False
        assert not store.is_known("abandon")

    def test_items_sorted_and_persisted(self, backend):
        store = KnownWordsStore(backend)
        store.toggle("zeal")
        store.toggle("able")

        assert KnownWordsStore(backend).items() == ["able", "zeal"]

    def test_loads_lowercased(self, backend):
        backend.save(["Abandon", "abandon", "Zeal"])

        assert KnownWordsStore(backend).items() == ["abandon", "zeal"]


class ReadOnlyBackend(JsonFileBackend):
    """Backend that loads normally but refuses every save."""

    def save(self, items):
        raise StorageError("disk full")


class TestFailedSaves:

    @pytest.fixture
    def read_only(self, backend):
        backend.save(["two", "one"])
        return ReadOnlyBackend(backend.path)

    def test_history_unchanged(self, read_only):
        store = HistoryStore(read_only)

        for action in [lambda: store.add("three"), lambda: store.add("one"),
                       lambda: store.remove("two"), store.clear]:
            with pytest.raises(StorageError):
                action()
            assert store.items() == ["two", "one"]

    def test_notebook_unchanged(self, read_only):
        store = NotebookStore(read_only)

        for action in [lambda: store.add("three"), lambda: store.remove("two"),
                       lambda: store.move(0, 1), store.clear]:
            with pytest.raises(StorageError):
                action()
            assert store.items() == ["two", "one"]

    def test_known_words_unchanged(self, read_only):
        store = KnownWordsStore(read_only)

        with pytest.raises(StorageError):
            store.toggle("three")
        with pytest.raises(StorageError):
            store.toggle("one")

        assert store.items() == ["one", "two"]
        assert not store.is_known("three")
