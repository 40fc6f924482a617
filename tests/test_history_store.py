"""Tests for HistoryStore, SelectionState and client storage backends."""

import json

import pytest

from ipmap.client.history import HISTORY_KEY, HistoryStore
from ipmap.client.selection import SelectionState
from ipmap.client.storage import JsonFileStorage, KeyValueStorage, MemoryStorage


# ─────────────────────────────────────────────────────────────────
# HistoryStore
# ─────────────────────────────────────────────────────────────────


class TestHistoryStore:

    def test_starts_empty(self, storage):
        assert HistoryStore(storage).list() == []

    def test_add_appends_in_order(self, storage):
        history = HistoryStore(storage)
        history.add("8.8.8.8")
        history.add("1.1.1.1")

        assert history.list() == ["8.8.8.8", "1.1.1.1"]

    def test_add_is_idempotent_and_keeps_position(self, storage):
        history = HistoryStore(storage)
        history.add("8.8.8.8")
        history.add("1.1.1.1")
        history.add("8.8.8.8")

        assert history.list() == ["8.8.8.8", "1.1.1.1"]

    def test_every_mutation_is_persisted(self, storage):
        history = HistoryStore(storage)

        history.add("8.8.8.8")
        assert json.loads(storage.get(HISTORY_KEY)) == ["8.8.8.8"]

        history.add("1.1.1.1")
        assert json.loads(storage.get(HISTORY_KEY)) == ["8.8.8.8", "1.1.1.1"]

        history.remove({"8.8.8.8"})
        assert json.loads(storage.get(HISTORY_KEY)) == ["1.1.1.1"]

        history.clear()
        assert json.loads(storage.get(HISTORY_KEY)) == []

    def test_reload_restores_identical_order(self, storage):
        entries = ["10.0.0.1", "8.8.8.8", "192.168.1.1", "1.1.1.1"]
        history = HistoryStore(storage)
        for ip in entries:
            history.add(ip)

        assert HistoryStore(storage).list() == entries

    def test_remove_preserves_survivor_order(self, storage):
        history = HistoryStore(storage)
        for ip in ["a.1", "b.2", "c.3", "d.4", "e.5"]:
            history.add(ip)

        remaining = history.remove({"b.2", "d.4", "not-there"})

        assert remaining == ["a.1", "c.3", "e.5"]
        assert history.list() == remaining

    def test_list_returns_a_copy(self, storage):
        history = HistoryStore(storage)
        history.add("8.8.8.8")

        history.list().append("1.1.1.1")

        assert history.list() == ["8.8.8.8"]

    @pytest.mark.parametrize("raw", [
        "not json",
        "{\"ip\": \"8.8.8.8\"}",
        "[1, 2, 3]",
        "null",
        "\"8.8.8.8\"",
    ])
    def test_malformed_storage_falls_back_to_empty(self, raw):
        storage = MemoryStorage({HISTORY_KEY: raw})

        history = HistoryStore(storage)

        assert history.list() == []
        history.add("8.8.8.8")
        assert json.loads(storage.get(HISTORY_KEY)) == ["8.8.8.8"]

    def test_stored_duplicates_keep_first_occurrence(self):
        storage = MemoryStorage({HISTORY_KEY: json.dumps(["8.8.8.8", "1.1.1.1", "8.8.8.8"])})

        assert HistoryStore(storage).list() == ["8.8.8.8", "1.1.1.1"]


# ─────────────────────────────────────────────────────────────────
# SelectionState
# ─────────────────────────────────────────────────────────────────


@pytest.fixture
def history(storage):
    history = HistoryStore(storage)
    for ip in ["8.8.8.8", "1.1.1.1", "9.9.9.9"]:
        history.add(ip)
    return history


class TestSelectionState:

    def test_toggle_flips_membership(self, history):
        selection = SelectionState(history)

        assert selection.toggle("8.8.8.8") is True
        assert "8.8.8.8" in selection
        assert selection.toggle("8.8.8.8") is False
        assert "8.8.8.8" not in selection

    def test_cannot_select_entries_missing_from_history(self, history):
        selection = SelectionState(history)

        assert selection.toggle("4.4.4.4") is False
        assert selection.selected == frozenset()

    def test_entering_delete_mode_selects_nothing(self, history):
        selection = SelectionState(history)

        selection.enter_delete_mode()

        assert selection.delete_mode is True
        assert len(selection) == 0

    def test_exiting_delete_mode_clears(self, history):
        selection = SelectionState(history)
        selection.toggle_delete_mode()
        selection.toggle("8.8.8.8")
        selection.toggle("1.1.1.1")

        assert selection.toggle_delete_mode() is False
        assert selection.selected == frozenset()

    def test_remove_then_clear(self, history):
        selection = SelectionState(history)
        selection.toggle("8.8.8.8")
        selection.toggle("9.9.9.9")

        remaining = history.remove(selection.selected)
        selection.clear()

        assert remaining == ["1.1.1.1"]
        assert selection.selected == frozenset()

    def test_entries_removed_from_history_drop_out_of_selection(self, history):
        selection = SelectionState(history)
        selection.toggle("8.8.8.8")
        selection.toggle("1.1.1.1")

        history.remove({"8.8.8.8"})

        assert "8.8.8.8" not in selection
        assert selection.selected == frozenset({"1.1.1.1"})
        assert len(selection) == 1

    def test_cleared_history_empties_selection(self, history):
        selection = SelectionState(history)
        selection.toggle("8.8.8.8")

        history.clear()

        assert len(selection) == 0
        assert selection.toggle("8.8.8.8") is False

    def test_selection_is_not_persisted(self, history, storage):
        before = dict(storage._data)
        selection = SelectionState(history)
        selection.enter_delete_mode()
        selection.toggle("8.8.8.8")

        assert storage._data == before


# ─────────────────────────────────────────────────────────────────
# JsonFileStorage
# ─────────────────────────────────────────────────────────────────


def test_storage_interface_is_abstract():
    with pytest.raises(TypeError):
        KeyValueStorage()

    class GetOnly(KeyValueStorage):
        def get(self, key):
            return None

    with pytest.raises(TypeError):
        GetOnly()


class TestJsonFileStorage:

    def test_missing_file_reads_as_empty(self, tmp_path):
        assert JsonFileStorage(str(tmp_path / "state.json")).get("history") is None

    def test_set_get_remove(self, tmp_path):
        path = tmp_path / "nested" / "state.json"
        storage = JsonFileStorage(str(path))

        storage.set("history", "[\"8.8.8.8\"]")
        storage.set("user", "{}")
        storage.remove("user")

        assert storage.get("history") == "[\"8.8.8.8\"]"
        assert storage.get("user") is None
        assert json.loads(path.read_text()) == {"history": "[\"8.8.8.8\"]"}

    def test_corrupt_file_is_ignored_and_replaced(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text("{{{ definitely not json")
        storage = JsonFileStorage(str(path))

        assert storage.get("history") is None

        storage.set("history", "[]")
        assert json.loads(path.read_text()) == {"history": "[]"}

    def test_history_survives_restart(self, tmp_path):
        path = str(tmp_path / "state.json")
        HistoryStore(JsonFileStorage(path)).add("8.8.8.8")

        assert HistoryStore(JsonFileStorage(path)).list() == ["8.8.8.8"]
