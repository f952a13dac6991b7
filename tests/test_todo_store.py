from __future__ import annotations

import pytest

from textual_todo import (
    DEFAULT_SEED,
    TodoItem,
    TodoNotFoundError,
    TodoStore,
    TodoValidationError,
)


def _assert_stats_consistent(store: TodoStore) -> None:
    stats = store.stats()
    assert stats.total == len(store.items)
    assert stats.completed == sum(1 for item in store.items if item.completed)
    assert stats.remaining == stats.total - stats.completed
    assert stats.completed <= stats.total


def test_default_seed() -> None:
    store = TodoStore()
    assert [item.id for item in store.items] == [1, 2, 3, 4, 5, 6]
    assert [item.completed for item in store.items] == [True] * 3 + [False] * 3
    assert store.items[0].text == "Learn React Fundamentals"
    assert store.items[-1].text == "Deploy Application"
    assert store.pending_input == ""


def test_add_appends_with_unique_ids() -> None:
    store = TodoStore()
    seen = {item.id for item in store.items}
    for n in range(20):
        before = len(store)
        item = store.add(f"task {n}")
        assert len(store) == before + 1
        assert item.id not in seen
        assert item.completed is False
        assert store.items[-1] == item
        seen.add(item.id)
    _assert_stats_consistent(store)


def test_add_trims_text_and_clears_pending_input() -> None:
    store = TodoStore(seed=())
    store.pending_input = "  Write tests  "
    item = store.submit()
    assert item.text == "Write tests"
    assert store.pending_input == ""


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_add_rejects_blank_text(text: str) -> None:
    store = TodoStore()
    store.pending_input = text
    before = store.items

    with pytest.raises(TodoValidationError) as excinfo:
        store.add(text)

    assert excinfo.value.reason == TodoValidationError.EMPTY
    assert isinstance(excinfo.value, ValueError)
    assert store.items == before
    assert store.pending_input == text


def test_ids_are_not_reused_after_delete() -> None:
    store = TodoStore(seed=())
    first = store.add("one")
    store.delete(first.id)
    second = store.add("two")
    assert second.id != first.id

    seeded = TodoStore()
    seeded.delete(6)
    assert seeded.add("again").id == 7


def test_toggle_is_an_involution() -> None:
    store = TodoStore()
    for item in store.items:
        original = item.completed
        assert store.toggle(item.id).completed is not original
        assert store.toggle(item.id).completed is original
    assert store.items == DEFAULT_SEED


def test_toggle_only_touches_matching_item() -> None:
    store = TodoStore()
    before = store.items
    store.toggle(4)
    after = store.items
    assert [i.id for i in after] == [i.id for i in before]
    for old, new in zip(before, after):
        if old.id == 4:
            assert new.completed is True
        else:
            assert new == old


@pytest.mark.parametrize("operation", ["toggle", "delete", "get"])
def test_unknown_id_raises_not_found(operation: str) -> None:
    store = TodoStore()
    before = store.items

    with pytest.raises(TodoNotFoundError) as excinfo:
        getattr(store, operation)(999)

    assert excinfo.value.todo_id == 999
    assert store.items == before


def test_delete_preserves_relative_order() -> None:
    store = TodoStore()
    before = store.items
    removed = store.delete(3)
    assert removed.id == 3
    assert 3 not in store
    assert store.items == tuple(i for i in before if i.id != 3)
    _assert_stats_consistent(store)


def test_items_is_a_read_only_snapshot() -> None:
    store = TodoStore()
    snapshot = store.items
    store.add("later")
    assert len(snapshot) == 6
    with pytest.raises(AttributeError):
        snapshot[0].completed = False  # type: ignore[misc]


def test_seed_validation() -> None:
    with pytest.raises(ValueError):
        TodoStore(seed=[TodoItem(1, "a"), TodoItem(1, "b")])
    with pytest.raises(ValueError):
        TodoStore(seed=[TodoItem(1, "  ")])

    store = TodoStore(seed=[TodoItem(10, "ten", True)])
    assert store.add("next").id == 11


def test_empty_store_stats() -> None:
    store = TodoStore(seed=())
    stats = store.stats()
    assert (stats.total, stats.completed, stats.remaining) == (0, 0, 0)
    assert stats.summary() == "Total: 0  Completed: 0  Remaining: 0"


def test_end_to_end_scenario() -> None:
    store = TodoStore()
    original = store.items

    def counts():
        s = store.stats()
        return (s.total, s.completed, s.remaining)

    assert counts() == (6, 3, 3)

    item = store.add("Write tests")
    assert len(store) == 7
    assert item.completed is False
    assert counts() == (7, 3, 4)

    store.toggle(item.id)
    assert counts() == (7, 4, 3)

    store.delete(item.id)
    assert counts() == (6, 3, 3)
    assert store.items == original


def test_generator_seed_sets_next_id() -> None:
    seed = (TodoItem(n, f"item {n}") for n in (3, 8, 5))
    store = TodoStore(seed=seed)
    assert [item.id for item in store.items] == [3, 8, 5]
    assert store.add("next").id == 9


def test_ids_keep_increasing_after_list_is_emptied() -> None:
    store = TodoStore()
    for item in store.items:
        store.delete(item.id)
    assert len(store) == 0
    assert store.add("fresh start").id == 7
