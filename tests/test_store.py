"""Tests for the in-memory task store."""

from concurrent.futures import ThreadPoolExecutor

from taskboard.models import TaskCreate, TaskUpdate
from taskboard.store import TaskStore


def test_create_and_get() -> None:
    store = TaskStore()
    task = store.create(TaskCreate(title="Buy milk"))

    assert store.get(task.id) == task
    assert task.created_at == task.updated_at
    assert task.status == "pending"
    assert task.priority == "medium"


def test_get_unknown_returns_none() -> None:
    assert TaskStore().get("missing") is None


def test_update_merges_only_supplied_fields() -> None:
    store = TaskStore()
    task = store.create(TaskCreate(title="Draft", description="first pass", priority="low"))

    updated = store.update(task.id, TaskUpdate(status="completed"))

    assert updated is not None
    assert updated.status == "completed"
    assert updated.title == "Draft"
    assert updated.description == "first pass"
    assert updated.priority == "low"
    assert updated.updated_at >= updated.created_at
    assert store.get(task.id) == updated


def test_update_unknown_returns_none() -> None:
    assert TaskStore().update("missing", TaskUpdate()) is None


def test_delete_returns_removed_task() -> None:
    store = TaskStore()
    keep = store.create(TaskCreate(title="keep"))
    drop = store.create(TaskCreate(title="drop"))

    assert store.delete(drop.id) == drop
    assert store.delete(drop.id) is None
    assert store.list_all() == [keep]


def test_clear_reports_count() -> None:
    store = TaskStore()
    store.seed()
    store.create(TaskCreate(title="another"))

    assert store.clear() == 2
    assert store.count() == 0
    assert store.clear() == 0


def test_list_preserves_creation_order() -> None:
    store = TaskStore()
    titles = ["one", "two", "three"]
    for title in titles:
        store.create(TaskCreate(title=title))

    assert [t.title for t in store.list_all()] == titles


def test_concurrent_creates_are_all_kept() -> None:
    store = TaskStore()
    with ThreadPoolExecutor(max_workers=8) as pool:
        tasks = list(pool.map(lambda i: store.create(TaskCreate(title=f"t{i}")), range(200)))

    assert store.count() == 200
    assert len({t.id for t in tasks}) == 200
