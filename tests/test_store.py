import asyncio
import json

import pytest

from signal_aggregator import aggregate_signals
from store import InMemoryStore, StoreUnavailableError, load_store_from_file

SEED = {
    "users": [{"userId": "u1", "email": "sam@example.edu", "name": "Sam"}],
    "journals": {
        "u1": [
            {"title": "Older", "content": "a", "createdAt": "2026-03-01T08:00:00Z"},
            {"title": "Newer", "content": "b", "createdAt": "2026-03-02T08:00:00Z"},
        ]
    },
    "conversations": {
        "u1": [
            {
                "sessionId": "s1",
                "updatedAt": "2026-03-02T09:00:00Z",
                "messages": [{"role": "user", "content": "hi", "timestamp": "2026-03-02T09:00:00Z"}],
            }
        ]
    },
    "moods": {
        "u1": [
            {"label": "good", "occurredAt": "2026-03-01T08:00:00Z"},
            {"label": "low", "occurredAt": "2026-03-02T08:00:00Z", "intensity": 7},
        ]
    },
}


async def _collect(iterator):
    return [item async for item in iterator]


def test_from_dict_and_recency_order():
    store = InMemoryStore.from_dict(SEED)

    user = asyncio.run(store.get_user_by_email("sam@example.edu"))
    assert user.userId == "u1"
    assert asyncio.run(store.get_user_by_email("nobody@example.edu")) is None

    journals = asyncio.run(_collect(store.iter_journals("u1")))
    assert [j.title for j in journals] == ["Newer", "Older"]

    moods = asyncio.run(_collect(store.iter_moods("u1")))
    assert [m.label for m in moods] == ["low", "good"]
    assert moods[0].intensity == 7

    conversations = asyncio.run(_collect(store.iter_conversations("u1")))
    assert conversations[0].messages[0].content == "hi"


def test_unknown_user_has_no_history():
    store = InMemoryStore.from_dict(SEED)
    assert asyncio.run(_collect(store.iter_journals("u2"))) == []


def test_load_store_from_file(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(SEED), encoding="utf-8")

    store = load_store_from_file(path)
    assert "sam@example.edu" in store.users


def test_missing_seed_file_raises(tmp_path):
    with pytest.raises(StoreUnavailableError):
        load_store_from_file(tmp_path / "missing.json")


def test_invalid_seed_file_raises(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StoreUnavailableError):
        load_store_from_file(path)

    path.write_text(json.dumps({"users": [{"userId": "u1"}]}), encoding="utf-8")
    with pytest.raises(StoreUnavailableError):
        load_store_from_file(path)


def test_mixed_naive_and_utc_timestamps_sort_and_score():
    seed = {
        "users": [{"userId": "u1", "email": "sam@example.edu"}],
        "journals": {"u1": [
            {"title": "Naive", "content": "panic", "createdAt": "2026-03-02T10:00:00"},
            {"title": "Aware", "content": "calm", "createdAt": "2026-03-02T09:00:00Z"},
        ]},
        "conversations": {"u1": [
            {"sessionId": "s1", "updatedAt": "2026-03-01T09:00:00", "messages": []},
            {"sessionId": "s2", "updatedAt": "2026-03-02T09:00:00+00:00", "messages": []},
        ]},
        "moods": {"u1": [
            {"label": "very_low", "occurredAt": "2026-03-01T08:00:00"},
            {"label": "excellent", "occurredAt": "2026-03-02T08:00:00Z"},
        ]},
    }
    store = InMemoryStore.from_dict(seed)

    assert [j.title for j in asyncio.run(_collect(store.iter_journals("u1")))] == ["Naive", "Aware"]
    assert [c.sessionId for c in asyncio.run(_collect(store.iter_conversations("u1")))] == ["s2", "s1"]
    assert [m.label for m in asyncio.run(_collect(store.iter_moods("u1")))] == ["excellent", "very_low"]

    signals = asyncio.run(aggregate_signals(store, "u1"))
    assert signals.stressScore == 1
    assert signals.averageMood == 3.0
