import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "backend"))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

os.environ.pop("WELLNESS_STORE_FILE", None)

from models import Conversation, ConversationMessage, JournalEntry, MoodSample, UserProfile  # noqa: E402
from store import InMemoryStore  # noqa: E402

NOW = datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)


def make_moods(labels, start=NOW):
    """Mood samples one hour apart, first label most recent."""
    return [
        MoodSample(label=label, occurredAt=start - timedelta(hours=i), intensity=5)
        for i, label in enumerate(labels)
    ]


def make_conversation(session_id, contents, updated_at):
    return Conversation(
        sessionId=session_id,
        messages=[
            ConversationMessage(role="user", content=c, timestamp=updated_at - timedelta(minutes=len(contents) - i))
            for i, c in enumerate(contents)
        ],
        updatedAt=updated_at,
    )


@pytest.fixture
def user():
    return UserProfile(userId="u1", email="sam@example.edu", name="Sam")


@pytest.fixture
def empty_history_store(user):
    return InMemoryStore(users=[user])


@pytest.fixture
def calm_store(user):
    """A user with cheerful history and good moods."""
    return InMemoryStore(
        users=[user],
        journals={"u1": [
            JournalEntry(title="Good day", content="Felt calm and grateful after class", createdAt=NOW),
        ]},
        conversations={"u1": [
            make_conversation("s1", ["I made progress and feel motivated"], NOW),
        ]},
        moods={"u1": make_moods(["good", "excellent", "good"])},
    )
