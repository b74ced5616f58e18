"""
Read-only access to stored user data.

The recommendation engine only reads bounded slices of a user's history. Real
deployments plug in their own WellnessStore; InMemoryStore backs development
and tests and can be seeded from a JSON file.
"""
import json
import logging
from pathlib import Path
from typing import Any, AsyncIterator, Dict, List, Optional, Protocol

from pydantic import ValidationError

from models import Conversation, JournalEntry, MoodSample, UserProfile

logger = logging.getLogger(__name__)


class StoreUnavailableError(RuntimeError):
    """Raised when stored user data cannot be read."""


class WellnessStore(Protocol):
    """Everything the engine needs from storage. All iterators yield most recent first."""

    async def get_user_by_email(self, email: str) -> Optional[UserProfile]:
        ...

    def iter_journals(self, user_id: str) -> AsyncIterator[JournalEntry]:
        ...

    def iter_conversations(self, user_id: str) -> AsyncIterator[Conversation]:
        ...

    def iter_moods(self, user_id: str) -> AsyncIterator[MoodSample]:
        ...


class InMemoryStore:
    """Dictionary-backed store. Records are sorted by recency on read."""

    def __init__(
        self,
        users: Optional[List[UserProfile]] = None,
        journals: Optional[Dict[str, List[JournalEntry]]] = None,
        conversations: Optional[Dict[str, List[Conversation]]] = None,
        moods: Optional[Dict[str, List[MoodSample]]] = None,
    ):
        self.users = {user.email: user for user in users or []}
        self.journals = journals or {}
        self.conversations = conversations or {}
        self.moods = moods or {}

    async def get_user_by_email(self, email: str) -> Optional[UserProfile]:
        return self.users.get(email)

    async def iter_journals(self, user_id: str) -> AsyncIterator[JournalEntry]:
        for entry in sorted(self.journals.get(user_id, []), key=lambda j: j.createdAt, reverse=True):
            yield entry

    async def iter_conversations(self, user_id: str) -> AsyncIterator[Conversation]:
        for conversation in sorted(self.conversations.get(user_id, []), key=lambda c: c.updatedAt, reverse=True):
            yield conversation

    async def iter_moods(self, user_id: str) -> AsyncIterator[MoodSample]:
        for sample in sorted(self.moods.get(user_id, []), key=lambda m: m.occurredAt, reverse=True):
            yield sample

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InMemoryStore":
        """
        Build a store from plain data.

        Expected shape:
            {
                "users": [{"userId": ..., "email": ..., "name": ...}],
                "journals": {"<userId>": [{"title", "content", "createdAt"}]},
                "conversations": {"<userId>": [{"sessionId", "messages", "updatedAt"}]},
                "moods": {"<userId>": [{"label", "occurredAt", "intensity"}]}
            }
        """
        return cls(
            users=[UserProfile.model_validate(u) for u in data.get("users", [])],
            journals={
                user_id: [JournalEntry.model_validate(j) for j in entries]
                for user_id, entries in data.get("journals", {}).items()
            },
            conversations={
                user_id: [Conversation.model_validate(c) for c in entries]
                for user_id, entries in data.get("conversations", {}).items()
            },
            moods={
                user_id: [MoodSample.model_validate(m) for m in entries]
                for user_id, entries in data.get("moods", {}).items()
            },
        )


def load_store_from_file(path: Path) -> InMemoryStore:
    """Load an InMemoryStore from a JSON seed file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        store = InMemoryStore.from_dict(data)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Could not load store seed file {path}: {e}")
        raise StoreUnavailableError(f"Could not load store seed file {path}: {e}") from e

    logger.info(f"Loaded store seed from {path}: {len(store.users)} users")
    return store
