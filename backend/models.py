"""
Data models for the wellness recommendation engine.
Everything here is built fresh per request and discarded afterwards.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


RecommendationCategory = Literal[
    "breathing",
    "meditation",
    "journaling",
    "mindfulness",
    "music",
    "reflection",
    "grounding",
    "motivational",
    "film",
    "walk",
    "game",
]


class Recommendation(BaseModel):
    """A single wellness suggestion drawn from one of the fixed pools."""
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Unique key within a result set")
    description: str = Field(..., description="What to do and why it helps")
    durationMinutes: int = Field(..., ge=1, description="Suggested duration in minutes")
    category: RecommendationCategory = Field(..., description="Kind of activity")


class StressTier(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TextScore(BaseModel):
    """Keyword hit counts for a blob of text. Also used as a running accumulator."""
    stress: int = Field(0, ge=0)
    positivity: int = Field(0, ge=0)

    def add(self, other: "TextScore", stress_weight: int = 1, positivity_weight: int = 1) -> None:
        self.stress += other.stress * stress_weight
        self.positivity += other.positivity * positivity_weight


class TextUnit(BaseModel):
    text: str
    sourceKind: Literal["journal", "conversationMessage", "liveInput"]


class Signals(BaseModel):
    """Aggregated signal for one user, computed once per request."""
    stressScore: int = Field(0, ge=0)
    positivityScore: int = Field(0, ge=0)
    averageMood: float = Field(3.0, ge=1, le=5)


class IntentFlags(BaseModel):
    """Independent topical flags detected in the live input text."""
    wants_film: bool = False
    wants_music: bool = False
    wants_walk: bool = False
    wants_game: bool = False
    topic_exam: bool = False
    topic_sleep: bool = False
    topic_focus: bool = False
    topic_lonely: bool = False
    topic_burnout: bool = False

    def active(self) -> list[str]:
        return [name for name, value in self.model_dump().items() if value]


# Stored records (read-only from the engine's point of view)

class Identity(BaseModel):
    """Identity handed over by the upstream auth layer."""
    subject: str
    email: Optional[str] = None


class UserProfile(BaseModel):
    userId: str
    email: str
    name: Optional[str] = None


def as_utc(value: datetime) -> datetime:
    # Naive timestamps are treated as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class MoodSample(BaseModel):
    # Unknown labels are kept and scored as neutral
    label: str = Field(..., description="very_low, low, neutral, good or excellent")
    occurredAt: datetime
    intensity: Optional[int] = Field(None, ge=1, le=10)

    @field_validator("occurredAt")
    @classmethod
    def normalize_timezone(cls, value: datetime) -> datetime:
        return as_utc(value)


class JournalEntry(BaseModel):
    title: str = ""
    content: str = ""
    createdAt: datetime

    @field_validator("createdAt")
    @classmethod
    def normalize_timezone(cls, value: datetime) -> datetime:
        return as_utc(value)


class ConversationMessage(BaseModel):
    role: str
    content: str
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def normalize_timezone(cls, value: datetime) -> datetime:
        return as_utc(value)


class Conversation(BaseModel):
    sessionId: str
    messages: list[ConversationMessage] = Field(default_factory=list)
    updatedAt: datetime

    @field_validator("updatedAt")
    @classmethod
    def normalize_timezone(cls, value: datetime) -> datetime:
        return as_utc(value)


# Mood analytics

class MoodTrendPoint(BaseModel):
    date: str
    mood: str
    value: int
    intensity: Optional[int] = None


class MoodTrends(BaseModel):
    trends: list[MoodTrendPoint] = Field(default_factory=list)
    averageMood: float = 0
    moodDistribution: dict[str, int] = Field(default_factory=dict)


class StressPattern(BaseModel):
    type: Literal["consecutive_low_mood"] = "consecutive_low_mood"
    severity: int = Field(..., ge=1, le=10)
    recommendation: str


# API request bodies

class RecommendationsRequest(BaseModel):
    """Request for personalized recommendations - frontend sends the live text only."""
    userText: str | None = None  # "What's on your mind right now?"
