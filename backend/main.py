import logging
import traceback
from typing import Optional

from fastapi import Depends, FastAPI, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from config import get_settings
from models import Identity, MoodTrends, Recommendation, RecommendationsRequest, StressPattern, UserProfile
from mood_aggregator import DEFAULT_TREND_DAYS, STRESS_PATTERN_WINDOW, detect_stress_patterns, mood_trends
from recommendations import get_personalized_recommendations
from signal_aggregator import collect_moods
from store import InMemoryStore, WellnessStore, load_store_from_file

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

# Upper bound on mood samples read for the trends view
MAX_TREND_SAMPLES = 500

app = FastAPI(title="Student Wellness Recommendations API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_store: Optional[WellnessStore] = None


def get_store() -> WellnessStore:
    """Shared store, created on first use from the configured seed file (or empty)."""
    global _store
    if _store is None:
        if settings.store_file:
            _store = load_store_from_file(settings.store_file)
        else:
            logger.warning("WELLNESS_STORE_FILE not set, starting with an empty in-memory store")
            _store = InMemoryStore()
    return _store


def get_identity(
    x_user_subject: Optional[str] = Header(default=None),
    x_user_email: Optional[str] = Header(default=None),
) -> Optional[Identity]:
    """Identity resolved upstream by the auth layer and forwarded in headers."""
    if not x_user_subject:
        return None
    return Identity(subject=x_user_subject, email=x_user_email or None)


async def _resolve_user(identity: Optional[Identity], store: WellnessStore) -> Optional[UserProfile]:
    if identity is None or not identity.email:
        return None
    return await store.get_user_by_email(identity.email)


@app.get("/")
async def root():
    return {"message": "Student Wellness Recommendations API"}


@app.post("/api/recommendations", response_model=list[Recommendation])
async def recommendations(
    request: Optional[RecommendationsRequest] = None,
    identity: Optional[Identity] = Depends(get_identity),
    store: WellnessStore = Depends(get_store),
):
    """Personalized wellness suggestions for the current user."""
    try:
        user_text = request.userText if request else None
        logger.info(f"Received recommendations request: signed_in={identity is not None}, has_text={bool(user_text)}")
        result = await get_personalized_recommendations(identity, user_text, store=store)
        logger.info(f"Returning {len(result)} recommendations")
        return result
    except Exception as exc:
        error_msg = str(exc)
        error_trace = traceback.format_exc()
        logger.error(f"Error in /api/recommendations: {error_msg}\n{error_trace}")
        raise HTTPException(
            status_code=500,
            detail=error_msg
        )


@app.get("/api/mood_trends", response_model=MoodTrends)
async def get_mood_trends(
    days: int = DEFAULT_TREND_DAYS,
    identity: Optional[Identity] = Depends(get_identity),
    store: WellnessStore = Depends(get_store),
):
    """Mood trend points, average and distribution for the dashboard."""
    try:
        user = await _resolve_user(identity, store)
        if user is None:
            return MoodTrends()

        samples = await collect_moods(store, user.userId, limit=MAX_TREND_SAMPLES)
        trends = mood_trends(samples, days=days)
        logger.info(f"Built {len(trends.trends)} mood trend points for user {user.userId}")
        return trends
    except Exception as exc:
        error_msg = str(exc)
        error_trace = traceback.format_exc()
        logger.error(f"Error in /api/mood_trends: {error_msg}\n{error_trace}")
        raise HTTPException(
            status_code=500,
            detail=error_msg
        )


@app.get("/api/stress_patterns", response_model=list[StressPattern])
async def get_stress_patterns(
    identity: Optional[Identity] = Depends(get_identity),
    store: WellnessStore = Depends(get_store),
):
    """Runs of consecutive low moods in the user's recent history."""
    try:
        user = await _resolve_user(identity, store)
        if user is None:
            return []

        samples = await collect_moods(store, user.userId, limit=STRESS_PATTERN_WINDOW)
        return detect_stress_patterns(samples)
    except Exception as exc:
        error_msg = str(exc)
        error_trace = traceback.format_exc()
        logger.error(f"Error in /api/stress_patterns: {error_msg}\n{error_trace}")
        raise HTTPException(
            status_code=500,
            detail=error_msg
        )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
