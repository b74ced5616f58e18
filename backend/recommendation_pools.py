"""
Fixed recommendation pools.
Pools are immutable tuples built once at import time and shared by all requests.
"""
from typing import Dict, Tuple

from models import Recommendation, StressTier

RecommendationPool = Tuple[Recommendation, ...]


def _pool(*items: Recommendation) -> RecommendationPool:
    titles = [item.title for item in items]
    if not titles:
        raise ValueError("Recommendation pool must not be empty")
    if len(set(titles)) != len(titles):
        raise ValueError(f"Recommendation pool has duplicate titles: {titles}")
    return tuple(items)


# Stress tiers

HIGH_STRESS_POOL = _pool(
    Recommendation(
        title="Grounding: 5-4-3-2-1",
        description="Anchor in the present using senses: 5 see, 4 feel, 3 hear, 2 smell, 1 taste. Quick reset under pressure.",
        durationMinutes=3,
        category="grounding",
    ),
    Recommendation(
        title="Box Breathing 60s",
        description="Inhale 4, hold 4, exhale 4, hold 4. 4 cycles to downshift your nervous system.",
        durationMinutes=1,
        category="breathing",
    ),
    Recommendation(
        title="Micro-Meditation (2 min)",
        description="Close eyes, follow the breath gently. When distracted, kindly return attention.",
        durationMinutes=2,
        category="meditation",
    ),
)

MEDIUM_STRESS_POOL = _pool(
    Recommendation(
        title="Positive Reframe",
        description="Write one worry, then reframe it kindly. Focus on a tiny, doable next step.",
        durationMinutes=3,
        category="reflection",
    ),
    Recommendation(
        title="3-2-1 Study Starter",
        description="3 breaths, 2 minutes mindful pause, 1 intention. Start lighter and steadier.",
        durationMinutes=3,
        category="mindfulness",
    ),
    Recommendation(
        title="Gentle Focus Music",
        description="Low-stimulus soundscape to ease into a calm, productive state.",
        durationMinutes=3,
        category="music",
    ),
)

LOW_STRESS_POOL = _pool(
    Recommendation(
        title="Gratitude Trio",
        description="Note three small wins or comforts today. Builds momentum and resilience.",
        durationMinutes=2,
        category="journaling",
    ),
    Recommendation(
        title="Single-Task Sprint (15m)",
        description="Pick one small, finishable task. Short, focused burst to keep your rhythm.",
        durationMinutes=15,
        category="mindfulness",
    ),
    Recommendation(
        title="Breathing Pause (60s)",
        description="One minute of paced breathing to maintain your steady state.",
        durationMinutes=1,
        category="breathing",
    ),
)

TIER_POOLS: Dict[StressTier, RecommendationPool] = {
    StressTier.HIGH: HIGH_STRESS_POOL,
    StressTier.MEDIUM: MEDIUM_STRESS_POOL,
    StressTier.LOW: LOW_STRESS_POOL,
}

MOTIVATIONAL_NUDGE = Recommendation(
    title="Motivational Nudge",
    description="Progress > perfection. One tiny, kind step is enough right now.",
    durationMinutes=1,
    category="motivational",
)


# Intents

FILM_POOL = _pool(
    Recommendation(
        title="Feel-Good Film Break",
        description="Pick a gentle, uplifting movie (e.g., Paddington 2, Soul, The Secret Life of Walter Mitty). Set a 90-120m window max.",
        durationMinutes=100,
        category="film",
    ),
    Recommendation(
        title="Short Series Reset",
        description="Watch one light episode (20-30m) then return. Keeps it restorative, not avoidant.",
        durationMinutes=25,
        category="film",
    ),
)

MUSIC_POOL = _pool(
    Recommendation(
        title="Lofi Focus Mix (15m)",
        description="Low-stimulus playlist to settle attention. Headphones, moderate volume, one small task.",
        durationMinutes=15,
        category="music",
    ),
    Recommendation(
        title="Mood Uplift Tracks (5-10m)",
        description="Play 2-3 upbeat songs you associate with small wins to nudge momentum.",
        durationMinutes=8,
        category="music",
    ),
)

WALK_POOL = _pool(
    Recommendation(
        title="Sunlight Walk (10m)",
        description="Go outside for fresh air and gentle sunlight. Look far, relax shoulders, breathe slowly.",
        durationMinutes=10,
        category="walk",
    ),
    Recommendation(
        title="Stretch & Sip (5m)",
        description="Light stretches + hydration break. Calm the body before the next step.",
        durationMinutes=5,
        category="walk",
    ),
)

GAME_POOL = _pool(
    Recommendation(
        title="Quick Breathing Game (60s)",
        description="Follow a paced inhale/exhale rhythm like a mini game. Aim for 4 calm cycles.",
        durationMinutes=1,
        category="game",
    ),
    Recommendation(
        title="5-4-3-2-1 Senses Challenge",
        description="Name 5 see, 4 feel, 3 hear, 2 smell, 1 taste. Turn grounding into a quick win.",
        durationMinutes=3,
        category="game",
    ),
)

EXAM_POOL = _pool(
    Recommendation(
        title="3-2-1 Study Starter",
        description="3 breaths, 2 minutes mindful pause, 1 clear intention. Start lighter and steadier.",
        durationMinutes=3,
        category="mindfulness",
    ),
)

SLEEP_POOL = _pool(
    Recommendation(
        title="Sleep Wind-Down (10m)",
        description="Dim lights, stretch 2m, hydrate, jot a 3-item plan for tomorrow. Signal your brain it's bedtime.",
        durationMinutes=10,
        category="mindfulness",
    ),
)

LONELY_POOL = _pool(
    Recommendation(
        title="Micro-Connection (3m)",
        description="Send a supportive note or thank someone specifically. A small social dose reduces stress.",
        durationMinutes=3,
        category="reflection",
    ),
)


# Top-up when the merged list is short

FALLBACK_POOL = _pool(
    Recommendation(
        title="Calm Reset (2 min)",
        description="Sit comfortably, soften shoulders, follow the breath. Let thoughts pass.",
        durationMinutes=2,
        category="meditation",
    ),
    Recommendation(
        title="Gratitude Trio",
        description="Note 3 small wins or comforts today to gently lift mood.",
        durationMinutes=2,
        category="journaling",
    ),
    Recommendation(
        title="Breathing Pause (60s)",
        description="Inhale 4, hold 4, exhale 6. Repeat to downshift tension quickly.",
        durationMinutes=1,
        category="breathing",
    ),
)


# Users we cannot personalize for. Each unresolved path returns its own list.
# TODO: merge the three lists once product signs off on a single generic set.

ANONYMOUS_RECOMMENDATIONS = _pool(
    Recommendation(
        title="60s Box Breathing",
        description="A short-paced breath to reset tension: inhale 4, hold 4, exhale 4, hold 4. Repeat for 60s.",
        durationMinutes=1,
        category="breathing",
    ),
    Recommendation(
        title="3-2-1 Pre-Study Calm",
        description="3 deep breaths, 2 minutes of mindful pause, 1 intention for your next task.",
        durationMinutes=3,
        category="mindfulness",
    ),
    Recommendation(
        title="Gratitude Trio",
        description="List 3 small things you appreciated today to nudge your mood upward.",
        durationMinutes=2,
        category="journaling",
    ),
)

NO_CONTACT_RECOMMENDATIONS = _pool(
    Recommendation(
        title="Grounding: 5-4-3-2-1",
        description="Use your senses to anchor in the present: 5 see, 4 feel, 3 hear, 2 smell, 1 taste.",
        durationMinutes=3,
        category="grounding",
    ),
    Recommendation(
        title="Gentle Focus Music",
        description="A short calming soundscape to ease into steady attention.",
        durationMinutes=2,
        category="music",
    ),
    Recommendation(
        title="Positive Reframe",
        description="Write one current worry, then reframe it into a kinder, more helpful perspective.",
        durationMinutes=3,
        category="reflection",
    ),
)

UNKNOWN_PROFILE_RECOMMENDATIONS = _pool(
    Recommendation(
        title="60s Breathing",
        description="A minute of paced breathing lowers stress and calms the nervous system.",
        durationMinutes=1,
        category="breathing",
    ),
    Recommendation(
        title="Micro-Meditation",
        description="Close your eyes, follow your breath for 2 minutes. Reset before your next step.",
        durationMinutes=2,
        category="meditation",
    ),
    Recommendation(
        title="Gratitude Trio",
        description="Note 3 small wins or comforts. Small positives compound into momentum.",
        durationMinutes=2,
        category="journaling",
    ),
)
