"""Mood suggestion behind a swappable interface.

Only a placeholder ships: it picks a random level after an optional delay,
standing in for camera-based expression analysis. A real inference backend
implements ``MoodSuggester`` and is registered in ``create_suggester``.
"""

import random
import time
from dataclasses import dataclass
from typing import Optional, Protocol

import structlog

from .models import MAX_MOOD, MIN_MOOD

logger = structlog.get_logger()

MIN_CONFIDENCE = 0.7


@dataclass(frozen=True)
class MoodSuggestion:
    mood: int
    confidence: float


class MoodSuggester(Protocol):
    def suggest(self) -> MoodSuggestion: ...


class RandomMoodSuggester:
    """Uniform random mood with confidence in [0.7, 1.0)."""

    def __init__(self, rng: Optional[random.Random] = None, delay: float = 0.0):
        self.rng = rng or random.Random()
        self.delay = delay

    def suggest(self) -> MoodSuggestion:
        if self.delay > 0:
            time.sleep(self.delay)
        mood = self.rng.randint(MIN_MOOD, MAX_MOOD)
        confidence = self.rng.random() * (1 - MIN_CONFIDENCE) + MIN_CONFIDENCE
        logger.debug("mood_suggest.random", mood=mood, confidence=round(confidence, 3))
        return MoodSuggestion(mood=mood, confidence=confidence)


SUGGESTERS = {"random": RandomMoodSuggester}


def create_suggester(provider: str = "random", delay: float = 0.0) -> MoodSuggester:
    """Build the configured suggester."""
    cls = SUGGESTERS.get(provider)
    if cls is None:
        raise ValueError(f"Unknown mood suggester: {provider}. Must be one of {sorted(SUGGESTERS)}")
    return cls(delay=delay)
