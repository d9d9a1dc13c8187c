"""Affinity scoring between users, and between a user and an event.

Both scores are normalized to [0, 1]:

    user_affinity  = 0.5 * event_overlap + 0.4 * interest_overlap
                     + 0.1 * activity_compatibility
    event_affinity = 0.6 * category_match + 0.4 * social_proof

Overlaps divide by the larger of the two collections (floored at 1), so an
empty collection contributes 0 instead of failing.
"""
from typing import Iterable, Tuple

from .constants import (
    USER_AFFINITY_WEIGHTS, EVENT_AFFINITY_WEIGHTS, SOCIAL_PROOF_SATURATION,
    HIGH_AFFINITY, MEDIUM_AFFINITY, LOW_AFFINITY,
)
from .records import HiveUser, HiveEvent


def _ordered_intersection(first: Iterable[str], second: Iterable[str]) -> Tuple[str, ...]:
    """Distinct items of ``first`` that also appear in ``second``, in ``first`` order."""
    other = set(second)
    seen = set()
    shared = []
    for item in first:
        if item in other and item not in seen:
            seen.add(item)
            shared.append(item)
    return tuple(shared)


def shared_events(a: HiveUser, b: HiveUser) -> Tuple[str, ...]:
    """Event IDs both users attended, in ``a``'s attendance order."""
    return _ordered_intersection(a.events_attended, b.events_attended)


def shared_interests(a: HiveUser, b: HiveUser) -> Tuple[str, ...]:
    """Interest categories both users hold, in ``a``'s order."""
    return _ordered_intersection(a.interests, b.interests)


def user_affinity(a: HiveUser, b: HiveUser) -> float:
    """
    Symmetric relatedness of two distinct users.

    Callers must not score a user against itself.
    """
    max_events = max(len(a.events_attended), len(b.events_attended), 1)
    event_score = len(shared_events(a, b)) / max_events

    max_interests = max(len(a.interests), len(b.interests), 1)
    interest_score = len(shared_interests(a, b)) / max_interests

    activity_score = 1 - abs(a.connection_strength - b.connection_strength)

    return (
        event_score * USER_AFFINITY_WEIGHTS["events"]
        + interest_score * USER_AFFINITY_WEIGHTS["interests"]
        + activity_score * USER_AFFINITY_WEIGHTS["activity"]
    )


def event_affinity(user: HiveUser, event: HiveEvent) -> float:
    """Relatedness of a user to an event: category match plus social proof."""
    category_score = 1.0 if event.category in user.interests else 0.0

    other_attendees = sum(1 for attendee in event.attendees if attendee != user.id)
    social_score = min(other_attendees / SOCIAL_PROOF_SATURATION, 1.0)

    return (
        category_score * EVENT_AFFINITY_WEIGHTS["category"]
        + social_score * EVENT_AFFINITY_WEIGHTS["social"]
    )


def affinity_tier(score: float) -> str:
    """Classify a score against the high/medium/low thresholds."""
    if score >= HIGH_AFFINITY:
        return "high"
    elif score >= MEDIUM_AFFINITY:
        return "medium"
    elif score >= LOW_AFFINITY:
        return "low"
    else:
        return "none"
