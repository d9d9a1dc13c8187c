"""Ranked "who to connect with" suggestions."""
from typing import List, Sequence

from .affinity import user_affinity, shared_events, shared_interests
from .records import HiveUser, Recommendation


def build_reason(user: HiveUser, other: HiveUser) -> str:
    """
    Explain a suggestion: shared events first, then a shared interest,
    then the generic fallback.
    """
    events = shared_events(user, other)
    if events:
        plural = "s" if len(events) > 1 else ""
        return f"{len(events)} shared event{plural}"

    interests = shared_interests(user, other)
    if interests:
        return f"Shares {interests[0].replace('_', ' ')} interest"

    return "Expanding your hive"


def get_recommended_connections(
    user: HiveUser,
    all_users: Sequence[HiveUser],
    limit: int = 5
) -> List[Recommendation]:
    """Top ``limit`` users by affinity to ``user``, never ``user`` itself.

    Equal affinities keep the order of ``all_users``.
    """
    if limit <= 0:
        return []

    candidates = [
        Recommendation(
            user=other,
            affinity=user_affinity(user, other),
            reason=build_reason(user, other),
        )
        for other in all_users
        if other.id != user.id
    ]
    candidates.sort(key=lambda rec: -rec.affinity)
    return candidates[:limit]
