"""Greedy group clustering with size limits.

Users are visited in input order; each unassigned user pulls in its
strongest unassigned neighbours (affinity >= LOW_AFFINITY, at most
MAX_GROUP_SIZE - 1 of them). A group is only formed when it reaches
MIN_GROUP_SIZE. The result depends on input order on purpose: the same
input always yields the same groups.
"""
import logging
from collections import defaultdict
from typing import Dict, List, Sequence

from .affinity import user_affinity
from .constants import (
    LOW_AFFINITY, MAX_GROUP_SIZE, MIN_GROUP_SIZE, SHARED_INTEREST_QUORUM,
    GROUP_NAMES, EMPTY_GROUP_NAME, UNKNOWN_GROUP_NAME,
)
from .records import HiveUser, HiveEvent, HiveGroup


logger = logging.getLogger(__name__)


def compute_affinity_matrix(users: Sequence[HiveUser]) -> Dict[str, Dict[str, float]]:
    """Pairwise user affinities keyed by user id. O(n^2)."""
    matrix: Dict[str, Dict[str, float]] = {}
    for user_i in users:
        row = {}
        for user_j in users:
            if user_i.id != user_j.id:
                row[user_j.id] = user_affinity(user_i, user_j)
        matrix[user_i.id] = row
    return matrix


def generate_group_name(shared_interests: Sequence[str]) -> str:
    """Friendly group name from the first shared interest."""
    if not shared_interests:
        return EMPTY_GROUP_NAME
    return GROUP_NAMES.get(shared_interests[0], UNKNOWN_GROUP_NAME)


def find_shared_interests(group_users: Sequence[HiveUser]) -> List[str]:
    """Categories held by at least half of ``group_users``, in first-seen order."""
    counts: Dict[str, int] = defaultdict(int)
    for user in group_users:
        for interest in user.interests:
            counts[interest] += 1

    quorum = len(group_users) * SHARED_INTEREST_QUORUM
    return [interest for interest, count in counts.items() if count >= quorum]


def average_pairwise_affinity(
    members: Sequence[str],
    matrix: Dict[str, Dict[str, float]]
) -> float:
    """Mean affinity over all member pairs; 0 when there are no pairs."""
    total = 0.0
    pairs = 0
    for i, member_i in enumerate(members):
        for member_j in members[i + 1:]:
            total += matrix.get(member_i, {}).get(member_j, 0.0)
            pairs += 1
    return total / pairs if pairs else 0.0


def create_groups(
    users: Sequence[HiveUser],
    events: Sequence[HiveEvent] = ()
) -> List[HiveGroup]:
    """
    Partition users into bounded-size groups.

    Users that never reach MIN_GROUP_SIZE stay ungrouped. No user appears
    in more than one returned group. ``events`` is accepted for callers
    that pass the whole neighbourhood; the grouping only uses users.
    """
    matrix = compute_affinity_matrix(users)
    groups: List[HiveGroup] = []
    assigned = set()

    for user in users:
        if user.id in assigned:
            continue

        candidates = [
            (other_id, affinity)
            for other_id, affinity in matrix[user.id].items()
            if other_id not in assigned and affinity >= LOW_AFFINITY
        ]
        candidates.sort(key=lambda c: -c[1])
        candidates = candidates[:MAX_GROUP_SIZE - 1]

        if len(candidates) < MIN_GROUP_SIZE - 1:
            continue

        members = [user.id] + [other_id for other_id, _ in candidates]
        member_set = set(members)
        group_users = [u for u in users if u.id in member_set]

        shared = find_shared_interests(group_users)
        group = HiveGroup(
            id=f"group-{len(groups) + 1}",
            name=generate_group_name(shared),
            members=tuple(members),
            shared_interests=tuple(shared),
            affinity_score=average_pairwise_affinity(members, matrix),
            max_size=MAX_GROUP_SIZE,
        )
        groups.append(group)
        assigned.update(members)

        logger.debug(
            f"Formed {group.id} '{group.name}' with {len(members)} members "
            f"(affinity {group.affinity_score:.3f})"
        )

    ungrouped = sum(1 for u in users if u.id not in assigned)
    logger.info(f"Clustered {len(users)} users into {len(groups)} groups, {ungrouped} ungrouped")

    return groups
