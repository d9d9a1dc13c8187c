"""Hive builder - scores, clusters and lays out a neighbourhood.

Build order:
1. Request one hex position per user and event
2. Cluster users into groups (carried in the output for consumers)
3. Current user at the center
4. Remaining users ranked by affinity to the current user
5. Events in input order
6. Co-attendance edges between every pair of users sharing an event

Positions are finite: once they run out, the remaining users and events are
dropped from placement (recorded in ``HiveData.placements``), never from
groups or edges.
"""
import logging
from typing import Dict, List, Optional, Sequence, Set, Tuple, Union

from .affinity import user_affinity, event_affinity, shared_events
from .clustering import create_groups
from .constants import (
    INTEREST_COLORS, DEFAULT_CATEGORY,
    HIGH_AFFINITY, MEDIUM_AFFINITY, LOW_AFFINITY,
    CURRENT_USER_CELL_SIZE, HIGH_AFFINITY_CELL_SIZE, MEDIUM_AFFINITY_CELL_SIZE,
    LOW_AFFINITY_CELL_SIZE, EVENT_CELL_SIZE,
    EVENT_EDGE_STRENGTH, NO_USER_EVENT_PULSE, SHARED_EVENT_SATURATION,
    HEX_SIZE_RATIO, CENTER_Y_DIVISOR,
    USER_USER, USER_EVENT,
)
from .hex_layout import generate_hex_positions
from .records import (
    HiveUser, HiveEvent, HiveCell, HiveConnection, HiveData, CellPosition,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Styling
# =============================================================================

def category_color(category: Optional[str]) -> str:
    """Palette color for a category, falling back to arts_crafts."""
    return INTEREST_COLORS.get(category, INTEREST_COLORS[DEFAULT_CATEGORY])


def user_color(user: HiveUser) -> str:
    """Color from the user's first interest."""
    return category_color(user.interests[0] if user.interests else None)


def cell_size_for_affinity(affinity: float) -> float:
    """Visual size tier of a non-center user cell."""
    if affinity >= HIGH_AFFINITY:
        return HIGH_AFFINITY_CELL_SIZE
    elif affinity >= MEDIUM_AFFINITY:
        return MEDIUM_AFFINITY_CELL_SIZE
    else:
        return LOW_AFFINITY_CELL_SIZE


def viewport_geometry(
    viewport_width: float,
    viewport_height: float
) -> Tuple[float, float, float]:
    """Return (center_x, center_y, hex_size) for a viewport.

    The center sits in the upper part of the viewport.
    """
    hex_size = min(viewport_width, viewport_height) * HEX_SIZE_RATIO
    return viewport_width / 2, viewport_height / CENTER_Y_DIVISOR, hex_size


# =============================================================================
# Placement and Edges
# =============================================================================

class CellPlacer:
    """Hands out positions in order and records which entities got one."""

    def __init__(self, positions: Sequence[CellPosition]):
        self.positions = list(positions)
        self.index = 0
        self.cells: List[HiveCell] = []
        self.placements: Dict[str, bool] = {}

    @property
    def remaining(self) -> int:
        return len(self.positions) - self.index

    def place(
        self,
        cell_id: str,
        cell_type: str,
        data: Union[HiveUser, HiveEvent],
        size: float,
        color: str,
        pulse_intensity: float,
        connections: Tuple[str, ...] = ()
    ) -> bool:
        """
        Place a cell at the next free position.

        Returns False, and places nothing, when positions are exhausted.
        """
        if self.remaining <= 0:
            self.placements[cell_id] = False
            logger.debug(f"No position left for {cell_type} {cell_id}, dropped from placement")
            return False

        self.cells.append(HiveCell(
            id=cell_id,
            position=self.positions[self.index],
            cell_type=cell_type,
            data=data,
            size=size,
            color=color,
            pulse_intensity=pulse_intensity,
            connections=connections,
        ))
        self.index += 1
        self.placements[cell_id] = True
        return True


class ConnectionSet:
    """Ordered edge list with at most one edge per unordered pair per type."""

    def __init__(self):
        self.connections: List[HiveConnection] = []
        self._keys: Set[Tuple[frozenset, str]] = set()

    def __len__(self) -> int:
        return len(self.connections)

    def has(self, a: str, b: str, connection_type: str) -> bool:
        return (frozenset((a, b)), connection_type) in self._keys

    def add(self, source: str, target: str, strength: float, connection_type: str) -> bool:
        """Add an edge unless one already joins this pair with this type."""
        key = (frozenset((source, target)), connection_type)
        if key in self._keys:
            return False
        self._keys.add(key)
        self.connections.append(HiveConnection(
            source=source,
            target=target,
            strength=strength,
            connection_type=connection_type,
        ))
        return True


# =============================================================================
# Hive Builder
# =============================================================================

def rank_users_by_affinity(
    current_user: Optional[HiveUser],
    users: Sequence[HiveUser],
    exclude_id: Optional[str] = None
) -> List[Tuple[HiveUser, float]]:
    """
    Users (except ``exclude_id``) paired with their affinity to
    ``current_user``, strongest first. Ties keep input order.
    """
    ranked = [
        (user, user_affinity(current_user, user) if current_user else 0.0)
        for user in users
        if user.id != exclude_id
    ]
    return sorted(ranked, key=lambda item: -item[1])


def add_co_attendance_edges(users: Sequence[HiveUser], edges: ConnectionSet) -> int:
    """
    Connect every pair of users that attended at least one common event,
    unless a user-user edge already joins them. Returns edges added.
    """
    added = 0
    for i, user_i in enumerate(users):
        for user_j in users[i + 1:]:
            if user_i.id == user_j.id:
                continue
            shared = shared_events(user_i, user_j)
            if not shared:
                continue
            strength = min(len(shared) / SHARED_EVENT_SATURATION, 1.0)
            if edges.add(user_i.id, user_j.id, strength, USER_USER):
                added += 1
    return added


def build_hive_data(
    users: Sequence[HiveUser],
    events: Sequence[HiveEvent],
    current_user_id: str,
    viewport_width: float,
    viewport_height: float,
    max_cells: Optional[int] = None
) -> HiveData:
    """
    Build the complete hive graph anchored on ``current_user_id``.

    ``max_cells`` caps the number of positions requested; by default there
    is one per user and event. A missing current user yields zero affinity
    for everyone and no center cell.
    """
    total_cells = len(users) + len(events)
    if max_cells is not None:
        total_cells = min(total_cells, max(max_cells, 0))

    center_x, center_y, hex_size = viewport_geometry(viewport_width, viewport_height)
    positions = generate_hex_positions(total_cells, center_x, center_y, hex_size)

    groups = create_groups(users, events)

    placer = CellPlacer(positions)
    edges = ConnectionSet()

    current_user = next((u for u in users if u.id == current_user_id), None)

    if current_user:
        placer.place(
            current_user.id, "user", current_user,
            size=CURRENT_USER_CELL_SIZE,
            color=user_color(current_user),
            pulse_intensity=1.0,
        )
    else:
        logger.warning(f"Current user {current_user_id} not in population, building without a center cell")

    for user, affinity in rank_users_by_affinity(current_user, users, exclude_id=current_user_id):
        placed = placer.place(
            user.id, "user", user,
            size=cell_size_for_affinity(affinity),
            color=user_color(user),
            pulse_intensity=affinity,
        )
        if placed and affinity >= LOW_AFFINITY:
            edges.add(current_user_id, user.id, affinity, USER_USER)

    for event in events:
        pulse = event_affinity(current_user, event) if current_user else NO_USER_EVENT_PULSE
        placed = placer.place(
            event.id, "event", event,
            size=EVENT_CELL_SIZE,
            color=category_color(event.category),
            pulse_intensity=pulse,
            connections=tuple(event.attendees),
        )
        if not placed:
            continue
        # Attendees without a cell still get their edge
        for attendee_id in event.attendees:
            edges.add(event.id, attendee_id, EVENT_EDGE_STRENGTH, USER_EVENT)

    co_attendance = add_co_attendance_edges(users, edges)

    dropped = sum(1 for placed in placer.placements.values() if not placed)
    logger.info(
        f"Built hive for {current_user_id}: {len(placer.cells)} cells, "
        f"{len(edges)} connections ({co_attendance} co-attendance), "
        f"{len(groups)} groups, {dropped} dropped"
    )

    return HiveData(
        cells=tuple(placer.cells),
        connections=tuple(edges.connections),
        groups=tuple(groups),
        current_user_cell_id=current_user_id,
        placements=dict(placer.placements),
    )
