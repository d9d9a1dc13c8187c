"""Value records consumed and produced by the hive engine.

All records are frozen: the engine reads what the caller hands it and
returns new structures, it never writes back to its inputs.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class HiveUser:
    """A member of the hive."""
    id: str
    name: str
    interests: Tuple[str, ...] = ()
    events_attended: Tuple[str, ...] = ()  # Event IDs, in attendance order
    connection_strength: float = 0.0  # 0-1, general platform engagement
    joined_at: str = ""
    hive_level: int = 1  # 1-5, informational only
    avatar_url: Optional[str] = None


@dataclass(frozen=True)
class HiveEvent:
    """An event with exactly one category."""
    id: str
    title: str
    category: str
    attendees: Tuple[str, ...] = ()  # User IDs
    host_id: str = ""
    date: str = ""


@dataclass(frozen=True)
class HiveGroup:
    """A bounded-size cluster of users."""
    id: str
    name: str
    members: Tuple[str, ...]
    shared_interests: Tuple[str, ...]
    affinity_score: float
    max_size: int


@dataclass(frozen=True)
class CellPosition:
    """Grid position; z is a shallow depth offset per hex ring."""
    x: float
    y: float
    z: float = 0.0


@dataclass(frozen=True)
class HiveCell:
    """A positioned, renderable wrapper around a user or an event."""
    id: str
    position: CellPosition
    cell_type: str  # "user" or "event"
    data: Union[HiveUser, HiveEvent]
    size: float
    color: str
    pulse_intensity: float
    connections: Tuple[str, ...] = ()  # Attendee IDs for event cells


@dataclass(frozen=True)
class HiveConnection:
    """Undirected weighted edge between two cell ids."""
    source: str
    target: str
    strength: float
    connection_type: str  # "user-user", "user-event" or "event-event"


@dataclass(frozen=True)
class HiveData:
    """Complete output of one graph build.

    ``placements`` records, for every user and event considered for a
    cell, whether a grid position was left for it.
    """
    cells: Tuple[HiveCell, ...]
    connections: Tuple[HiveConnection, ...]
    groups: Tuple[HiveGroup, ...]
    current_user_cell_id: str
    placements: Dict[str, bool] = field(default_factory=dict)

    def was_placed(self, entity_id: str) -> bool:
        """True if ``entity_id`` received a cell in this build."""
        return self.placements.get(entity_id, False)

    @property
    def dropped_ids(self) -> Tuple[str, ...]:
        return tuple(eid for eid, placed in self.placements.items() if not placed)

    def get_cell(self, cell_id: str) -> Optional[HiveCell]:
        for cell in self.cells:
            if cell.id == cell_id:
                return cell
        return None


@dataclass(frozen=True)
class Recommendation:
    """A suggested connection with a human-readable reason."""
    user: HiveUser
    affinity: float
    reason: str
