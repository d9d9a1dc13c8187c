"""Fixed parameters of the hive engine.

Category vocabulary, palette and group-name table are part of the public
contract: renderers and clients key off the category names. Everything here
is built once at import time and exposed read-only.
"""
from types import MappingProxyType


# =============================================================================
# Interest Categories
# =============================================================================

INTEREST_CATEGORIES = (
    "arts_crafts",
    "cooking",
    "photography",
    "music",
    "fitness",
    "tech",
    "languages",
    "outdoors",
    "wellness",
    "gaming",
)

INTEREST_CATEGORY_SET = frozenset(INTEREST_CATEGORIES)

DEFAULT_CATEGORY = "arts_crafts"

INTEREST_COLORS = MappingProxyType({
    "arts_crafts": "#FFB347",  # Peach
    "cooking": "#FF6B6B",      # Coral
    "photography": "#4ECDC4",  # Teal
    "music": "#9B59B6",        # Purple
    "fitness": "#2ECC71",      # Green
    "tech": "#3498DB",         # Blue
    "languages": "#E74C3C",    # Red
    "outdoors": "#27AE60",     # Forest
    "wellness": "#F39C12",     # Gold
    "gaming": "#8E44AD",       # Violet
})

GROUP_NAMES = MappingProxyType({
    "arts_crafts": "Creative Bees",
    "cooking": "Kitchen Hive",
    "photography": "Lens Collective",
    "music": "Melody Makers",
    "fitness": "Active Swarm",
    "tech": "Digital Drones",
    "languages": "Global Buzzers",
    "outdoors": "Nature Seekers",
    "wellness": "Zen Garden",
    "gaming": "Player Hive",
})

EMPTY_GROUP_NAME = "New Colony"
UNKNOWN_GROUP_NAME = "Buzzing Group"


# =============================================================================
# Affinity
# =============================================================================

HIGH_AFFINITY = 0.7
MEDIUM_AFFINITY = 0.4
LOW_AFFINITY = 0.2

USER_AFFINITY_WEIGHTS = MappingProxyType({
    "events": 0.5,
    "interests": 0.4,
    "activity": 0.1,
})

EVENT_AFFINITY_WEIGHTS = MappingProxyType({
    "category": 0.6,
    "social": 0.4,
})

# 3+ other attendees already give full social proof
SOCIAL_PROOF_SATURATION = 3

# 3+ shared events give a full-strength co-attendance edge
SHARED_EVENT_SATURATION = 3


# =============================================================================
# Groups
# =============================================================================

MAX_GROUP_SIZE = 12
MIN_GROUP_SIZE = 3

# A category is shared when at least this fraction of members hold it
SHARED_INTEREST_QUORUM = 0.5


# =============================================================================
# Layout
# =============================================================================

HEX_SIZE_RATIO = 0.12
CENTER_Y_DIVISOR = 2.5
RING_DEPTH_STEP = 0.1

CURRENT_USER_CELL_SIZE = 3
HIGH_AFFINITY_CELL_SIZE = 2.5
MEDIUM_AFFINITY_CELL_SIZE = 2
LOW_AFFINITY_CELL_SIZE = 1.5
EVENT_CELL_SIZE = 1.8

EVENT_EDGE_STRENGTH = 0.5
NO_USER_EVENT_PULSE = 0.5

USER_USER = "user-user"
USER_EVENT = "user-event"
EVENT_EVENT = "event-event"

CONNECTION_TYPES = (USER_USER, USER_EVENT, EVENT_EVENT)
