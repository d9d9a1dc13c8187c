"""Demo neighbourhood used for previews, seeding and tests."""
from .records import HiveUser, HiveEvent


DEMO_CURRENT_USER_ID = "user-1"

DEMO_USERS = (
    HiveUser(
        id="user-1",
        name="You",
        interests=("arts_crafts", "photography", "cooking"),
        events_attended=("event-1", "event-2", "event-5"),
        connection_strength=0.8,
        joined_at="2025-06-15",
        hive_level=3,
    ),
    HiveUser(
        id="user-2",
        name="Sarah Chen",
        avatar_url="https://i.pravatar.cc/150?img=1",
        interests=("arts_crafts", "photography"),
        events_attended=("event-1", "event-2"),
        connection_strength=0.9,
        joined_at="2025-03-10",
        hive_level=4,
    ),
    HiveUser(
        id="user-3",
        name="Mike Rodriguez",
        avatar_url="https://i.pravatar.cc/150?img=3",
        interests=("cooking", "outdoors"),
        events_attended=("event-3", "event-5"),
        connection_strength=0.6,
        joined_at="2025-08-20",
        hive_level=2,
    ),
    HiveUser(
        id="user-4",
        name="Emma Liu",
        avatar_url="https://i.pravatar.cc/150?img=5",
        interests=("photography", "tech"),
        events_attended=("event-2", "event-4"),
        connection_strength=0.7,
        joined_at="2025-07-05",
        hive_level=3,
    ),
    HiveUser(
        id="user-5",
        name="James Wilson",
        avatar_url="https://i.pravatar.cc/150?img=8",
        interests=("fitness", "outdoors"),
        events_attended=("event-6", "event-7"),
        connection_strength=0.5,
        joined_at="2025-09-12",
        hive_level=2,
    ),
    HiveUser(
        id="user-6",
        name="Priya Patel",
        avatar_url="https://i.pravatar.cc/150?img=9",
        interests=("arts_crafts", "wellness"),
        events_attended=("event-1", "event-8"),
        connection_strength=0.75,
        joined_at="2025-05-28",
        hive_level=3,
    ),
    HiveUser(
        id="user-7",
        name="Alex Kim",
        avatar_url="https://i.pravatar.cc/150?img=11",
        interests=("tech", "gaming"),
        events_attended=("event-4", "event-9"),
        connection_strength=0.4,
        joined_at="2025-10-01",
        hive_level=1,
    ),
    HiveUser(
        id="user-8",
        name="Nina Garcia",
        avatar_url="https://i.pravatar.cc/150?img=16",
        interests=("cooking", "languages"),
        events_attended=("event-3", "event-10"),
        connection_strength=0.65,
        joined_at="2025-04-18",
        hive_level=3,
    ),
)

DEMO_EVENTS = (
    HiveEvent(id="event-1", title="Pottery Workshop", category="arts_crafts",
              attendees=("user-1", "user-2", "user-6"), host_id="host-1", date="2026-01-15"),
    HiveEvent(id="event-2", title="Street Photography", category="photography",
              attendees=("user-1", "user-2", "user-4"), host_id="host-2", date="2026-01-20"),
    HiveEvent(id="event-3", title="Italian Cooking", category="cooking",
              attendees=("user-3", "user-8"), host_id="host-3", date="2026-01-25"),
    HiveEvent(id="event-4", title="App Development", category="tech",
              attendees=("user-4", "user-7"), host_id="host-4", date="2026-02-01"),
    HiveEvent(id="event-5", title="Farm to Table", category="cooking",
              attendees=("user-1", "user-3"), host_id="host-3", date="2026-02-05"),
    HiveEvent(id="event-6", title="Morning Yoga", category="fitness",
              attendees=("user-5",), host_id="host-5", date="2026-02-10"),
    HiveEvent(id="event-7", title="Trail Hiking", category="outdoors",
              attendees=("user-5",), host_id="host-6", date="2026-02-15"),
    HiveEvent(id="event-8", title="Meditation Circle", category="wellness",
              attendees=("user-6",), host_id="host-7", date="2026-02-20"),
)
