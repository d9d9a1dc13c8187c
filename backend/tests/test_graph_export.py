"""Test networkx export and serialisation of built hives."""
import pytest

from hive_engine.graph_export import to_networkx, hive_stats
from hive_engine.hive_builder import build_hive_data
from hive_engine.records import HiveEvent
from hive_engine.serialization import hive_data_to_dict, recommendation_to_dict
from hive_engine.recommendations import get_recommended_connections


@pytest.fixture
def demo_hive(demo_users, demo_events):
    return build_hive_data(demo_users, demo_events, "user-1", 400, 800)


class TestToNetworkx:
    """Test graph export."""

    def test_nodes_and_edges(self, demo_hive):
        G = to_networkx(demo_hive)

        assert G.number_of_nodes() == 16
        assert G.number_of_edges() == 24
        assert G.nodes["user-1"]["type"] == "user"
        assert G["user-1"]["user-2"]["weight"] == pytest.approx(0.69)

    def test_dangling_endpoints_marked(self, make_user):
        you = make_user("you", interests=["music"])
        gig = HiveEvent(id="gig", title="Gig", category="music", attendees=("you", "ghost"))

        G = to_networkx(build_hive_data([you], [gig], "you", 300, 300))

        assert G.nodes["ghost"]["placed"] is False
        assert G.nodes["gig"]["placed"] is True

    def test_stats(self, demo_hive):
        stats = hive_stats(demo_hive)

        # user-5 and its two solo events form their own component
        assert stats["componentCount"] == 2
        assert stats["danglingNodeCount"] == 0
        assert stats["groupCount"] == 1


class TestSerialization:
    """Test renderer payloads."""

    def test_hive_payload(self, demo_hive):
        body = hive_data_to_dict(demo_hive)

        assert body["stats"] == {
            "cellCount": 16,
            "connectionCount": 24,
            "groupCount": 1,
            "droppedCount": 0,
        }
        first_edge = body["connections"][0]
        assert set(first_edge) == {"from", "to", "strength", "type"}
        event_cell = next(c for c in body["cells"] if c["type"] == "event")
        assert event_cell["data"]["category"] == "arts_crafts"

    def test_dropped_listed(self, demo_users, demo_events):
        data = build_hive_data(demo_users, demo_events, "user-1", 400, 800, max_cells=10)
        body = hive_data_to_dict(data)

        assert body["stats"]["droppedCount"] == 6
        assert body["dropped"] == ["event-3", "event-4", "event-5", "event-6", "event-7", "event-8"]

    def test_recommendation_payload(self, demo_users):
        rec = get_recommended_connections(demo_users[0], demo_users, limit=1)[0]

        assert recommendation_to_dict(rec) == {
            "user": {
                "id": "user-2",
                "name": "Sarah Chen",
                "avatar": "https://i.pravatar.cc/150?img=1",
                "interests": ["arts_crafts", "photography"],
                "eventsAttended": ["event-1", "event-2"],
                "connectionStrength": 0.9,
                "joinedAt": "2025-03-10",
                "hiveLevel": 4,
            },
            "affinity": 0.69,
            "reason": "2 shared events",
        }
