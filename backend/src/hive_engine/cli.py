"""CLI for the hive engine."""
import argparse
import json
import logging
import sys

from .config import settings
from .database import init_db, SessionLocal
from .demo_data import DEMO_USERS, DEMO_EVENTS, DEMO_CURRENT_USER_ID
from .directory import load_users, load_events, seed_demo_directory
from .clustering import create_groups
from .graph_export import hive_stats
from .hive_builder import build_hive_data
from .recommendations import get_recommended_connections
from .serialization import hive_data_to_dict, group_to_dict, recommendation_to_dict
from .validation import HiveValidationError


class PopulationTooLarge(Exception):
    """More users than the engine is configured to handle in one call."""
    pass


def load_population(args):
    """Users and events from the demo set or the directory."""
    if args.demo:
        users, events = DEMO_USERS, DEMO_EVENTS
    else:
        init_db()
        db = SessionLocal()
        try:
            users = load_users(db)
            events = load_events(db)
        finally:
            db.close()

    if len(users) > settings.max_population:
        raise PopulationTooLarge(
            f"Population of {len(users)} users exceeds limit of {settings.max_population}"
        )
    return users, events


def cmd_init(args):
    """Initialize the database."""
    print("Initializing database...")
    init_db()
    print("Database initialized successfully")


def cmd_seed(args):
    """Seed the demo neighbourhood."""
    init_db()
    db = SessionLocal()

    try:
        users_added, events_added = seed_demo_directory(db)
        print(f"Seeded {users_added} members and {events_added} events")
    finally:
        db.close()


def cmd_hive(args):
    """Build and print the hive layout."""
    users, events = load_population(args)
    data = build_hive_data(
        users,
        events,
        args.user,
        args.width or settings.default_viewport_width,
        args.height or settings.default_viewport_height,
    )

    if args.json:
        print(json.dumps(hive_data_to_dict(data), indent=2))
        return

    print(f"Hive for {args.user}")
    print("=" * 40)
    for cell in data.cells:
        print(
            f"  {cell.cell_type:5} {cell.id:12} "
            f"({cell.position.x:7.1f}, {cell.position.y:7.1f}) "
            f"size {cell.size:<3} pulse {cell.pulse_intensity:.2f}"
        )
    print(f"\nConnections: {len(data.connections)}")
    print(f"Groups: {len(data.groups)}")
    if data.dropped_ids:
        print(f"Dropped from placement: {', '.join(data.dropped_ids)}")


def cmd_groups(args):
    """List groups."""
    users, events = load_population(args)
    groups = create_groups(users, events)

    if args.json:
        print(json.dumps([group_to_dict(g) for g in groups], indent=2))
        return

    if not groups:
        print("No groups formed")
        return

    for group in groups:
        interests = ", ".join(group.shared_interests) or "none"
        print(f"  {group.id}: {group.name} ({len(group.members)} members, affinity {group.affinity_score:.2f})")
        print(f"    Members: {', '.join(group.members)}")
        print(f"    Shared interests: {interests}")


def cmd_recommend(args):
    """Show recommended connections for a user."""
    users, _ = load_population(args)
    user = next((u for u in users if u.id == args.user), None)
    if not user:
        print(f"User {args.user} not found")
        return 1

    limit = settings.recommendation_limit if args.limit is None else args.limit
    recommendations = get_recommended_connections(user, users, limit=limit)

    if args.json:
        print(json.dumps([recommendation_to_dict(r) for r in recommendations], indent=2))
        return

    print(f"Recommended connections for {user.name}:")
    print("-" * 40)
    for rec in recommendations:
        print(f"  {rec.user.name:20} {rec.affinity:.2f}  {rec.reason}")


def cmd_stats(args):
    """Show graph statistics for the hive layout."""
    users, events = load_population(args)
    data = build_hive_data(
        users,
        events,
        args.user,
        settings.default_viewport_width,
        settings.default_viewport_height,
    )
    stats = hive_stats(data)

    if args.json:
        print(json.dumps(stats, indent=2))
        return

    print("Hive Statistics")
    print("=" * 40)
    print(f"Nodes: {stats['nodeCount']} ({stats['danglingNodeCount']} without a cell)")
    print(f"Edges: {stats['edgeCount']}")
    print(f"Components: {stats['componentCount']}")
    print(f"Density: {stats['density']}")
    print(f"Groups: {stats['groupCount']}")


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Hive Engine - affinity, groups and recommendations"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    def add_source_args(sub):
        sub.add_argument("--demo", action="store_true", help="Use the built-in demo neighbourhood")
        sub.add_argument("--json", action="store_true", help="Output full JSON payloads")

    # init
    init_parser = subparsers.add_parser("init", help="Initialize database")
    init_parser.set_defaults(func=cmd_init)

    # seed
    seed_parser = subparsers.add_parser("seed", help="Seed demo members and events")
    seed_parser.set_defaults(func=cmd_seed)

    # hive
    hive_parser = subparsers.add_parser("hive", help="Build the hive layout")
    hive_parser.add_argument("--user", "-u", default=DEMO_CURRENT_USER_ID, help="Current user ID")
    hive_parser.add_argument("--width", type=float, help="Viewport width")
    hive_parser.add_argument("--height", type=float, help="Viewport height")
    add_source_args(hive_parser)
    hive_parser.set_defaults(func=cmd_hive)

    # groups
    groups_parser = subparsers.add_parser("groups", help="List groups")
    add_source_args(groups_parser)
    groups_parser.set_defaults(func=cmd_groups)

    # recommend
    recommend_parser = subparsers.add_parser("recommend", help="Recommend connections")
    recommend_parser.add_argument("--user", "-u", default=DEMO_CURRENT_USER_ID, help="User ID")
    recommend_parser.add_argument("--limit", type=int, help="Number of suggestions")
    add_source_args(recommend_parser)
    recommend_parser.set_defaults(func=cmd_recommend)

    # stats
    stats_parser = subparsers.add_parser("stats", help="Show hive graph statistics")
    stats_parser.add_argument("--user", "-u", default=DEMO_CURRENT_USER_ID, help="Current user ID")
    add_source_args(stats_parser)
    stats_parser.set_defaults(func=cmd_stats)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args) or 0
    except (HiveValidationError, PopulationTooLarge) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
