"""Read side of the member/event directory.

Hydrates ORM rows into engine records. The engine path only reads; demo
seeding is a separate, explicit action.
"""
import json
import logging
from typing import Iterable, Tuple

from sqlalchemy.orm import Session

from .models import Member, HostedEvent
from .records import HiveUser, HiveEvent
from .validation import validate_user, validate_event, validate_population
from .demo_data import DEMO_USERS, DEMO_EVENTS


logger = logging.getLogger(__name__)


def member_to_user(member: Member) -> HiveUser:
    return validate_user(HiveUser(
        id=member.member_id,
        name=member.name,
        avatar_url=member.avatar_url,
        interests=member.interests,
        events_attended=member.events_attended,
        connection_strength=member.connection_strength,
        joined_at=member.joined_at,
        hive_level=member.hive_level,
    ))


def row_to_event(row: HostedEvent) -> HiveEvent:
    return validate_event(HiveEvent(
        id=row.event_id,
        title=row.title,
        category=row.category,
        attendees=row.attendees,
        host_id=row.host_id,
        date=row.date,
    ))


def load_users(db: Session) -> Tuple[HiveUser, ...]:
    """All members, in directory order."""
    members = db.query(Member).order_by(Member.sort_order.asc(), Member.member_id.asc()).all()
    return tuple(member_to_user(m) for m in members)


def load_events(db: Session) -> Tuple[HiveEvent, ...]:
    """All events, in directory order."""
    rows = db.query(HostedEvent).order_by(HostedEvent.sort_order.asc(), HostedEvent.event_id.asc()).all()
    return tuple(row_to_event(r) for r in rows)


def seed_directory(
    db: Session,
    users: Iterable[HiveUser],
    events: Iterable[HiveEvent]
) -> Tuple[int, int]:
    """
    Insert users and events that are not in the directory yet.

    Returns (users_added, events_added). Existing rows are left untouched.
    """
    users = list(users)
    events = list(events)
    validate_population(users, events)

    next_member_order = db.query(Member).count()
    users_added = 0
    for user in users:
        if db.query(Member).filter(Member.member_id == user.id).first():
            continue
        db.add(Member(
            member_id=user.id,
            name=user.name,
            avatar_url=user.avatar_url,
            interests_json=json.dumps(list(user.interests)),
            events_attended_json=json.dumps(list(user.events_attended)),
            connection_strength=user.connection_strength,
            joined_at=user.joined_at,
            hive_level=user.hive_level,
            sort_order=next_member_order + users_added,
        ))
        users_added += 1

    next_event_order = db.query(HostedEvent).count()
    events_added = 0
    for event in events:
        if db.query(HostedEvent).filter(HostedEvent.event_id == event.id).first():
            continue
        db.add(HostedEvent(
            event_id=event.id,
            title=event.title,
            category=event.category,
            attendees_json=json.dumps(list(event.attendees)),
            host_id=event.host_id,
            date=event.date,
            sort_order=next_event_order + events_added,
        ))
        events_added += 1

    db.commit()
    logger.info(f"Seeded directory: {users_added} members, {events_added} events")
    return users_added, events_added


def seed_demo_directory(db: Session) -> Tuple[int, int]:
    """Seed the demo neighbourhood. Safe to call repeatedly."""
    return seed_directory(db, DEMO_USERS, DEMO_EVENTS)
