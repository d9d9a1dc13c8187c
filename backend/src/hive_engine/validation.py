"""Boundary checks for records entering the engine.

The engine itself never raises on odd input; records are checked where they
are hydrated (directory, API payloads).
"""
from typing import Iterable

from .constants import INTEREST_CATEGORY_SET
from .records import HiveUser, HiveEvent


class HiveValidationError(ValueError):
    """A user or event record violates its invariants."""
    pass


def validate_user(user: HiveUser) -> HiveUser:
    """Return ``user`` unchanged, or raise HiveValidationError."""
    if not user.id:
        raise HiveValidationError("User id must not be empty")

    unknown = [i for i in user.interests if i not in INTEREST_CATEGORY_SET]
    if unknown:
        raise HiveValidationError(f"User {user.id} has unknown interests: {', '.join(unknown)}")

    if not 0.0 <= user.connection_strength <= 1.0:
        raise HiveValidationError(
            f"User {user.id} connection strength {user.connection_strength} outside [0, 1]"
        )

    if not 1 <= user.hive_level <= 5:
        raise HiveValidationError(f"User {user.id} hive level {user.hive_level} outside [1, 5]")

    return user


def validate_event(event: HiveEvent) -> HiveEvent:
    """Return ``event`` unchanged, or raise HiveValidationError."""
    if not event.id:
        raise HiveValidationError("Event id must not be empty")

    if event.category not in INTEREST_CATEGORY_SET:
        raise HiveValidationError(f"Event {event.id} has unknown category: {event.category}")

    return event


def validate_population(users: Iterable[HiveUser], events: Iterable[HiveEvent]) -> None:
    """Validate every record and reject duplicate ids."""
    seen_users = set()
    for user in users:
        validate_user(user)
        if user.id in seen_users:
            raise HiveValidationError(f"Duplicate user id: {user.id}")
        seen_users.add(user.id)

    seen_events = set()
    for event in events:
        validate_event(event)
        if event.id in seen_events:
            raise HiveValidationError(f"Duplicate event id: {event.id}")
        seen_events.add(event.id)
