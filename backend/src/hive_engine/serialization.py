"""JSON-ready payloads for the rendering layer."""
from typing import Union

from .records import (
    HiveUser, HiveEvent, HiveGroup, HiveCell, HiveConnection, HiveData,
    Recommendation,
)


def user_to_dict(user: HiveUser) -> dict:
    return {
        "id": user.id,
        "name": user.name,
        "avatar": user.avatar_url,
        "interests": list(user.interests),
        "eventsAttended": list(user.events_attended),
        "connectionStrength": user.connection_strength,
        "joinedAt": user.joined_at,
        "hiveLevel": user.hive_level,
    }


def event_to_dict(event: HiveEvent) -> dict:
    return {
        "id": event.id,
        "title": event.title,
        "category": event.category,
        "attendees": list(event.attendees),
        "hostId": event.host_id,
        "date": event.date,
    }


def _entity_to_dict(data: Union[HiveUser, HiveEvent]) -> dict:
    if isinstance(data, HiveEvent):
        return event_to_dict(data)
    return user_to_dict(data)


def group_to_dict(group: HiveGroup) -> dict:
    return {
        "id": group.id,
        "name": group.name,
        "members": list(group.members),
        "sharedInterests": list(group.shared_interests),
        "affinityScore": round(group.affinity_score, 4),
        "maxSize": group.max_size,
    }


def cell_to_dict(cell: HiveCell) -> dict:
    return {
        "id": cell.id,
        "type": cell.cell_type,
        "position": {
            "x": round(cell.position.x, 2),
            "y": round(cell.position.y, 2),
            "z": round(cell.position.z, 2),
        },
        "data": _entity_to_dict(cell.data),
        "connections": list(cell.connections),
        "size": cell.size,
        "color": cell.color,
        "pulseIntensity": round(cell.pulse_intensity, 4),
    }


def connection_to_dict(connection: HiveConnection) -> dict:
    return {
        "from": connection.source,
        "to": connection.target,
        "strength": round(connection.strength, 4),
        "type": connection.connection_type,
    }


def hive_data_to_dict(data: HiveData) -> dict:
    """Full hive payload, including a stats block like the frame JSON."""
    dropped = list(data.dropped_ids)
    return {
        "currentUserCellId": data.current_user_cell_id,
        "cells": [cell_to_dict(c) for c in data.cells],
        "connections": [connection_to_dict(c) for c in data.connections],
        "groups": [group_to_dict(g) for g in data.groups],
        "dropped": dropped,
        "stats": {
            "cellCount": len(data.cells),
            "connectionCount": len(data.connections),
            "groupCount": len(data.groups),
            "droppedCount": len(dropped),
        },
    }


def recommendation_to_dict(recommendation: Recommendation) -> dict:
    return {
        "user": user_to_dict(recommendation.user),
        "affinity": round(recommendation.affinity, 4),
        "reason": recommendation.reason,
    }
