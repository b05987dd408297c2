"""Event helper utilities.

Quick import:
    from packweight.events.event_helpers import publish_pack_list_changed
"""
from __future__ import annotations
from .Event_Bus import publish_event, PACK_LIST_CHANGED

__all__ = ['publish_pack_list_changed', 'PACK_LIST_CHANGED']


def publish_pack_list_changed(pack_list_id: str, reason: str = "updated"):
    """Publish a pack_list.changed event."""
    publish_event(PACK_LIST_CHANGED, {'pack_list_id': pack_list_id, 'reason': reason})

