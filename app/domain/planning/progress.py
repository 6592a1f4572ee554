"""
Planning progress.

Each planning section stores a completion percentage that is recomputed in
full from its items after every add, update or remove. Clients cannot set it.
"""

import math
from collections.abc import Callable, Sequence


def completion_percentage(items: Sequence, is_complete: Callable) -> int:
    """Share of completed items as a whole percentage; an empty section is 0"""
    total = len(items)
    if total == 0:
        return 0
    done = sum(1 for item in items if is_complete(item))
    return int(math.floor(100 * done / total + 0.5))


def budget_item_done(item) -> bool:
    return bool(item.is_paid)


def guest_done(guest) -> bool:
    return guest.rsvp_status == "confirmed"


def timeline_item_done(item) -> bool:
    return item.status == "completed"


def checklist_item_done(item) -> bool:
    return bool(item.is_completed)


# section name -> (items attribute on Planning, progress column, completion predicate)
SECTIONS = {
    "budget": ("budget_items", "progress_budget", budget_item_done),
    "guests": ("guests", "progress_guests", guest_done),
    "timeline": ("timeline_items", "progress_timeline", timeline_item_done),
    "checklist": ("checklist_items", "progress_checklist", checklist_item_done),
}


def refresh_progress(planning, section: str = None) -> dict:
    """Recompute one section (or every section) on a Planning row in place"""
    names = [section] if section else list(SECTIONS)
    result = {}
    for name in names:
        items_attr, column, predicate = SECTIONS[name]
        value = completion_percentage(getattr(planning, items_attr), predicate)
        setattr(planning, column, value)
        result[name] = value
    return result


def overall_progress(planning) -> int:
    values = [getattr(planning, column) or 0 for _, column, _ in SECTIONS.values()]
    return int(math.floor(sum(values) / len(values) + 0.5))
