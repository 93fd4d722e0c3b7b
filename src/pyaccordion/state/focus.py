"""Roving focus navigation.

Pure functions over an ordered item tuple. Focus never wraps around the
ends of the sequence.
"""

from __future__ import annotations

from pyaccordion.models.item import AccordionItem, Uuid
from pyaccordion.state.actions import FocusIntent


def index_of(items: tuple[AccordionItem, ...], uuid: Uuid) -> int | None:
    """Index of the first item matching *uuid*, or ``None``."""
    for index, item in enumerate(items):
        if item.uuid == uuid:
            return index
    return None


def focus_at(items: tuple[AccordionItem, ...], target: int) -> tuple[AccordionItem, ...]:
    """Give focus to ``items[target]`` and clear it everywhere else."""
    return tuple(item.replace(focus=index == target) for index, item in enumerate(items))


def _target_index(
    items: tuple[AccordionItem, ...],
    intent: FocusIntent,
    reference_uuid: Uuid | None,
) -> int | None:
    if not items:
        return None
    if intent == FocusIntent.HEAD:
        return 0
    if intent == FocusIntent.TAIL:
        return len(items) - 1

    if reference_uuid is None:
        return None
    current = index_of(items, reference_uuid)
    if current is None:
        return None
    if intent == FocusIntent.PREVIOUS:
        return current - 1 if current > 0 else None
    return current + 1 if current < len(items) - 1 else None


def navigate(
    items: tuple[AccordionItem, ...],
    intent: FocusIntent,
    reference_uuid: Uuid | None = None,
) -> tuple[AccordionItem, ...]:
    """Move the single focus pointer according to *intent*.

    Returns *items* itself when there is nowhere to move: an empty
    sequence, an unknown reference, or a reference already at the edge.
    """
    target = _target_index(items, intent, reference_uuid)
    if target is None:
        return items
    return focus_at(items, target)
