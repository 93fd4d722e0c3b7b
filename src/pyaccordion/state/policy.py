"""Deterministic expansion and focus policy.

This module contains *no* notification or logging. Each reducer takes
the committed items plus the store flags and returns a
:class:`Transition`; the store decides what to do with it.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from pyaccordion.models.item import AccordionItem, Uuid
from pyaccordion.state.actions import ActionKind, StoreAction
from pyaccordion.state.focus import index_of, navigate


@dataclass(frozen=True, slots=True)
class Transition:
    """Result of reducing one action.

    ``applied`` is False when the action targeted an unknown uuid or was
    refused by policy; ``items`` is then the input tuple unchanged.
    ``warnings`` carries non-fatal diagnostics about the action.
    """

    items: tuple[AccordionItem, ...]
    applied: bool = True
    warnings: tuple[str, ...] = ()


def count_expanded(items: Iterable[AccordionItem]) -> int:
    return sum(1 for item in items if item.expanded)


def expanded_uuids(items: Iterable[AccordionItem]) -> list[Uuid]:
    return [item.uuid for item in items if item.expanded]


def find_duplicate_uuids(items: Iterable[AccordionItem]) -> list[Uuid]:
    """Uuids that occur more than once, in first-seen order."""
    counts = Counter(item.uuid for item in items)
    return [uuid for uuid, count in counts.items() if count > 1]


def is_sole_expanded(items: tuple[AccordionItem, ...], uuid: Uuid) -> bool:
    """Return True when every expanded item carries *uuid*.

    Duplicated uuids count as one item: collapsing or removing *uuid*
    would leave nothing expanded.
    """
    expanded = expanded_uuids(items)
    return bool(expanded) and all(candidate == uuid for candidate in expanded)


def duplicate_uuid_warning(uuid: Uuid) -> str:
    return f'One item already has the uuid "{uuid}". Item uuids must be unique within an accordion.'


def add_item(
    items: tuple[AccordionItem, ...],
    new_item: AccordionItem,
    *,
    allow_multiple_expanded: bool,
) -> Transition:
    warnings: tuple[str, ...] = ()
    if index_of(items, new_item.uuid) is not None:
        warnings = (duplicate_uuid_warning(new_item.uuid),)

    if not allow_multiple_expanded and new_item.expanded:
        # Collapse everything already present so the new item is the only one open.
        items = tuple(item.replace(expanded=False) for item in items)
    return Transition(items=(*items, new_item), warnings=warnings)


def remove_item(
    items: tuple[AccordionItem, ...],
    uuid: Uuid,
    *,
    allow_zero_expanded: bool,
) -> Transition:
    if index_of(items, uuid) is None:
        return Transition(items=items, applied=False)
    if not allow_zero_expanded and is_sole_expanded(items, uuid):
        return Transition(items=items, applied=False)
    return Transition(items=tuple(item for item in items if item.uuid != uuid))


def set_expanded(
    items: tuple[AccordionItem, ...],
    uuid: Uuid,
    expanded: bool,
    *,
    allow_multiple_expanded: bool,
    allow_zero_expanded: bool,
) -> Transition:
    if index_of(items, uuid) is None:
        return Transition(items=items, applied=False)
    if not expanded and not allow_zero_expanded and is_sole_expanded(items, uuid):
        return Transition(items=items, applied=False)

    collapse_others = expanded and not allow_multiple_expanded
    updated = []
    for item in items:
        if item.uuid == uuid:
            updated.append(item.replace(expanded=expanded))
        elif collapse_others:
            updated.append(item.replace(expanded=False))
        else:
            updated.append(item)
    return Transition(items=tuple(updated))


def remove_focus(items: tuple[AccordionItem, ...], uuid: Uuid) -> Transition:
    if index_of(items, uuid) is None:
        return Transition(items=items, applied=False)
    return Transition(items=tuple(item.replace(focus=False) if item.uuid == uuid else item for item in items))


def reduce(
    items: tuple[AccordionItem, ...],
    action: StoreAction,
    *,
    allow_multiple_expanded: bool,
    allow_zero_expanded: bool,
) -> Transition:
    """Compute the transition for *action* against *items*."""
    kind = action.kind
    if kind == ActionKind.ADD_ITEM:
        assert action.item is not None  # noqa: S101
        return add_item(items, action.item, allow_multiple_expanded=allow_multiple_expanded)
    if kind == ActionKind.REMOVE_ITEM:
        assert action.uuid is not None  # noqa: S101
        return remove_item(items, action.uuid, allow_zero_expanded=allow_zero_expanded)
    if kind == ActionKind.SET_EXPANDED:
        assert action.uuid is not None and action.expanded is not None  # noqa: S101
        return set_expanded(
            items,
            action.uuid,
            action.expanded,
            allow_multiple_expanded=allow_multiple_expanded,
            allow_zero_expanded=allow_zero_expanded,
        )
    if kind == ActionKind.REMOVE_FOCUS:
        assert action.uuid is not None  # noqa: S101
        return remove_focus(items, action.uuid)

    assert action.intent is not None  # noqa: S101
    navigated = navigate(items, action.intent, action.uuid)
    return Transition(items=navigated, applied=navigated is not items)
