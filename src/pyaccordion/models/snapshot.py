"""Public snapshot broadcast to store subscribers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pyaccordion.models.item import AccordionItem, Uuid


@dataclass(frozen=True, slots=True)
class AccordionSnapshot:
    """Committed store state plus the handles that mutate it.

    Every subscriber of one commit receives the same instance. Handles
    called from inside a subscriber are queued: the store applies them
    after the current notification round, so reads made right after such
    a call still see this commit.
    """

    items: tuple[AccordionItem, ...]
    allow_multiple_expanded: bool
    allow_zero_expanded: bool
    add_item: Callable[[AccordionItem | Mapping[str, Any]], None]
    remove_item: Callable[[Uuid], None]
    set_expanded: Callable[[Uuid, bool], None]
    remove_focus: Callable[[Uuid], None]
    set_focus_to_head: Callable[[], None]
    set_focus_to_tail: Callable[[], None]
    set_focus_to_previous: Callable[[Uuid], None]
    set_focus_to_next: Callable[[Uuid], None]

    def get_item(self, uuid: Uuid) -> AccordionItem | None:
        for item in self.items:
            if item.uuid == uuid:
                return item
        return None

    @property
    def expanded_uuids(self) -> list[Uuid]:
        return [item.uuid for item in self.items if item.expanded]

    @property
    def focused_uuid(self) -> Uuid | None:
        return next((item.uuid for item in self.items if item.focus), None)
