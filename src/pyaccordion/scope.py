"""Item scope: one store bound to one item.

Code that renders a single accordion item receives an :class:`ItemScope`
explicitly instead of looking the store up from its surroundings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pyaccordion.models.item import AccordionItem, Uuid

if TYPE_CHECKING:
    from pyaccordion.state.store import AccordionStore


@dataclass(frozen=True, slots=True)
class ItemScope:
    """Read access to one item plus the store handles its controls need."""

    store: AccordionStore
    uuid: Uuid

    @property
    def item(self) -> AccordionItem | None:
        """The committed item, or ``None`` once it has been removed."""
        return self.store.get_item(self.uuid)

    @property
    def expanded(self) -> bool:
        item = self.item
        return item is not None and item.expanded

    @property
    def disabled(self) -> bool:
        item = self.item
        return item is not None and item.disabled

    @property
    def focus(self) -> bool:
        item = self.item
        return item is not None and item.focus

    def set_expanded(self, expanded: bool) -> None:
        self.store.set_expanded(self.uuid, expanded)

    def toggle(self) -> None:
        """Flip the item's expansion; no-op if the item is gone."""
        item = self.item
        if item is None:
            return
        self.store.set_expanded(self.uuid, not item.expanded)

    def remove_focus(self) -> None:
        self.store.remove_focus(self.uuid)

    def focus_head(self) -> None:
        self.store.set_focus_to_head()

    def focus_tail(self) -> None:
        self.store.set_focus_to_tail()

    def focus_previous(self) -> None:
        self.store.set_focus_to_previous(self.uuid)

    def focus_next(self) -> None:
        self.store.set_focus_to_next(self.uuid)
