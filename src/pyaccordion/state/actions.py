"""Store actions.

Every store mutator converts its arguments into one of these actions.
Only the store's dispatch loop is allowed to reduce them into state.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator

from pyaccordion.models.item import AccordionItem, Uuid


class ActionKind(StrEnum):
    ADD_ITEM = "add_item"
    REMOVE_ITEM = "remove_item"
    SET_EXPANDED = "set_expanded"
    REMOVE_FOCUS = "remove_focus"
    MOVE_FOCUS = "move_focus"


class FocusIntent(StrEnum):
    HEAD = "head"
    TAIL = "tail"
    PREVIOUS = "previous"
    NEXT = "next"


# Intents that navigate relative to a reference item.
RELATIVE_INTENTS = frozenset({FocusIntent.PREVIOUS, FocusIntent.NEXT})


class StoreAction(BaseModel):
    """A single requested transition of the store."""

    model_config = ConfigDict(frozen=True)

    kind: ActionKind
    uuid: Uuid | None = None
    item: AccordionItem | None = None
    expanded: bool | None = None
    intent: FocusIntent | None = None

    @model_validator(mode="after")
    def _check_required_fields(self) -> StoreAction:
        kind = self.kind
        if kind == ActionKind.ADD_ITEM and self.item is None:
            raise ValueError("add_item requires an item")
        if kind in (ActionKind.REMOVE_ITEM, ActionKind.REMOVE_FOCUS) and self.uuid is None:
            raise ValueError(f"{kind} requires a uuid")
        if kind == ActionKind.SET_EXPANDED and (self.uuid is None or self.expanded is None):
            raise ValueError("set_expanded requires a uuid and an expanded flag")
        if kind == ActionKind.MOVE_FOCUS:
            if self.intent is None:
                raise ValueError("move_focus requires an intent")
            if self.intent in RELATIVE_INTENTS and self.uuid is None:
                raise ValueError(f"{self.intent} focus requires a reference uuid")
        return self

    @classmethod
    def add_item(cls, item: AccordionItem) -> StoreAction:
        return cls(kind=ActionKind.ADD_ITEM, item=item)

    @classmethod
    def remove_item(cls, uuid: Uuid) -> StoreAction:
        return cls(kind=ActionKind.REMOVE_ITEM, uuid=uuid)

    @classmethod
    def set_expanded(cls, uuid: Uuid, expanded: bool) -> StoreAction:
        return cls(kind=ActionKind.SET_EXPANDED, uuid=uuid, expanded=expanded)

    @classmethod
    def remove_focus(cls, uuid: Uuid) -> StoreAction:
        return cls(kind=ActionKind.REMOVE_FOCUS, uuid=uuid)

    @classmethod
    def move_focus(cls, intent: FocusIntent, uuid: Uuid | None = None) -> StoreAction:
        return cls(kind=ActionKind.MOVE_FOCUS, intent=intent, uuid=uuid)
