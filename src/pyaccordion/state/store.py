"""Accordion item store.

This is the only component allowed to commit item state. Mutators build
a :class:`StoreAction`, which is queued and reduced strictly in call
order: every action sees the state committed by the one before it.
"""

from __future__ import annotations

import dataclasses
import logging
from collections import deque
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from pyaccordion.config import AccordionConfig
from pyaccordion.models.item import AccordionItem, Uuid, coerce_item
from pyaccordion.models.snapshot import AccordionSnapshot
from pyaccordion.scope import ItemScope
from pyaccordion.state.actions import ActionKind, FocusIntent, StoreAction
from pyaccordion.state.focus import index_of
from pyaccordion.state.policy import duplicate_uuid_warning, expanded_uuids, find_duplicate_uuids, reduce

_logger = logging.getLogger(__name__)

Subscriber = Callable[[AccordionSnapshot], None]


class AccordionStore:
    """Ordered, single-owner store of accordion items.

    Usage::

        store = AccordionStore(allow_zero_expanded=True)
        unsubscribe = store.subscribe(render)
        store.add_item({"uuid": "intro", "expanded": True})
        store.set_focus_to_head()

    Mutators never raise for unknown uuids or refused transitions; those
    are silent no-ops. Subscribers are notified synchronously after
    every commit, before the mutator returns.
    """

    def __init__(self, config: AccordionConfig | None = None, **overrides: Any) -> None:
        config = config if config is not None else AccordionConfig()
        if overrides:
            config = dataclasses.replace(config, **overrides)
        self._config = config
        self._items: tuple[AccordionItem, ...] = config.items
        self._subscribers: list[Subscriber] = []
        self._queue: deque[StoreAction] = deque()
        self._dispatching = False

        for uuid in find_duplicate_uuids(self._items):
            _logger.warning(duplicate_uuid_warning(uuid))

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def config(self) -> AccordionConfig:
        return self._config

    @property
    def allow_multiple_expanded(self) -> bool:
        return self._config.allow_multiple_expanded

    @property
    def allow_zero_expanded(self) -> bool:
        return self._config.allow_zero_expanded

    @property
    def items(self) -> tuple[AccordionItem, ...]:
        return self._items

    def get_item(self, uuid: Uuid) -> AccordionItem | None:
        """Return the committed item matching *uuid*, or ``None``."""
        index = index_of(self._items, uuid)
        return self._items[index] if index is not None else None

    def snapshot(self) -> AccordionSnapshot:
        """Build the public snapshot of the committed state."""
        return AccordionSnapshot(
            items=self._items,
            allow_multiple_expanded=self.allow_multiple_expanded,
            allow_zero_expanded=self.allow_zero_expanded,
            add_item=self.add_item,
            remove_item=self.remove_item,
            set_expanded=self.set_expanded,
            remove_focus=self.remove_focus,
            set_focus_to_head=self.set_focus_to_head,
            set_focus_to_tail=self.set_focus_to_tail,
            set_focus_to_previous=self.set_focus_to_previous,
            set_focus_to_next=self.set_focus_to_next,
        )

    def scope(self, uuid: Uuid) -> ItemScope:
        """Bind this store to one item for the code that renders it."""
        return ItemScope(store=self, uuid=uuid)

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback* for post-commit snapshots.

        Returns a callable that unsubscribes; calling it again is a no-op.
        """
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Mutators
    #
    # Each mutator commits and notifies before returning. When called from
    # inside a subscriber or on_change callback it only queues its action;
    # the action commits after the current notification round, before the
    # outermost mutator returns.
    # ------------------------------------------------------------------

    def add_item(self, item: AccordionItem | Mapping[str, Any]) -> None:
        self._submit(lambda: StoreAction.add_item(coerce_item(item)))

    def remove_item(self, uuid: Uuid) -> None:
        self._submit(lambda: StoreAction.remove_item(uuid))

    def set_expanded(self, uuid: Uuid, expanded: bool) -> None:
        self._submit(lambda: StoreAction.set_expanded(uuid, expanded))

    def remove_focus(self, uuid: Uuid) -> None:
        self._submit(lambda: StoreAction.remove_focus(uuid))

    def set_focus_to_head(self) -> None:
        self._submit(lambda: StoreAction.move_focus(FocusIntent.HEAD))

    def set_focus_to_tail(self) -> None:
        self._submit(lambda: StoreAction.move_focus(FocusIntent.TAIL))

    def set_focus_to_previous(self, uuid: Uuid) -> None:
        self._submit(lambda: StoreAction.move_focus(FocusIntent.PREVIOUS, uuid))

    def set_focus_to_next(self, uuid: Uuid) -> None:
        self._submit(lambda: StoreAction.move_focus(FocusIntent.NEXT, uuid))

    # ------------------------------------------------------------------
    # Dispatch loop
    # ------------------------------------------------------------------

    def _submit(self, build: Callable[[], StoreAction]) -> None:
        """Build an action from mutator arguments and dispatch it.

        Arguments that fail validation (e.g. a bool uuid) cannot match any
        item; the call is logged and dropped without a commit.
        """
        try:
            action = build()
        except ValidationError:
            _logger.warning("Store call rejected: invalid arguments", exc_info=True)
            return
        self.dispatch(action)

    def dispatch(self, action: StoreAction) -> None:
        """Queue *action* and drain the queue unless a drain is already running.

        A mutator called from inside a subscriber or ``on_change`` callback
        is applied once the current commit has finished notifying.
        """
        self._queue.append(action)
        if self._dispatching:
            return

        self._dispatching = True
        try:
            while self._queue:
                self._apply(self._queue.popleft())
        finally:
            self._dispatching = False

    def _apply(self, action: StoreAction) -> None:
        transition = reduce(
            self._items,
            action,
            allow_multiple_expanded=self.allow_multiple_expanded,
            allow_zero_expanded=self.allow_zero_expanded,
        )
        for warning in transition.warnings:
            _logger.warning(warning)
        if not transition.applied:
            _logger.debug("Action %s not applied for uuid=%r", action.kind, action.uuid)

        self._items = transition.items
        self._broadcast()

        if action.kind == ActionKind.SET_EXPANDED and transition.applied and action.uuid is not None:
            self._emit_change(action.uuid)

    def _broadcast(self) -> None:
        snapshot = self.snapshot()
        for subscriber in list(self._subscribers):
            try:
                subscriber(snapshot)
            except Exception:
                _logger.warning("Store subscriber failed", exc_info=True)

    def _emit_change(self, uuid: Uuid) -> None:
        on_change = self._config.on_change
        if on_change is None:
            return
        payload: Uuid | list[Uuid] = expanded_uuids(self._items) if self.allow_multiple_expanded else uuid
        try:
            on_change(payload)
        except Exception:
            _logger.warning("on_change callback failed", exc_info=True)
