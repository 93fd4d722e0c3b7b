"""Heading input glue.

Translates clicks, key codes and blur on an item heading into store
calls. The store does not look at ``disabled``; this layer does.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pyaccordion._constants import TOGGLE_KEYS, KeyCode
from pyaccordion.scope import ItemScope

_logger = logging.getLogger(__name__)


class HeadingControls:
    """Input handlers for the heading of one item.

    Every handler returns ``True`` when the input was acted upon.
    """

    def __init__(self, scope: ItemScope) -> None:
        self._scope = scope

    @property
    def scope(self) -> ItemScope:
        return self._scope

    def click(self) -> bool:
        item = self._scope.item
        if item is None:
            _logger.debug("Heading input ignored; uuid=%r is not in the store", self._scope.uuid)
            return False
        if item.disabled:
            return False
        self._scope.toggle()
        return True

    def key_press(self, code: int) -> bool:
        """Enter and Space behave like a click."""
        if code not in TOGGLE_KEYS:
            return False
        return self.click()

    def key_down(self, code: int) -> bool:
        """Home/End/Up/Down move the roving focus."""
        handlers: dict[int, Callable[[], None]] = {
            KeyCode.END: self._scope.focus_tail,
            KeyCode.HOME: self._scope.focus_head,
            KeyCode.UP: self._scope.focus_previous,
            KeyCode.DOWN: self._scope.focus_next,
        }
        handler = handlers.get(code)
        if handler is None:
            return False
        handler()
        return True

    def blur(self) -> bool:
        self._scope.remove_focus()
        return True
