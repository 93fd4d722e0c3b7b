"""Constants shared by the store and its input glue."""

from __future__ import annotations

import enum

# Environment variables read by ``AccordionConfig.from_env``.
ENV_ALLOW_MULTIPLE_EXPANDED = "ACCORDION_ALLOW_MULTIPLE_EXPANDED"
ENV_ALLOW_ZERO_EXPANDED = "ACCORDION_ALLOW_ZERO_EXPANDED"

TRUTHY_VALUES = frozenset({"1", "true", "yes", "y", "on"})
FALSY_VALUES = frozenset({"0", "false", "no", "n", "off"})


class KeyCode(enum.IntEnum):
    """Key codes a heading reacts to."""

    ENTER = 13
    SPACE = 32
    END = 35
    HOME = 36
    UP = 38
    DOWN = 40


TOGGLE_KEYS = frozenset({KeyCode.ENTER, KeyCode.SPACE})
