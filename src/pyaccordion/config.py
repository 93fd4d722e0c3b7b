"""Store configuration for pyaccordion."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from pyaccordion._constants import (
    ENV_ALLOW_MULTIPLE_EXPANDED,
    ENV_ALLOW_ZERO_EXPANDED,
    FALSY_VALUES,
    TRUTHY_VALUES,
)
from pyaccordion.exceptions import AccordionConfigError
from pyaccordion.models.item import AccordionItem, Uuid, coerce_item

ChangeCallback = Callable[[Uuid | list[Uuid]], None]


def _env_bool(key: str, value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in TRUTHY_VALUES:
        return True
    if normalized in FALSY_VALUES:
        return False
    raise AccordionConfigError(f"{key} must be a boolean flag, got {value!r}", key=key)


@dataclasses.dataclass(frozen=True)
class AccordionConfig:
    """Store configuration.

    Parameters
    ----------
    allow_multiple_expanded : bool
        Allow more than one item to be expanded at once. When ``False``
        the store behaves as an exclusive accordion.
    allow_zero_expanded : bool
        Allow every item to be collapsed. When ``False`` the last
        expanded item can neither be collapsed nor removed.
    items : tuple of AccordionItem
        Initial items, in display order. Mappings are validated into
        :class:`AccordionItem` on construction.
    on_change : callable or None
        Called after every applied ``set_expanded`` with the changed
        uuid (exclusive mode) or the list of expanded uuids.
    """

    allow_multiple_expanded: bool = False
    allow_zero_expanded: bool = False
    items: tuple[AccordionItem, ...] = ()
    on_change: ChangeCallback | None = None

    def __post_init__(self) -> None:
        items: Sequence[AccordionItem | Mapping[str, Any]] = self.items
        object.__setattr__(self, "items", tuple(coerce_item(item) for item in items))

    @classmethod
    def from_env(cls, **overrides: Any) -> AccordionConfig:
        """Create configuration from environment variables.

        Reads ``ACCORDION_ALLOW_MULTIPLE_EXPANDED`` and
        ``ACCORDION_ALLOW_ZERO_EXPANDED``. Explicit keyword arguments
        override environment values.

        Raises
        ------
        AccordionConfigError
            If an environment flag is not a recognised boolean.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        _ENV_FLAG_MAP = {
            ENV_ALLOW_MULTIPLE_EXPANDED: "allow_multiple_expanded",
            ENV_ALLOW_ZERO_EXPANDED: "allow_zero_expanded",
        }
        for env_key, field_name in _ENV_FLAG_MAP.items():
            if field_name in overrides:
                continue
            config_kwargs[field_name] = _env_bool(env_key, env.get(env_key), False)

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
