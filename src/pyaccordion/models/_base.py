"""Base model for accordion state.

Every state model inherits from :class:`AccordionBaseModel` which
provides:

* ``frozen=True``: committed items are shared with subscribers as-is.
* ``extra="forbid"``: unknown keys are a validation error.
* ``alias_generator=to_camel`` with ``populate_by_name``: snake_case
  and camelCase keys both validate.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AccordionBaseModel(BaseModel):
    """Base for immutable accordion state models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def replace(self, **changes: Any) -> Self:
        """Return a copy with *changes* applied, or ``self`` when nothing differs."""
        if all(getattr(self, key) == value for key, value in changes.items()):
            return self
        return self.model_copy(update=changes)
