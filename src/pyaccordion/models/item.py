"""Accordion item model."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, TypeAlias

from pydantic import BeforeValidator, Field

from pyaccordion.models._base import AccordionBaseModel


def _reject_bool_uuid(value: Any) -> Any:
    # bool is an int subclass; True/False would silently alias 1/0.
    if isinstance(value, bool):
        raise ValueError("uuid must be a string or an integer")
    return value


Uuid: TypeAlias = Annotated[str | int, BeforeValidator(_reject_bool_uuid)]
"""Opaque item identifier, unique within one store."""


class AccordionItem(AccordionBaseModel):
    """One collapsible entry of an accordion."""

    uuid: Uuid = Field(..., description="Identifier unique within the owning store")
    expanded: bool = False
    disabled: bool = False
    focus: bool = False


def coerce_item(value: AccordionItem | Mapping[str, Any]) -> AccordionItem:
    """Return *value* as an :class:`AccordionItem`, validating mappings."""
    if isinstance(value, AccordionItem):
        return value
    return AccordionItem.model_validate(dict(value))
