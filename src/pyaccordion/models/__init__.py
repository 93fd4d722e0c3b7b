"""State models for pyaccordion."""

from pyaccordion.models.item import AccordionItem, Uuid, coerce_item
from pyaccordion.models.snapshot import AccordionSnapshot

__all__ = [
    "AccordionItem",
    "AccordionSnapshot",
    "Uuid",
    "coerce_item",
]
