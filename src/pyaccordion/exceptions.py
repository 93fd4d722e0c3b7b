"""Custom exception hierarchy for pyaccordion."""

from __future__ import annotations


class AccordionError(Exception):
    """Base exception for all pyaccordion errors."""


class AccordionConfigError(AccordionError):
    """Invalid or missing configuration."""

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)
