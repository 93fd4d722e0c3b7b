"""pyaccordion - State container for accordion widgets."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyaccordion")
except PackageNotFoundError:
    __version__ = "0+local"
from pyaccordion._constants import KeyCode
from pyaccordion.config import AccordionConfig
from pyaccordion.controls import HeadingControls
from pyaccordion.exceptions import AccordionConfigError, AccordionError
from pyaccordion.models import AccordionItem, AccordionSnapshot, Uuid
from pyaccordion.scope import ItemScope
from pyaccordion.state.actions import ActionKind, FocusIntent, StoreAction
from pyaccordion.state.store import AccordionStore

__all__ = [
    "__version__",
    "AccordionConfig",
    "AccordionConfigError",
    "AccordionError",
    "AccordionItem",
    "AccordionSnapshot",
    "AccordionStore",
    "ActionKind",
    "FocusIntent",
    "HeadingControls",
    "ItemScope",
    "KeyCode",
    "StoreAction",
    "Uuid",
]
