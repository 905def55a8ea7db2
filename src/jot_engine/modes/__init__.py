"""Mode manager and the base types modes are built from.

Concrete modes live in ``edit_mode`` and ``search_mode``.
"""

from .base_mode import DEFAULT_SAVE_NAME, Mode, ModeBus, ModeContext, ModeResult
from .mode_manager import ModeManager

__all__ = [
    "DEFAULT_SAVE_NAME",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeManager",
    "ModeResult",
]
