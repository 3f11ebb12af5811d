from .darkness import (
    DarknessConfig,
    DarknessController,
    SubjectPositionProvider,
    ViewportSizeProvider,
)
from .commands import COMMANDS, CommandError, dispatch, nudge

__all__ = [
    "DarknessConfig",
    "DarknessController",
    "SubjectPositionProvider",
    "ViewportSizeProvider",
    "COMMANDS",
    "CommandError",
    "dispatch",
    "nudge",
]
