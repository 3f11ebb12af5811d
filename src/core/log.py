"""Logging setup shared by the engine and the scenes.

Modules log through ``logging.getLogger(__name__)``; the engine calls
``configure_logging`` once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

DEFAULT_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"


def configure_logging(
    level: Union[int, str] = logging.INFO, format: Optional[str] = None
) -> None:
    """Configure the root logger unless something already did."""
    if logging.getLogger().handlers:
        # Respect any user provided configuration (pytest, embedding apps).
        return

    logging.basicConfig(
        level=level,
        format=format or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
