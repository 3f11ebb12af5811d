"""Named darkness commands, as triggered by key bindings or event scripts.

Each command takes one argument, parses it (strings such as ``"true"`` or
``"120"`` are accepted), pre-clamps it to the command's bounds and forwards
it to the matching controller mutator.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional

from config import DARKNESS_OPACITY, GRADIENT_WIDTH, LIGHT_RADIUS
from lighting.darkness import DarknessController, parse_bool

logger = logging.getLogger(__name__)


class CommandError(ValueError):
    """Unknown command or an argument that cannot be used."""


@dataclass(frozen=True)
class CommandDef:
    name: str
    arg: str
    kind: type
    apply: Callable[[DarknessController, object], None]
    default: object = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    text: str = ""
    setting: str = ""  # DarknessConfig field the command writes

    def coerce(self, raw: object) -> object:
        if raw is None or raw == "":
            if self.default is None:
                raise CommandError(f"{self.name}: missing argument '{self.arg}'")
            raw = self.default
        if self.kind is bool:
            return parse_bool(raw)
        try:
            value = float(raw)
        except (TypeError, ValueError) as exc:
            raise CommandError(f"{self.name}: '{self.arg}' must be a number, got {raw!r}") from exc
        if math.isnan(value):
            raise CommandError(f"{self.name}: '{self.arg}' must be a number, got {raw!r}")
        if self.minimum is not None:
            value = max(self.minimum, value)
        if self.maximum is not None:
            value = min(self.maximum, value)
        return value


COMMANDS: Dict[str, CommandDef] = {
    cmd.name: cmd
    for cmd in (
        CommandDef(
            "toggleDarkness",
            "enabled",
            bool,
            DarknessController.set_enabled,
            default=True,
            setting="enabled",
            text="Turns the darkness system on or off.",
        ),
        CommandDef(
            "setLightRadius",
            "radius",
            float,
            DarknessController.set_light_radius,
            default=LIGHT_RADIUS,
            setting="light_radius",
            minimum=10,
            maximum=300,
            text="Change the player's light radius (px).",
        ),
        CommandDef(
            "setDarknessLevel",
            "opacity",
            float,
            DarknessController.set_darkness_opacity,
            default=DARKNESS_OPACITY,
            setting="darkness_opacity",
            minimum=0,
            maximum=255,
            text="Change the darkness opacity (0-255).",
        ),
        CommandDef(
            "setGradientSize",
            "size",
            float,
            DarknessController.set_gradient_width,
            default=GRADIENT_WIDTH,
            setting="gradient_width",
            minimum=0,
            maximum=100,
            text="Change how many pixels the light edge fades over.",
        ),
    )
}


def dispatch(
    controller: DarknessController, name: str, args: Optional[Mapping[str, object]] = None
) -> object:
    """Run command ``name`` against ``controller``; returns the value applied."""
    cmd = COMMANDS.get(name)
    if cmd is None:
        raise CommandError(f"Unknown darkness command: {name!r}")
    args = args or {}
    logger.debug("%s %s", name, dict(args))
    value = cmd.coerce(args.get(cmd.arg))
    cmd.apply(controller, value)
    return value


def nudge(controller: DarknessController, name: str, delta: float) -> object:
    """Shift a numeric setting by ``delta`` through its command bounds."""
    cmd = COMMANDS.get(name)
    if cmd is None or cmd.kind is bool:
        raise CommandError(f"Cannot nudge {name!r}")
    value = getattr(controller.config, cmd.setting) + delta
    return dispatch(controller, name, {cmd.arg: value})


__all__ = ["COMMANDS", "CommandError", "CommandDef", "dispatch", "nudge"]
