"""Darkness configuration and the per-frame controller that drives the mask.

The controller is owned by the host scene: the scene calls ``attach`` once
with the draw target and ``tick`` every frame. Settings change only through
the mutators, which clamp their input and take effect on the next tick.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Protocol, Tuple

from config import (
    DARKNESS_ENABLED,
    DARKNESS_OPACITY,
    GRADIENT_WIDTH,
    LIGHT_OFFSET_Y,
    LIGHT_RADIUS,
)
from render.draw_batch import DrawSurface
from render.gradient_mask import (
    MAX_OPACITY,
    FrameContext,
    GradientMaskRenderer,
    MaskParams,
    clamp,
    inner_radius,
)

logger = logging.getLogger(__name__)


class SubjectPositionProvider(Protocol):
    def current_screen_position(self) -> Tuple[float, float]: ...


class ViewportSizeProvider(Protocol):
    def current_size(self) -> Tuple[float, float]: ...


def parse_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


@dataclass
class DarknessConfig:
    enabled: bool = DARKNESS_ENABLED
    light_radius: float = LIGHT_RADIUS
    darkness_opacity: float = DARKNESS_OPACITY
    gradient_width: float = GRADIENT_WIDTH

    @classmethod
    def from_params(cls, params: Mapping[str, object]) -> "DarknessConfig":
        """Build from plugin-style parameters (string values, keys optional).

        Missing, empty or unparsable numbers fall back to the defaults.
        """

        def number(key: str, default: float) -> float:
            raw = params.get(key)
            if raw is None or raw == "":
                return default
            return clamp(raw, 0.0, default=default)

        return cls(
            enabled=parse_bool(params.get("DefaultEnableOnStartup", DARKNESS_ENABLED)),
            light_radius=number("DefaultLightRadius", LIGHT_RADIUS),
            darkness_opacity=min(
                MAX_OPACITY, number("DefaultDarknessOpacity", DARKNESS_OPACITY)
            ),
            gradient_width=number("GradientSize", GRADIENT_WIDTH),
        )

    @property
    def inner_radius(self) -> float:
        return inner_radius(self.light_radius, self.gradient_width)


class DarknessController:
    def __init__(
        self,
        config: Optional[DarknessConfig] = None,
        renderer: Optional[GradientMaskRenderer] = None,
        *,
        position_provider: Optional[SubjectPositionProvider] = None,
        viewport_provider: Optional[ViewportSizeProvider] = None,
        light_offset_y: float = LIGHT_OFFSET_Y,
    ) -> None:
        self._config = DarknessConfig()
        self.renderer = renderer or GradientMaskRenderer()
        self.position_provider = position_provider
        self.viewport_provider = viewport_provider
        self.light_offset_y = light_offset_y
        self.target: Optional[DrawSurface] = None
        self.last_mask: Optional[MaskParams] = None

        # Route initial values through the mutators so they are clamped too
        initial = config or DarknessConfig()
        self.set_enabled(initial.enabled)
        self.set_light_radius(initial.light_radius)
        self.set_darkness_opacity(initial.darkness_opacity)
        self.set_gradient_width(initial.gradient_width)

    # ------------------------------------------------------------------
    @property
    def config(self) -> DarknessConfig:
        """Copy of the current settings; edits do not reach the controller."""
        return replace(self._config)

    @property
    def enabled(self) -> bool:
        return self._config.enabled

    @property
    def inner_radius(self) -> float:
        return self._config.inner_radius

    # ------------------------------------------------------------------
    def set_enabled(self, enabled: bool) -> None:
        enabled = parse_bool(enabled)
        if enabled != self._config.enabled:
            logger.info("Darkness %s", "enabled" if enabled else "disabled")
        self._config.enabled = enabled

    def set_light_radius(self, radius: float) -> None:
        self._config.light_radius = clamp(radius, 0.0)
        logger.debug("Light radius -> %s", self._config.light_radius)

    def set_darkness_opacity(self, opacity: float) -> None:
        self._config.darkness_opacity = clamp(opacity, 0.0, MAX_OPACITY)
        logger.debug("Darkness opacity -> %s", self._config.darkness_opacity)

    def set_gradient_width(self, width: float) -> None:
        self._config.gradient_width = clamp(width, 0.0)
        logger.debug("Gradient width -> %s", self._config.gradient_width)

    # ------------------------------------------------------------------
    def sample_frame(self) -> Optional[FrameContext]:
        """Read the subject position and viewport size from the providers."""
        if self.position_provider is None or self.viewport_provider is None:
            return None
        x, y = self.position_provider.current_screen_position()
        w, h = self.viewport_provider.current_size()
        return FrameContext(x, y, w, h)

    def attach(self, target: DrawSurface) -> None:
        """Scene-attach hook: take ownership of the target and draw once."""
        self.target = target
        logger.info(
            "Darkness overlay attached (enabled=%s, radius=%s, opacity=%s, gradient=%s)",
            self._config.enabled,
            self._config.light_radius,
            self._config.darkness_opacity,
            self._config.gradient_width,
        )
        self.tick()

    def tick(self, frame: Optional[FrameContext] = None) -> None:
        if self.target is None:
            return
        if not self._config.enabled:
            self.target.clear()
            self.last_mask = None
            return

        frame = frame or self.sample_frame()
        if frame is None:
            return
        lit = replace(frame, subject_y=frame.subject_y - self.light_offset_y)
        self.last_mask = self.renderer.render(self.target, self._config, lit)


__all__ = [
    "DarknessConfig",
    "DarknessController",
    "SubjectPositionProvider",
    "ViewportSizeProvider",
    "parse_bool",
]
