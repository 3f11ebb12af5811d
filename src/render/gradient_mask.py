"""Soft-edged light mask built from layered alpha circles.

There is no radial gradient fill in the fixed-function pipeline, so the fade
is approximated: a full-screen dark rectangle, a ladder of concentric circles
whose alpha rises from 0 at the outer radius to the full darkness alpha at
the inner radius, and finally a hole that clears the inner disc completely.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from config import DARKNESS_COLOR, GRADIENT_STEPS
from render.draw_batch import Color, DrawSurface

if TYPE_CHECKING:  # pragma: no cover
    from lighting.darkness import DarknessConfig


MAX_OPACITY = 255.0


def clamp(
    value: float, lo: float, hi: float = math.inf, default: Optional[float] = None
) -> float:
    """Clamp to [lo, hi]; NaN, infinities and non-numbers give ``default``
    (``lo`` when not supplied)."""
    fallback = lo if default is None else default
    try:
        value = float(value)
    except (TypeError, ValueError):
        return fallback
    if not math.isfinite(value):
        return fallback
    return max(lo, min(hi, value))


def inner_radius(light_radius: float, gradient_width: float) -> float:
    return max(0.0, clamp(light_radius, 0.0) - clamp(gradient_width, 0.0))


@dataclass(frozen=True)
class FrameContext:
    """Per-tick inputs: subject position on screen and the viewport size."""

    subject_x: float
    subject_y: float
    viewport_width: float
    viewport_height: float

    @property
    def center(self) -> Tuple[float, float]:
        return self.subject_x, self.subject_y


@dataclass(frozen=True)
class MaskParams:
    """Effective values one render call actually drew with."""

    x: float
    y: float
    outer_radius: float
    inner_radius: float
    opacity: float
    alpha: float
    steps: int


class GradientMaskRenderer:
    def __init__(self, steps: int = GRADIENT_STEPS, color: Color = DARKNESS_COLOR):
        self.steps = max(1, int(steps))
        self.color = tuple(color)

    def ladder(self, outer: float, inner: float, alpha: float):
        """Yield (radius, alpha) pairs from the outer edge inwards."""
        last = self.steps - 1
        for i in range(last, -1, -1):
            ratio = i / last if last else 0.0
            yield inner + (outer - inner) * ratio, (1.0 - ratio) * alpha

    def render(
        self, target: DrawSurface, config: "DarknessConfig", frame: FrameContext
    ) -> MaskParams:
        outer = clamp(config.light_radius, 0.0)
        inner = inner_radius(outer, config.gradient_width)
        opacity = clamp(config.darkness_opacity, 0.0, MAX_OPACITY)
        alpha = opacity / MAX_OPACITY
        x = clamp(frame.subject_x, -math.inf, default=0.0)
        y = clamp(frame.subject_y, -math.inf, default=0.0)
        width = clamp(frame.viewport_width, 0.0)
        height = clamp(frame.viewport_height, 0.0)

        target.clear()
        # 1. full darkness layer
        target.fill_rect(0.0, 0.0, width, height, self.color, alpha)
        # 2. outer -> inner so each circle only darkens its own disc
        for radius, step_alpha in self.ladder(outer, inner, alpha):
            target.fill_circle(x, y, radius, self.color, step_alpha)
        # 3. fully lit centre
        target.punch_circle(x, y, inner)

        return MaskParams(
            x=x,
            y=y,
            outer_radius=outer,
            inner_radius=inner,
            opacity=opacity,
            alpha=alpha,
            steps=self.steps,
        )


__all__ = [
    "FrameContext",
    "GradientMaskRenderer",
    "MaskParams",
    "clamp",
    "inner_radius",
]
