"""Recorded 2D draw commands for screen-space overlays.

A ``DrawBatch`` plays the role of a retained "graphics" object: producers
append filled shapes and holes, and a backend (see ``render.gl_overlay``)
replays the list every frame. Keeping the geometry as data lets the mask
logic run and be inspected without a GL context.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, Tuple, Union

Color = Tuple[float, float, float]


class DrawSurface(Protocol):
    """Capabilities the darkness mask needs from a draw target."""

    def clear(self) -> None: ...

    def fill_rect(
        self, x: float, y: float, w: float, h: float, color: Color, alpha: float
    ) -> None: ...

    def fill_circle(
        self, x: float, y: float, radius: float, color: Color, alpha: float
    ) -> None: ...

    def punch_circle(self, x: float, y: float, radius: float) -> None:
        """Remove a disc from everything drawn so far in the current batch."""
        ...


@dataclass(frozen=True)
class RectFill:
    x: float
    y: float
    w: float
    h: float
    color: Color
    alpha: float


@dataclass(frozen=True)
class CircleFill:
    x: float
    y: float
    radius: float
    color: Color
    alpha: float


@dataclass(frozen=True)
class CircleHole:
    x: float
    y: float
    radius: float


DrawOp = Union[RectFill, CircleFill, CircleHole]


class DrawBatch:
    """Ordered list of draw ops; later fills composite over earlier ones."""

    def __init__(self) -> None:
        self.ops: List[DrawOp] = []

    def clear(self) -> None:
        self.ops.clear()

    def fill_rect(self, x, y, w, h, color, alpha) -> None:
        self.ops.append(RectFill(x, y, w, h, tuple(color), alpha))

    def fill_circle(self, x, y, radius, color, alpha) -> None:
        self.ops.append(CircleFill(x, y, radius, tuple(color), alpha))

    def punch_circle(self, x, y, radius) -> None:
        self.ops.append(CircleHole(x, y, radius))

    # ------------------------------------------------------------------
    @property
    def fills(self) -> List[DrawOp]:
        return [op for op in self.ops if not isinstance(op, CircleHole)]

    @property
    def holes(self) -> List[CircleHole]:
        return [op for op in self.ops if isinstance(op, CircleHole)]

    @property
    def circles(self) -> List[CircleFill]:
        return [op for op in self.ops if isinstance(op, CircleFill)]

    def is_empty(self) -> bool:
        return not self.ops

    def __len__(self) -> int:
        return len(self.ops)

    def __iter__(self):
        return iter(self.ops)


__all__ = [
    "Color",
    "DrawSurface",
    "DrawBatch",
    "DrawOp",
    "RectFill",
    "CircleFill",
    "CircleHole",
]
