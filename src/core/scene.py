from typing import List, Callable
from dataclasses import dataclass, field

from core.drawable import Drawable

UpdateFn = Callable[[float], None]


@dataclass
class Scene:
    updaters: List[UpdateFn] = field(default_factory=list)
    # Screen-space layers drawn after the scene's own content, in order
    # (darkness overlay first, HUD-like layers after it).
    overlays: List[Drawable] = field(default_factory=list)
    attached: bool = False

    # Called once by the engine before the first frame
    def attach(self) -> None:
        self.attached = True

    def update(self, dt: float):
        for fn in self.updaters:
            fn(dt)

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    def draw(self):  # pragma: no cover - visual
        for layer in self.overlays:
            layer.draw()

    # Scenes can own their full render pipeline; by default just draw layers
    def render(self, **_):  # pragma: no cover - visual
        self.draw()
