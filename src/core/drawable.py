from typing import Protocol


class Drawable(Protocol):
    """Anything the scene can draw in screen space."""

    def draw(self) -> None: ...  # noqa: D401
