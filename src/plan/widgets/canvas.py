"""Raster drawing surface for widgets, backed by Pillow."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageDraw

from ..core.rect import Rect

Colour = tuple[float, ...]


def to_rgba(colour: Colour) -> tuple[int, int, int, int]:
    """Convert a 0-1 float colour (RGB or RGBA) to 8-bit RGBA."""
    channels = [min(max(float(c), 0.0), 1.0) for c in colour]
    if len(channels) == 3:
        channels.append(1.0)
    if len(channels) != 4:
        raise ValueError(f"Colour must have 3 or 4 channels, got {len(channels)}")
    r, g, b, a = (round(c * 255) for c in channels)
    return (r, g, b, a)


class Canvas:
    """The host's drawing surface.

    Widgets hold a reference to the canvas they paint on, since draw() takes
    no arguments.
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: Colour = (0.7, 0.7, 0.7),
    ) -> None:
        self.background = background
        self._image = Image.new("RGBA", (int(width), int(height)), to_rgba(background))
        self._draw = ImageDraw.Draw(self._image)

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def size(self) -> tuple[int, int]:
        return self._image.size

    def clear(self) -> None:
        """Fill the whole canvas with the background colour."""
        self._draw.rectangle((0, 0, *self._image.size), fill=to_rgba(self.background))

    def resize(self, width: int, height: int) -> None:
        """Replace the surface with a blank one of a new size."""
        self._image = Image.new("RGBA", (int(width), int(height)), to_rgba(self.background))
        self._draw = ImageDraw.Draw(self._image)

    def fill_rect(self, rect: Rect, colour: Colour, radius: float = 0) -> None:
        """Fill a rectangle, optionally with rounded corners.

        Empty or negative rectangles are skipped. Rectangles thinner than a
        pixel still cover one pixel row or column.
        """
        if rect.width <= 0 or rect.height <= 0:
            return
        # Pillow's box is inclusive of the bottom-right pixel.
        box = (rect.x, rect.y, max(rect.x, rect.right - 1), max(rect.y, rect.bottom - 1))
        radius = min(radius, (box[2] - box[0]) / 2, (box[3] - box[1]) / 2)
        if radius > 0:
            self._draw.rounded_rectangle(box, radius=radius, fill=to_rgba(colour))
        else:
            self._draw.rectangle(box, fill=to_rgba(colour))

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        self._image.save(str(path))
        return path
