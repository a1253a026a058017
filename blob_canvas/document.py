"""Blob records and the canvas document that arranges them."""

import enum
import random
from dataclasses import dataclass, field, replace
from typing import List, Optional

from shapely import affinity
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon

from blob_canvas.core.curves import format_number, outline_polygon, points_to_path
from blob_canvas.core.polygon import (
    CANVAS_CENTER,
    DEFAULT_RADIUS,
    Point,
    generate_blob_points,
    stretch_points,
)

CANVAS_WIDTH = 1000
CANVAS_HEIGHT = 600
ROTATION_STEP = 45.0


class FillType(str, enum.Enum):
    GRADIENT = "gradient"
    SOLID = "solid"
    OUTLINE = "outline"

    @classmethod
    def parse(cls, value: "str | FillType") -> "FillType":
        try:
            return cls(value)
        except ValueError:
            names = [f.value for f in cls]
            raise ValueError(
                f"Unknown fill type {value!r}. Expected one of {names}"
            ) from None


@dataclass
class BlobConfig:
    edges: int = 5
    smoothness: float = 0.5
    fill: FillType = FillType.GRADIENT
    color1: str = "#D3E1EB"
    color2: str = "#FFFFFF"
    gradient_angle: float = 90.0
    width: float = 1.0
    height: float = 1.0
    radius: float = DEFAULT_RADIUS
    points: List[Point] = field(default_factory=list)
    path: str = ""

    def generate(self, rng: Optional[random.Random] = None) -> "BlobConfig":
        """Roll a new ring for the current parameters and store its path."""
        ring = generate_blob_points(
            self.edges, self.smoothness, self.radius, CANVAS_CENTER, rng
        )
        self.points = stretch_points(ring, self.width, self.height, CANVAS_CENTER)
        self.path = points_to_path(self.points)
        return self


@dataclass
class PlacedBlob:
    blob: BlobConfig
    x: float = CANVAS_WIDTH / 2
    y: float = CANVAS_HEIGHT / 2
    scale: float = 1.0
    rotation: float = 0.0

    def transform(self) -> str:
        """SVG transform moving the blob's own center onto (x, y)."""
        cx, cy = CANVAS_CENTER
        x, y, s, r = (
            format_number(v) for v in (self.x, self.y, self.scale, self.rotation)
        )
        back = f"{format_number(-cx)} {format_number(-cy)}"
        return f"translate({x} {y}) rotate({r}) scale({s}) translate({back})"

    def outline(self) -> Polygon:
        shape = outline_polygon(self.blob.points)
        if shape.is_empty:
            return shape
        cx, cy = CANVAS_CENTER
        shape = affinity.scale(shape, self.scale, self.scale, origin=(cx, cy))
        shape = affinity.rotate(shape, self.rotation, origin=(cx, cy))
        return affinity.translate(shape, self.x - cx, self.y - cy)


class CanvasDocument:
    """
    Ordered blobs (last drawn on top) plus at most one selected index.
    Only the command methods below mutate it.
    """

    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT):
        self.width = width
        self.height = height
        self.blobs: List[PlacedBlob] = []
        self.selected: Optional[int] = None

    def __len__(self) -> int:
        return len(self.blobs)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.blobs):
            raise IndexError(f"No blob at index {index} (have {len(self.blobs)})")

    def add(
        self, blob: BlobConfig, x: Optional[float] = None, y: Optional[float] = None
    ) -> int:
        placed = PlacedBlob(
            blob=blob,
            x=self.width / 2 if x is None else x,
            y=self.height / 2 if y is None else y,
        )
        self.blobs.append(placed)
        return len(self.blobs) - 1

    def delete(self, index: int) -> PlacedBlob:
        self._check(index)
        removed = self.blobs.pop(index)
        self.selected = None
        return removed

    def select(self, index: Optional[int]) -> Optional[int]:
        """Toggle: selecting the already selected blob clears the selection."""
        if index is not None:
            self._check(index)
        self.selected = None if index == self.selected else index
        return self.selected

    def rotate(self, index: int, direction: int = 1) -> float:
        self._check(index)
        step = ROTATION_STEP if direction >= 0 else -ROTATION_STEP
        placed = self.blobs[index]
        self.blobs[index] = replace(placed, rotation=placed.rotation + step)
        return self.blobs[index].rotation

    def move(self, index: int, x: float, y: float) -> None:
        self._check(index)
        self.blobs[index] = replace(self.blobs[index], x=x, y=y)

    def scale(self, index: int, factor: float) -> float:
        self._check(index)
        placed = self.blobs[index]
        self.blobs[index] = replace(placed, scale=placed.scale * factor)
        return self.blobs[index].scale

    def hit_test(self, x: float, y: float) -> Optional[int]:
        """Topmost blob whose outline covers (x, y), or None."""
        probe = ShapelyPoint(x, y)
        for index in range(len(self.blobs) - 1, -1, -1):
            if self.blobs[index].outline().covers(probe):
                return index
        return None
