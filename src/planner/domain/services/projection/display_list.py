"""Renderer-neutral drawing primitives produced by the 2D projections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str = "none"
    stroke: str = "#000000"
    stroke_width: float = 1.0
    dashed: bool = False
    layer: str = "OUTLINE"
    tag: str | None = None


@dataclass(frozen=True)
class Polygon:
    """Closed polygon; ``points`` are (x, y) pairs in view pixels."""

    points: tuple[tuple[float, float], ...]
    fill: str = "none"
    stroke: str = "#000000"
    stroke_width: float = 1.0
    layer: str = "OUTLINE"
    tag: str | None = None


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str = "#000000"
    stroke_width: float = 1.0
    dashed: bool = False
    layer: str = "OUTLINE"
    tag: str | None = None


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    text: str
    size: float = 12.0
    fill: str = "#000000"
    anchor: str = "middle"
    rotation: float = 0.0
    layer: str = "LABELS"
    tag: str | None = None


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    fill: str = "none"
    stroke: str = "#000000"
    stroke_width: float = 1.0
    layer: str = "OUTLINE"
    tag: str | None = None


Primitive = Union[Rect, Polygon, Line, Text, Circle]


@dataclass
class DisplayList:
    """Ordered primitives for one view, painted back to front.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        title: Human-readable view name.
        primitives: Primitives in paint order.
    """

    width: float
    height: float
    title: str = ""
    primitives: list[Primitive] = field(default_factory=list)

    def add(self, primitive: Primitive) -> None:
        self.primitives.append(primitive)

    def extend(self, primitives: list[Primitive]) -> None:
        self.primitives.extend(primitives)

    def of_type(self, kind: type) -> list[Primitive]:
        return [p for p in self.primitives if isinstance(p, kind)]

    def tagged(self, tag: str) -> list[Primitive]:
        return [p for p in self.primitives if p.tag == tag]

    def __len__(self) -> int:
        return len(self.primitives)
