from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from bombhopper.domain.ammo import Ammo
from bombhopper.domain.geometry import Point, Shape


WHITE = 16777215


class TextAlign(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class MaterialKind(Enum):
    """Terrain surfaces. They all share the same params: isStatic plus a shape."""
    NORMAL = "normal"
    ICE = "ice"
    BREAKABLE = "breakable"
    DEADLY = "deadly"
    BOUNCY = "bouncy"


@dataclass(frozen=True)
class Player:
    is_static: bool
    angle: int
    x: float
    y: float
    ammo: Ammo


@dataclass(frozen=True)
class Door:
    """The level exit. Encoded with the "endpoint" tag."""
    is_static: bool
    angle: int
    x: float
    y: float
    right_facing: bool


@dataclass(frozen=True)
class Text:
    angle: int
    x: float
    y: float
    text: dict[str, str]  # locale code -> copy, e.g. {"en": "..."}
    anchor: Point
    align: TextAlign
    fill_color: int
    opacity: float

    @classmethod
    def new(cls, position: Point, text: str) -> Text:
        """Left-aligned, white, fully opaque english text centred on its anchor."""
        return cls(
            angle=0,
            x=position.x,
            y=position.y,
            text={"en": text},
            anchor=Point(0.5, 0.5),
            align=TextAlign.LEFT,
            fill_color=WHITE,
            opacity=1.0,
        )


@dataclass(frozen=True)
class Paint:
    fill_color: int
    opacity: float
    vertices: tuple[Point, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Material:
    kind: MaterialKind
    is_static: bool
    shape: Shape


Entity = Player | Door | Text | Paint | Material
