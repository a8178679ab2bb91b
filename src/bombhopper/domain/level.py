from __future__ import annotations

from dataclasses import dataclass, field

from bombhopper.domain.entity import Entity


FORMAT_VERSION = 0


@dataclass
class Level:
    name: str
    timings: tuple[int, int]
    entities: list[Entity] = field(default_factory=list, init=False)
    format_version: int = field(default=FORMAT_VERSION, init=False)

    def push(self, entity: Entity) -> None:
        # Order matters to the game: later entities are drawn on top.
        self.entities.append(entity)

    def clear(self) -> None:
        self.entities.clear()
