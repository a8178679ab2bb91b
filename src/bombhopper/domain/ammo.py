from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from bombhopper.domain.exceptions import InvalidAmmoChar


class AmmoType(Enum):
    EMPTY = "empty"
    BOMB = "bullet"  # the game still calls bombs bullets
    GRENADE = "grenade"


_AMMO_CHARS = {
    "b": AmmoType.BOMB,
    "g": AmmoType.GRENADE,
    "e": AmmoType.EMPTY,
}


@dataclass(frozen=True)
class Infinite:
    ammo_type: AmmoType


@dataclass(frozen=True)
class Finite:
    """
    A limited magazine. Stored back to front: the last entry is fired first,
    so the first entry is fired last.
    """
    magazine: tuple[AmmoType, ...] = field(default_factory=tuple)

    @classmethod
    def from_sequence(cls, s: str) -> Finite:
        """
        Build a magazine from a firing-order string such as "bbeg"
        (b = bomb, g = grenade, e = empty, case-insensitive).
        The first character is fired first, so it is stored last.
        """
        rounds: list[AmmoType] = []
        for i in range(len(s) - 1, -1, -1):
            ammo = _AMMO_CHARS.get(s[i].lower())
            if ammo is None:
                raise InvalidAmmoChar(s[i], i)
            rounds.append(ammo)
        return cls(magazine=tuple(rounds))


Ammo = Infinite | Finite
