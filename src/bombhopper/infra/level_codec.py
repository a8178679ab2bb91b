from __future__ import annotations

import json
import logging
import math
import struct
from typing import Any

from bombhopper.domain.ammo import Ammo, Finite, Infinite
from bombhopper.domain.entity import Door, Entity, Material, Paint, Player, Text
from bombhopper.domain.geometry import Circle, Point, Polygon, Shape
from bombhopper.domain.level import Level
from bombhopper.infra.exceptions import LevelEncodeError


log = logging.getLogger(__name__)

_I32_MIN = -(2 ** 31)
_I32_MAX = 2 ** 31 - 1
_F32_MAX = 3.4028234663852886e38

# Past these decimal exponents the game's JSON writer switches to 1e30 notation.
_F32_POSITIONAL_MAX = 13
_F32_POSITIONAL_MIN = -6


def encode_level(level: Level) -> dict:
    try:
        timings = [_int(t, "timings") for t in level.timings]
        if len(timings) != 2:
            raise LevelEncodeError(f"timings must hold exactly 2 values, got {len(timings)}.")

        payload = {
            "name": str(level.name),
            "timings": timings,
            "entities": [_encode_entity(e) for e in level.entities],
            "formatVersion": int(level.format_version),
        }
        log.debug("Encoded level %r with %d entities", level.name, len(level.entities))
        return payload
    except LevelEncodeError:
        raise
    except Exception as e:
        raise LevelEncodeError(f"Failed to encode level: {e}") from e


def dumps_level(level: Level, *, indent: int | None = None) -> str:
    """
    Render a level as the JSON text the editor and game load.

    The default is the compact form; pass indent for a readable one.
    Floats are written as float32 in the game's notation ("0.3", "200.0",
    "0.00001", "1e-7"), which json.dumps cannot produce from float64.
    """
    return _write(encode_level(level), indent, 0)


def encode_entity(entity: Entity) -> dict:
    """Tagged form: {"type": <tag>, "params": {...}}."""
    try:
        return _encode_entity(entity)
    except LevelEncodeError:
        raise
    except Exception as e:
        raise LevelEncodeError(f"Failed to encode entity: {e}") from e


def _encode_entity(entity: Entity) -> dict:
    if isinstance(entity, Player):
        tag = "player"
        params = {
            "isStatic": bool(entity.is_static),
            "angle": _int(entity.angle, "angle"),
            "x": _float(entity.x),
            "y": _float(entity.y),
        }
        params.update(_encode_ammo(entity.ammo))
    elif isinstance(entity, Door):
        tag = "endpoint"
        params = {
            "isStatic": bool(entity.is_static),
            "angle": _int(entity.angle, "angle"),
            "x": _float(entity.x),
            "y": _float(entity.y),
            "rightFacing": bool(entity.right_facing),
        }
    elif isinstance(entity, Text):
        tag = "text"
        params = {
            "angle": _int(entity.angle, "angle"),
            "x": _float(entity.x),
            "y": _float(entity.y),
            "copy": {str(k): str(v) for k, v in entity.text.items()},
            "anchor": _encode_point(entity.anchor),
            "align": entity.align.value,
            "fillColor": _int(entity.fill_color, "fillColor"),
            "opacity": _float(entity.opacity),
        }
    elif isinstance(entity, Paint):
        tag = "paint"
        params = {
            "fillColor": _int(entity.fill_color, "fillColor"),
            "opacity": _float(entity.opacity),
            "vertices": [_encode_point(p) for p in entity.vertices],
        }
    elif isinstance(entity, Material):
        tag = entity.kind.value
        params = {"isStatic": bool(entity.is_static)}
        params.update(_encode_shape(entity.shape))
    else:
        raise LevelEncodeError(f"Unknown entity type: {type(entity).__name__}")

    return {"type": tag, "params": params}


def _encode_ammo(ammo: Ammo) -> dict:
    # The variant name is the key itself so it can be merged into player params.
    if isinstance(ammo, Infinite):
        return {"infiniteAmmo": ammo.ammo_type.value}
    if isinstance(ammo, Finite):
        return {"magazine": [a.value for a in ammo.magazine]}
    raise LevelEncodeError(f"Unknown ammo type: {type(ammo).__name__}")


def _encode_shape(shape: Shape) -> dict:
    if isinstance(shape, Polygon):
        return {"vertices": [_encode_point(p) for p in shape.vertices]}
    if isinstance(shape, Circle):
        return {
            "x": _float(shape.x),
            "y": _float(shape.y),
            "radius": _float(shape.radius),
        }
    raise LevelEncodeError(f"Unknown shape type: {type(shape).__name__}")


def _encode_point(p: Point) -> dict:
    return {"x": _float(p.x), "y": _float(p.y)}


def _int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise LevelEncodeError(f"{name} must be an integer, got {value!r}.")
    if isinstance(value, int):
        v = value
    elif isinstance(value, float) and value.is_integer():
        v = int(value)
    else:
        raise LevelEncodeError(f"{name} must be an integer, got {value!r}.")
    if not _I32_MIN <= v <= _I32_MAX:
        raise LevelEncodeError(f"{name} is out of the 32-bit range: {v}.")
    return v


def _float(value: Any) -> float | None:
    """Round to float32 and return the shortest float that reads back as the same float32."""
    v = float(value)
    if math.isfinite(v) and abs(v) <= _F32_MAX:
        return float(_shortest_f32(_to_f32(v)))
    log.warning("Non-finite number %r encoded as null", v)
    return None


def _to_f32(v: float) -> float:
    return struct.unpack("f", struct.pack("f", v))[0]


def _shortest_f32(v: float) -> str:
    """Shortest scientific-notation string, e.g. "3e-01", that rounds to the float32 v."""
    for precision in range(9):
        s = "%.*e" % (precision, v)
        try:
            if _to_f32(float(s)) == v:
                return s
        except OverflowError:
            # rounded past the float32 maximum; needs more digits
            continue
    return "%.8e" % v


def _format_f32(v: float) -> str:
    s = _shortest_f32(_to_f32(v))
    sign = "-" if s.startswith("-") else ""
    mantissa, exponent = s.lstrip("-").split("e")
    digits = mantissa.replace(".", "").rstrip("0") or "0"
    length = len(digits)
    kk = int(exponent) + 1  # position of the decimal point relative to digits

    if length <= kk <= _F32_POSITIONAL_MAX:
        return f"{sign}{digits}{'0' * (kk - length)}.0"
    if 0 < kk <= _F32_POSITIONAL_MAX:
        return f"{sign}{digits[:kk]}.{digits[kk:]}"
    if _F32_POSITIONAL_MIN < kk <= 0:
        return f"{sign}0.{'0' * -kk}{digits}"
    if length == 1:
        return f"{sign}{digits}e{kk - 1}"
    return f"{sign}{digits[0]}.{digits[1:]}e{kk - 1}"


def _write(obj: Any, indent: int | None, depth: int) -> str:
    if obj is None:
        return "null"
    if isinstance(obj, bool):
        return "true" if obj else "false"
    if isinstance(obj, int):
        return str(obj)
    if isinstance(obj, float):
        return _format_f32(obj)
    if isinstance(obj, str):
        return json.dumps(obj, ensure_ascii=False)

    if isinstance(obj, dict):
        items = [f"{_write(str(k), indent, depth)}{':' if indent is None else ': '}{_write(v, indent, depth + 1)}"
                 for k, v in obj.items()]
        open_, close = "{", "}"
    elif isinstance(obj, list):
        items = [_write(v, indent, depth + 1) for v in obj]
        open_, close = "[", "]"
    else:
        raise LevelEncodeError(f"Cannot write {type(obj).__name__} as JSON")

    if not items:
        return open_ + close
    if indent is None:
        return open_ + ",".join(items) + close
    pad = "\n" + " " * (indent * (depth + 1))
    return open_ + pad + ("," + pad).join(items) + "\n" + " " * (indent * depth) + close
