from __future__ import annotations

import logging
import os
from pathlib import Path

from bombhopper.domain.level import Level
from bombhopper.infra.exceptions import LevelEncodeError, LevelSaveError
from bombhopper.infra.level_codec import dumps_level


log = logging.getLogger(__name__)


def save_level_to_path(level: Level, path: Path, *, indent: int | None = None) -> None:
    """
    Write the level document to path, replacing it atomically.
    Optional helper for tools; games and editors may persist dumps_level output themselves.
    """
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        text = dumps_level(level, indent=indent)
        tmp.write_text(text, encoding="utf-8")
        os.replace(tmp, path)
        log.debug("Saved level %r to %s", level.name, path)
    except LevelEncodeError:
        raise
    except Exception as e:
        try:
            if tmp.exists():
                tmp.unlink()
        except OSError:
            log.warning("Could not remove temporary file %s", tmp)
        raise LevelSaveError(f"Failed to save level to {path}: {e}") from e
