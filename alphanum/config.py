from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


log = logging.getLogger(__name__)

DEFAULT_MAX_ITEMS = 10_000


@dataclass(frozen=True)
class Settings:
    root_dir: Path
    max_items: int


def _max_items_from_env() -> int:
    raw = os.getenv("ALPHANUM_MAX_ITEMS", "").strip()
    if not raw:
        return DEFAULT_MAX_ITEMS
    try:
        value = int(raw)
    except ValueError:
        log.warning("ignoring non-integer ALPHANUM_MAX_ITEMS=%r", raw)
        return DEFAULT_MAX_ITEMS
    if value <= 0:
        log.warning("ignoring non-positive ALPHANUM_MAX_ITEMS=%r", raw)
        return DEFAULT_MAX_ITEMS
    return value


def get_settings() -> Settings:
    root_raw = os.getenv("ALPHANUM_ROOT", "").strip()
    if not root_raw:
        root_dir = Path(".").resolve()
    else:
        root_dir = Path(root_raw).expanduser().resolve()

    return Settings(root_dir=root_dir, max_items=_max_items_from_env())
