from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .comparator import alphanum_key


log = logging.getLogger(__name__)


@dataclass
class Entry:
    name: str
    path: Path
    is_dir: bool


@dataclass
class ScanStats:
    dirs_seen: int = 0
    files_seen: int = 0


def _normalize_suffixes(suffixes: Iterable[str] | None) -> set[str] | None:
    if suffixes is None:
        return None
    out = set()
    for s in suffixes:
        s = s.strip().lower()
        if not s:
            continue
        out.add(s if s.startswith(".") else "." + s)
    return out or None


def list_entries(
    directory: Path,
    *,
    suffixes: Iterable[str] | None = None,
    include_dirs: bool = True,
) -> tuple[list[Entry], ScanStats]:
    """Immediate children of ``directory`` in alphanum order of their names.

    ``suffixes`` only filters files; directories are kept (or dropped) by
    ``include_dirs`` alone.
    """
    stats = ScanStats()
    if not directory.exists() or not directory.is_dir():
        log.warning("not a directory: %s", directory)
        return [], stats

    wanted = _normalize_suffixes(suffixes)
    entries: list[Entry] = []
    for p in directory.iterdir():
        if p.is_dir():
            if not include_dirs:
                continue
            stats.dirs_seen += 1
            entries.append(Entry(name=p.name, path=p, is_dir=True))
            continue
        if wanted is not None and p.suffix.lower() not in wanted:
            continue
        stats.files_seen += 1
        entries.append(Entry(name=p.name, path=p, is_dir=False))

    entries.sort(key=lambda e: alphanum_key(e.name))
    return entries, stats


def iter_files(directory: Path, suffixes: Iterable[str] | None = None) -> Iterator[Path]:
    # Ordered by path relative to directory, so "s2/a.mp4" comes before "s10/a.mp4".
    if not directory.is_dir():
        log.warning("not a directory: %s", directory)
        return
    wanted = _normalize_suffixes(suffixes)
    files = [p for p in directory.rglob("*") if p.is_file()]
    files.sort(key=lambda p: alphanum_key(p.relative_to(directory).as_posix()))
    for p in files:
        if wanted is not None and p.suffix.lower() not in wanted:
            continue
        yield p
