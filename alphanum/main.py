from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from .comparator import compare, sort_alphanum
from .config import get_settings
from .scan import Entry, ScanStats, iter_files, list_entries


app = FastAPI(title="Alphanum")


log = logging.getLogger(__name__)


class CompareIn(BaseModel):
    a: str
    b: str


class CompareOut(BaseModel):
    result: int
    order: str


class SortIn(BaseModel):
    items: list[str] = Field(default_factory=list)
    reverse: bool = False


class SortOut(BaseModel):
    items: list[str]


class EntryOut(BaseModel):
    name: str
    is_dir: bool


class BrowseOut(BaseModel):
    path: str
    entries: list[EntryOut]
    dirs_seen: int
    files_seen: int


def _order_name(result: int) -> str:
    if result < 0:
        return "less"
    if result > 0:
        return "greater"
    return "equal"


def _require_utf8(values) -> None:
    # Lone surrogates survive JSON decoding but cannot be encoded into the
    # response, and the default validation error would echo them back.
    for value in values:
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise HTTPException(422, "Strings must be valid UTF-8 text") from e


def _resolve_under_root(root: Path, rel: str) -> Path:
    try:
        target = (root / rel).resolve()
    except (ValueError, OSError) as e:
        raise HTTPException(400, "Invalid path") from e
    if target != root and root not in target.parents:
        raise HTTPException(400, "Path escapes the configured root")
    return target


@app.get("/api/health")
def health():
    return {"ok": True}


@app.post("/api/compare", response_model=CompareOut)
def compare_strings(payload: CompareIn):
    _require_utf8((payload.a, payload.b))
    result = compare(payload.a, payload.b)
    return CompareOut(result=result, order=_order_name(result))


@app.post("/api/sort", response_model=SortOut)
def sort_strings(payload: SortIn):
    settings = get_settings()
    if len(payload.items) > settings.max_items:
        raise HTTPException(413, f"Too many items (max {settings.max_items})")
    _require_utf8(payload.items)
    return SortOut(items=sort_alphanum(payload.items, reverse=payload.reverse))


@app.get("/api/browse", response_model=BrowseOut)
def browse(
    path: str = "",
    suffix: list[str] | None = Query(default=None),
    recursive: bool = False,
):
    """Directory listing under the configured root, in alphanum order.

    With ``recursive`` every file below the directory is listed by its
    relative path instead.
    """
    settings = get_settings()
    target = _resolve_under_root(settings.root_dir, path)
    if not target.is_dir():
        raise HTTPException(404, "Directory not found")

    if recursive:
        entries = [
            Entry(name=p.relative_to(target).as_posix(), path=p, is_dir=False)
            for p in iter_files(target, suffix)
        ]
        stats = ScanStats(files_seen=len(entries))
    else:
        entries, stats = list_entries(target, suffixes=suffix)
    log.info("browse %s: %d dirs, %d files", target, stats.dirs_seen, stats.files_seen)
    return _browse_out(settings.root_dir, target, entries, stats)


def _browse_out(root: Path, target: Path, entries, stats: ScanStats) -> BrowseOut:
    rel = target.relative_to(root).as_posix()
    return BrowseOut(
        path="" if rel == "." else rel,
        entries=[EntryOut(name=e.name, is_dir=e.is_dir) for e in entries],
        dirs_seen=stats.dirs_seen,
        files_seen=stats.files_seen,
    )
