from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class ScanEntry:
    path: Path
    modified: datetime


def scan_directory(directory: str | Path) -> list[ScanEntry]:
    """List regular files directly under ``directory``, most recently modified first.

    Ties on modification time fall back to file name so repeated scans agree.
    """
    root = Path(directory).resolve()
    if not root.is_dir():
        return []
    try:
        listing = list(root.iterdir())
    except OSError:
        return []
    rows: list[tuple[float, str, Path]] = []
    for path in listing:
        try:
            if not path.is_file():
                continue
            mtime = path.stat().st_mtime
        except OSError:
            continue
        rows.append((mtime, path.name, path))
    rows.sort(key=lambda row: (-row[0], row[1]))
    return [ScanEntry(path=path, modified=datetime.fromtimestamp(mtime)) for mtime, _, path in rows]
