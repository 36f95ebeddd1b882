# chancellor/assets/walker.py
import logging
from pathlib import Path
from typing import List, Tuple

from chancellor.assets.errors import AssetRootNotFoundError

logger = logging.getLogger(__name__)


def walk_assets(
    root: Path | str | None, *, skip_hidden: bool = False
) -> List[Tuple[str, Path]]:
    """
    Recursively list every regular file under root.

    Returns (relative_key, absolute_location) pairs where relative_key joins
    directory names with "/" on every platform, e.g. "sprites/player/idle.png".
    Entries are visited in sorted name order so a given snapshot always
    produces the same sequence. Subdirectories that cannot be listed are
    skipped with a warning; only the root itself is required.
    """
    if root is None or str(root) == "":
        raise AssetRootNotFoundError(root)

    root_path = Path(root)
    if not root_path.is_dir():
        raise AssetRootNotFoundError(root)

    try:
        entries = _list_dir(root_path.resolve())
    except OSError as e:
        raise AssetRootNotFoundError(root) from e

    found: List[Tuple[str, Path]] = []
    _walk(entries, "", found, skip_hidden)
    return found


def _list_dir(directory: Path) -> List[Path]:
    return sorted(directory.iterdir(), key=lambda p: p.name)


def _walk(
    entries: List[Path],
    prefix: str,
    found: List[Tuple[str, Path]],
    skip_hidden: bool,
) -> None:
    for entry in entries:
        if skip_hidden and entry.name.startswith("."):
            continue

        key = f"{prefix}/{entry.name}" if prefix else entry.name

        # Symlinked directories are not followed; they could form a cycle.
        if entry.is_dir() and not entry.is_symlink():
            try:
                children = _list_dir(entry)
            except OSError as e:
                logger.warning("Skipping unreadable directory %s: %s", key, e)
                continue
            _walk(children, key, found, skip_hidden)
        elif entry.is_file():
            found.append((key, entry))
