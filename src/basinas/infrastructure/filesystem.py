"""File-system helpers for writing generated files"""

import logging
import os
import shutil
import stat
import tempfile
from pathlib import Path
from typing import List, Sequence, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_text(path: PathLike) -> str:
    """Read the full content of a text file"""
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_text_atomic(path: PathLike, content: str) -> None:
    """Overwrite a file so that readers never observe a partial write.

    The content goes to a temporary file in the same directory which then
    replaces the target in a single rename. An existing file keeps its
    permission bits; a new file gets the usual umask-derived mode.
    """
    target = Path(path)
    if target.exists():
        mode = stat.S_IMODE(target.stat().st_mode)
    else:
        mode = _default_file_mode()
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def write_file_with_dirs(path: PathLike, content: str) -> Path:
    """Write a file, creating parent directories recursively first.

    Args:
        path: Destination file path
        content: Text content

    Returns:
        The written path
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    write_text_atomic(target, content)
    logger.debug(f"Wrote {target}")
    return target


def move_into_group(parent: PathLike, group: str, names: Sequence[str]) -> List[str]:
    """Move entries of ``parent`` into the ``parent/group`` subdirectory.

    Missing entries are skipped. When an entry exists in both places the one
    in ``parent`` wins: files replace their counterpart and directories are
    merged into it, so re-running after the entries were regenerated leaves
    no duplicate routes behind.

    Returns:
        Names that were moved during this call
    """
    parent_dir = Path(parent)
    group_dir = parent_dir / group
    group_dir.mkdir(parents=True, exist_ok=True)

    moved = []
    for name in names:
        source = parent_dir / name
        destination = group_dir / name
        if not source.exists():
            logger.debug(f"Skipping {source}: not found")
            continue
        if source.is_dir() and destination.exists():
            shutil.copytree(source, destination, dirs_exist_ok=True)
            shutil.rmtree(source)
        else:
            os.replace(source, destination)
        moved.append(name)
        logger.debug(f"Moved {source} -> {destination}")
    return moved
