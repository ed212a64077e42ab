import os
from ..models import ProgressCb
from ..errors import (
    DirectoryCreateError,
    DirectoryExistsError,
    DirectoryRemoveError,
    FileMoveError,
    FileReadError,
    FileWriteError,
)

# surrogateescape + newline="" keeps undecodable bytes and CRLF intact on write-back
_TEXT_ARGS = {"encoding": "utf-8", "errors": "surrogateescape", "newline": ""}


def read_text(path: str) -> str:
    try:
        with open(path, "r", **_TEXT_ARGS) as f:
            return f.read()
    except OSError as e:
        raise FileReadError(path, e) from e


def write_text(path: str, text: str) -> None:
    try:
        with open(path, "w", **_TEXT_ARGS) as f:
            f.write(text)
    except OSError as e:
        raise FileWriteError(path, e) from e


def move_file(src: str, dst: str) -> None:
    """Move src to dst, creating dst's parent directories first."""
    new_dir = os.path.dirname(dst)
    if new_dir and not os.path.isdir(new_dir):
        try:
            os.makedirs(new_dir, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateError(new_dir, e) from e
    try:
        os.replace(src, dst)
    except OSError as e:
        raise FileMoveError(src, dst, e) from e


def rename_directory(old_path: str, new_path: str, progress_cb: ProgressCb = None) -> bool:
    """Rename a directory. Returns False when old_path doesn't exist."""
    if not os.path.exists(old_path):
        return False
    if os.path.exists(new_path):
        raise DirectoryExistsError(new_path)
    try:
        os.rename(old_path, new_path)
    except OSError as e:
        raise FileMoveError(old_path, new_path, e) from e
    if progress_cb:
        progress_cb("Renamed", f"Renamed directory from {old_path} to {new_path}")
    return True


def prune_empty_dirs(root: str, skip=()) -> list:
    """Remove empty directories under root, bottom-up. root itself is kept."""
    removed = []
    for base, _, _ in os.walk(root, topdown=False):
        if base == root or any(part in skip for part in os.path.relpath(base, root).split(os.sep)):
            continue
        try:
            if not os.listdir(base):
                os.rmdir(base)
                removed.append(base)
        except OSError as e:
            raise DirectoryRemoveError(base, e) from e
    return removed
