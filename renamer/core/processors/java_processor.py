from typing import Optional, Tuple
from ..models import FileMove, ProgressCb, package_path
from ..utils.fileio import move_file, read_text, write_text

JAVA_SUFFIX = ".java"


def is_java_file(name: str) -> bool:
    return name.endswith(JAVA_SUFFIX)


# Plain substring replacement, not boundary-aware: "package com.old" also hits
# "package com.older", and "import static com.old" is left alone.
def rewrite_java_text(text: str, old_name: str, new_name: str) -> str:
    text = text.replace("package " + old_name, "package " + new_name)
    text = text.replace("import " + old_name, "import " + new_name)
    return text


def relocated_path(file_path: str, old_name: str, new_name: str) -> Optional[str]:
    """Path after swapping the first occurrence of the old package path, or None."""
    old_path = package_path(old_name)
    if old_path not in file_path:
        return None
    new_file_path = file_path.replace(old_path, package_path(new_name), 1)
    if new_file_path == file_path:
        return None
    return new_file_path


# Class names are never rewritten, only package/import prefixes and the file location.
def process_java_file(
    file_path: str, old_name: str, new_name: str, progress_cb: ProgressCb = None
) -> Tuple[bool, Optional[FileMove]]:
    emit = progress_cb or (lambda status, message: None)
    emit("Processing", f"Processing Java file: {file_path}")

    src = read_text(file_path)
    updated = rewrite_java_text(src, old_name, new_name)
    changed = updated != src
    if changed:
        write_text(file_path, updated)
        emit("Updated", f"Updated content of {file_path}")

    target = relocated_path(file_path, old_name, new_name)
    if target is None:
        return changed, None

    move_file(file_path, target)
    emit("Renamed", f"Renamed file from {file_path} to {target}")
    return changed, FileMove(source=file_path, target=target)
