from ..models import ProgressCb, split_coordinates
from ..utils.fileio import read_text, write_text

BUILD_FILES = ("pom.xml", "build.gradle")


def is_build_file(name: str) -> bool:
    return name in BUILD_FILES


def rewrite_build_text(text: str, old_name: str, new_name: str) -> str:
    """
    Rewrite Maven/Gradle identifiers by literal replacement.

    Order:
        1. the full dotted name
        2. the trailing segment (artifact)
        3. the dotted prefix (group), only when both names have one

    Caveat:
        Every step matches anywhere in the file, so the artifact string inside
        an unrelated word or dependency is replaced as well. There is no XML
        or Gradle awareness.
    """
    text = text.replace(old_name, new_name)

    old_group, old_artifact = split_coordinates(old_name)
    new_group, new_artifact = split_coordinates(new_name)
    if old_artifact:
        text = text.replace(old_artifact, new_artifact)
    if old_group and new_group:
        text = text.replace(old_group, new_group)
    return text


def process_build_file(
    file_path: str, old_name: str, new_name: str, progress_cb: ProgressCb = None
) -> bool:
    emit = progress_cb or (lambda status, message: None)
    emit("Processing", f"Processing build file: {file_path}")

    src = read_text(file_path)
    updated = rewrite_build_text(src, old_name, new_name)
    if updated == src:
        return False
    write_text(file_path, updated)
    emit("Updated", f"Updated content of {file_path}")
    return True
