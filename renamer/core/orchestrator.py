import os
from .errors import WalkError
from .models import ProgressCb, RenameOptions, RenameReport
from .processors.build_processor import is_build_file, process_build_file
from .processors.java_processor import is_java_file, process_java_file
from .utils.fileio import prune_empty_dirs

SKIP_DIRS = {".git", "target"}


def _dispatch(path: str, opts: RenameOptions, report: RenameReport, progress_cb: ProgressCb) -> None:
    name = os.path.basename(path)
    if is_java_file(name):
        report.visited_java += 1
        changed, move = process_java_file(path, opts.old_name, opts.new_name, progress_cb)
        if changed:
            report.updated_files.append(move.target if move else path)
        if move:
            report.moved_files.append(move)
    elif is_build_file(name):
        report.visited_build += 1
        if process_build_file(path, opts.old_name, opts.new_name, progress_cb):
            report.updated_files.append(path)


def _walk(path: str, opts: RenameOptions, report: RenameReport, progress_cb: ProgressCb) -> None:
    """Visit a directory's entries in one sorted order, descending into subdirectories in place."""
    emit = progress_cb or (lambda status, message: None)
    try:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise WalkError(path, e) from e

    for entry in entries:
        full = os.path.join(path, entry.name)
        if entry.is_dir(follow_symlinks=False):
            if entry.name in SKIP_DIRS:
                emit("Skipped", f"Skipping directory: {full}")
                report.skipped_dirs.append(full)
                continue
            _walk(full, opts, report, progress_cb)
        else:
            _dispatch(full, opts, report, progress_cb)


"""Walks the project top-down, files and folders together in lexical order, rewrites .java and build
   files as they are met, and stops at the first error. Nothing is rolled back, so a failed run can leave a mixed tree."""
def run_rename(opts: RenameOptions, progress_cb: ProgressCb = None) -> RenameReport:
    emit = progress_cb or (lambda status, message: None)
    report = RenameReport()
    root = opts.project_dir

    if os.path.isfile(root):
        _dispatch(root, opts, report, progress_cb)
        return report

    if os.path.basename(os.path.normpath(root)) in SKIP_DIRS:
        emit("Skipped", f"Skipping directory: {root}")
        report.skipped_dirs.append(root)
        return report

    # A directory is listed once, when it is reached; folders created later by
    # a relocation are only visited if their parent hasn't been listed yet.
    _walk(root, opts, report, progress_cb)

    if opts.prune_empty:
        for removed in prune_empty_dirs(root, skip=SKIP_DIRS):
            emit("Pruned", f"Removed empty directory {removed}")
            report.pruned_dirs.append(removed)

    return report
