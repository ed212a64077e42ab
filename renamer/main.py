# main.py

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from renamer.core.errors import RenameError
from renamer.core.models import RenameOptions
from renamer.core.orchestrator import run_rename

REQUIRED_MSG = "All flags --dir, --old, and --new are required."


# -----------------------------------------------------------------------------
# Argument parsing
# -----------------------------------------------------------------------------
# Flags are declared optional so a missing one goes through the same fatal
# path as an empty one (usage + message + exit 1).
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="java-rename",
        description="Rename a Java project's package namespace across a source tree.",
    )
    parser.add_argument("--dir", default="", help="Path to the Java project directory")
    parser.add_argument("--old", default="", help="Old project name (e.g., com.example.oldproject)")
    parser.add_argument("--new", default="", help="New project name (e.g., com.newcompany.newproject)")
    parser.add_argument(
        "--prune-empty",
        action="store_true",
        help="Remove package directories left empty after files are moved",
    )
    return parser


def _fatal(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


# Prints every progress event; statuses are only used by callers that filter.
def _progress(status: str, message: str = "") -> None:
    print(message or status)


# -----------------------------------------------------------------------------
# Entry point
# -----------------------------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.dir or not args.old or not args.new:
        parser.print_usage(sys.stderr)
        return _fatal(REQUIRED_MSG)

    try:
        opts = RenameOptions(
            project_dir=args.dir,
            old_name=args.old,
            new_name=args.new,
            prune_empty=args.prune_empty,
        )
    except ValidationError as e:
        parser.print_usage(sys.stderr)
        return _fatal(f"Invalid arguments: {e}")

    print(f"Renaming Java project in {opts.project_dir} from '{opts.old_name}' to '{opts.new_name}'")

    try:
        report = run_rename(opts, progress_cb=_progress)
    except RenameError as e:
        return _fatal(f"Error walking the directory: {e}")

    print("Renaming complete. Please verify the changes and rebuild your Java project.")
    print(
        f"{len(report.updated_files)} file(s) updated, {len(report.moved_files)} file(s) moved "
        f"({report.visited_java} Java, {report.visited_build} build file(s) scanned)."
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
