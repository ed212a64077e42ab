from __future__ import annotations
import os
import pathlib
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Callable, List, Optional, Tuple


# Receives (status, message) as the run progresses
ProgressCb = Optional[Callable[[str, str], None]]


def package_path(name: str) -> str:
    """Directory form of a dotted name (com.example.app -> com/example/app)."""
    return name.replace(".", os.sep)


def split_coordinates(name: str) -> Tuple[str, str]:
    """Split a dotted name into (group, artifact) at its last segment."""
    parts = name.split(".")
    return ".".join(parts[:-1]), parts[-1]


class RenameOptions(BaseModel):
    """Single source of truth for a rename run."""
    project_dir: str = Field(alias="dir", description="Path to the Java project directory")
    old_name: str = Field(alias="old", description="Old project name (e.g., com.example.oldproject)")
    new_name: str = Field(alias="new", description="New project name (e.g., com.newcompany.newproject)")

    # Remove package directories left empty after relocation
    prune_empty: bool = False

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("project_dir", "old_name", "new_name")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must be a non-empty string")
        return v

    @field_validator("project_dir")
    @classmethod
    def _dir_must_exist(cls, v: str) -> str:
        if not pathlib.Path(v).exists():
            raise ValueError(f"Project directory does not exist: {v}")
        return v

    @property
    def old_package_path(self) -> str:
        return package_path(self.old_name)

    @property
    def new_package_path(self) -> str:
        return package_path(self.new_name)


class FileMove(BaseModel):
    source: str
    target: str


class RenameReport(BaseModel):
    """What a run touched. Filled in as the walk goes."""
    visited_java: int = 0
    visited_build: int = 0
    updated_files: List[str] = Field(default_factory=list)
    moved_files: List[FileMove] = Field(default_factory=list)
    skipped_dirs: List[str] = Field(default_factory=list)
    pruned_dirs: List[str] = Field(default_factory=list)

