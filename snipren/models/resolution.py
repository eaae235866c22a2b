"""Rename resolution data models."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class MatchKind(str, Enum):
    """Relationship that makes a directory entry a rename candidate."""

    EXPANSION = "expansion"
    EXTENSION_CHANGE = "extension_change"


class Direction(str, Enum):
    """Which of the two names was treated as the old one."""

    ENTRY_TO_TARGET = "entry_to_target"
    TARGET_TO_ENTRY = "target_to_entry"


class MatchVerdict(BaseModel):
    """A predicate that held for an entry, and the direction it held in."""

    kind: MatchKind
    direction: Direction

    def __str__(self) -> str:
        arrow = "entry → target" if self.direction is Direction.ENTRY_TO_TARGET else "target → entry"
        return f"{self.kind.value.replace('_', ' ')} ({arrow})"


class Candidate(BaseModel):
    """A directory entry that may be the file the user wants renamed."""

    name: str = Field(description="Filename of the existing entry (without directory path)")
    verdicts: list[MatchVerdict] = Field(
        description="Predicates that matched this entry against the target",
        default_factory=list,
    )

    def __str__(self) -> str:
        reasons = ", ".join(str(verdict) for verdict in self.verdicts)
        return f"Candidate('{self.name}', {reasons})"


class RenameIntent(BaseModel):
    """A resolved rename of exactly one file within one directory."""

    directory: Path = Field(description="Canonical directory holding both names")
    source: str = Field(description="Existing filename to rename")
    destination: str = Field(description="Filename to rename to")
    candidate: Candidate | None = Field(
        description="Why the source was selected",
        default=None,
    )

    @property
    def source_path(self) -> Path:
        return self.directory / self.source

    @property
    def destination_path(self) -> Path:
        return self.directory / self.destination

    def __str__(self) -> str:
        return f"{self.source} → {self.destination}"
