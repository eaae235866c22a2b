"""Errors raised when a rename request cannot be carried out."""

from enum import Enum


class RefusalKind(str, Enum):
    INVALID_PATH = "invalid_path"
    DIRECTORY_UNREADABLE = "directory_unreadable"
    TARGET_EXISTS = "target_exists"
    NO_MATCH = "no_match"
    AMBIGUOUS = "ambiguous"
    RENAME_FAILED = "rename_failed"


class ResolutionError(Exception):
    """Base class for every refusal or failure of a rename request.

    None of these are retried: each one needs either a different target from
    the user or a change to the directory.
    """

    kind: RefusalKind


class InvalidPathError(ResolutionError):
    kind = RefusalKind.INVALID_PATH


class DirectoryUnreadableError(ResolutionError):
    kind = RefusalKind.DIRECTORY_UNREADABLE


class TargetExistsError(ResolutionError):
    kind = RefusalKind.TARGET_EXISTS

    def __init__(self, target: str) -> None:
        super().__init__(f"Target '{target}' already exists. Use --force to overwrite.")
        self.target = target


class NoMatchError(ResolutionError):
    kind = RefusalKind.NO_MATCH

    def __init__(self, target: str) -> None:
        super().__init__(f"No matching files found for '{target}'")
        self.target = target


class AmbiguousMatchError(ResolutionError):
    """More than one entry could be the source; nothing is renamed."""

    kind = RefusalKind.AMBIGUOUS

    def __init__(self, target: str, candidates: list[str]) -> None:
        lines = [f"Multiple candidates found for '{target}':"]
        lines.extend(f"  {name}" for name in candidates)
        lines.append("")
        lines.append("Cannot proceed - ambiguous match.")
        super().__init__("\n".join(lines))
        self.target = target
        self.candidates = candidates


class RenameFailedError(ResolutionError):
    kind = RefusalKind.RENAME_FAILED
