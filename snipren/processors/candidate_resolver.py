"""Resolution of a single target name into one safe file rename."""

import logging
import os
from pathlib import Path

from snipren.errors import (
    AmbiguousMatchError,
    DirectoryUnreadableError,
    InvalidPathError,
    NoMatchError,
    RenameFailedError,
    TargetExistsError,
)
from snipren.matching import is_candidate, match_verdicts
from snipren.models.resolution import Candidate, RenameIntent


logger = logging.getLogger(__name__)


class CandidateResolver:
    """Find the one existing file a target name evolved from (or into) and rename it.

    The target may be either the longer or the shorter spelling: entries are
    matched against it in both directions. At most one rename is ever made;
    two or more candidates are reported instead of guessed between.
    """

    def __init__(self, cwd: Path) -> None:
        """Initialize the resolver.

        Args:
            cwd: Directory that relative targets are resolved against.
        """
        self.cwd = cwd

    def resolve_path(self, target: str) -> tuple[Path, str]:
        """Split a target into its canonical directory and bare filename.

        Args:
            target: User-supplied name, optionally with a directory part.

        Returns:
            Tuple of (canonical directory, filename).

        Raises:
            InvalidPathError: If the target has no usable filename component.
            DirectoryUnreadableError: If the directory cannot be canonicalized.
        """
        target_path = Path(target)
        name = target_path.name
        if not target or "\x00" in target or name in ("", ".", ".."):
            raise InvalidPathError(f"Invalid target name: '{target}'")

        # Joining an absolute path onto cwd yields the absolute path unchanged
        parent = self.cwd / target_path.parent
        try:
            directory = parent.resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise DirectoryUnreadableError(f"Failed to resolve directory '{parent}': {e}") from e

        if not directory.is_dir():
            raise DirectoryUnreadableError(f"Not a directory: '{directory}'")

        return directory, name

    def scan(self, directory: Path, target_name: str) -> list[str]:
        """List regular files in a directory, excluding the target itself.

        Any unreadable entry aborts the scan, since a partial listing could
        hide a competing candidate.

        Args:
            directory: Directory to list.
            target_name: Name to leave out of the listing.

        Returns:
            Sorted filenames.

        Raises:
            DirectoryUnreadableError: If the directory or one of its entries cannot be read.
        """
        names: list[str] = []
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if entry.name == target_name:
                        continue
                    if not entry.is_file():
                        continue
                    names.append(entry.name)
        except OSError as e:
            raise DirectoryUnreadableError(f"Failed to read directory: {e}") from e

        logger.debug("Scanned %d file(s) in %s", len(names), directory)
        return sorted(names)

    def find_candidates(self, names: list[str], target_name: str) -> list[Candidate]:
        """Select the names that relate to the target by expansion or extension change.

        Args:
            names: Filenames to test.
            target_name: Name the user asked for.

        Returns:
            Candidates in the order of `names`.
        """
        candidates: list[Candidate] = []
        for name in names:
            if not is_candidate(name, target_name):
                continue
            candidate = Candidate(name=name, verdicts=match_verdicts(name, target_name))
            logger.debug("%s", candidate)
            candidates.append(candidate)
        return candidates

    def resolve(self, target: str, force: bool = False) -> RenameIntent:
        """Work out which file to rename into `target`, without renaming anything.

        Args:
            target: Name to rename to, optionally with a directory part.
            force: Allow the target to be overwritten if it already exists.

        Returns:
            The single rename to perform.

        Raises:
            InvalidPathError: If the target has no usable filename component.
            DirectoryUnreadableError: If the directory cannot be resolved or read.
            TargetExistsError: If the target exists and `force` is not set.
            NoMatchError: If no file relates to the target.
            AmbiguousMatchError: If more than one file relates to the target.
        """
        directory, name = self.resolve_path(target)

        # Checked before scanning so the clearest error wins
        if (directory / name).exists() and not force:
            raise TargetExistsError(name)

        names = self.scan(directory, name)
        candidates = self.find_candidates(names, name)

        if not candidates:
            raise NoMatchError(name)
        if len(candidates) > 1:
            raise AmbiguousMatchError(name, [candidate.name for candidate in candidates])

        candidate = candidates[0]
        return RenameIntent(directory=directory, source=candidate.name, destination=name, candidate=candidate)

    def apply(self, intent: RenameIntent) -> None:
        """Rename the intent's source to its destination.

        Raises:
            RenameFailedError: If the filesystem refuses the rename.
        """
        logger.debug("Renaming %s to %s", intent.source_path, intent.destination_path)
        try:
            intent.source_path.rename(intent.destination_path)
        except OSError as e:
            raise RenameFailedError(f"Failed to rename: {e}") from e

    def run(self, target: str, force: bool = False, dry_run: bool = False) -> RenameIntent:
        """Resolve `target` and, unless `dry_run` is set, perform the rename."""
        intent = self.resolve(target, force=force)
        if not dry_run:
            self.apply(intent)
        return intent
