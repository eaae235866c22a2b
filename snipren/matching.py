"""Filename relationship predicates used to infer rename intent."""

from collections.abc import Callable

from snipren.models.resolution import Direction, MatchKind, MatchVerdict


Predicate = Callable[[str, str], bool]


def is_expansion(old: str, new: str) -> bool:
    """Check whether `new` is `old` with characters inserted after its first character.

    Cursors squeeze towards the middle from both ends ("vice" scan). Every
    character of `old` must be consumed by the common prefix or the common
    suffix, and the common prefix must not be empty.

    Examples:
        route_report.csv -> route_report_before.csv   match
        README -> README.md                           match
        data.json -> metadata.json                    no match (insertion at the start)
        route_report.csv -> route-report_before.csv   no match (changed separator)

    Args:
        old: The original filename.
        new: The candidate evolved filename.

    Returns:
        True if `new` is an expansion of `old`.
    """
    if len(new) <= len(old):
        return False

    i = 0
    while i < len(old) and old[i] == new[i]:
        i += 1

    j_old, j_new = len(old), len(new)
    while j_old > i and j_new > i and old[j_old - 1] == new[j_new - 1]:
        j_old -= 1
        j_new -= 1

    return i == j_old and i > 0


def split_extension(name: str) -> tuple[str, str]:
    """Split a filename at its last dot into `(base, extension)`.

    The extension keeps the dot. Without a dot the extension is empty.
    """
    dot = name.rfind(".")
    if dot < 0:
        return name, ""
    return name[:dot], name[dot:]


def is_extension_change(old: str, new: str) -> bool:
    """Check whether both names share a base and differ only in the extension.

    Only the last dot separates the extension, so `file.tar.gz` and
    `file.tar.bz2` share the base `file.tar`. A name without a dot never
    takes part in an extension change.
    """
    if old == new:
        return False

    old_base, old_ext = split_extension(old)
    new_base, new_ext = split_extension(new)
    if not old_ext or not new_ext:
        return False

    return old_base == new_base and old_ext != new_ext


def either_direction(predicate: Predicate) -> Predicate:
    """Lift a directional predicate so it holds when either argument order holds."""

    def _either(a: str, b: str) -> bool:
        return predicate(a, b) or predicate(b, a)

    return _either


def any_of(*predicates: Predicate) -> Predicate:
    """Combine predicates with logical OR."""

    def _any(a: str, b: str) -> bool:
        return any(predicate(a, b) for predicate in predicates)

    return _any


PREDICATES: dict[MatchKind, Predicate] = {
    MatchKind.EXPANSION: is_expansion,
    MatchKind.EXTENSION_CHANGE: is_extension_change,
}

is_candidate: Predicate = any_of(*(either_direction(predicate) for predicate in PREDICATES.values()))


def match_verdicts(entry: str, target: str) -> list[MatchVerdict]:
    """List every predicate and direction under which `entry` relates to `target`.

    Args:
        entry: Name of an existing directory entry.
        target: Name the user asked to rename into.

    Returns:
        Verdicts that hold, empty if `entry` is not a candidate.
    """
    verdicts: list[MatchVerdict] = []
    for kind, predicate in PREDICATES.items():
        if predicate(entry, target):
            verdicts.append(MatchVerdict(kind=kind, direction=Direction.ENTRY_TO_TARGET))
        if predicate(target, entry):
            verdicts.append(MatchVerdict(kind=kind, direction=Direction.TARGET_TO_ENTRY))
    return verdicts
