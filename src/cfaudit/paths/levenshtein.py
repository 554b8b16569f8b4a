"""Edit distance between path strings."""

from __future__ import annotations


def levenshtein_distance(source: str | None, target: str | None) -> int:
    """Return the number of single-character insertions, deletions or
    substitutions needed to turn ``source`` into ``target``.

    None is treated as the empty string.
    """
    source = source or ""
    target = target or ""

    if source == target:
        return 0
    if not source:
        return len(target)
    if not target:
        return len(source)

    # Keep the shorter string in the inner loop
    if len(source) < len(target):
        source, target = target, source

    previous = list(range(len(target) + 1))
    for i, source_char in enumerate(source, start=1):
        current = [i]
        for j, target_char in enumerate(target, start=1):
            cost = 0 if source_char == target_char else 1
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current

    return previous[-1]
