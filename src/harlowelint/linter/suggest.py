"""'Did you mean?' suggestions for unknown macro names."""

from __future__ import annotations

from harlowelint.models.vocabulary import Vocabulary

MAX_SUGGESTION_DISTANCE = 2


def levenshtein(a: str, b: str) -> int:
    """Edit distance with unit-cost insert, delete and substitute."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + (char_a != char_b),  # substitution
                )
            )
        previous = current
    return previous[-1]


def suggest_macro(name: str, vocabulary: Vocabulary) -> str | None:
    """Return the closest vocabulary entry to *name*, or ``None``.

    A case-insensitive exact match always wins. Otherwise the entry with
    the smallest edit distance (at most ``MAX_SUGGESTION_DISTANCE``) is
    returned; ties go to the entry that comes first in vocabulary order.
    """
    lowered = name.lower()

    for candidate in vocabulary:
        if candidate.lower() == lowered:
            return candidate

    best: str | None = None
    best_distance = MAX_SUGGESTION_DISTANCE + 1
    for candidate in vocabulary:
        distance = levenshtein(lowered, candidate.lower())
        if distance < best_distance:
            best, best_distance = candidate, distance
    return best
