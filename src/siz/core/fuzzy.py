"""Approximate string matching primitives.

Edit distance and a normalized similarity ratio, used to rank file type
suggestions when a requested type name is not recognized.
"""

from __future__ import annotations


def levenshtein_distance(s1: str, s2: str) -> int:
    """Return the minimum number of single character edits between two strings.

    Insertions, deletions and substitutions each cost 1. Characters are
    compared as Unicode code points, not bytes. Only two table rows are kept
    in memory, sized by the shorter string.

    Args:
        s1: Source string
        s2: Target string

    Returns:
        Non-negative edit distance

    Examples:
        >>> levenshtein_distance("sitting", "kitten")
        3
        >>> levenshtein_distance("", "xyz")
        3
    """
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    # distance is symmetric, iterate over the longer string
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, start=1):
        current = [i]
        for j, c2 in enumerate(s2, start=1):
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + (c1 != c2),  # substitution
                )
            )
        previous = current

    return previous[-1]


def similarity_ratio(s1: str, s2: str) -> float:
    """Return the normalized Levenshtein similarity of two strings in [0, 1].

    ``(len(s1) + len(s2) - distance) / (len(s1) + len(s2))`` where the lengths
    are UTF-8 byte lengths. The ratio is intended for ASCII input such as type
    names and file extensions; non-ASCII input gives well defined but less
    intuitive values.

    Identical strings return exactly ``1.0`` without computing a distance.

    Precondition: at least one argument is non-empty. Two empty strings are
    equal and short-circuit to ``1.0``.

    Args:
        s1: First string
        s2: Second string

    Returns:
        Similarity ratio, 1.0 for identical strings

    Examples:
        >>> similarity_ratio("xyz", "xy")
        0.8
        >>> round(similarity_ratio("sitting", "kitten"), 4)
        0.7692
    """
    if s1 == s2:
        return 1.0

    len_sum = len(s1.encode("utf-8")) + len(s2.encode("utf-8"))
    distance = levenshtein_distance(s1, s2)
    return (len_sum - distance) / len_sum
