# wordbank/services/word_ops.py
"""
Pure word-set operations: random sampling, pagination and set mutation.

Nothing here performs I/O; the repository in word_store.py loads a
category's word list, applies one of these functions and writes the
result back inside a transaction.
"""
import math
import random
from typing import Iterable, Optional, Sequence


def sample_words(words: Sequence[str], n: int, rng: Optional[random.Random] = None) -> list[str]:
    """
    Draw up to n distinct words uniformly without replacement.

    Runs a Fisher-Yates shuffle over a copy of ``words`` (the input is
    never mutated) and returns the first min(n, len(words)) items. Every
    permutation is equally likely, so n >= len(words) yields the whole list
    in uniformly random order. n <= 0 yields an empty list.

    Args:
        words: Source words
        n: Number of words wanted
        rng: Random generator to draw from (defaults to the random module)

    Returns:
        List of sampled words
    """
    if n <= 0:
        return []
    randrange = (rng or random).randrange
    shuffled = list(words)
    for i in range(len(shuffled) - 1, 0, -1):
        j = randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled[:n]


def filter_words(words: Iterable[str], search: Optional[str]) -> list[str]:
    """Keep words containing ``search`` case-insensitively (literal match, not a regex)."""
    if not search:
        return list(words)
    needle = search.casefold()
    return [w for w in words if needle in w.casefold()]


def paginate_words(
    words: Sequence[str],
    page: int,
    limit: int,
    search: Optional[str] = None,
) -> tuple[list[str], int, int]:
    """
    Slice the (optionally filtered) word list into one page.

    ``total`` counts the words remaining after filtering, so walking pages
    1..pages returns every filtered word exactly once.

    Returns:
        (items, total, pages)

    Raises:
        ValueError: If page or limit is smaller than 1
    """
    if page < 1:
        raise ValueError("page must be >= 1")
    if limit < 1:
        raise ValueError("limit must be >= 1")
    filtered = filter_words(words, search)
    total = len(filtered)
    start = (page - 1) * limit
    return filtered[start:start + limit], total, math.ceil(total / limit)


def merge_words(existing: Sequence[str], incoming: Iterable[str]) -> list[str]:
    """
    Set union that keeps order: existing words first, then new words in
    the order first seen. Duplicates, also within ``incoming``, are dropped.
    """
    merged = list(dict.fromkeys(existing))
    seen = set(merged)
    for word in incoming:
        if word not in seen:
            seen.add(word)
            merged.append(word)
    return merged


def subtract_words(existing: Sequence[str], removed: Iterable[str]) -> list[str]:
    """Set difference that keeps order; words not present are ignored."""
    drop = set(removed)
    return [w for w in existing if w not in drop]
