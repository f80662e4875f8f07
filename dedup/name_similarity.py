"""Name similarity scoring: bigram Dice + token Jaccard, order-tolerant.

Dice on character bigrams catches typos and spelling variants, Jaccard on
token sets catches missing or extra middle names, and a second pass with one
name's tokens reversed catches "First Last" vs "Last First". The score is the
maximum over all of them, so one strong metric is enough.
"""

from collections import Counter

from dedup.name_normalizer import normalize

SAME_PERSON_THRESHOLD = 0.70


def bigrams(normalized: str) -> Counter:
    """Multiset of overlapping 2-char substrings.

    Strings shorter than 2 characters (including "") are their own single
    element, so two empty names share one "bigram" and score 1.0.
    """
    if len(normalized) < 2:
        return Counter([normalized])
    return Counter(normalized[i:i + 2] for i in range(len(normalized) - 1))


def dice_coefficient(a: str, b: str) -> float:
    """Dice over bigram multisets of two already-normalized names."""
    bg_a = bigrams(a)
    bg_b = bigrams(b)
    total = sum(bg_a.values()) + sum(bg_b.values())
    if total == 0:
        return 0.0
    overlap = sum((bg_a & bg_b).values())
    return 2 * overlap / total


def jaccard_tokens(a: str, b: str) -> float:
    """Jaccard over token sets of two already-normalized names. 0 if both empty."""
    tokens_a = set(a.split())
    tokens_b = set(b.split())
    union = tokens_a | tokens_b
    if not union:
        return 0.0
    return len(tokens_a & tokens_b) / len(union)


def _reversed(normalized: str) -> str:
    return " ".join(reversed(normalized.split()))


def _directional_score(a: str, b: str) -> float:
    b_rev = _reversed(b)
    return max(
        dice_coefficient(a, b),
        jaccard_tokens(a, b),
        dice_coefficient(a, b_rev),
        jaccard_tokens(a, b_rev),
    )


def name_similarity(a, b) -> float:
    """Similarity in [0, 1] between two raw names. Symmetric.

    The reversed-token pass is run in both directions; reversing only the
    second name can otherwise score (a, b) and (b, a) differently on the
    bigrams that span a token boundary.
    """
    norm_a = normalize(a)
    norm_b = normalize(b)
    return max(_directional_score(norm_a, norm_b), _directional_score(norm_b, norm_a))


def is_same_person(a, b, threshold: float = SAME_PERSON_THRESHOLD) -> bool:
    return name_similarity(a, b) >= threshold
