"""Greedy single-linkage clustering of applications within birth-date buckets.

Records are only ever compared against records with the exact same birth
date key. A missing birth date is its own bucket (""), not a wildcard.

Within a bucket, records are processed in input order and each one joins the
FIRST existing cluster that has at least one member above threshold, or
starts a new cluster. This is order-dependent and not a transitive closure:
two members of a cluster can be below threshold with each other, linked
through a third. Grouping results depend on that, so don't replace it with
connected components.
"""

from typing import Callable

from dedup.models import ApplicationRecord
from dedup.name_similarity import SAME_PERSON_THRESHOLD, name_similarity


def check_threshold(threshold: float) -> float:
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"Similarity threshold must be within [0, 1], got {threshold!r}")
    return threshold


def bucket_by_birth_date(
    records: list[ApplicationRecord],
) -> dict[str, list[ApplicationRecord]]:
    """Group records by exact birth date key, in first-appearance order."""
    buckets: dict[str, list[ApplicationRecord]] = {}
    for record in records:
        buckets.setdefault(record.date_of_birth or "", []).append(record)
    return buckets


def cluster_bucket(
    records: list[ApplicationRecord],
    threshold: float = SAME_PERSON_THRESHOLD,
    similarity: Callable[[str, str], float] = name_similarity,
) -> list[list[ApplicationRecord]]:
    """Cluster one bucket. Returns every cluster, singletons included."""
    clusters: list[list[ApplicationRecord]] = []
    for record in records:
        for group in clusters:
            if any(similarity(m.full_name, record.full_name) >= threshold for m in group):
                group.append(record)
                break
        else:
            clusters.append([record])
    return clusters


def cluster(
    records: list[ApplicationRecord],
    threshold: float = SAME_PERSON_THRESHOLD,
    similarity: Callable[[str, str], float] = name_similarity,
) -> list[list[ApplicationRecord]]:
    """Cluster all records, bucket by bucket. Never compares across buckets."""
    check_threshold(threshold)
    clusters = []
    for bucket in bucket_by_birth_date(records).values():
        clusters.extend(cluster_bucket(bucket, threshold, similarity))
    return clusters
