"""Duplicate reporting: flatten clusters into groups, ids, and panel summaries."""

from dedup.models import ApplicationRecord


def report(
    clusters: list[list[ApplicationRecord]],
) -> tuple[list[list[ApplicationRecord]], set]:
    """Keep clusters of size >= 2, in production order, plus the set of their ids.

    Returns:
        (groups, duplicate_ids)
    """
    groups = [list(c) for c in clusters if len(c) >= 2]
    duplicate_ids = {record.id for group in groups for record in group}
    return groups, duplicate_ids


def summarize_group(
    group: list[ApplicationRecord],
    preview_size: int = 2,
    missing_value: str = "N/A",
) -> dict:
    """Review panel entry for one group.

    The headline is the first member; only the first preview_size members
    are listed, the size still counts all of them.
    """
    head = group[0] if group else None
    return {
        "full_name": (head.full_name if head else "") or missing_value,
        "date_of_birth": (head.date_of_birth if head else "") or missing_value,
        "size": len(group),
        "members": [
            {
                "id": record.id,
                "full_name": record.full_name or missing_value,
                "date_of_birth": record.date_of_birth or missing_value,
                "phone": record.phone or missing_value,
            }
            for record in group[:preview_size]
        ],
    }


def summarize_groups(
    groups: list[list[ApplicationRecord]],
    preview_size: int = 2,
    missing_value: str = "N/A",
) -> list[dict]:
    return [summarize_group(g, preview_size, missing_value) for g in groups]
