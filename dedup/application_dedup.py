"""ApplicationDeduplicator: Flags applications that are likely the same person.

Two applications are duplicates when their birth dates are identical and their
names are similar enough (see name_similarity). Runs over the full in-memory
application list each time; nothing is persisted.
"""

import logging
from typing import Callable

from dedup.clusterer import cluster
from dedup.config import build_config, load_config
from dedup.duplicate_report import report, summarize_groups
from dedup.models import DuplicateNotification, DuplicateReport, coerce_records

logger = logging.getLogger(__name__)


class ApplicationDeduplicator:
    """Groups submitted applications into likely-duplicate clusters.

    The "duplicates found" badge is fed through the on_duplicates callback
    instead of a global event, once per run, including runs that find
    nothing so the badge can clear.
    """

    def __init__(
        self,
        config: dict | None = None,
        on_duplicates: Callable[[DuplicateNotification], None] | None = None,
    ):
        config = build_config(config)
        self.threshold = config["similarity_threshold"]
        self.preview_size = config["preview_size"]
        self.missing_value = config["missing_value"]
        self.on_duplicates = on_duplicates

    @classmethod
    def from_config(cls, path: str = "config/dedup.yaml", on_duplicates=None):
        """Build from the "dedup" section of a YAML file."""
        return cls(load_config(path), on_duplicates=on_duplicates)

    def find_duplicates(self, applications) -> DuplicateReport:
        """Run the full pipeline over a list of records or raw application dicts.

        Args:
            applications: ApplicationRecord objects or dicts with "id",
                "full_name" (or "user": {"full_name"}) and "data_of_birth"
                (or "date_of_birth"). None is treated as an empty list.

        Returns:
            DuplicateReport with groups, duplicate_ids and the notification
        """
        records = coerce_records(applications)
        logger.debug(
            "Checking %d applications across %d birth date buckets",
            len(records), len({r.date_of_birth for r in records}),
        )

        groups, duplicate_ids = report(cluster(records, self.threshold))
        notification = DuplicateNotification(has_duplicates=bool(groups), count=len(groups))

        if groups:
            logger.info(
                "Found %d duplicate groups covering %d applications",
                len(groups), len(duplicate_ids),
            )

        if self.on_duplicates is not None:
            self.on_duplicates(notification)

        return DuplicateReport(
            groups=groups,
            duplicate_ids=duplicate_ids,
            notification=notification,
        )

    def summaries(self, duplicate_report: DuplicateReport) -> list[dict]:
        """Review panel entries for every group in a report."""
        return summarize_groups(
            duplicate_report.groups, self.preview_size, self.missing_value
        )
