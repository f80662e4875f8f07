"""Loads duplicate-detection settings from dedup.yaml.

Missing keys fall back to defaults, so an empty file is a valid config.
"""

import yaml

from dedup.clusterer import check_threshold
from dedup.name_similarity import SAME_PERSON_THRESHOLD

DEFAULT_CONFIG = {
    "similarity_threshold": SAME_PERSON_THRESHOLD,
    "preview_size": 2,
    "missing_value": "N/A",
}


def load_config(path: str = "config/dedup.yaml") -> dict:
    """Read and validate the "dedup" section of a YAML config file."""
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return build_config(raw.get("dedup", {}))


def build_config(overrides: dict | None = None) -> dict:
    """Merge overrides onto defaults and validate."""
    config = {**DEFAULT_CONFIG, **(overrides or {})}

    config["similarity_threshold"] = check_threshold(float(config["similarity_threshold"]))

    preview_size = config["preview_size"]
    if isinstance(preview_size, bool) or not isinstance(preview_size, int) or preview_size < 1:
        raise ValueError(f"preview_size must be a positive integer, got {preview_size!r}")

    config["missing_value"] = str(config["missing_value"])
    return config
