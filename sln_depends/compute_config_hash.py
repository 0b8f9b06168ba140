"""Logic for fingerprinting the configuration a report was produced with."""

import hashlib
import json
from typing import Any

from sln_depends.deep_merge import ADDITIVE_KEYS


def compute_config_hash(config: dict[str, Any]) -> str:
    """Compute a stable hash of the configuration.

    Key order and the spelling of extension lists (case, order, duplicates) do
    not change the hash.
    """
    canonical = {
        key: sorted({str(ext).lower() for ext in value})
        if key in ADDITIVE_KEYS and isinstance(value, list)
        else value
        for key, value in config.items()
    }
    config_json = json.dumps(canonical, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(config_json.encode("utf-8")).hexdigest()[:16]
