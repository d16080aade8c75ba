# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
Scan, cluster and merge core.

All operations are request-scoped: nothing is cached between calls.
"""

from swatchmerge.merge.apply import apply_merge, select_clusters
from swatchmerge.merge.clustering import build_clusters
from swatchmerge.merge.codec import decode, encode, normalize_key
from swatchmerge.merge.distance import MAX_DISTANCE, distance
from swatchmerge.merge.scanner import scan_colors

__all__ = [
    "encode",
    "decode",
    "normalize_key",
    "distance",
    "MAX_DISTANCE",
    "scan_colors",
    "build_clusters",
    "select_clusters",
    "apply_merge",
]
