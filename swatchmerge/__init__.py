# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
Swatchmerge -- Find and merge near-duplicate colors in a design document.

Scans every node's solid fills and strokes, groups similar colors, and
collapses chosen groups onto a single color, optionally registering it as
a reusable paint style.

Quick start::

    from swatchmerge import MemoryDocument, find_similar_colors, apply_merge

    doc = MemoryDocument.from_dict(data)
    groups = find_similar_colors(doc, threshold=20)
    apply_merge(doc, groups[:1], "#00FF00", style_name="Brand/Green")
"""

from __future__ import annotations

__version__ = "1.0.0"

from swatchmerge.config import SessionConfig
from swatchmerge.document import DocumentStore, MemoryDocument, MemoryNode, MIXED
from swatchmerge.errors import (
    InvalidColorKey,
    MergeFailure,
    NodeLocked,
    ScanFailure,
    SwatchMergeError,
)
from swatchmerge.merge import apply_merge, build_clusters, scan_colors
from swatchmerge.runtime import SessionController
from swatchmerge.schema import (
    Cluster,
    Color,
    ColorEntry,
    MergeResult,
    PaintReference,
    SlotKind,
)


def find_similar_colors(store: DocumentStore, threshold: float = 20.0) -> tuple[Cluster, ...]:
    """Scan a document and cluster its colors in one call."""
    return build_clusters(scan_colors(store), threshold)


__all__ = [
    # Core API
    "find_similar_colors",
    "scan_colors",
    "build_clusters",
    "apply_merge",
    "SessionController",
    "SessionConfig",
    # Types
    "Color",
    "SlotKind",
    "PaintReference",
    "ColorEntry",
    "Cluster",
    "MergeResult",
    # Documents
    "DocumentStore",
    "MemoryDocument",
    "MemoryNode",
    "MIXED",
    # Errors
    "SwatchMergeError",
    "InvalidColorKey",
    "ScanFailure",
    "MergeFailure",
    "NodeLocked",
    # Version
    "__version__",
]
