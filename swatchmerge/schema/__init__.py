# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
Schema definitions for scanned paints, clusters and merge results.

All types in this module are immutable (frozen dataclasses).
They are built fresh for every request and never retained between calls.
"""

from swatchmerge.schema.paint import (
    Cluster,
    Color,
    ColorEntry,
    MergeResult,
    PaintReference,
    SkippedReference,
    SkipReason,
    SlotKind,
)

__all__ = [
    # Core types
    "Color",
    "SlotKind",
    "PaintReference",
    # Scan output
    "ColorEntry",
    "Cluster",
    # Merge output
    "SkipReason",
    "SkippedReference",
    "MergeResult",
]
