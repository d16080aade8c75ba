# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
Host document access.

The scanner and merge applier only talk to the DocumentStore protocol.
MemoryDocument is a complete in-memory implementation.
"""

from swatchmerge.document.store import (
    MIXED,
    SOLID,
    DocumentStore,
    is_solid,
    read_paints,
    write_paints,
)
from swatchmerge.document.memory import MemoryDocument, MemoryNode, PaintStyle

__all__ = [
    "DocumentStore",
    "MIXED",
    "SOLID",
    "read_paints",
    "write_paints",
    "is_solid",
    "MemoryDocument",
    "MemoryNode",
    "PaintStyle",
]
