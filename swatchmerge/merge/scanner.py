# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
Color scanning.

Walks every node of a document and indexes its solid fill and stroke paints
by hex key. The traversal is read-only.
"""

from __future__ import annotations

import logging
from typing import Any

from swatchmerge.document.store import DocumentStore, is_solid, read_paints
from swatchmerge.errors import ScanFailure
from swatchmerge.schema import Color, ColorEntry, PaintReference, SlotKind


logger = logging.getLogger(__name__)

_SLOT_ORDER = (SlotKind.FILL, SlotKind.STROKE)


def extract_solid_paints(paints: Any, mixed: object) -> list[tuple[int, Color]]:
    """
    Solid, visible colors of a paint list with their original positions.

    Positions are NOT renumbered after filtering: index i always refers to
    paints[i], so a later rewrite hits the right slot.

    Args:
        paints: Paint list, None (no capability) or the mixed sentinel
        mixed: The store's mixed sentinel

    Returns:
        List of (slot_index, color); empty for None or mixed lists
    """
    if paints is None or paints is mixed:
        return []

    found: list[tuple[int, Color]] = []
    for i, paint in enumerate(paints):
        if not is_solid(paint) or paint.get("visible") is False:
            continue
        opacity = paint.get("opacity")
        color = Color.from_dict(
            paint["color"],
            alpha=1.0 if opacity is None else opacity,
        )
        found.append((i, color))
    return found


def scan_colors(store: DocumentStore) -> dict[str, ColorEntry]:
    """
    Index every solid paint in the document by hex key.

    Nodes are visited in store order, fills before strokes. The first
    float-precision color seen for a key becomes the entry's color; every
    use is recorded as a PaintReference.

    Args:
        store: Document to scan

    Returns:
        Mapping of hex key to ColorEntry, in discovery order

    Raises:
        ScanFailure: If the document cannot be traversed or a paint is
            malformed
    """
    colors: dict[str, Color] = {}
    references: dict[str, list[PaintReference]] = {}
    n_nodes = 0

    try:
        for node in store.find_all():
            n_nodes += 1
            for kind in _SLOT_ORDER:
                for index, color in extract_solid_paints(read_paints(node, kind), store.mixed):
                    key = color.hex
                    if key not in colors:
                        colors[key] = color
                        references[key] = []
                    references[key].append(PaintReference(node.id, kind, index))
    except ScanFailure:
        raise
    except Exception as e:
        raise ScanFailure(f"{type(e).__name__}: {e}") from e

    entries = {
        key: ColorEntry(hex=key, color=colors[key], references=tuple(refs))
        for key, refs in references.items()
    }
    logger.debug(
        "Scanned %d nodes: %d paints, %d distinct colors",
        n_nodes,
        sum(e.count for e in entries.values()),
        len(entries),
    )
    return entries
