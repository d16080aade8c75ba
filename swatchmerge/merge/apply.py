# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
Merge application.

Rewrites every paint slot referenced by the selected clusters to one target
color. The batch is best-effort: a reference whose node is gone, whose slot
changed since the scan, or whose node refuses the write is skipped and
recorded, and the batch continues.
"""

from __future__ import annotations

import copy
import logging
from typing import Iterable, Optional, Sequence

from swatchmerge.document.store import (
    SOLID,
    DocumentStore,
    is_solid,
    read_paints,
    write_paints,
)
from swatchmerge.errors import NodeLocked
from swatchmerge.merge.codec import decode
from swatchmerge.schema import (
    Cluster,
    Color,
    MergeResult,
    PaintReference,
    SkippedReference,
    SkipReason,
)


logger = logging.getLogger(__name__)


def select_clusters(
    clusters: Sequence[Cluster],
    indices: Iterable[object],
) -> tuple[Cluster, ...]:
    """
    Resolve group indices against a cluster sequence.

    Indices are taken in request order. Anything that is not a valid
    position (non-integers, negatives, out of range) is dropped silently,
    as are repeats: a group listed twice is rewritten and counted once.
    """
    selected: list[Cluster] = []
    seen: set[int] = set()
    for i in indices:
        if isinstance(i, bool) or not isinstance(i, int):
            logger.debug("Dropping non-integer group index %r", i)
            continue
        if not 0 <= i < len(clusters) or i in seen:
            logger.debug("Dropping group index %d (%d clusters)", i, len(clusters))
            continue
        seen.add(i)
        selected.append(clusters[i])
    return tuple(selected)


def _rewrite_slot(
    store: DocumentStore,
    ref: PaintReference,
    target: Color,
) -> Optional[SkippedReference]:
    """Rewrite one slot. Returns a SkippedReference if it was not changed."""
    node = store.get_node_by_id(ref.node_id)
    if node is None:
        return SkippedReference(ref, SkipReason.NODE_GONE)

    try:
        paints = read_paints(node, ref.slot_kind)
        if paints is None or paints is store.mixed:
            return SkippedReference(ref, SkipReason.SLOT_CHANGED, "paint list unavailable")
        if ref.slot_index >= len(paints) or not is_solid(paints[ref.slot_index]):
            return SkippedReference(ref, SkipReason.SLOT_CHANGED, "slot is no longer a solid paint")

        # Replace only the color; opacity, visibility, blend mode and the
        # other entries are carried over untouched
        updated = copy.deepcopy(list(paints))
        updated[ref.slot_index]["color"] = target.to_dict()
        write_paints(node, ref.slot_kind, updated)
    except NodeLocked as e:
        return SkippedReference(ref, SkipReason.NODE_LOCKED, str(e))
    except Exception as e:
        return SkippedReference(ref, SkipReason.WRITE_FAILED, f"{type(e).__name__}: {e}")

    return None


def apply_merge(
    store: DocumentStore,
    clusters: Sequence[Cluster],
    target_hex: str,
    style_name: Optional[str] = None,
) -> MergeResult:
    """
    Collapse the given clusters onto one color.

    Every reference of every member is rewritten, in cluster, member, then
    reference order. Nodes are re-resolved against the live document, so
    edits made since the scan are respected.

    If style_name is non-empty a new paint style with a single solid paint of
    the target color is always created, whether or not any slot changed.
    Existing styles with the same name are left alone.

    Args:
        store: Live document
        clusters: Clusters to collapse
        target_hex: Target color key ("00FF00" or "#00FF00")
        style_name: Optional name for a new paint style

    Returns:
        MergeResult with changed count, style outcome and skipped references

    Raises:
        InvalidColorKey: If target_hex is malformed (nothing is modified)
    """
    target = decode(target_hex)

    changed = 0
    skipped: list[SkippedReference] = []

    for cluster in clusters:
        for ref in cluster.references:
            skip = _rewrite_slot(store, ref, target)
            if skip is None:
                changed += 1
            else:
                logger.debug(
                    "Skipped %s[%d] on node %s: %s %s",
                    ref.slot_kind.attribute, ref.slot_index, ref.node_id,
                    skip.reason.value, skip.detail,
                )
                skipped.append(skip)

    style_created = False
    if style_name:
        store.create_paint_style(style_name, [{"type": SOLID, "color": target.to_dict()}])
        style_created = True
        logger.info("Created paint style %r (%s)", style_name, target.hex)

    logger.info(
        "Merged %d groups into %s: %d slots changed, %d skipped",
        len(clusters), target.hex, changed, len(skipped),
    )
    return MergeResult(
        changed_count=changed,
        style_created=style_created,
        style_name=style_name,
        skipped=tuple(skipped),
    )
