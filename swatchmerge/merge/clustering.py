# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
Similar-color clustering.

Greedy, representative-anchored grouping of scanned colors:

1. Walk entries in discovery order.
2. Each unassigned entry seeds a new cluster and becomes its representative.
3. Every later unassigned entry within threshold of that representative
   joins the cluster.

Membership is tested against the representative only (star-shaped), never
chained through other members. Two members may therefore be further apart
than the threshold. This keeps clusters anchored on a color that actually
exists in the document.
"""

from __future__ import annotations

import logging
import math
from typing import Mapping, Sequence, Union

import numpy as np

from swatchmerge.merge.distance import distances_from, to_rgb_array
from swatchmerge.schema import Cluster, ColorEntry


logger = logging.getLogger(__name__)


def build_clusters(
    entries: Union[Mapping[str, ColorEntry], Sequence[ColorEntry]],
    threshold: float,
) -> tuple[Cluster, ...]:
    """
    Group similar colors and rank the groups by usage.

    Args:
        entries: Scanned colors in discovery order (scan_colors output, or
            any sequence of ColorEntry)
        threshold: Maximum distance (0-255 scale) from the representative.
            0 groups exact hex matches only; math.inf groups everything.

    Returns:
        Clusters sorted by total reference count descending. Ties keep
        discovery order.

    Raises:
        ValueError: If threshold is negative or NaN
    """
    if math.isnan(threshold) or threshold < 0:
        raise ValueError(f"Threshold must be >= 0, got {threshold}")

    if isinstance(entries, Mapping):
        entries = list(entries.values())
    else:
        entries = list(entries)

    if not entries:
        return ()

    rgb = to_rgb_array([e.color for e in entries])

    # Track which entries have been assigned to a cluster
    assigned = np.zeros(len(entries), dtype=bool)
    clusters: list[Cluster] = []

    for i, seed in enumerate(entries):
        if assigned[i]:
            continue

        assigned[i] = True
        members = [seed]

        # Candidates: later entries not yet assigned
        later = np.arange(i + 1, len(entries))
        later = later[~assigned[later]]
        if later.size:
            d = distances_from(seed.color, rgb[later])
            for j in later[d <= threshold]:
                members.append(entries[j])
                assigned[j] = True

        clusters.append(Cluster(representative=seed, members=tuple(members)))

    # Python's sort is stable, including with reverse=True
    clusters.sort(key=lambda c: c.total_count, reverse=True)

    logger.debug(
        "Clustered %d colors into %d groups (threshold=%s)",
        len(entries), len(clusters), threshold,
    )
    return tuple(clusters)
