# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
Paint data model for color scanning and merging.

Design principles:
- Immutable: All types are frozen dataclasses
- Request-scoped: Entries and clusters are rebuilt on every scan and never
  cached between calls
- Serializable: JSON-ready for the message channel

Colors use the host's normalized RGB representation: each channel is a float
in [0, 1]. Grouping identity is the quantized 6-digit hex key (8 bits per
channel), so two float colors that round to the same bytes share one entry.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Optional


# =============================================================================
# Core Color Type
# =============================================================================


@dataclass(frozen=True, slots=True)
class Color:
    """
    A solid color in normalized RGB.

    Attributes:
        r: Red channel (0.0-1.0)
        g: Green channel (0.0-1.0)
        b: Blue channel (0.0-1.0)
        a: Alpha (0.0-1.0). Carried for display only; ignored by the hex key
           and by the distance metric.
    """
    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        """Validate channels are finite and within range."""
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not math.isfinite(value) or not 0.0 <= value <= 1.0:
                raise ValueError(f"Channel {name} must be 0-1, got {value}")

    @property
    def hex(self) -> str:
        """Quantized hex key, e.g. "FF0000"."""
        from swatchmerge.merge.codec import encode
        return encode(self)

    def to_dict(self) -> dict:
        """Serialize to the host paint color shape ({r, g, b})."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict, alpha: float = 1.0) -> Color:
        """Deserialize from a host paint color, with alpha taken separately."""
        return cls(
            r=float(data["r"]),
            g=float(data["g"]),
            b=float(data["b"]),
            a=float(alpha),
        )


# =============================================================================
# Paint References
# =============================================================================


class SlotKind(Enum):
    """Which paint list of a node a reference points into."""
    FILL = "fill"
    STROKE = "stroke"

    @property
    def attribute(self) -> str:
        """Node property holding this paint list."""
        return {SlotKind.FILL: "fills", SlotKind.STROKE: "strokes"}[self]


@dataclass(frozen=True, slots=True)
class PaintReference:
    """
    One paint slot on one node.

    This is a lookup key into the live document, not ownership. It is only
    meaningful for the scan that produced it: the node may be deleted or its
    paints edited before a merge acts on it.

    Attributes:
        node_id: Host identifier of the node
        slot_kind: Fill or stroke list
        slot_index: Position in the node's original (unfiltered) paint list
    """
    node_id: Hashable
    slot_kind: SlotKind
    slot_index: int

    def __post_init__(self) -> None:
        if self.slot_index < 0:
            raise ValueError(f"slot_index must be >= 0, got {self.slot_index}")

    def to_dict(self) -> dict:
        return {
            "nodeId": self.node_id,
            "slotKind": self.slot_kind.value,
            "slotIndex": self.slot_index,
        }

    @classmethod
    def from_dict(cls, data: dict) -> PaintReference:
        return cls(
            node_id=data["nodeId"],
            slot_kind=SlotKind(data["slotKind"]),
            slot_index=data["slotIndex"],
        )


# =============================================================================
# Entries and Clusters
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorEntry:
    """
    All uses of one distinct hex key found during a scan.

    Attributes:
        hex: Quantized hex key
        color: First float-precision color seen for this key
        references: Every paint slot using this key, in scan order
    """
    hex: str
    color: Color
    references: tuple[PaintReference, ...]

    @property
    def count(self) -> int:
        """Number of paint slots using this color."""
        return len(self.references)

    def to_dict(self) -> dict:
        """Serialize as a cluster member ({hex, count})."""
        return {"hex": self.hex, "count": self.count}


@dataclass(frozen=True, slots=True)
class Cluster:
    """
    A group of similar colors.

    The representative is the entry that seeded the cluster (earliest in
    discovery order) and is always the first member. Members are only
    guaranteed to be within threshold of the representative, not of each
    other.

    Attributes:
        representative: Seed entry, identity of the cluster
        members: All entries in the cluster, representative first
    """
    representative: ColorEntry
    members: tuple[ColorEntry, ...]

    def __post_init__(self) -> None:
        """Validate cluster structure."""
        if not self.members:
            raise ValueError("Cluster members cannot be empty")
        if self.members[0] is not self.representative:
            raise ValueError("Cluster representative must be its first member")

    @property
    def total_count(self) -> int:
        """Paint slots across all members."""
        return sum(m.count for m in self.members)

    @property
    def references(self) -> tuple[PaintReference, ...]:
        """All references, member order then reference order."""
        return tuple(ref for m in self.members for ref in m.references)

    def to_dict(self) -> dict:
        """Serialize as a scan-result group."""
        return {
            "representative": self.representative.hex,
            "members": [m.to_dict() for m in self.members],
            "totalCount": self.total_count,
        }


# =============================================================================
# Merge Results
# =============================================================================


class SkipReason(Enum):
    """Why a paint reference was left untouched by a merge."""
    NODE_GONE = "node_gone"          # node no longer resolves
    SLOT_CHANGED = "slot_changed"    # list mixed/missing, index gone, or not solid
    NODE_LOCKED = "node_locked"      # store refused the write
    WRITE_FAILED = "write_failed"    # any other per-node failure


@dataclass(frozen=True, slots=True)
class SkippedReference:
    """A reference the merge could not rewrite."""
    reference: PaintReference
    reason: SkipReason
    detail: str = ""


@dataclass(frozen=True, slots=True)
class MergeResult:
    """
    Outcome of a merge batch.

    A merge is best-effort: skipped references do not fail the batch and are
    excluded from changed_count.

    Attributes:
        changed_count: Paint slots successfully rewritten
        style_created: True if a paint style was registered
        style_name: Requested style name, if any
        skipped: References left untouched, with reasons
    """
    changed_count: int
    style_created: bool = False
    style_name: Optional[str] = None
    skipped: tuple[SkippedReference, ...] = ()

    def to_dict(self) -> dict:
        """Serialize as merge-done fields."""
        return {
            "changed": self.changed_count,
            "styleCreated": self.style_created,
            "styleName": self.style_name,
        }
