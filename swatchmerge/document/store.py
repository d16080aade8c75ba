# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
Document store interface.

The host document (node tree, paint lists, paint styles) is consumed through
this protocol so the scanner and merge applier can run against any backend,
including the in-memory store used by tests and the stdio runner.

Node contract:
    node.id                 Stable identifier
    node.fills              list of paint dicts, the store's mixed sentinel,
    node.strokes            or absent/None when the node has no such capability

Paint lists are written back whole (``node.fills = new_list``). A store may
raise NodeLocked from that assignment when the node forbids edits.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Optional, Protocol

from swatchmerge.schema import SlotKind


class _Mixed:
    """Marker for a paint property with indeterminate value."""

    _instance: Optional[_Mixed] = None

    def __new__(cls) -> _Mixed:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MIXED"

    def __bool__(self) -> bool:
        return False


# Sentinel used by the in-memory store
MIXED = _Mixed()

SOLID = "SOLID"


class DocumentStore(Protocol):
    """Host document capabilities consumed by the scanner and merge applier."""

    # Host-specific "mixed/indeterminate" marker for a paint list
    mixed: object

    def find_all(self) -> Iterable[Any]:
        """All nodes, in host traversal order (depth-first)."""
        ...

    def get_node_by_id(self, node_id: Hashable) -> Optional[Any]:
        """Resolve a node against the live document, or None if gone."""
        ...

    def create_paint_style(self, name: str, paints: list[dict]) -> Any:
        """Register a new named paint style with an initial paint list."""
        ...


def read_paints(node: Any, kind: SlotKind) -> Any:
    """
    Current paint list of a node for a slot kind.

    Returns None when the node has no such capability. The store's mixed
    sentinel is returned as-is.
    """
    return getattr(node, kind.attribute, None)


def write_paints(node: Any, kind: SlotKind, paints: list[dict]) -> None:
    """Write a full paint list back to a node."""
    setattr(node, kind.attribute, paints)


def is_solid(paint: Any) -> bool:
    """True for a solid paint dict."""
    return isinstance(paint, dict) and paint.get("type") == SOLID
