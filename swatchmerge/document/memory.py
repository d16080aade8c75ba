# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
In-memory document store.

Loads a host-style JSON document (nested nodes with ``children``, ``fills``
and ``strokes``), flattens it depth-first, and implements DocumentStore on
top of it. Used by the stdio runner and the test suite.

In the JSON form, a paint list given as the string "MIXED" maps to the
MIXED sentinel. A node with ``"locked": true`` refuses paint writes.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Iterator, Optional, Union

from swatchmerge.document.store import MIXED
from swatchmerge.errors import NodeLocked


PaintList = Union[list, object]

_MIXED_JSON = "MIXED"
_ABSENT = object()


def _paints_from_json(value: Any) -> Optional[PaintList]:
    if value is None:
        return None
    if value == _MIXED_JSON:
        return MIXED
    return copy.deepcopy(list(value))


def _paints_to_json(value: Optional[PaintList]) -> Any:
    if value is MIXED:
        return _MIXED_JSON
    return copy.deepcopy(value)


class MemoryNode:
    """
    A document node with optional fill and stroke capabilities.

    A node built with ``fills=None`` has no ``fills`` attribute at all, the
    same way a host group or slice node lacks paint properties.
    """

    def __init__(
        self,
        id: Hashable,
        *,
        name: str = "",
        type: str = "RECTANGLE",
        fills: Optional[PaintList] = None,
        strokes: Optional[PaintList] = None,
        locked: bool = False,
    ) -> None:
        self.id = id
        self.name = name
        self.type = type
        self.locked = locked
        self.children: list[MemoryNode] = []
        self._paints: dict[str, Any] = {}
        if fills is not None:
            self._paints["fills"] = fills
        if strokes is not None:
            self._paints["strokes"] = strokes

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes not set in __init__
        if name in ("fills", "strokes"):
            value = self.__dict__.get("_paints", {}).get(name, _ABSENT)
            if value is not _ABSENT:
                return value
        raise AttributeError(f"{type(self).__name__} {self.__dict__.get('id')!r} has no {name}")

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("fills", "strokes"):
            if self.locked:
                raise NodeLocked(self.id)
            if name not in self._paints:
                raise AttributeError(f"Node {self.id} has no {name}")
            self._paints[name] = value
            return
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"MemoryNode(id={self.id!r}, name={self.name!r})"

    @classmethod
    def from_dict(cls, data: dict) -> MemoryNode:
        """Build a node and its subtree from host-style JSON."""
        node = cls(
            str(data["id"]),
            name=data.get("name", ""),
            type=data.get("type", "RECTANGLE"),
            fills=_paints_from_json(data.get("fills")),
            strokes=_paints_from_json(data.get("strokes")),
            locked=bool(data.get("locked", False)),
        )
        node.children = [cls.from_dict(child) for child in data.get("children", ())]
        return node

    def to_dict(self) -> dict:
        """Serialize the node and its subtree to host-style JSON."""
        d: dict[str, Any] = {"id": self.id, "name": self.name, "type": self.type}
        for attr in ("fills", "strokes"):
            if attr in self._paints:
                d[attr] = _paints_to_json(self._paints[attr])
        if self.locked:
            d["locked"] = True
        if self.children:
            d["children"] = [child.to_dict() for child in self.children]
        return d

    def walk(self) -> Iterator[MemoryNode]:
        """This node and its descendants, depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass
class PaintStyle:
    """A named reusable paint style."""
    id: str
    name: str
    paints: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "paints": copy.deepcopy(self.paints)}


class MemoryDocument:
    """
    DocumentStore backed by an in-memory node tree.

    Nodes are indexed by id, so resolving a node does not walk the tree.
    Change the tree through add_node() and remove_node() to keep the index
    current; subtrees must be fully built before they are added.

    Args:
        roots: Top-level nodes (each may carry children)
        styles: Existing paint styles
    """

    mixed = MIXED

    def __init__(
        self,
        roots: Iterable[MemoryNode] = (),
        styles: Iterable[PaintStyle] = (),
    ) -> None:
        self.roots: list[MemoryNode] = []
        self.styles = list(styles)
        self._index: dict[Hashable, MemoryNode] = {}
        self._parents: dict[Hashable, Optional[MemoryNode]] = {}
        for root in roots:
            self.add_node(root)

    def find_all(self) -> list[MemoryNode]:
        return [node for root in self.roots for node in root.walk()]

    def get_node_by_id(self, node_id: Hashable) -> Optional[MemoryNode]:
        return self._index.get(node_id)

    def add_node(self, node: MemoryNode, parent_id: Optional[Hashable] = None) -> None:
        """
        Attach a node (and its subtree) as a root or under a parent.

        Raises:
            KeyError: If parent_id does not resolve
            ValueError: If an id in the subtree is already in the document
        """
        parent = None
        if parent_id is not None:
            parent = self._index[parent_id]

        subtree = list(node.walk())
        ids = [n.id for n in subtree]
        duplicates = [i for i in ids if i in self._index]
        if duplicates or len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate node ids in subtree of {node.id!r}")

        if parent is None:
            self.roots.append(node)
        else:
            parent.children.append(node)
        self._parents[node.id] = parent
        for n in subtree:
            self._index[n.id] = n
            for child in n.children:
                self._parents[child.id] = n

    def remove_node(self, node_id: Hashable) -> bool:
        """Detach a node (and its subtree). Returns False if not found."""
        node = self._index.get(node_id)
        if node is None:
            return False

        parent = self._parents[node_id]
        siblings = self.roots if parent is None else parent.children
        siblings.remove(node)
        for n in node.walk():
            del self._index[n.id]
            del self._parents[n.id]
        return True

    def create_paint_style(self, name: str, paints: list[dict]) -> PaintStyle:
        style = PaintStyle(
            id=f"S:{len(self.styles) + 1}",
            name=name,
            paints=copy.deepcopy(paints),
        )
        self.styles.append(style)
        return style

    @classmethod
    def from_dict(cls, data: dict) -> MemoryDocument:
        """
        Load a document from host-style JSON.

        Accepts either ``{"document": {...root...}, "styles": [...]}`` or a
        bare root node. The root itself is kept as a node so its paints are
        scanned too.
        """
        root = data.get("document", data)
        styles = [
            PaintStyle(id=s["id"], name=s["name"], paints=list(s.get("paints", ())))
            for s in data.get("styles", ())
        ]
        return cls([MemoryNode.from_dict(root)], styles)

    def to_dict(self) -> dict:
        """Serialize back to host-style JSON (single root form)."""
        if len(self.roots) == 1:
            document = self.roots[0].to_dict()
        else:
            document = {
                "id": "0:0",
                "name": "Document",
                "type": "DOCUMENT",
                "children": [root.to_dict() for root in self.roots],
            }
        return {
            "document": document,
            "styles": [s.to_dict() for s in self.styles],
        }
