# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
Exception taxonomy.

Operation-level errors (InvalidColorKey, ScanFailure, MergeFailure) abort a
single scan or merge and are reported to the client as an error message.
Per-reference conditions during a merge are never raised to the caller;
they are tallied as SkipReason values on the MergeResult.
"""

from typing import Hashable


class SwatchMergeError(Exception):
    """Base class for all swatchmerge errors."""


class InvalidColorKey(SwatchMergeError, ValueError):
    """A hex key is not exactly six hexadecimal digits."""

    def __init__(self, key: object) -> None:
        super().__init__(f"Invalid color key {key!r}: expected 6 hex digits")
        self.key = key


class ScanFailure(SwatchMergeError):
    """The document could not be traversed or its paints extracted."""


class MergeFailure(SwatchMergeError):
    """A merge request could not be carried out."""


class NodeLocked(SwatchMergeError):
    """Raised by a document store when a node refuses a paint write."""

    def __init__(self, node_id: Hashable) -> None:
        super().__init__(f"Node {node_id} is locked")
        self.node_id = node_id
