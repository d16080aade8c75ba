# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
Response payloads for the message channel.

Each builder returns a JSON-ready dict carrying a ``type`` tag. Payloads
report results exactly; nothing is recomputed or reordered here.
"""

from __future__ import annotations

from typing import Sequence

from swatchmerge.schema import Cluster, MergeResult


SCAN_RESULT = "scan-result"
MERGE_DONE = "merge-done"
ERROR = "error"


def to_scan_result(clusters: Sequence[Cluster], threshold: float) -> dict:
    """Serialize clusters as a scan-result message.

    Example::

        {
          "type": "scan-result",
          "groups": [
            {
              "representative": "FF0000",
              "members": [{"hex": "FF0000", "count": 1}, {"hex": "FE0101", "count": 1}],
              "totalCount": 2
            }
          ],
          "threshold": 20
        }
    """
    return {
        "type": SCAN_RESULT,
        "groups": [c.to_dict() for c in clusters],
        "threshold": threshold,
    }


def to_merge_done(result: MergeResult) -> dict:
    """Serialize a merge outcome as a merge-done message."""
    return {"type": MERGE_DONE, **result.to_dict()}


def to_error(message: str) -> dict:
    """Error message with a human-readable description."""
    return {"type": ERROR, "message": message}
