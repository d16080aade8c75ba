# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
Message-driven session controller.

Binds channel requests to the scan/cluster/merge core:

    scan  {threshold?}                                   -> scan-result | error
    merge {threshold?, groupIndices, targetHex, styleName?} -> merge-done | error
    close                                                -> (no response)

Every request is handled from a fresh scan of the live document; the
controller keeps no scan state between messages. Group indices in a merge
refer to the clustering computed with that merge's own threshold, so
clients must resend the threshold of the scan they are acting on.

Failures never escape: each scan or merge yields exactly one response, and
the session stays usable after an error.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Mapping, Optional, Protocol

from swatchmerge.config import SessionConfig
from swatchmerge.document.store import DocumentStore
from swatchmerge.errors import MergeFailure
from swatchmerge.merge import apply_merge, build_clusters, scan_colors, select_clusters
from swatchmerge.schema import Cluster
from swatchmerge.runtime.serializers import to_error, to_merge_done, to_scan_result


logger = logging.getLogger(__name__)


class Channel(Protocol):
    """Outbound side of the UI message channel."""

    def post_message(self, payload: dict) -> None:
        ...


def _parse_threshold(message: Mapping[str, Any], default: float) -> float:
    threshold = message.get("threshold")
    if threshold is None:
        return default
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise ValueError(f"threshold must be a number, got {threshold!r}")
    if math.isnan(threshold) or threshold < 0:
        raise ValueError(f"threshold must be >= 0, got {threshold}")
    return threshold


class SessionController:
    """
    Dispatches channel messages to scan and merge operations.

    Args:
        store: Live host document
        channel: Where responses are posted by receive(); optional when the
            caller uses handle() directly
        config: Session settings (default threshold)
        on_close: Called once when a close message arrives
    """

    def __init__(
        self,
        store: DocumentStore,
        channel: Optional[Channel] = None,
        config: Optional[SessionConfig] = None,
        on_close: Optional[Callable[[], None]] = None,
    ) -> None:
        self.store = store
        self.channel = channel
        self.config = config or SessionConfig()
        self.on_close = on_close
        self.closed = False

    def receive(self, message: Any) -> Optional[dict]:
        """Handle a message and post the response, if any, to the channel."""
        response = self.handle(message)
        if response is not None and self.channel is not None:
            self.channel.post_message(response)
        return response

    def handle(self, message: Any) -> Optional[dict]:
        """
        Handle one request message.

        Returns:
            Response payload, or None for close and unrecognized messages
        """
        if self.closed or not isinstance(message, Mapping):
            return None

        kind = message.get("type")
        if kind == "scan":
            return self._scan(message)
        elif kind == "merge":
            return self._merge(message)
        elif kind == "close":
            self._close()
        return None

    def _cluster(self, threshold: float) -> tuple[Cluster, ...]:
        entries = scan_colors(self.store)
        return build_clusters(entries, threshold)

    def _scan(self, message: Mapping[str, Any]) -> dict:
        try:
            threshold = _parse_threshold(message, self.config.default_threshold)
            clusters = self._cluster(threshold)
            return to_scan_result(clusters, threshold)
        except Exception as e:
            logger.exception("Scan failed")
            return to_error(f"Scan failed: {e}")

    def _merge(self, message: Mapping[str, Any]) -> dict:
        try:
            threshold = _parse_threshold(message, self.config.default_threshold)

            indices = message.get("groupIndices")
            if not isinstance(indices, (list, tuple)):
                raise MergeFailure(f"groupIndices must be a list, got {indices!r}")
            target_hex = message.get("targetHex")
            if target_hex is None:
                raise MergeFailure("targetHex is required")
            style_name = message.get("styleName")
            if style_name is not None and not isinstance(style_name, str):
                raise MergeFailure(f"styleName must be a string, got {style_name!r}")

            clusters = self._cluster(threshold)
            selected = select_clusters(clusters, indices)
            result = apply_merge(self.store, selected, target_hex, style_name)
            return to_merge_done(result)
        except Exception as e:
            logger.exception("Merge failed")
            return to_error(f"Merge failed: {e}")

    def _close(self) -> None:
        self.closed = True
        logger.info("Session closed")
        if self.on_close is not None:
            self.on_close()
