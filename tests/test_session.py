# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""Tests for the message-driven session controller."""

import pytest

from swatchmerge.config import SessionConfig
from swatchmerge.document import MIXED, MemoryDocument, MemoryNode
from swatchmerge.runtime import SessionController


def _solid(r, g, b):
    return {"type": "SOLID", "color": {"r": r, "g": g, "b": b}}


def _two_reds():
    """node1 fill = #FF0000, node2 fill = #FE0101."""
    return MemoryDocument([
        MemoryNode("node1", fills=[_solid(1.0, 0.0, 0.0)]),
        MemoryNode("node2", fills=[_solid(254 / 255, 1 / 255, 1 / 255)]),
    ])


class RecordingChannel:
    def __init__(self):
        self.messages = []

    def post_message(self, payload):
        self.messages.append(payload)


@pytest.fixture
def doc():
    return _two_reds()


@pytest.fixture
def session(doc):
    return SessionController(doc)


class TestScan:

    def test_similar_reds_grouped(self, session):
        response = session.handle({"type": "scan", "threshold": 20})
        assert response["type"] == "scan-result"
        assert response["threshold"] == 20
        (group,) = response["groups"]
        assert group["representative"] == "FF0000"
        assert group["totalCount"] == 2

    def test_zero_threshold_separates(self, session):
        response = session.handle({"type": "scan", "threshold": 0})
        assert [g["totalCount"] for g in response["groups"]] == [1, 1]

    def test_default_threshold(self, session):
        response = session.handle({"type": "scan"})
        assert response["threshold"] == 20
        assert len(response["groups"]) == 1

    def test_configured_default_threshold(self, doc):
        session = SessionController(doc, config=SessionConfig(default_threshold=0))
        response = session.handle({"type": "scan"})
        assert response["threshold"] == 0
        assert len(response["groups"]) == 2

    def test_empty_document(self):
        response = SessionController(MemoryDocument()).handle({"type": "scan"})
        assert response == {"type": "scan-result", "groups": [], "threshold": 20.0}

    def test_mixed_fills_ignored(self):
        doc = MemoryDocument([
            MemoryNode("1", fills=MIXED),
            MemoryNode("2", fills=[_solid(0.0, 0.0, 1.0)]),
        ])
        response = SessionController(doc).handle({"type": "scan"})
        assert [g["representative"] for g in response["groups"]] == ["0000FF"]
        assert response["groups"][0]["totalCount"] == 1

    def test_fresh_scan_each_time(self, doc, session):
        session.handle({"type": "scan"})
        doc.add_node(MemoryNode("node3", fills=[_solid(0.0, 0.0, 1.0)]))
        response = session.handle({"type": "scan"})
        assert len(response["groups"]) == 2

    @pytest.mark.parametrize("threshold", [-5, "20", True, [20]])
    def test_bad_threshold(self, session, threshold):
        response = session.handle({"type": "scan", "threshold": threshold})
        assert response["type"] == "error"
        assert response["message"].startswith("Scan failed: ")

    def test_scan_error_keeps_session(self, session):
        assert session.handle({"type": "scan", "threshold": -1})["type"] == "error"
        assert session.handle({"type": "scan"})["type"] == "scan-result"

    def test_broken_document(self):
        class BrokenStore:
            mixed = MIXED

            def find_all(self):
                raise RuntimeError("page not loaded")

        response = SessionController(BrokenStore()).handle({"type": "scan"})
        assert response["type"] == "error"
        assert "page not loaded" in response["message"]


class TestMerge:

    def test_merge_group(self, doc, session):
        response = session.handle(
            {"type": "merge", "threshold": 20, "groupIndices": [0], "targetHex": "#00FF00"}
        )
        assert response == {"type": "merge-done", "changed": 2, "styleCreated": False, "styleName": None}
        for node_id in ("node1", "node2"):
            assert doc.get_node_by_id(node_id).fills[0]["color"] == {"r": 0.0, "g": 1.0, "b": 0.0}

    def test_out_of_range_index_dropped(self, doc, session):
        response = session.handle({"type": "merge", "groupIndices": [5], "targetHex": "#00FF00"})
        assert response["type"] == "merge-done"
        assert response["changed"] == 0
        assert response["styleCreated"] is False
        assert doc.get_node_by_id("node1").fills[0]["color"] == {"r": 1.0, "g": 0.0, "b": 0.0}

    def test_style_registered(self, doc, session):
        response = session.handle({
            "type": "merge",
            "groupIndices": [0],
            "targetHex": "00ff00",
            "styleName": "Brand/Green",
        })
        assert response["styleCreated"] is True
        assert response["styleName"] == "Brand/Green"
        assert [s.name for s in doc.styles] == ["Brand/Green"]

    def test_threshold_selects_clustering(self, doc, session):
        # At threshold 0 the two reds are separate groups of one
        response = session.handle(
            {"type": "merge", "threshold": 0, "groupIndices": [1], "targetHex": "000000"}
        )
        assert response["changed"] == 1
        assert doc.get_node_by_id("node1").fills[0]["color"] == {"r": 1.0, "g": 0.0, "b": 0.0}
        assert doc.get_node_by_id("node2").fills[0]["color"] == {"r": 0.0, "g": 0.0, "b": 0.0}

    def test_scan_reflects_merge(self, session):
        session.handle({"type": "merge", "groupIndices": [0], "targetHex": "00FF00"})
        response = session.handle({"type": "scan", "threshold": 0})
        assert response["groups"] == [
            {"representative": "00FF00", "members": [{"hex": "00FF00", "count": 2}], "totalCount": 2}
        ]

    def test_locked_node_counted_out(self, doc, session):
        doc.get_node_by_id("node2").locked = True
        response = session.handle({"type": "merge", "groupIndices": [0], "targetHex": "00FF00"})
        assert response["type"] == "merge-done"
        assert response["changed"] == 1

    @pytest.mark.parametrize(
        "message",
        [
            {"type": "merge", "groupIndices": [0], "targetHex": "#0F0"},
            {"type": "merge", "groupIndices": [0]},
            {"type": "merge", "targetHex": "00FF00"},
            {"type": "merge", "groupIndices": 0, "targetHex": "00FF00"},
            {"type": "merge", "groupIndices": [0], "targetHex": "00FF00", "styleName": 3},
            {"type": "merge", "groupIndices": [0], "targetHex": "00FF00", "threshold": -1},
        ],
    )
    def test_invalid_request(self, doc, session, message):
        response = session.handle(message)
        assert response["type"] == "error"
        assert response["message"].startswith("Merge failed: ")
        assert doc.get_node_by_id("node1").fills[0]["color"] == {"r": 1.0, "g": 0.0, "b": 0.0}
        assert doc.styles == []

    def test_error_keeps_session(self, session):
        session.handle({"type": "merge", "groupIndices": [0], "targetHex": "zzzzzz"})
        response = session.handle({"type": "merge", "groupIndices": [0], "targetHex": "00FF00"})
        assert response["changed"] == 2


class TestLifecycle:

    def test_unknown_type_ignored(self, session):
        assert session.handle({"type": "resize", "width": 300}) is None
        assert session.handle({"threshold": 20}) is None
        assert session.handle("scan") is None

    def test_close(self, session):
        calls = []
        session.on_close = lambda: calls.append(True)
        assert session.handle({"type": "close"}) is None
        assert session.closed
        assert calls == [True]

    def test_ignores_messages_after_close(self, session):
        session.handle({"type": "close"})
        assert session.handle({"type": "scan"}) is None

    def test_receive_posts_to_channel(self, doc):
        channel = RecordingChannel()
        session = SessionController(doc, channel=channel)
        session.receive({"type": "scan"})
        session.receive({"type": "bogus"})
        session.receive({"type": "merge", "groupIndices": [0], "targetHex": "bad"})
        session.receive({"type": "close"})
        assert [m["type"] for m in channel.messages] == ["scan-result", "error"]
