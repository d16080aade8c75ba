# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""Tests for similar-color clustering."""

import math

import pytest

from swatchmerge.merge.clustering import build_clusters
from swatchmerge.merge.codec import decode
from swatchmerge.merge.distance import MAX_DISTANCE, distance
from swatchmerge.schema import ColorEntry, PaintReference, SlotKind


def _entry(key, count=1):
    refs = tuple(PaintReference(f"{key}-{i}", SlotKind.FILL, 0) for i in range(count))
    return ColorEntry(hex=key, color=decode(key), references=refs)


def _keys(cluster):
    return [m.hex for m in cluster.members]


PALETTE = [
    _entry("FF0000", 2),
    _entry("FE0101", 1),
    _entry("0000FF", 1),
    _entry("0505FA", 3),
    _entry("FFFFFF", 1),
    _entry("000000", 1),
]


class TestPartition:

    @pytest.mark.parametrize("threshold", [0, 5, 20, 100, 300, math.inf])
    def test_every_entry_exactly_once(self, threshold):
        clusters = build_clusters(PALETTE, threshold)
        keys = [k for c in clusters for k in _keys(c)]
        assert sorted(keys) == sorted(e.hex for e in PALETTE)
        assert len(keys) == len(set(keys))

    def test_zero_threshold_exact_only(self):
        clusters = build_clusters(PALETTE, 0)
        assert len(clusters) == len(PALETTE)

    def test_large_threshold_single_cluster(self):
        assert len(build_clusters(PALETTE, math.inf)) == 1
        assert len(build_clusters(PALETTE, MAX_DISTANCE + 1)) == 1

    def test_accepts_mapping(self):
        clusters = build_clusters({e.hex: e for e in PALETTE}, 20)
        assert _keys(clusters[0]) == ["0000FF", "0505FA"]

    def test_empty(self):
        assert build_clusters({}, 20) == ()


class TestStarShape:

    def test_not_chained_through_members(self):
        # 0F is 15 from both neighbours, but 000000 and 1E0000 are 30 apart
        entries = [_entry("000000"), _entry("0F0000"), _entry("1E0000")]
        clusters = build_clusters(entries, 20)
        assert [_keys(c) for c in clusters] == [["000000", "0F0000"], ["1E0000"]]

    def test_members_may_exceed_threshold_between_themselves(self):
        entries = [_entry("0F0000"), _entry("000000"), _entry("1E0000")]
        clusters = build_clusters(entries, 20)
        assert len(clusters) == 1
        assert _keys(clusters[0]) == ["0F0000", "000000", "1E0000"]

    def test_representative_is_seed(self):
        entries = [_entry("FF0000", 1), _entry("FE0101", 9)]
        (cluster,) = build_clusters(entries, 20)
        assert cluster.representative.hex == "FF0000"
        assert cluster.total_count == 10

    def test_threshold_inclusive(self):
        entries = [_entry("000000"), _entry("000014")]
        d = distance(entries[0].color, entries[1].color)
        assert len(build_clusters(entries, d)) == 1
        assert len(build_clusters(entries, d - 1e-9)) == 2


class TestOrdering:

    def test_descending_total_count(self):
        clusters = build_clusters(PALETTE, 20)
        totals = [c.total_count for c in clusters]
        assert totals == sorted(totals, reverse=True)
        assert totals == [4, 3, 1, 1]

    def test_ties_keep_discovery_order(self):
        entries = [_entry("111111", 1), _entry("555555", 3), _entry("999999", 1), _entry("DDDDDD", 3)]
        clusters = build_clusters(entries, 0)
        assert [c.representative.hex for c in clusters] == ["555555", "DDDDDD", "111111", "999999"]


class TestValidation:

    @pytest.mark.parametrize("bad", [-1, -0.001, math.nan])
    def test_bad_threshold(self, bad):
        with pytest.raises(ValueError):
            build_clusters(PALETTE, bad)


class TestFindSimilarColors:

    def test_scan_and_cluster(self):
        from swatchmerge import MemoryDocument, MemoryNode, find_similar_colors

        doc = MemoryDocument([
            MemoryNode("1", fills=[{"type": "SOLID", "color": {"r": 1.0, "g": 0.0, "b": 0.0}}]),
            MemoryNode("2", fills=[{"type": "SOLID", "color": {"r": 254 / 255, "g": 1 / 255, "b": 1 / 255}}]),
        ])
        (cluster,) = find_similar_colors(doc)
        assert cluster.representative.hex == "FF0000"
        assert _keys(cluster) == ["FF0000", "FE0101"]
