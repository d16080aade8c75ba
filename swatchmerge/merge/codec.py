# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
Hex key codec.

Colors are quantized to 8 bits per channel and written as six uppercase hex
digits ("FF0000"). The key is the canonical identity used to deduplicate
paints during a scan.

Quantization is lossy: decode(encode(c)) may differ from c by up to 1/255
per channel.
"""

from __future__ import annotations

import re

import numpy as np

from swatchmerge.errors import InvalidColorKey
from swatchmerge.schema import Color


_HEX_KEY_RE = re.compile(r"#?([0-9A-Fa-f]{6})")


def encode(color: Color) -> str:
    """
    Convert a color to its hex key.

    Each channel is scaled by 255, rounded half away from zero and clamped
    to [0, 255]. Alpha is ignored.

    Args:
        color: Normalized RGB color

    Returns:
        Hex key like "3941C8"
    """
    rgb = np.array([color.r, color.g, color.b], dtype=np.float64)
    # floor(x + 0.5) rounds halves up; np.round would round them to even
    r, g, b = np.clip(np.floor(rgb * 255.0 + 0.5), 0, 255).astype(int)
    return f"{r:02X}{g:02X}{b:02X}"


def normalize_key(hex_key: str) -> str:
    """
    Validate a hex key and return its canonical form.

    Accepts an optional leading "#" and either letter case.

    Raises:
        InvalidColorKey: If the input is not exactly six hex digits
    """
    if not isinstance(hex_key, str):
        raise InvalidColorKey(hex_key)
    m = _HEX_KEY_RE.fullmatch(hex_key)
    if not m:
        raise InvalidColorKey(hex_key)
    return m.group(1).upper()


def decode(hex_key: str) -> Color:
    """
    Convert a hex key (e.g. "00FF00" or "#00FF00") to a normalized color.

    Raises:
        InvalidColorKey: If the input is not exactly six hex digits
    """
    n = int(normalize_key(hex_key), 16)
    return Color(
        r=((n >> 16) & 0xFF) / 255.0,
        g=((n >> 8) & 0xFF) / 255.0,
        b=(n & 0xFF) / 255.0,
    )
