# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""Base types and JSON wire helpers for serializers."""

from __future__ import annotations

import json
from enum import Enum


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"


def dumps_message(payload: dict, format: SerializerFormat = SerializerFormat.JSON) -> str:
    """Encode a message payload for the channel."""
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(payload, indent=2)
    else:
        return json.dumps(payload, separators=(",", ":"))


def loads_message(text: str) -> dict:
    """
    Decode a message received from the channel.

    Raises:
        ValueError: If the text is not a JSON object
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data
