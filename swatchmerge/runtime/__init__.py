# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
Session runtime for swatchmerge.

Connects a UI message channel to the scan/merge core:

1. SessionController -- dispatches scan, merge and close requests
2. Serializers -- shape results into channel payloads and JSON

The runtime never caches document state between messages.
"""

from swatchmerge.runtime.serializers import (
    SerializerFormat,
    dumps_message,
    loads_message,
    to_error,
    to_merge_done,
    to_scan_result,
)
from swatchmerge.runtime.session import Channel, SessionController

__all__ = [
    "SessionController",
    "Channel",
    "to_scan_result",
    "to_merge_done",
    "to_error",
    "dumps_message",
    "loads_message",
    "SerializerFormat",
]
