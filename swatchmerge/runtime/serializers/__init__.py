# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
Serializers for the message channel.

Builders shape scan and merge results into response payloads; the base
helpers encode and decode them as JSON.
"""

from swatchmerge.runtime.serializers.base import (
    SerializerFormat,
    dumps_message,
    loads_message,
)
from swatchmerge.runtime.serializers.payloads import (
    ERROR,
    MERGE_DONE,
    SCAN_RESULT,
    to_error,
    to_merge_done,
    to_scan_result,
)

__all__ = [
    "SerializerFormat",
    "dumps_message",
    "loads_message",
    "SCAN_RESULT",
    "MERGE_DONE",
    "ERROR",
    "to_scan_result",
    "to_merge_done",
    "to_error",
]
