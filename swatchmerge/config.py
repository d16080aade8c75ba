# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""Session configuration, with environment overrides."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass


# Euclidean RGB distance on the 0-255 scale.
# ~2 = indistinguishable, 20 = near-identical shades, 442 = black vs white
DEFAULT_THRESHOLD = 20.0


@dataclass(frozen=True)
class SessionConfig:
    """Configuration for a scan/merge session."""

    # Threshold used when a scan or merge request omits one
    default_threshold: float = DEFAULT_THRESHOLD

    # Level applied by the stdio runner; library code never configures logging
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if math.isnan(self.default_threshold) or self.default_threshold < 0:
            raise ValueError(
                f"default_threshold must be >= 0, got {self.default_threshold}"
            )

    @classmethod
    def from_env(cls) -> SessionConfig:
        """Build a config from SWATCHMERGE_* environment variables."""
        return cls(
            default_threshold=float(
                os.environ.get("SWATCHMERGE_DEFAULT_THRESHOLD", str(DEFAULT_THRESHOLD))
            ),
            log_level=os.environ.get("SWATCHMERGE_LOG_LEVEL", "WARNING").upper(),
        )
