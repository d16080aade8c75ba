# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""Tests for session configuration."""

import pytest

from swatchmerge.config import DEFAULT_THRESHOLD, SessionConfig


class TestSessionConfig:

    def test_defaults(self):
        config = SessionConfig()
        assert config.default_threshold == DEFAULT_THRESHOLD == 20.0
        assert config.log_level == "WARNING"

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValueError):
            SessionConfig(default_threshold=-1.0)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SWATCHMERGE_DEFAULT_THRESHOLD", "7.5")
        monkeypatch.setenv("SWATCHMERGE_LOG_LEVEL", "debug")
        config = SessionConfig.from_env()
        assert config.default_threshold == 7.5
        assert config.log_level == "DEBUG"

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("SWATCHMERGE_DEFAULT_THRESHOLD", raising=False)
        monkeypatch.delenv("SWATCHMERGE_LOG_LEVEL", raising=False)
        assert SessionConfig.from_env() == SessionConfig()
