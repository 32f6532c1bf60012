"""Tests for partition configuration."""

from __future__ import annotations

from dataclasses import fields

import pytest

from union_find.config import PartitionConfig


class TestPartitionConfig:
    def test_defaults(self) -> None:
        cfg = PartitionConfig()
        assert cfg.size == 0
        assert cfg.read_only is False
        assert cfg.as_json is False
        assert cfg.log_level == "WARNING"

    def test_validation_negative_size(self) -> None:
        with pytest.raises(ValueError, match="size"):
            PartitionConfig(size=-1)

    def test_validation_log_level(self) -> None:
        with pytest.raises(ValueError, match="log_level"):
            PartitionConfig(log_level="LOUD")

    def test_valid_levels_not_a_field(self) -> None:
        assert "_VALID_LOG_LEVELS" not in {f.name for f in fields(PartitionConfig)}
        with pytest.raises(TypeError):
            PartitionConfig(_VALID_LOG_LEVELS=("LOUD",), log_level="LOUD")  # type: ignore[call-arg]

    def test_repr_omits_valid_levels(self) -> None:
        assert "_VALID_LOG_LEVELS" not in repr(PartitionConfig())

    def test_frozen(self) -> None:
        cfg = PartitionConfig()
        with pytest.raises(AttributeError):
            cfg.size = 3  # type: ignore[misc]
