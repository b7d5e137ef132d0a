"""
Tests for core.config — registry deployment configuration.
"""

import pytest

from core.config import DEFAULT_GENESIS_BLOCK_HEIGHT, RegistryConfig


class TestRegistryConfig:
    def test_from_mapping(self):
        config = RegistryConfig.from_mapping(
            {"AUTHORITY": "ST1PQHQ", "GENESIS_BLOCK_HEIGHT": 1000}
        )
        assert config.authority == "ST1PQHQ"
        assert config.genesis_block_height == 1000

    def test_env_style_strings(self):
        config = RegistryConfig.from_mapping(
            {"AUTHORITY": "  ST1PQHQ  ", "GENESIS_BLOCK_HEIGHT": " 42 "}
        )
        assert config.authority == "ST1PQHQ"
        assert config.genesis_block_height == 42

    def test_default_genesis(self):
        config = RegistryConfig.from_mapping({"AUTHORITY": "ST1PQHQ"})
        assert config.genesis_block_height == DEFAULT_GENESIS_BLOCK_HEIGHT

    def test_missing_authority(self):
        with pytest.raises(ValueError, match="AUTHORITY is required"):
            RegistryConfig.from_mapping({})

    def test_blank_authority(self):
        with pytest.raises(ValueError, match="authority"):
            RegistryConfig.from_mapping({"AUTHORITY": "   "})

    def test_non_numeric_genesis(self):
        with pytest.raises(ValueError, match="GENESIS_BLOCK_HEIGHT"):
            RegistryConfig.from_mapping({"AUTHORITY": "a", "GENESIS_BLOCK_HEIGHT": "tip"})

    def test_negative_genesis(self):
        with pytest.raises(ValueError, match="non-negative"):
            RegistryConfig(authority="a", genesis_block_height=-5)

    def test_to_dict(self):
        assert RegistryConfig(authority="a", genesis_block_height=3).to_dict() == {
            "authority": "a",
            "genesis_block_height": 3,
        }
