"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from pathlib import Path

# Minimal environment for the global settings instance
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

# Add project root to PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from decimal import Decimal

from app.config.settings import Settings
from referral_network import (
    DEFAULT_NETWORK,
    CommissionEngine,
    NetworkNode,
    NetworkTier,
)


@pytest.fixture
def sample_tree() -> NetworkNode:
    """Demo network: root, three TIER1 recruits, three TIER2 recruits."""
    return DEFAULT_NETWORK


@pytest.fixture
def engine() -> CommissionEngine:
    """Create commission engine instance."""
    return CommissionEngine()


@pytest.fixture
def bare_tree() -> NetworkNode:
    """Tree holding only the account holder."""
    return NetworkNode(id="root", name="You", tier=NetworkTier.ME, value=Decimal("0"))


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings isolated from the environment, logging into tmp_path."""
    return Settings(
        _env_file=None,
        environment="test",
        log_file=str(tmp_path / "network.log"),
    )


@pytest.fixture
def strict_settings(tmp_path) -> Settings:
    """Settings with strict network validation enabled."""
    return Settings(
        _env_file=None,
        environment="test",
        strict_validation=True,
        log_file=str(tmp_path / "network.log"),
    )
