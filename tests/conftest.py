"""Shared pytest fixtures for multirewards-deployments tests."""

import json
from pathlib import Path
from typing import Dict

import pytest

from multirewards_deployments.chains import SupportedChainId
from multirewards_deployments.config import SecretStore, Settings, load_settings
from multirewards_deployments.registry import ChainRegistry

TEST_MNEMONIC = "test test test test test test test test test test test junk"
TEST_PK = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"


@pytest.fixture
def complete_environ() -> Dict[str, str]:
    """Environment with every required secret and explorer key set."""
    return {
        "MNEMONIC": TEST_MNEMONIC,
        "INFURA_API_KEY": "infura-key-123",
        "NODEREAL_API_KEY": "nodereal-key-456",
        "BASESCAN_API_KEY": "basescan-key",
        "ESCAN_API_KEY": "escan-key",
        "MANTLESCAN_API_KEY": "mantlescan-key",
        "ZKEVMSCAN_API_KEY": "zkevmscan-key",
        "LINEASCAN_API_KEY": "lineascan-key",
        "OPBNBSCAN_API_KEY": "opbnbscan-key",
        "FTMSCAN_API_KEY": "ftmscan-key",
        "ETHERSCAN_API_KEY": "etherscan-key",
    }


@pytest.fixture
def vars_file(tmp_path: Path) -> Path:
    """Hardhat vars.json holding a deployer private key."""
    path = tmp_path / "hardhat-nodejs" / "vars.json"
    path.parent.mkdir(parents=True)
    path.write_text(
        json.dumps({"_format": "hh-vars-1", "vars": {"DEPLOYER_PK": {"value": TEST_PK}}})
    )
    return path


@pytest.fixture
def empty_secrets(tmp_path: Path) -> SecretStore:
    """Secret store backed by a file that doesn't exist."""
    return SecretStore(tmp_path / "missing-vars.json")


@pytest.fixture
def settings(complete_environ: Dict[str, str], empty_secrets: SecretStore) -> Settings:
    """Settings using the mnemonic (no private key)."""
    return load_settings(environ=complete_environ, secrets=empty_secrets)


@pytest.fixture
def registry(settings: Settings) -> ChainRegistry:
    """Registry built from the static tables."""
    return ChainRegistry.from_settings(settings)


@pytest.fixture
def fork_settings(complete_environ: Dict[str, str], empty_secrets: SecretStore) -> Settings:
    """Settings forking Base mainnet."""
    environ = dict(complete_environ, CHAIN_ID=str(int(SupportedChainId.BASE_MAINNET)))
    return load_settings(environ=environ, secrets=empty_secrets)
