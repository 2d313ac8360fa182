"""Hardhat configuration document builder."""

from typing import Any, Dict

from .chains import SupportedChainId
from .config import Settings
from .constants import (
    DEFAULT_NETWORK,
    GANACHE_URL,
    HD_ACCOUNT_COUNT,
    HD_PATH,
    MOCHA_TIMEOUT_MS,
    NETWORK_TIMEOUT_MS,
    SOLIDITY_VERSION,
)
from .registry import ChainRegistry


def _accounts(settings: Settings) -> Any:
    if settings.has_private_key:
        return [settings.deployer_pk]
    return {
        "count": HD_ACCOUNT_COUNT,
        "mnemonic": settings.mnemonic,
        "path": HD_PATH,
    }


def build_network_config(
    registry: ChainRegistry, settings: Settings, chain_id: SupportedChainId
) -> Dict[str, Any]:
    """
    Build the Hardhat network entry for one chain.

    Uses the deployer private key when available, otherwise HD accounts
    derived from the mnemonic.
    """
    return {
        "accounts": _accounts(settings),
        "chainId": int(chain_id),
        "url": registry.resolve_rpc_url(chain_id),
        "timeout": NETWORK_TIMEOUT_MS,
    }


def build_networks(registry: ChainRegistry, settings: Settings) -> Dict[str, Any]:
    """
    Build the `networks` section.

    Every chain gets an entry under its network name. The `hardhat` and
    `ganache` entries are then replaced with the local network setup: the
    in-process network forks CHAIN_ID when it is set. Keys without a value
    are left out rather than emitted as null.
    """
    networks: Dict[str, Any] = {}
    for chain_id in registry.chain_ids():
        networks[registry.network_name(chain_id)] = build_network_config(
            registry, settings, chain_id
        )

    fork_chain = settings.chain_id
    local = {"hardhat": {}, "ganache": {"url": GANACHE_URL}}
    if fork_chain:
        local["hardhat"]["forking"] = registry.resolve_fork_target(fork_chain).to_hardhat()
    local["hardhat"]["chainId"] = int(fork_chain or SupportedChainId.HARDHAT)
    local["ganache"]["chainId"] = int(SupportedChainId.GANACHE)

    # Without a mnemonic the local networks keep Hardhat's default accounts.
    if settings.mnemonic:
        for entry in local.values():
            entry["accounts"] = {"mnemonic": settings.mnemonic}

    networks[DEFAULT_NETWORK] = local["hardhat"]
    networks["ganache"] = local["ganache"]
    return networks


def build_etherscan_config(registry: ChainRegistry) -> Dict[str, Any]:
    """Build the `etherscan` section consumed by hardhat-verify."""
    return {
        "apiKey": registry.api_keys_by_network(),
        "customChains": [chain.to_hardhat() for chain in registry.custom_chains()],
    }


def build_hardhat_config(registry: ChainRegistry, settings: Settings) -> Dict[str, Any]:
    """
    Build the complete Hardhat user config as a JSON-serialisable dict.

    Args:
        registry: Validated chain registry
        settings: Loaded settings

    Returns:
        Dictionary matching HardhatUserConfig
    """
    return {
        "defaultNetwork": DEFAULT_NETWORK,
        "namedAccounts": {"deployer": 0},
        "etherscan": build_etherscan_config(registry),
        "gasReporter": {
            "currency": "USD",
            "enabled": settings.report_gas,
            "excludeContracts": [],
            "src": "./contracts",
        },
        "networks": build_networks(registry, settings),
        "paths": {
            "artifacts": "./artifacts",
            "cache": "./cache",
            "sources": "./contracts",
            "tests": "./test",
        },
        "solidity": {"compilers": [{"version": SOLIDITY_VERSION}]},
        "typechain": {"outDir": "types"},
        "mocha": {"timeout": MOCHA_TIMEOUT_MS},
    }
