"""Supported chain identifiers for multirewards-deployments library."""

from enum import IntEnum
from typing import Any

from .exceptions import UnsupportedChainError


class SupportedChainId(IntEnum):
    """
    EVM chain ids the deployment harness knows how to reach.

    Values are the EIP-155 chain ids, so members compare equal to plain ints.
    """

    ETHEREUM_MAINNET = 1
    OPTIMISM_MAINNET = 10
    BSC_MAINNET = 56
    POLYGON_MAINNET = 137
    OPBNB_MAINNET = 204
    FANTOM_MAINNET = 250
    HEDERA_MAINNET = 295
    HEDERA_TESTNET = 296
    ZKSYNC_TESTNET = 300
    ZKSYNC_MAINNET = 324
    POLYGON_ZKEVM = 1101
    GANACHE = 1337
    MANTLE_MAINNET = 5000
    HORIZEN_MAINNET = 7332
    BASE_MAINNET = 8453
    EVMOS_MAINNET = 9001
    HARDHAT = 31337
    ARBITRUM_MAINNET = 42161
    AVALANCHE_MAINNET = 43114
    INK_MAINNET = 57073
    LINEA_MAINNET = 59144
    POLYGON_MUMBAI = 80001
    BERACHAIN_MAINNET = 80094
    INK_SEPOLIA = 763373
    SEPOLIA = 11155111


_VALID_IDS = frozenset(int(c) for c in SupportedChainId)


def is_valid_chain_id(value: Any) -> bool:
    """
    Check whether a value is a supported chain id.

    Args:
        value: Candidate chain id (int or SupportedChainId)

    Returns:
        True if value is a member of SupportedChainId, False otherwise
        (including None, bools and non-integers)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return value in _VALID_IDS


def to_chain_id(value: Any) -> SupportedChainId:
    """
    Convert a value to a SupportedChainId.

    Strings of decimal digits are accepted so values read from the
    environment can be passed straight through.

    Raises:
        UnsupportedChainError: If value is not a supported chain id
    """
    candidate = value
    if isinstance(value, str) and value.strip().isdigit():
        candidate = int(value.strip())

    if not is_valid_chain_id(candidate):
        raise UnsupportedChainError(f"CHAIN_ID {value} is not supported")

    return SupportedChainId(candidate)
