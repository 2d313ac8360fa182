"""Data types and dataclasses for multirewards-deployments library."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .chains import SupportedChainId
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class ExplorerUrls:
    """Etherscan-compatible explorer endpoints for a chain."""

    api_url: str  # e.g., "https://api.basescan.org/api"
    browser_url: str  # e.g., "https://basescan.org/"

    def to_hardhat(self) -> Dict[str, str]:
        return {"apiURL": self.api_url, "browserURL": self.browser_url}


@dataclass(frozen=True)
class ChainProfile:
    """Static description of one supported chain."""

    # Required fields
    chain_id: SupportedChainId
    name: str  # Canonical network name, e.g., "base-mainnet"
    fallback_rpc_urls: Tuple[str, ...]  # Public endpoints, first one is the default

    # Optional fields
    explorer: Optional[ExplorerUrls] = None
    aggregator_supported: bool = False

    def __post_init__(self):
        if not self.name:
            raise ConfigurationError(f"Chain {self.chain_id!r} has an empty name")
        if not self.fallback_rpc_urls:
            raise ConfigurationError(f"Chain '{self.name}' has no fallback RPC URLs")
        # Accept lists from callers but keep the profile immutable
        object.__setattr__(self, "fallback_rpc_urls", tuple(self.fallback_rpc_urls))


@dataclass(frozen=True)
class ForkTarget:
    """Where the in-process Hardhat network forks from."""

    url: str
    block_number: Optional[int] = None  # None forks from the latest block

    def to_hardhat(self) -> Dict[str, Any]:
        forking: Dict[str, Any] = {"url": self.url}
        if self.block_number is not None:
            forking["blockNumber"] = self.block_number
        return forking


@dataclass(frozen=True)
class CustomChain:
    """Entry of hardhat-verify's customChains list."""

    network: str
    chain_id: int
    urls: ExplorerUrls

    def to_hardhat(self) -> Dict[str, Any]:
        return {
            "network": self.network,
            "chainId": self.chain_id,
            "urls": self.urls.to_hardhat(),
        }


@dataclass
class VerificationRequest:
    """Arguments of the verify:verify task."""

    contract: str  # Fully qualified, e.g., "contracts/MultiRewards.sol:MultiRewards"
    address: str
    constructor_arguments: List[Any] = field(default_factory=list)

    def to_task_args(self) -> Dict[str, Any]:
        return {
            "contract": self.contract,
            "address": self.address,
            "constructorArguments": list(self.constructor_arguments),
        }
