"""Chain registry: RPC endpoint and explorer credential resolution."""

import logging
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional

from .chains import SupportedChainId, is_valid_chain_id
from .config import Settings
from .constants import (
    AGGREGATOR_SUPPORTED,
    AGGREGATOR_URL_TEMPLATE,
    CHAIN_NAMES,
    EXPLORER_API_KEY_ENV,
    EXPLORER_CONFIG,
    FALLBACK_RPC_URLS,
    FORK_BLOCK_NUMBERS,
    KEYLESS_EXPLORERS,
    PLACEHOLDER_API_KEY,
)
from .exceptions import ConfigurationError, MissingApiKeyError, UnsupportedChainError
from .types import ChainProfile, CustomChain, ExplorerUrls, ForkTarget

logger = logging.getLogger(__name__)


def find_missing_api_keys(
    profiles: Iterable[ChainProfile],
    keys: Mapping[SupportedChainId, str],
    keyless: FrozenSet[SupportedChainId] = KEYLESS_EXPLORERS,
) -> List[str]:
    """
    List chains whose explorer has no usable API key.

    A key is usable when it is non-empty and, unless the explorer is keyless,
    not the placeholder.

    Returns:
        Chain names (e.g., "INK_SEPOLIA") in profile order
    """
    missing = []
    for profile in profiles:
        if profile.explorer is None:
            continue
        key = keys.get(profile.chain_id)
        if not key or (key == PLACEHOLDER_API_KEY and profile.chain_id not in keyless):
            missing.append(profile.chain_id.name)
    return missing


def verify_integrity(
    profiles: Iterable[ChainProfile],
    keys: Mapping[SupportedChainId, str],
    keyless: FrozenSet[SupportedChainId] = KEYLESS_EXPLORERS,
) -> None:
    """
    Check that every chain with an explorer profile has an API key.

    All violations are reported together.

    Raises:
        MissingApiKeyError: Listing every chain without a usable key
    """
    missing = find_missing_api_keys(profiles, keys, keyless)
    if missing:
        raise MissingApiKeyError(missing)


def default_profiles(nodereal_api_key: Optional[str] = None) -> List[ChainProfile]:
    """
    Build chain profiles from the static tables.

    Args:
        nodereal_api_key: Key embedded in the opBNB explorer URL

    Returns:
        One ChainProfile per SupportedChainId
    """
    profiles = []
    for chain_id in SupportedChainId:
        explorer = None
        if chain_id in EXPLORER_CONFIG:
            urls = EXPLORER_CONFIG[chain_id]
            explorer = ExplorerUrls(
                api_url=urls["api_url"].format(nodereal_api_key=nodereal_api_key or ""),
                browser_url=urls["browser_url"],
            )
        profiles.append(
            ChainProfile(
                chain_id=chain_id,
                name=CHAIN_NAMES[chain_id],
                fallback_rpc_urls=tuple(FALLBACK_RPC_URLS[chain_id]),
                explorer=explorer,
                aggregator_supported=AGGREGATOR_SUPPORTED.get(chain_id, False),
            )
        )
    return profiles


class ChainRegistry:
    """
    Immutable lookup of chain profiles and their credentials.

    Construction validates the whole configuration; afterwards every
    resolution is a pure table lookup.
    """

    def __init__(
        self,
        profiles: Iterable[ChainProfile],
        api_keys: Mapping[SupportedChainId, str],
        aggregator_api_key: Optional[str] = None,
        fork_block_numbers: Optional[Mapping[SupportedChainId, int]] = None,
        keyless_explorers: FrozenSet[SupportedChainId] = KEYLESS_EXPLORERS,
    ):
        """
        Initialize the registry.

        Args:
            profiles: Chain profiles, one per chain id
            api_keys: Explorer API key per chain
            aggregator_api_key: Infura API key (aggregator URLs are skipped without it)
            fork_block_numbers: Pinned fork height per chain
            keyless_explorers: Chains whose explorer accepts the placeholder key

        Raises:
            ConfigurationError: If chain ids or names are duplicated
            MissingApiKeyError: If an explorer chain has no usable API key
        """
        by_id: Dict[SupportedChainId, ChainProfile] = {}
        names: Dict[str, SupportedChainId] = {}
        for profile in profiles:
            if profile.chain_id in by_id:
                raise ConfigurationError(f"Duplicate profile for chain {profile.chain_id.name}")
            if profile.name in names:
                raise ConfigurationError(
                    f"Chain name '{profile.name}' used by both "
                    f"{names[profile.name].name} and {profile.chain_id.name}"
                )
            by_id[profile.chain_id] = profile
            names[profile.name] = profile.chain_id

        verify_integrity(by_id.values(), api_keys, keyless_explorers)

        self._profiles = MappingProxyType(by_id)
        self._chain_ids_by_name = MappingProxyType(names)
        self._api_keys = MappingProxyType(dict(api_keys))
        self._aggregator_api_key = aggregator_api_key or None
        self._fork_block_numbers = MappingProxyType(dict(fork_block_numbers or {}))

    @classmethod
    def from_settings(cls, settings: Settings) -> "ChainRegistry":
        """
        Build the registry from the static tables and loaded settings.

        Explorers that need no key get the placeholder. The opBNB explorer
        URL embeds NODEREAL_API_KEY, so its absence is reported alongside
        missing explorer keys.

        Raises:
            MissingApiKeyError: Listing every chain without a usable key
        """
        profiles = default_profiles(settings.nodereal_api_key)

        api_keys: Dict[SupportedChainId, str] = dict(settings.explorer_api_keys)
        for chain_id in KEYLESS_EXPLORERS:
            api_keys.setdefault(chain_id, PLACEHOLDER_API_KEY)

        missing = find_missing_api_keys(profiles, api_keys)
        for name in missing:
            logger.error(
                "Explorer API key missing for %s (set %s)",
                name,
                EXPLORER_API_KEY_ENV.get(SupportedChainId[name]),
            )
        if not settings.nodereal_api_key:
            logger.error("NODEREAL_API_KEY is required for the opBNB explorer URL")
            missing.append(f"{SupportedChainId.OPBNB_MAINNET.name} (NODEREAL_API_KEY)")
        if missing:
            raise MissingApiKeyError(missing)

        return cls(
            profiles,
            api_keys,
            aggregator_api_key=settings.infura_api_key,
            fork_block_numbers=FORK_BLOCK_NUMBERS,
        )

    def _guard(self, chain_id: Any) -> SupportedChainId:
        if not is_valid_chain_id(chain_id) or chain_id not in self._profiles:
            raise UnsupportedChainError(f"Chain id {chain_id!r} is not supported")
        return SupportedChainId(chain_id)

    def profile(self, chain_id: Any) -> ChainProfile:
        return self._profiles[self._guard(chain_id)]

    def chain_ids(self) -> List[SupportedChainId]:
        return list(self._profiles)

    def network_name(self, chain_id: Any) -> str:
        return self.profile(chain_id).name

    def chain_id_for_network(self, network_name: str) -> SupportedChainId:
        """
        Look up a chain by its network name.

        Raises:
            UnsupportedChainError: If no chain has that name
        """
        if network_name not in self._chain_ids_by_name:
            raise UnsupportedChainError(f"Network '{network_name}' is not supported")
        return self._chain_ids_by_name[network_name]

    def resolve_rpc_url(self, chain_id: Any) -> str:
        """
        Resolve the JSON-RPC endpoint for a chain.

        Aggregator-hosted URL when the chain is aggregator-supported and a key
        is configured, otherwise the first fallback URL.

        Raises:
            UnsupportedChainError: If chain is not supported
            ConfigurationError: If no URL can be produced
        """
        profile = self.profile(chain_id)

        if profile.aggregator_supported and self._aggregator_api_key:
            logger.debug("Using aggregator endpoint for %s", profile.name)
            return AGGREGATOR_URL_TEMPLATE.format(
                name=profile.name, key=self._aggregator_api_key
            )

        if profile.fallback_rpc_urls:
            return profile.fallback_rpc_urls[0]

        raise ConfigurationError(f"No RPC URL available for chain '{profile.name}'")

    def resolve_explorer_key(self, chain_id: Any) -> str:
        """
        Get the explorer API key for a chain.

        Chains with an explorer profile always have a usable key (checked at
        construction). For keyless explorers (Ink Sepolia, Ink mainnet,
        Berachain) that key may be PLACEHOLDER_API_KEY. Other chains return ""
        when no key was supplied.

        Raises:
            UnsupportedChainError: If chain is not supported
        """
        chain = self._guard(chain_id)
        return self._api_keys.get(chain, "")

    def resolve_fork_target(self, chain_id: Any) -> ForkTarget:
        """
        Describe the fork source for the in-process Hardhat network.

        The chain id is validated here as well, whatever the caller checked.

        Returns:
            ForkTarget with the resolved URL and the pinned block
            (None means latest)

        Raises:
            UnsupportedChainError: If chain is not supported
        """
        chain = self._guard(chain_id)
        return ForkTarget(
            url=self.resolve_rpc_url(chain),
            block_number=self._fork_block_numbers.get(chain),
        )

    def api_keys_by_network(self) -> Dict[str, str]:
        """Explorer API key per network name ("" where none is configured)."""
        return {
            profile.name: self._api_keys.get(chain_id, "")
            for chain_id, profile in self._profiles.items()
        }

    def custom_chains(self) -> List[CustomChain]:
        """hardhat-verify customChains entries for chains with an explorer profile."""
        return [
            CustomChain(network=profile.name, chain_id=int(chain_id), urls=profile.explorer)
            for chain_id, profile in self._profiles.items()
            if profile.explorer is not None
        ]
