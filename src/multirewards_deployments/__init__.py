"""
multirewards-deployments: chain configuration for MultiRewards Hardhat deployments
"""

from importlib.metadata import PackageNotFoundError, version

from .chains import SupportedChainId, is_valid_chain_id
from .config import SecretStore, Settings, load_settings
from .exceptions import (
    ConfigurationError,
    ExplorerError,
    MissingApiKeyError,
    MissingSecretError,
    RpcError,
    UnsupportedChainError,
    VerificationPreconditionError,
)
from .registry import ChainRegistry, verify_integrity
from .types import ChainProfile, ExplorerUrls, ForkTarget, VerificationRequest
from .verification import verify_contract

try:
    __version__ = version("multirewards-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "ChainRegistry",
    "verify_integrity",
    "SupportedChainId",
    "is_valid_chain_id",
    "Settings",
    "SecretStore",
    "load_settings",
    "ChainProfile",
    "ExplorerUrls",
    "ForkTarget",
    "VerificationRequest",
    "verify_contract",
    "ConfigurationError",
    "MissingSecretError",
    "MissingApiKeyError",
    "UnsupportedChainError",
    "VerificationPreconditionError",
    "RpcError",
    "ExplorerError",
]
