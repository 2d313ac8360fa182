"""Custom exception classes for multirewards-deployments library."""

from typing import Iterable


class ConfigurationError(Exception):
    """Base exception for configuration-related errors."""

    pass


class MissingSecretError(ConfigurationError, LookupError):
    """Raised when a required secret (private key, mnemonic, API key) is absent."""

    def __init__(self, message: str, names: Iterable[str] = ()):
        super().__init__(message)
        self.names = list(names)


class MissingApiKeyError(ConfigurationError, LookupError):
    """Raised when explorer API keys are missing for one or more chains."""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(
            "Explorer API key missing for: " + ", ".join(self.missing)
            if self.missing
            else "Explorer API key missing"
        )


class UnsupportedChainError(ConfigurationError, ValueError):
    """Raised when a chain id is outside the supported enumeration."""

    pass


class VerificationPreconditionError(ConfigurationError, RuntimeError):
    """Raised when explorer verification cannot be attempted."""

    pass


class RpcError(RuntimeError):
    """Raised when a JSON-RPC endpoint fails or returns an error."""

    pass


class ExplorerError(RuntimeError):
    """Raised when a block explorer API call fails."""

    pass
