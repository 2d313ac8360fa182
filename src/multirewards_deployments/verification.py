"""Explorer verification helpers for multirewards-deployments library."""

import logging
from typing import Any, Callable

import requests

from .constants import DEFAULT_NETWORK
from .exceptions import ExplorerError, VerificationPreconditionError
from .types import ExplorerUrls, VerificationRequest

logger = logging.getLogger(__name__)

VERIFY_TASK = "verify:verify"
MULTI_REWARDS_CONTRACT = "contracts/MultiRewards.sol:MultiRewards"

# (task_name, **task_args) -> task result
TaskRunner = Callable[..., Any]


def check_verification_preconditions(network_name: str, address: str) -> None:
    """
    Make sure a verification attempt can reach a real explorer.

    Args:
        network_name: Active Hardhat network name
        address: Deployed contract address

    Raises:
        VerificationPreconditionError: If network is the local default network
                                       or address is empty
    """
    if network_name == DEFAULT_NETWORK:
        raise VerificationPreconditionError(
            'To verify on a specific etherscan (not hardhat) specify "--network" cmd flag'
        )
    if not address:
        raise VerificationPreconditionError("Contract address is not defined")


def multi_rewards_request(address: str, owner: str, staking_token: str) -> VerificationRequest:
    """Verification request for a MultiRewards instance."""
    return VerificationRequest(
        contract=MULTI_REWARDS_CONTRACT,
        address=address,
        constructor_arguments=[owner, staking_token],
    )


def verify_contract(run: TaskRunner, network_name: str, request: VerificationRequest) -> Any:
    """
    Submit a contract to the explorer through the task runner.

    Preconditions are checked before the runner is called.

    Args:
        run: Task runner, called as run("verify:verify", **task_args)
        network_name: Active Hardhat network name
        request: What to verify

    Returns:
        Whatever the task runner returns
    """
    check_verification_preconditions(network_name, request.address)
    logger.info("Verifying %s at %s on %s", request.contract, request.address, network_name)
    return run(VERIFY_TASK, **request.to_task_args())


class ExplorerClient:
    """Minimal client for an Etherscan-compatible explorer API."""

    def __init__(self, urls: ExplorerUrls, api_key: str, timeout: int = 30):
        self.urls = urls
        self.api_key = api_key
        self.timeout = timeout

    def address_url(self, address: str) -> str:
        return f"{self.urls.browser_url.rstrip('/')}/address/{address}"

    def get_source_code(self, address: str) -> dict:
        """
        Fetch verified source metadata for an address.

        Returns:
            First entry of the `result` list

        Raises:
            ExplorerError: On network errors, HTTP errors or unexpected payloads
        """
        try:
            response = requests.get(
                self.urls.api_url,
                params={
                    "module": "contract",
                    "action": "getsourcecode",
                    "address": address,
                    "apikey": self.api_key,
                },
                timeout=self.timeout,
            )

            if response.status_code != 200:
                raise ExplorerError(
                    f"Explorer request failed with status {response.status_code}"
                )

            payload = response.json()
        except requests.RequestException as e:
            raise ExplorerError(f"Network error during explorer call: {e}") from e

        if not isinstance(payload, dict):
            raise ExplorerError(f"Unexpected explorer response: {payload!r}")

        result = payload.get("result")
        if not isinstance(result, list) or not result:
            raise ExplorerError(f"Unexpected explorer response: {result!r}")

        return result[0]

    def is_verified(self, address: str) -> bool:
        """Check whether the explorer shows verified source for an address."""
        entry = self.get_source_code(address)
        return bool(entry.get("SourceCode"))
