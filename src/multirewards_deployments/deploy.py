"""Deployment module definitions."""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

# (contract_name, constructor_args) -> deployed contract handle
DeploymentRunner = Callable[[str, List[Any]], Any]


@dataclass(frozen=True)
class ContractFuture:
    """A contract the module asks the runner to deploy."""

    future_name: str  # Key in the module result, e.g., "factory"
    contract_name: str  # Artifact name, e.g., "MultiRewardsFactory"
    args: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class DeploymentModule:
    """Named group of contract deployments."""

    name: str
    contracts: List[ContractFuture]


MULTI_REWARDS_MODULE = DeploymentModule(
    name="MultiRewards",
    contracts=[ContractFuture(future_name="factory", contract_name="MultiRewardsFactory")],
)


def deploy_module(runner: DeploymentRunner, module: DeploymentModule) -> Dict[str, Any]:
    """
    Hand every contract of a module to the deployment runner.

    Args:
        runner: Callable that deploys a contract and returns its handle
        module: Module to deploy

    Returns:
        Deployed contract handles keyed by future name
    """
    deployed: Dict[str, Any] = {}
    for future in module.contracts:
        logger.info("Deploying %s from module %s", future.contract_name, module.name)
        deployed[future.future_name] = runner(future.contract_name, list(future.args))
    return deployed
