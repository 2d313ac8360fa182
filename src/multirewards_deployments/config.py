"""Environment and secret loading for multirewards-deployments library."""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from dotenv import load_dotenv

from .chains import SupportedChainId, to_chain_id
from .constants import EXPLORER_API_KEY_ENV
from .exceptions import MissingSecretError
from .paths import get_default_vars_path, get_dotenv_path

logger = logging.getLogger(__name__)

DEPLOYER_PK_VAR = "DEPLOYER_PK"


class SecretStore:
    """
    Read-only view of Hardhat's configuration variables.

    The file written by `npx hardhat vars set` looks like:
        {"_format": "hh-vars-1", "vars": {"DEPLOYER_PK": {"value": "0x..."}}}
    """

    def __init__(self, path: Optional[Union[Path, str]] = None):
        """
        Load the variables file.

        Args:
            path: Path to vars.json (defaults to Hardhat's global location)

        A missing, unreadable or corrupted file gives an empty store.
        """
        self.path = Path(path) if path is not None else get_default_vars_path()
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            data = {}

        variables = data.get("vars") if isinstance(data, dict) else None
        if not isinstance(variables, dict):
            variables = {}

        self._vars: Dict[str, str] = {}
        for name, entry in variables.items():
            if isinstance(entry, dict) and entry.get("value"):
                self._vars[name] = entry["value"]

    def get(self, name: str) -> Optional[str]:
        return self._vars.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._vars


@dataclass(frozen=True)
class Settings:
    """Secrets and switches read from the environment at startup."""

    infura_api_key: str
    mnemonic: Optional[str] = None
    deployer_pk: Optional[str] = None
    chain_id: Optional[SupportedChainId] = None  # Chain the hardhat network forks
    dex: Optional[str] = None
    nodereal_api_key: Optional[str] = None
    explorer_api_keys: Dict[SupportedChainId, str] = field(default_factory=dict)
    report_gas: bool = False

    @property
    def has_private_key(self) -> bool:
        return bool(self.deployer_pk)


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    secrets: Optional[SecretStore] = None,
    dotenv_path: Optional[Union[Path, str]] = None,
) -> Settings:
    """
    Read settings from the environment and the secret store.

    When environ is None the .env file is loaded into os.environ first
    (existing variables win) and os.environ is used.

    Args:
        environ: Environment mapping
        secrets: Secret store holding DEPLOYER_PK (defaults to Hardhat's vars)
        dotenv_path: .env location (defaults to $DOTENV_CONFIG_PATH or ./.env)

    Returns:
        Validated Settings

    Raises:
        MissingSecretError: If neither MNEMONIC nor DEPLOYER_PK is available,
                            or INFURA_API_KEY is unset
        UnsupportedChainError: If CHAIN_ID is set to an unsupported chain
    """
    if environ is None:
        path = Path(dotenv_path) if dotenv_path is not None else get_dotenv_path()
        if load_dotenv(path):
            logger.debug("Loaded environment from %s", path)
        environ = os.environ

    if secrets is None:
        secrets = SecretStore()

    mnemonic = environ.get("MNEMONIC") or None
    deployer_pk = secrets.get(DEPLOYER_PK_VAR)
    if not mnemonic and not deployer_pk:
        raise MissingSecretError(
            f"Please set your {DEPLOYER_PK_VAR} (npx hardhat vars set {DEPLOYER_PK_VAR}) "
            "or MNEMONIC in a .env file",
            names=[DEPLOYER_PK_VAR, "MNEMONIC"],
        )

    infura_api_key = environ.get("INFURA_API_KEY")
    if not infura_api_key:
        raise MissingSecretError(
            "Please set your INFURA_API_KEY in a .env file", names=["INFURA_API_KEY"]
        )

    raw_chain_id = environ.get("CHAIN_ID")
    chain_id = to_chain_id(raw_chain_id) if raw_chain_id else None

    explorer_api_keys: Dict[SupportedChainId, str] = {}
    for chain, env_name in EXPLORER_API_KEY_ENV.items():
        value = environ.get(env_name)
        if value:
            explorer_api_keys[chain] = value

    return Settings(
        infura_api_key=infura_api_key,
        mnemonic=mnemonic,
        deployer_pk=deployer_pk,
        chain_id=chain_id,
        dex=environ.get("DEX") or None,
        nodereal_api_key=environ.get("NODEREAL_API_KEY") or None,
        explorer_api_keys=explorer_api_keys,
        report_gas=bool(environ.get("REPORT_GAS")),
    )
