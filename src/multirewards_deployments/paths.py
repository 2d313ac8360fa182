"""Path management utilities for multirewards-deployments library."""

import os
from pathlib import Path
from typing import Mapping, Optional, Union


def get_default_vars_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Get the location of Hardhat's configuration variables file.

    Hardhat keeps `npx hardhat vars set` values in
    $XDG_CONFIG_HOME/hardhat-nodejs/vars.json (~/.config when unset).

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Path to vars.json
    """
    if environ is None:
        environ = os.environ

    config_home = environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "hardhat-nodejs" / "vars.json"


def get_dotenv_path(
    project_root: Optional[Union[Path, str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """
    Get the .env file path.

    Args:
        project_root: Directory relative paths are resolved against
                      (defaults to the current working directory)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Absolute path from $DOTENV_CONFIG_PATH, or ./.env
    """
    if environ is None:
        environ = os.environ

    root = Path.cwd() if project_root is None else Path(project_root).absolute()
    return (root / environ.get("DOTENV_CONFIG_PATH", ".env")).absolute()
