"""Command line interface for multirewards-deployments."""

import json
import logging

import click

from .chains import to_chain_id
from .config import SecretStore, load_settings
from .constants import PLACEHOLDER_API_KEY
from .exceptions import ConfigurationError, ExplorerError, RpcError
from .hardhat import build_hardhat_config
from .registry import ChainRegistry
from .rpc import get_chain_id
from .verification import ExplorerClient

REDACTED = "<redacted>"


def _load(ctx: click.Context):
    """Load settings and build the registry, failing with a readable message."""
    try:
        secrets = SecretStore(ctx.obj["vars_file"]) if ctx.obj["vars_file"] else None
        settings = load_settings(secrets=secrets, dotenv_path=ctx.obj["env_file"])
        return settings, ChainRegistry.from_settings(settings)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e


def _chain_option(required: bool = True):
    return click.option(
        "--chain-id",
        required=required,
        callback=lambda ctx, param, value: _parse_chain_id(value),
        help="EIP-155 chain id, e.g. 8453",
    )


def _parse_chain_id(value):
    if value is None:
        return None
    try:
        return to_chain_id(value)
    except ConfigurationError as e:
        raise click.BadParameter(str(e)) from e


@click.group()
@click.option("--env-file", type=click.Path(dir_okay=False), help="Path to .env file")
@click.option("--vars-file", type=click.Path(dir_okay=False), help="Path to Hardhat vars.json")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, env_file, vars_file, verbose):
    """Chain configuration for MultiRewards deployments"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["env_file"] = env_file
    ctx.obj["vars_file"] = vars_file


@cli.command()
@click.pass_context
def networks(ctx):
    """List supported networks with their resolved RPC URL"""
    _, registry = _load(ctx)
    for chain_id in registry.chain_ids():
        profile = registry.profile(chain_id)
        url = registry.resolve_rpc_url(chain_id)
        if profile.aggregator_supported and url != profile.fallback_rpc_urls[0]:
            url = url.rsplit("/", 1)[0] + "/" + REDACTED
        click.echo(f"{profile.name:<20} {int(chain_id):>9}  {url}")


@cli.command()
@click.option("--show-secrets", is_flag=True, help="Print keys and mnemonics unredacted")
@click.pass_context
def config(ctx, show_secrets):
    """Print the Hardhat config as JSON"""
    settings, registry = _load(ctx)
    document = json.dumps(build_hardhat_config(registry, settings), indent=2)

    if not show_secrets:
        secrets = [
            settings.deployer_pk,
            settings.mnemonic,
            settings.infura_api_key,
            settings.nodereal_api_key,
            *settings.explorer_api_keys.values(),
        ]
        for secret in secrets:
            if secret and secret != PLACEHOLDER_API_KEY:
                document = document.replace(secret, REDACTED)

    click.echo(document)


@cli.command("fork-target")
@_chain_option()
@click.pass_context
def fork_target(ctx, chain_id):
    """Print where the hardhat network forks from"""
    _, registry = _load(ctx)
    target = registry.resolve_fork_target(chain_id)
    block = target.block_number if target.block_number is not None else "latest"
    click.echo(f"url: {target.url}")
    click.echo(f"block: {block}")


@cli.command("check-rpc")
@_chain_option()
@click.pass_context
def check_rpc(ctx, chain_id):
    """Check that the resolved RPC endpoint serves the expected chain"""
    _, registry = _load(ctx)
    url = registry.resolve_rpc_url(chain_id)
    try:
        reported = get_chain_id(url)
    except RpcError as e:
        raise click.ClickException(str(e)) from e

    if reported != int(chain_id):
        raise click.ClickException(
            f"{registry.network_name(chain_id)}: endpoint reports chain id {reported}, "
            f"expected {int(chain_id)}"
        )
    click.echo(f"{registry.network_name(chain_id)}: OK (chain id {reported})")


@cli.command()
@_chain_option()
@click.argument("address")
@click.pass_context
def verified(ctx, chain_id, address):
    """Show whether ADDRESS has verified source on the chain's explorer"""
    _, registry = _load(ctx)
    profile = registry.profile(chain_id)
    if profile.explorer is None:
        raise click.ClickException(f"No custom explorer configured for {profile.name}")

    client = ExplorerClient(profile.explorer, registry.resolve_explorer_key(chain_id))
    try:
        status = "Verified" if client.is_verified(address) else "Not Verified"
    except ExplorerError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"{client.address_url(address)} {status}")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
