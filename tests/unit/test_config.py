"""Unit tests for settings and secret loading."""

import json
from pathlib import Path
from typing import Dict

import pytest

from multirewards_deployments.chains import SupportedChainId
from multirewards_deployments.config import SecretStore, load_settings
from multirewards_deployments.exceptions import MissingSecretError, UnsupportedChainError

TEST_MNEMONIC = "test test test test test test test test test test test junk"
TEST_PK = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"


class TestSecretStore:
    """Test reading Hardhat's vars.json."""

    def test_reads_value_by_name(self, vars_file: Path):
        """Test looking up a stored variable."""
        store = SecretStore(vars_file)

        assert store.get("DEPLOYER_PK") == TEST_PK
        assert "DEPLOYER_PK" in store

    def test_unknown_name_returns_none(self, vars_file: Path):
        """Test that unknown names return None."""
        assert SecretStore(vars_file).get("OTHER") is None

    def test_missing_file_is_empty(self, tmp_path: Path):
        """Test that a missing file gives an empty store."""
        store = SecretStore(tmp_path / "nope.json")

        assert store.get("DEPLOYER_PK") is None

    def test_corrupted_file_is_empty(self, tmp_path: Path):
        """Test that an unreadable file gives an empty store."""
        path = tmp_path / "vars.json"
        path.write_text("{ invalid json")

        assert SecretStore(path).get("DEPLOYER_PK") is None

    def test_directory_path_is_empty(self, tmp_path: Path):
        """Test that a path pointing at a directory gives an empty store."""
        path = tmp_path / "vars.json"
        path.mkdir()

        assert SecretStore(path).get("DEPLOYER_PK") is None

    def test_invalid_utf8_is_empty(self, tmp_path: Path):
        """Test that undecodable bytes give an empty store."""
        path = tmp_path / "vars.json"
        path.write_bytes(b"\xff\xfe{\x00")

        assert SecretStore(path).get("DEPLOYER_PK") is None

    @pytest.mark.parametrize(
        "content",
        [[], "vars", {"vars": []}, {"vars": "DEPLOYER_PK"}],
    )
    def test_unexpected_json_shape_is_empty(self, tmp_path: Path, content):
        """Test that valid JSON of the wrong shape gives an empty store."""
        path = tmp_path / "vars.json"
        path.write_text(json.dumps(content))

        assert SecretStore(path).get("DEPLOYER_PK") is None

    def test_unexpected_json_shape_reports_missing_secret(
        self, tmp_path: Path, complete_environ: Dict[str, str]
    ):
        """Test that a malformed vars file surfaces as a missing secret at load."""
        path = tmp_path / "vars.json"
        path.write_text("[]")
        environ = dict(complete_environ)
        del environ["MNEMONIC"]

        with pytest.raises(MissingSecretError):
            load_settings(environ=environ, secrets=SecretStore(path))

    def test_empty_values_are_ignored(self, tmp_path: Path):
        """Test that blank values count as absent."""
        path = tmp_path / "vars.json"
        path.write_text(json.dumps({"_format": "hh-vars-1", "vars": {"DEPLOYER_PK": {"value": ""}}}))

        assert "DEPLOYER_PK" not in SecretStore(path)

    def test_default_path_from_xdg(self, tmp_path: Path, vars_file: Path, monkeypatch):
        """Test that the default location follows $XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(vars_file.parent.parent))

        assert SecretStore().get("DEPLOYER_PK") == TEST_PK


class TestLoadSettings:
    """Test the load_settings function."""

    def test_loads_complete_environment(self, complete_environ: Dict[str, str], empty_secrets):
        """Test that all values are picked up."""
        settings = load_settings(environ=complete_environ, secrets=empty_secrets)

        assert settings.mnemonic == TEST_MNEMONIC
        assert settings.infura_api_key == "infura-key-123"
        assert settings.nodereal_api_key == "nodereal-key-456"
        assert settings.deployer_pk is None
        assert settings.chain_id is None
        assert settings.report_gas is False

    def test_explorer_keys_mapped_to_chains(self, complete_environ, empty_secrets):
        """Test that explorer env vars map onto chain ids."""
        settings = load_settings(environ=complete_environ, secrets=empty_secrets)

        assert settings.explorer_api_keys[SupportedChainId.BASE_MAINNET] == "basescan-key"
        # ETHERSCAN_API_KEY serves both mainnet and Sepolia
        assert settings.explorer_api_keys[SupportedChainId.ETHEREUM_MAINNET] == "etherscan-key"
        assert settings.explorer_api_keys[SupportedChainId.SEPOLIA] == "etherscan-key"
        assert SupportedChainId.ARBITRUM_MAINNET not in settings.explorer_api_keys

    def test_private_key_from_secret_store(self, complete_environ, vars_file: Path):
        """Test that DEPLOYER_PK comes from the secret store."""
        settings = load_settings(environ=complete_environ, secrets=SecretStore(vars_file))

        assert settings.deployer_pk == TEST_PK
        assert settings.has_private_key

    def test_private_key_without_mnemonic(self, complete_environ, vars_file: Path):
        """Test that a private key alone is enough."""
        del complete_environ["MNEMONIC"]

        settings = load_settings(environ=complete_environ, secrets=SecretStore(vars_file))

        assert settings.mnemonic is None
        assert settings.deployer_pk == TEST_PK

    def test_raises_without_mnemonic_or_private_key(self, complete_environ, empty_secrets):
        """Test that missing signer secrets fail naming both options."""
        del complete_environ["MNEMONIC"]

        with pytest.raises(MissingSecretError) as exc_info:
            load_settings(environ=complete_environ, secrets=empty_secrets)

        assert "DEPLOYER_PK" in str(exc_info.value)
        assert "MNEMONIC" in str(exc_info.value)
        assert exc_info.value.names == ["DEPLOYER_PK", "MNEMONIC"]

    def test_raises_without_infura_key(self, complete_environ, empty_secrets):
        """Test that a missing INFURA_API_KEY is named."""
        del complete_environ["INFURA_API_KEY"]

        with pytest.raises(MissingSecretError) as exc_info:
            load_settings(environ=complete_environ, secrets=empty_secrets)

        assert "INFURA_API_KEY" in str(exc_info.value)

    def test_empty_infura_key_counts_as_missing(self, complete_environ, empty_secrets):
        """Test that a blank INFURA_API_KEY is rejected."""
        complete_environ["INFURA_API_KEY"] = ""

        with pytest.raises(MissingSecretError):
            load_settings(environ=complete_environ, secrets=empty_secrets)

    def test_parses_chain_id(self, complete_environ, empty_secrets):
        """Test that CHAIN_ID is parsed into a SupportedChainId."""
        complete_environ["CHAIN_ID"] = "8453"

        settings = load_settings(environ=complete_environ, secrets=empty_secrets)

        assert settings.chain_id is SupportedChainId.BASE_MAINNET

    def test_rejects_unsupported_chain_id(self, complete_environ, empty_secrets):
        """Test that an unsupported CHAIN_ID fails at load."""
        complete_environ["CHAIN_ID"] = "424242"

        with pytest.raises(UnsupportedChainError) as exc_info:
            load_settings(environ=complete_environ, secrets=empty_secrets)

        assert "424242" in str(exc_info.value)

    def test_dex_and_report_gas(self, complete_environ, empty_secrets):
        """Test optional switches."""
        complete_environ["DEX"] = "uniswap"
        complete_environ["REPORT_GAS"] = "1"

        settings = load_settings(environ=complete_environ, secrets=empty_secrets)

        assert settings.dex == "uniswap"
        assert settings.report_gas is True

    def test_loads_dotenv_file(self, tmp_path: Path, empty_secrets, monkeypatch):
        """Test that a .env file is loaded into the process environment."""
        for name in ("MNEMONIC", "INFURA_API_KEY", "CHAIN_ID"):
            # setenv first so the teardown removes whatever .env adds
            monkeypatch.setenv(name, "")
            monkeypatch.delenv(name)
        env_file = tmp_path / ".env"
        env_file.write_text(f'MNEMONIC="{TEST_MNEMONIC}"\nINFURA_API_KEY=from-dotenv\n')

        settings = load_settings(secrets=empty_secrets, dotenv_path=env_file)

        assert settings.infura_api_key == "from-dotenv"
        assert settings.mnemonic == TEST_MNEMONIC

    def test_process_environment_wins_over_dotenv(self, tmp_path: Path, empty_secrets, monkeypatch):
        """Test that already-set variables are not overridden by .env."""
        monkeypatch.setenv("MNEMONIC", TEST_MNEMONIC)
        monkeypatch.setenv("INFURA_API_KEY", "from-process")
        monkeypatch.delenv("CHAIN_ID", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("INFURA_API_KEY=from-dotenv\n")

        settings = load_settings(secrets=empty_secrets, dotenv_path=env_file)

        assert settings.infura_api_key == "from-process"
