"""JSON-RPC probes for resolved endpoints."""

from typing import Any, List, Optional

import requests

from .exceptions import RpcError


def _call(rpc_url: str, method: str, params: Optional[List[Any]] = None) -> Any:
    """
    Make a single JSON-RPC call.

    Raises:
        RpcError: On network errors, non-200 responses, malformed replies or RPC errors
    """
    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": method,
                "params": params or [],
                "id": 1,
            },
            timeout=30,
        )

        if response.status_code != 200:
            raise RpcError(f"RPC request failed with status {response.status_code}")

        result = response.json()
    except requests.RequestException as e:
        raise RpcError(f"Network error during RPC call: {e}") from e

    if not isinstance(result, dict):
        raise RpcError(f"Unexpected RPC response: {result!r}")
    if "error" in result:
        raise RpcError(f"RPC error: {result['error']}")
    if "result" not in result:
        raise RpcError(f"RPC response has no result: {result!r}")

    return result["result"]


def _hex_quantity(value: Any) -> int:
    """Decode a 0x-prefixed hex quantity."""
    if not isinstance(value, str) or not value.startswith("0x"):
        raise RpcError(f"Expected hex quantity, got {value!r}")
    try:
        return int(value, 16)
    except ValueError as e:
        raise RpcError(f"Expected hex quantity, got {value!r}") from e


def get_chain_id(rpc_url: str) -> int:
    """Chain id reported by the endpoint (eth_chainId)."""
    return _hex_quantity(_call(rpc_url, "eth_chainId"))


def get_block_number(rpc_url: str) -> int:
    """Latest block height reported by the endpoint (eth_blockNumber)."""
    return _hex_quantity(_call(rpc_url, "eth_blockNumber"))
