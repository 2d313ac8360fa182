"""Configuration constants for multirewards-deployments library."""

from typing import Dict

from .chains import SupportedChainId

# Name of the in-process network Hardhat starts when --network is omitted.
# Nothing is ever deployed there, so it can't be verified against.
DEFAULT_NETWORK = "hardhat"

GANACHE_URL = "http://localhost:8545"

# Hedera needs more than Hardhat's default 20s
NETWORK_TIMEOUT_MS = 60_000
MOCHA_TIMEOUT_MS = 3_600_000

HD_PATH = "m/44'/60'/0'/0"
HD_ACCOUNT_COUNT = 10

SOLIDITY_VERSION = "0.5.17"

# Explorers that accept unauthenticated verification still need a
# non-empty key in hardhat-verify's apiKey map
PLACEHOLDER_API_KEY = "z" * 32

AGGREGATOR_URL_TEMPLATE = "https://{name}.infura.io/v3/{key}"

# Canonical network names; these double as Hardhat --network names and as
# Infura subdomains for the chains Infura serves.
CHAIN_NAMES = {
    SupportedChainId.ETHEREUM_MAINNET: "mainnet",
    SupportedChainId.OPTIMISM_MAINNET: "optimism-mainnet",
    SupportedChainId.BSC_MAINNET: "bsc",
    SupportedChainId.POLYGON_MAINNET: "polygon-mainnet",
    SupportedChainId.OPBNB_MAINNET: "opbnb-mainnet",
    SupportedChainId.FANTOM_MAINNET: "fantom-mainnet",
    SupportedChainId.HEDERA_MAINNET: "hedera-mainnet",
    SupportedChainId.HEDERA_TESTNET: "hedera-testnet",
    SupportedChainId.POLYGON_ZKEVM: "polygon-zkevm",
    SupportedChainId.GANACHE: "ganache",
    SupportedChainId.MANTLE_MAINNET: "mantle-mainnet",
    SupportedChainId.EVMOS_MAINNET: "evmos-mainnet",
    SupportedChainId.HARDHAT: "hardhat",
    SupportedChainId.AVALANCHE_MAINNET: "avalanche-mainnet",
    SupportedChainId.SEPOLIA: "sepolia",
    SupportedChainId.ARBITRUM_MAINNET: "arbitrum-mainnet",
    SupportedChainId.POLYGON_MUMBAI: "polygon-mumbai",
    SupportedChainId.LINEA_MAINNET: "linea-mainnet",
    SupportedChainId.HORIZEN_MAINNET: "horizen-mainnet",
    SupportedChainId.BASE_MAINNET: "base-mainnet",
    SupportedChainId.ZKSYNC_TESTNET: "zksync-testnet",
    SupportedChainId.ZKSYNC_MAINNET: "zksync-mainnet",
    SupportedChainId.INK_SEPOLIA: "ink-sepolia",
    SupportedChainId.INK_MAINNET: "ink-mainnet",
    SupportedChainId.BERACHAIN_MAINNET: "berachain-mainnet",
}

# Public endpoints, first entry is the default
FALLBACK_RPC_URLS = {
    SupportedChainId.ETHEREUM_MAINNET: ["https://eth.llamarpc.com"],
    SupportedChainId.OPTIMISM_MAINNET: ["https://optimism.llamarpc.com"],
    SupportedChainId.BSC_MAINNET: ["https://rpc.ankr.com/bsc"],
    SupportedChainId.POLYGON_MAINNET: ["https://polygon.llamarpc.com"],
    SupportedChainId.OPBNB_MAINNET: ["https://opbnb.publicnode.com"],
    SupportedChainId.FANTOM_MAINNET: [
        "https://rpc.fantom.network",
        "https://rpcapi.fantom.network",
        "https://fantom-pokt.nodies.app",
        "https://rpc.ftm.tools",
        "https://rpc.ankr.com/fantom",
        "https://rpc2.fantom.network",
        "https://rpc3.fantom.network",
        "https://fantom-mainnet.public.blastapi.io",
        "https://endpoints.omniatech.io/v1/fantom/mainnet/public",
    ],
    SupportedChainId.HEDERA_MAINNET: ["https://mainnet.hashio.io/api"],
    SupportedChainId.HEDERA_TESTNET: ["https://testnet.hashio.io/api"],
    SupportedChainId.POLYGON_ZKEVM: ["https://rpc.ankr.com/polygon_zkevm"],
    SupportedChainId.GANACHE: [GANACHE_URL],
    SupportedChainId.MANTLE_MAINNET: [
        "https://1rpc.io/mantle",
        "https://rpc.mantle.xyz",
        "https://mantle.drpc.org",
        "https://mantle-mainnet.public.blastapi.io",
        "https://mantle.publicnode.com",
        "https://rpc.ankr.com/mantle",
    ],
    SupportedChainId.EVMOS_MAINNET: [
        "https://evmos-evm.publicnode.com",
        "https://evmos.lava.build",
        "https://jsonrpc-evmos.mzonder.com",
        "https://json-rpc.evmos.tcnetwork.io",
        "https://rpc-evm.evmos.dragonstake.io",
        "https://evmos-jsonrpc.alkadeta.com",
        "https://evmos-jsonrpc.stake-town.com",
        "https://evm-rpc.evmos.silentvalidator.com",
        "https://evmos-mainnet.public.blastapi.io",
        "https://jsonrpc-evmos-ia.cosmosia.notional.ventures",
        "https://evmos-jsonrpc.theamsolutions.info",
        "https://alphab.ai/rpc/eth/evmos",
        "https://evmos-json-rpc.0base.dev",
        "https://json-rpc-evmos.mainnet.validatrium.club",
        "https://evmos-json-rpc.stakely.io",
        "https://json-rpc.evmos.blockhunters.org",
        "https://evmos-pokt.nodies.app",
        "https://evmosevm.rpc.stakin-nodes.com",
        "https://evmos-json.antrixy.org",
    ],
    # In-process network, Hardhat ignores the url
    SupportedChainId.HARDHAT: ["http://127.0.0.1:8545"],
    SupportedChainId.AVALANCHE_MAINNET: [
        "https://avalanche-mainnet-rpc.allthatnode.com",
        "https://rpc.ankr.com/avalanche",
        "https://1rpc.io/avax/c",
        "https://api.avax.network/ext/bc/C/rpc",
        "https://avalanche.public-rpc.com",
        "https://avalanche-c-chain.publicnode.com",
        "https://avalanche.blockpi.network/v1/rpc/public",
        "https://avalanche.drpc.org",
    ],
    SupportedChainId.SEPOLIA: ["https://1rpc.io/sepolia"],
    SupportedChainId.ARBITRUM_MAINNET: ["https://arbitrum.llamarpc.com"],
    SupportedChainId.POLYGON_MUMBAI: ["https://polygon-testnet.public.blastapi.io"],
    SupportedChainId.LINEA_MAINNET: ["https://linea.drpc.org"],
    SupportedChainId.HORIZEN_MAINNET: ["https://rpc.ankr.com/horizen_eon"],
    SupportedChainId.BASE_MAINNET: [
        "https://mainnet.base.org",
        "https://base.blockpi.network/v1/rpc/public",
        "https://1rpc.io/base",
        "https://base-pokt.nodies.app",
        "https://base.meowrpc.com",
        "https://base-mainnet.public.blastapi.io",
        "https://base.gateway.tenderly.co",
        "https://gateway.tenderly.co/public/base",
        "https://rpc.notadegen.com/base",
        "https://base.publicnode.com",
        "https://base.drpc.org",
        "https://endpoints.omniatech.io/v1/base/mainnet/public",
        "https://base.llamarpc.com",
    ],
    SupportedChainId.ZKSYNC_TESTNET: ["https://sepolia.era.zksync.dev"],
    SupportedChainId.ZKSYNC_MAINNET: ["https://mainnet.era.zksync.io"],
    SupportedChainId.INK_SEPOLIA: [
        "https://rpc-gel-sepolia.inkonchain.com",
        "https://rpc-qnd-sepolia.inkonchain.com",
        "https://rpc-ten-sepolia.inkonchain.com",
    ],
    SupportedChainId.INK_MAINNET: ["https://rpc-gel.inkonchain.com"],
    SupportedChainId.BERACHAIN_MAINNET: [
        "https://berachain.blockpi.network/v1/rpc/public",
        "https://berachain-rpc.publicnode.com",
        "https://rpc.berachain-apis.com",
        "https://rpc.berachain.com",
    ],
}

# Explorers hardhat-verify doesn't know about out of the box
# (see `npx hardhat verify --list-networks`).
# "{nodereal_api_key}" is filled in from the environment.
EXPLORER_CONFIG = {
    SupportedChainId.BASE_MAINNET: {
        "api_url": "https://api.basescan.org/api",
        "browser_url": "https://basescan.org/",
    },
    SupportedChainId.EVMOS_MAINNET: {
        "api_url": "https://escan.live/api",
        "browser_url": "https://escan.live",
    },
    SupportedChainId.INK_SEPOLIA: {
        "api_url": "https://api.routescan.io/v2/network/testnet/evm/763373/etherscan",
        "browser_url": "https://sepolia.inkonscan.xyz",
    },
    SupportedChainId.INK_MAINNET: {
        "api_url": "https://pqr0zfqez8pm54s.blockscout.com/api",
        "browser_url": "https://pqr0zfqez8pm54s.blockscout.com",
    },
    SupportedChainId.BERACHAIN_MAINNET: {
        "api_url": "https://api.routescan.io/v2/network/mainnet/evm/80094/etherscan",
        "browser_url": "https://beratrail.io",
    },
    SupportedChainId.MANTLE_MAINNET: {
        "api_url": "https://api.mantlescan.xyz/api",
        "browser_url": "https://mantlescan.xyz",
    },
    SupportedChainId.POLYGON_ZKEVM: {
        "api_url": "https://api-zkevm.polygonscan.com/api",
        "browser_url": "https://zkevm.polygonscan.com",
    },
    SupportedChainId.LINEA_MAINNET: {
        "api_url": "https://api.lineascan.build/api",
        "browser_url": "https://lineascan.build/",
    },
    SupportedChainId.OPBNB_MAINNET: {
        "api_url": "https://open-platform.nodereal.io/{nodereal_api_key}/op-bnb-mainnet/contract/",
        "browser_url": "https://opbnbscan.com/",
    },
    SupportedChainId.FANTOM_MAINNET: {
        "api_url": "https://api.ftmscan.com/api",
        "browser_url": "https://ftmscan.com",
    },
}

# Explorer API key environment variable per chain
EXPLORER_API_KEY_ENV = {
    SupportedChainId.BASE_MAINNET: "BASESCAN_API_KEY",
    SupportedChainId.EVMOS_MAINNET: "ESCAN_API_KEY",
    SupportedChainId.MANTLE_MAINNET: "MANTLESCAN_API_KEY",
    SupportedChainId.POLYGON_ZKEVM: "ZKEVMSCAN_API_KEY",
    SupportedChainId.LINEA_MAINNET: "LINEASCAN_API_KEY",
    SupportedChainId.OPBNB_MAINNET: "OPBNBSCAN_API_KEY",
    SupportedChainId.FANTOM_MAINNET: "FTMSCAN_API_KEY",
    SupportedChainId.ARBITRUM_MAINNET: "ARBISCAN_API_KEY",
    SupportedChainId.AVALANCHE_MAINNET: "SNOWTRACE_API_KEY",
    SupportedChainId.BSC_MAINNET: "BSCSCAN_API_KEY",
    SupportedChainId.ETHEREUM_MAINNET: "ETHERSCAN_API_KEY",
    SupportedChainId.OPTIMISM_MAINNET: "OPTIMISM_API_KEY",
    SupportedChainId.POLYGON_MAINNET: "POLYGONSCAN_API_KEY",
    SupportedChainId.POLYGON_MUMBAI: "POLYGONSCAN_API_KEY",
    SupportedChainId.SEPOLIA: "ETHERSCAN_API_KEY",
}

# Explorers that verify without an API key
KEYLESS_EXPLORERS = frozenset(
    {
        SupportedChainId.INK_SEPOLIA,
        SupportedChainId.INK_MAINNET,
        SupportedChainId.BERACHAIN_MAINNET,
    }
)

# Chains served by the aggregator; missing means False
AGGREGATOR_SUPPORTED = {
    SupportedChainId.ETHEREUM_MAINNET: True,
    SupportedChainId.BASE_MAINNET: False,
    SupportedChainId.POLYGON_MAINNET: True,
    SupportedChainId.OPTIMISM_MAINNET: True,
    SupportedChainId.ARBITRUM_MAINNET: True,
    SupportedChainId.AVALANCHE_MAINNET: True,
}

# Pinned fork heights; chains not listed fork from the latest block.
# Example pins:
#   SupportedChainId.BSC_MAINNET: 34_274_774,
#   SupportedChainId.BASE_MAINNET: 10_607_880,
FORK_BLOCK_NUMBERS: Dict[SupportedChainId, int] = {}
