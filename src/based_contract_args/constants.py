"""Configuration constants for based-contract-args library."""

# Deployed addresses referenced by constructor arguments (Fantom Opera)
ACROPOLIS_ADDR = "0x4D06f72DdbA5EDaA240e5cc657553e89c2De7944"
BASED_TOKEN_ADDR = "0x1252E3f03E0caa840cbb35442d817a1686A62586"
BSHARE_TOKEN_ADDR = "0x3e4bf688aD2F24AAE7EE99f019A95d2Ac77f3c28"
TREASURY_ADDR = "0xc4ec4d4A2CF16E9e4C473dAB6f12AD04D719098c"
DEV_FUND_ADDR = "0xf2D002BB00Ec16215902F3def7e9F20cE3C2332E"
PAIR_ADDR = "0x02135471B727c129A2EE8d7416732427849d6a69"
# Tax collector is the token contract itself
TAX_COLLECTOR_ADDR = "0x1252E3f03E0caa840cbb35442d817a1686A62586"
TAX_OFFICE_OPERATOR_ADDR = "0x5556B03e542EE4f515ba1A15d9640f0C97AdDe12"

POOL_START_TIME = 1643317911  # Unix timestamp
PERIOD = 0

# Network configuration for the verification tool
# hardhat_network is the name passed to `npx hardhat verify --network`
NETWORK_CONFIG = {
    "fantom": {
        "chain_id": 250,
        "chain_name": "Fantom Opera",
        "hardhat_network": "fantom",
        "block_explorer_url": "https://ftmscan.com",
    },
    "fantom-testnet": {
        "chain_id": 4002,
        "chain_name": "Fantom Testnet",
        "hardhat_network": "fantomTestnet",
        "block_explorer_url": "https://testnet.ftmscan.com",
    },
}

# Suffix of argument files written for the verification tool
ARGS_FILE_SUFFIX = ".args.js"
