"""Constructor arguments of the deployed contracts.

Used when verifying the deployments on the block explorer, e.g.::

    npx hardhat verify --constructor-args .contract-args/Oracle.args.js \
        0x9b19319E9bcFf85D106956096286A554a3C43350 --network fantom
"""

from .constants import (
    BASED_TOKEN_ADDR,
    DEV_FUND_ADDR,
    PAIR_ADDR,
    PERIOD,
    POOL_START_TIME,
    TAX_COLLECTOR_ADDR,
    TAX_OFFICE_OPERATOR_ADDR,
    TREASURY_ADDR,
)
from .table import ArgumentTable

CONTRACT_ARGS = ArgumentTable(
    [
        ("Acropolis", []),
        ("BasedToken", [0, TAX_COLLECTOR_ADDR]),
        ("Bshare", [POOL_START_TIME, TREASURY_ADDR, DEV_FUND_ADDR]),
        ("FtmLpRewardPool", [BASED_TOKEN_ADDR, POOL_START_TIME]),
        ("FtmLpBshareRewardPool", [BASED_TOKEN_ADDR]),
        ("FTMRewardPool", [BASED_TOKEN_ADDR, POOL_START_TIME]),
        ("Greeter", ["Hello!"]),
        ("GenesisRewardPool", [BASED_TOKEN_ADDR, POOL_START_TIME]),
        ("Oracle", [PAIR_ADDR, PERIOD, POOL_START_TIME]),
        ("BasedRewardPool", [BASED_TOKEN_ADDR, POOL_START_TIME]),
        ("Zap", [BASED_TOKEN_ADDR]),
        ("TaxOffice", [TAX_OFFICE_OPERATOR_ADDR]),
    ]
)
