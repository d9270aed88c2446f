"""Argument file export for the hardhat verification tool."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .constants import NETWORK_CONFIG
from .contracts import CONTRACT_ARGS
from .exceptions import ContractNotFoundError, NetworkNotFoundError
from .paths import get_args_path
from .table import ArgumentTable
from .types import ArgumentList

logger = logging.getLogger(__name__)

# Largest integer a JavaScript number holds exactly (Number.MAX_SAFE_INTEGER)
MAX_SAFE_INTEGER = 2**53 - 1


def _network_config(network: str) -> Dict[str, Any]:
    if network not in NETWORK_CONFIG:
        raise NetworkNotFoundError(
            f"Network '{network}' not configured "
            f"(known: {', '.join(sorted(NETWORK_CONFIG))})"
        )
    return NETWORK_CONFIG[network]


def _js_safe(value: Any) -> Any:
    """Replace integers JavaScript cannot represent with decimal strings."""
    if isinstance(value, (list, tuple)):
        return [_js_safe(item) for item in value]
    if isinstance(value, int) and abs(value) > MAX_SAFE_INTEGER:
        return str(value)
    return value


def render_arguments_module(arguments: ArgumentList) -> str:
    """
    Render constructor arguments as a CommonJS module.

    `hardhat verify --constructor-args` requires a module whose export is the
    argument array. Integers beyond Number.MAX_SAFE_INTEGER are written as
    decimal strings, which ethers accepts for uint/int parameters.

    Args:
        arguments: Constructor arguments, in constructor order

    Returns:
        Module source text, e.g. 'module.exports = ["Hello!"];\\n'
    """
    return f"module.exports = {json.dumps(_js_safe(arguments), indent=2)};\n"


def write_arguments_file(
    contract_name: str,
    output_dir: Optional[Union[Path, str]] = None,
    table: ArgumentTable = CONTRACT_ARGS,
) -> Path:
    """
    Write a contract's constructor arguments to a verification argument file.

    Args:
        contract_name: Name of contract, e.g. "Oracle"
        output_dir: Where to write the file (defaults to ./.contract-args)
        table: Argument table to read from

    Returns:
        Path of the written file

    Raises:
        ContractNotFoundError: If contract is not in the table
    """
    arguments = table.lookup(contract_name)
    args_path = get_args_path(contract_name, output_dir)

    args_path.parent.mkdir(parents=True, exist_ok=True)
    with open(args_path, "w") as f:
        f.write(render_arguments_module(arguments))

    logger.debug("Wrote %d arguments for %s to %s", len(arguments), contract_name, args_path)
    return args_path


def verify_command(
    contract_name: str,
    address: str,
    network: str = "fantom",
    args_path: Optional[Union[Path, str]] = None,
    table: ArgumentTable = CONTRACT_ARGS,
) -> List[str]:
    """
    Build the hardhat verify command line for a deployed contract.

    Args:
        contract_name: Name of contract, e.g. "Oracle"
        address: Deployed contract address, passed through unchecked
        network: Network name (key of NETWORK_CONFIG)
        args_path: Argument file (defaults to ./.contract-args/{name}.args.js)
        table: Argument table the contract must be defined in

    Returns:
        Command as an argument vector

    Raises:
        NetworkNotFoundError: If network is not configured
        ContractNotFoundError: If contract is not in the table
    """
    network_config = _network_config(network)
    if not table.has_contract(contract_name):
        raise ContractNotFoundError(
            f"Contract '{contract_name}' not found in argument table"
        )

    if args_path is None:
        args_path = get_args_path(contract_name)

    return [
        "npx",
        "hardhat",
        "verify",
        "--constructor-args",
        str(args_path),
        address,
        "--network",
        network_config["hardhat_network"],
    ]


def explorer_url(address: str, network: str = "fantom") -> str:
    """
    Get block explorer page URL for an address.

    Raises:
        NetworkNotFoundError: If network is not configured
    """
    network_config = _network_config(network)
    return f"{network_config['block_explorer_url']}/address/{address}"
