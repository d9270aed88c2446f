"""
based-contract-args: constructor arguments for verifying deployed contracts
"""

from importlib.metadata import PackageNotFoundError, version

from .contracts import CONTRACT_ARGS
from .exceptions import (
    ArgumentsError,
    ArgumentsFileNotFoundError,
    ContractNotFoundError,
    DuplicateContractError,
    InvalidContractNameError,
    MalformedArgumentsError,
    NetworkNotFoundError,
)
from .export import explorer_url, render_arguments_module, verify_command, write_arguments_file
from .table import ArgumentTable

try:
    __version__ = version("based-contract-args")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "CONTRACT_ARGS",
    "ArgumentTable",
    "render_arguments_module",
    "write_arguments_file",
    "verify_command",
    "explorer_url",
    "ArgumentsError",
    "ContractNotFoundError",
    "DuplicateContractError",
    "InvalidContractNameError",
    "MalformedArgumentsError",
    "NetworkNotFoundError",
    "ArgumentsFileNotFoundError",
]
