"""Path management utilities for based-contract-args library."""

from pathlib import Path
from typing import Optional, Union

from .constants import ARGS_FILE_SUFFIX
from .exceptions import InvalidContractNameError


def get_default_args_dir() -> Path:
    """
    Get default output directory for argument files.

    Returns:
        Path to ./.contract-args
    """
    return Path.cwd() / ".contract-args"


def get_args_path(
    contract_name: str, output_dir: Optional[Union[Path, str]] = None
) -> Path:
    """
    Get argument file path for a contract.

    Args:
        contract_name: Name of contract, e.g. "Oracle"
        output_dir: Custom output directory (defaults to ./.contract-args)

    Returns:
        Absolute path to {output_dir}/{contract_name}.args.js

    Raises:
        InvalidContractNameError: If the name contains a path separator
    """
    if "/" in contract_name or "\\" in contract_name:
        raise InvalidContractNameError(
            f"Contract name '{contract_name}' is not a valid file name"
        )

    if output_dir is None:
        output_dir = get_default_args_dir()
    else:
        output_dir = Path(output_dir).absolute()

    return output_dir / f"{contract_name}{ARGS_FILE_SUFFIX}"
