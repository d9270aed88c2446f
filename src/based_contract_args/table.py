"""Read-only constructor argument table for based-contract-args library."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Tuple, Union

from .exceptions import (
    ArgumentsFileNotFoundError,
    ContractNotFoundError,
    DuplicateContractError,
    MalformedArgumentsError,
)
from .types import ArgumentList

logger = logging.getLogger(__name__)


class _JsonObject:
    """Key/value pairs of a JSON object, in file order."""

    def __init__(self, pairs: List[Tuple[str, Any]]):
        self.pairs = pairs

    def __repr__(self) -> str:
        return repr(dict(self.pairs))


def _freeze(name: str, value: Any) -> Any:
    """Convert an argument value to its immutable stored form."""
    if isinstance(value, _JsonObject):
        raise MalformedArgumentsError(
            f"Contract '{name}' has object argument {value!r}"
        )
    # bool is an int subclass but never a constructor argument literal here
    if isinstance(value, bool):
        raise MalformedArgumentsError(
            f"Contract '{name}' has boolean argument {value!r}"
        )
    if isinstance(value, (str, int)):
        return value
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(name, item) for item in value)
    raise MalformedArgumentsError(
        f"Contract '{name}' has argument of unsupported type "
        f"{type(value).__name__}: {value!r}"
    )


def _thaw(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


class ArgumentTable:
    """Immutable mapping from contract name to constructor arguments."""

    def __init__(self, entries: Iterable[Tuple[str, ArgumentList]]):
        """
        Build the table from literal (name, arguments) pairs.

        Args:
            entries: Pairs of contract name and constructor argument list

        Raises:
            DuplicateContractError: If a contract name appears twice
            MalformedArgumentsError: If an entry is not a pair, a name is not a
                non-empty string, or
                arguments are not a list of str, int or nested lists
        """
        table: Dict[str, Tuple[Any, ...]] = {}

        for entry in entries:
            if not isinstance(entry, (list, tuple)) or len(entry) != 2:
                raise MalformedArgumentsError(
                    f"Table entry must be a (name, arguments) pair, got {entry!r}"
                )
            name, arguments = entry
            if not isinstance(name, str) or not name:
                raise MalformedArgumentsError(
                    f"Contract name must be a non-empty string, got {name!r}"
                )
            if name in table:
                raise DuplicateContractError(f"Contract '{name}' defined twice")
            if not isinstance(arguments, (list, tuple)):
                raise MalformedArgumentsError(
                    f"Arguments for contract '{name}' must be a list, "
                    f"got {type(arguments).__name__}"
                )
            table[name] = _freeze(name, arguments)

        self._table = table
        logger.debug("Built argument table with %d contracts", len(table))

    @classmethod
    def from_dict(cls, data: Dict[str, ArgumentList]) -> "ArgumentTable":
        """Build a table from a name -> arguments dictionary."""
        return cls(data.items())

    @classmethod
    def from_json(cls, file_path: Union[Path, str]) -> "ArgumentTable":
        """
        Load a table from a JSON object file.

        Args:
            file_path: Path to JSON file of the form {"Name": [args...]}

        Returns:
            ArgumentTable with the file's entries, in file order

        Raises:
            ArgumentsFileNotFoundError: If file does not exist
            MalformedArgumentsError: If top-level value is not an object,
                or an entry is malformed
            DuplicateContractError: If a contract name is repeated in the file
        """
        path = Path(file_path)
        if not path.exists():
            raise ArgumentsFileNotFoundError(f"Argument file not found at {path}")

        logger.debug("Loading argument table from %s", path)
        # Objects stay as pairs so repeated contract names reach the duplicate check
        with open(path) as f:
            data = json.load(f, object_pairs_hook=_JsonObject)

        if not isinstance(data, _JsonObject):
            raise MalformedArgumentsError(
                f"Argument file {path} must contain a JSON object"
            )

        return cls(data.pairs)

    def lookup(self, name: str) -> ArgumentList:
        """
        Get constructor arguments for a contract.

        Args:
            name: Contract name, e.g. "Oracle"

        Returns:
            New list of constructor arguments, in constructor order

        Raises:
            ContractNotFoundError: If contract is not in the table
        """
        if name not in self._table:
            raise ContractNotFoundError(f"Contract '{name}' not found in argument table")
        return _thaw(self._table[name])

    def has_contract(self, name: str) -> bool:
        return name in self._table

    def contract_names(self) -> List[str]:
        """Get contract names in definition order."""
        return list(self._table)

    def to_dict(self) -> Dict[str, ArgumentList]:
        """Get a plain dictionary copy of the table."""
        return {name: _thaw(arguments) for name, arguments in self._table.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._table))

    def __repr__(self) -> str:
        return f"ArgumentTable({self.contract_names()!r})"
