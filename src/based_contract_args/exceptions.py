"""Custom exception classes for based-contract-args library."""


class ArgumentsError(Exception):
    """Base exception for constructor-argument errors."""

    pass


class ContractNotFoundError(ArgumentsError, LookupError):
    """Raised when requested contract is not in the argument table."""

    pass


class DuplicateContractError(ArgumentsError, ValueError):
    """Raised when a contract name appears twice while building a table."""

    pass


class MalformedArgumentsError(ArgumentsError, TypeError):
    """Raised when a table entry is not a list of str, int or nested lists."""

    pass


class NetworkNotFoundError(ArgumentsError, ValueError):
    """Raised when requested network is not configured."""

    pass


class ArgumentsFileNotFoundError(ArgumentsError, FileNotFoundError):
    """Raised when an argument table JSON file is not found."""

    pass


class InvalidContractNameError(ArgumentsError, ValueError):
    """Raised when a contract name cannot be used as an argument file name."""

    pass
