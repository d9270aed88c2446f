"""Type aliases for based-contract-args library."""

from typing import List, Union

# A single constructor argument: string, integer, or nested argument list
ArgumentValue = Union[str, int, List["ArgumentValue"]]

# Ordered constructor arguments, matched positionally to the constructor
ArgumentList = List[ArgumentValue]
