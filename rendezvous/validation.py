from collections.abc import Sequence

from .exceptions import InvalidArgumentError

MASK64 = (1 << 64) - 1


def check_uint64(value, name: str = "value") -> int:
    """Return ``value`` if it is an int in ``[0, 2**64)``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > MASK64:
        raise InvalidArgumentError(f"{name} must fit in 64 unsigned bits: {value}")
    return value


def check_sequence(values, name: str = "values") -> None:
    if not isinstance(values, Sequence) or isinstance(values, (str, bytes, bytearray)):
        raise InvalidArgumentError(f"{name} must be a sequence, got {type(values).__name__}")
