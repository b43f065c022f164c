"""Key hashing and per-element hash extraction.

A key hasher turns an arbitrary byte key into the 64-bit seed every ranking
call is driven by. Hashers are looked up by name so that all the processes
sharing a deployment can be pinned to the same function.
"""

import hashlib
import logging
from functools import singledispatch
from typing import Callable, Protocol, runtime_checkable

import mmh3

from .config import get_settings
from .exceptions import InvalidArgumentError, UnsupportedTypeError
from .validation import MASK64, check_sequence, check_uint64
from .weight import weight

logger = logging.getLogger(__name__)

KeyHasher = Callable[[bytes], int]


@runtime_checkable
class Hasher(Protocol):
    """Capability for element types that can hash themselves."""

    def hash64(self) -> int:
        ...


def murmur3_hash(data: bytes) -> int:
    """MurmurHash3 x64 128-bit digest folded to 64 bits with :func:`weight`."""
    h1, h2 = mmh3.hash64(data, signed=False)
    return weight(h1, h2)


def murmur3_be_hash(data: bytes) -> int:
    """Digest halves read big-endian, as deployments of the Go client seed keys."""
    digest = mmh3.hash_bytes(data)
    return weight(int.from_bytes(digest[:8], "big"), int.from_bytes(digest[8:], "big"))


def murmur3_fold_hash(data: bytes) -> int:
    # older deployments folded the 16 digest bytes with overlapping shifts
    digest = mmh3.hash_bytes(data)
    length = len(digest)
    result = 0
    for i, byte in enumerate(digest):
        result += byte << (length - i)
    return result & MASK64


def sha1_hash(data: bytes) -> int:
    return int.from_bytes(hashlib.sha1(data).digest()[:8], "big")


_HASHERS: dict[str, KeyHasher] = {
    "murmur3": murmur3_hash,
    "murmur3-be": murmur3_be_hash,
    "murmur3-fold": murmur3_fold_hash,
    "sha1": sha1_hash,
}


def register_hasher(name: str, func: KeyHasher) -> None:
    """Make ``func`` selectable as a key hasher under ``name``."""
    if not callable(func):
        raise InvalidArgumentError(f"hasher {name!r} is not callable")
    _HASHERS[name.strip().lower()] = func
    logger.debug("Registered key hasher %s", name)


def get_hasher(name: str | KeyHasher | None = None) -> KeyHasher:
    """Resolve ``name`` to a hasher; ``None`` means the configured default."""
    if callable(name):
        return name
    if name is None:
        name = get_settings().key_hasher
    if not isinstance(name, str):
        raise InvalidArgumentError(f"hasher must be a name or callable, got {type(name).__name__}")
    try:
        return _HASHERS[name.strip().lower()]
    except KeyError:
        raise InvalidArgumentError(
            f"unknown key hasher {name!r}, expected one of {sorted(_HASHERS)}"
        ) from None


def hash_key(key: bytes | str, hasher: str | KeyHasher | None = None) -> int:
    """Return the 64-bit seed for ``key``. Text keys are UTF-8 encoded."""
    if isinstance(key, str):
        key = key.encode("utf-8")
    elif isinstance(key, (bytearray, memoryview)):
        key = bytes(key)
    elif not isinstance(key, bytes):
        raise InvalidArgumentError(f"key must be bytes or str, got {type(key).__name__}")
    return check_uint64(get_hasher(hasher)(key), "key hash")


@singledispatch
def element_hash(value, hasher: KeyHasher | None = None) -> int:
    """Return the 64-bit hash of a single element."""
    if isinstance(value, Hasher) and callable(value.hash64):
        result = value.hash64()
        if isinstance(result, bool) or not isinstance(result, int):
            raise UnsupportedTypeError(
                f"{type(value).__name__}.hash64() returned {type(result).__name__}, expected int"
            )
        return result & MASK64
    raise UnsupportedTypeError(
        f"cannot hash element of type {type(value).__name__}; implement hash64()"
    )


@element_hash.register
def _(value: bool, hasher: KeyHasher | None = None) -> int:
    raise UnsupportedTypeError("cannot hash element of type bool")


@element_hash.register
def _(value: int, hasher: KeyHasher | None = None) -> int:
    return hash_key(str(value).encode("ascii"), hasher)


@element_hash.register
def _(value: str, hasher: KeyHasher | None = None) -> int:
    return hash_key(value.encode("utf-8"), hasher)


def element_rules(values, key_seed: int, hasher: str | KeyHasher | None = None) -> list[int]:
    """Weigh every element of ``values`` against ``key_seed``.

    All elements are hashed before the result is returned, so an
    :class:`UnsupportedTypeError` leaves nothing half done.
    """
    check_sequence(values)
    check_uint64(key_seed, "key_seed")
    if not values:
        return []
    func = get_hasher(hasher)
    return [weight(key_seed, element_hash(value, func)) for value in values]
