import logging
from collections.abc import MutableSequence, Sequence

from .exceptions import InvalidArgumentError
from .hashing import KeyHasher, element_rules
from .permutation import Convention, apply_permutation, swapper
from .ranking import sort_by_weight
from .validation import check_uint64

logger = logging.getLogger(__name__)


def rank_nodes_by_weight(identifiers: Sequence[int], key_seed: int) -> list[int]:
    """Rank opaque 64-bit node identifiers for ``key_seed``.

    Returns indices into ``identifiers``, first choice first.
    """
    return sort_by_weight(identifiers, key_seed)


def _check_mutable(seq) -> None:
    if not isinstance(seq, MutableSequence):
        raise InvalidArgumentError(
            f"sequence must be a mutable sequence, got {type(seq).__name__}"
        )


def reorder_by_positional_rank(seq: MutableSequence, key_seed: int) -> None:
    """Reorder ``seq`` in place by the rank of its positions.

    The resulting order only depends on ``len(seq)`` and ``key_seed``, never
    on the values held.
    """
    _check_mutable(seq)
    check_uint64(key_seed, "key_seed")
    length = len(seq)
    rule = sort_by_weight(range(length), key_seed)
    apply_permutation(swapper(seq), length, rule, Convention.DIRECT)
    logger.debug("Reordered %d elements by position for seed %d", length, key_seed)


def rank_by_value(
    values: Sequence, key_seed: int, hasher: str | KeyHasher | None = None
) -> list[int]:
    """Rank the elements of ``values`` without touching them."""
    rules = element_rules(values, key_seed, hasher)
    return sort_by_weight(rules, key_seed)


def reorder_by_value(
    seq: MutableSequence, key_seed: int, hasher: str | KeyHasher | None = None
) -> None:
    """Reorder ``seq`` in place so the most preferred element comes first.

    Elements must be ints, strs or implement :class:`~rendezvous.hashing.Hasher`.
    Every element is hashed before the first swap, so on error ``seq`` is
    left as it was.
    """
    _check_mutable(seq)
    rule = rank_by_value(seq, key_seed, hasher)
    apply_permutation(swapper(seq), len(rule), rule, Convention.DIRECT)
    logger.debug("Reordered %d elements by value for seed %d", len(rule), key_seed)
