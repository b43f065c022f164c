from collections.abc import Sequence

from .validation import check_sequence, check_uint64
from .weight import weight


def sort_by_weight(identifiers: Sequence[int], key_seed: int) -> list[int]:
    """Return the indices of ``identifiers`` from most to least preferred.

    Index ``i`` is weighted with ``weight(identifiers[i], key_seed)``; the
    smallest weight comes first and equal weights keep index order.
    """
    check_sequence(identifiers, "identifiers")
    check_uint64(key_seed, "key_seed")
    weights = [
        weight(check_uint64(node, "identifier"), key_seed) for node in identifiers
    ]
    return sorted(range(len(weights)), key=lambda i: (weights[i], i))
