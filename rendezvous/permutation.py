"""Apply a permutation in place through a swap callback.

Two readings of ``rule`` are supported and must be chosen explicitly:

* ``Convention.DIRECT``: ``rule[i]`` is the index whose value ends up at
  position ``i``, i.e. ``new[i] = old[rule[i]]``.
* ``Convention.INVERSE``: ``rule[i]`` is the position the value currently at
  ``i`` moves to, i.e. ``new[rule[i]] = old[i]``.

Both walk the disjoint cycles of ``rule`` and perform at most ``length - 1``
swaps, whatever the container is.
"""

from collections.abc import MutableSequence, Sequence
from enum import Enum, auto
from typing import Callable

Swapper = Callable[[int, int], None]


class Convention(Enum):
    DIRECT = auto()
    INVERSE = auto()


def swapper(seq: MutableSequence) -> Swapper:
    """Return a callback swapping two positions of ``seq``."""

    def swap(i: int, j: int) -> None:
        seq[i], seq[j] = seq[j], seq[i]

    return swap


def is_permutation(rule: Sequence[int], length: int) -> bool:
    if len(rule) != length:
        return False
    seen = [False] * length
    for j in rule:
        if not 0 <= j < length or seen[j]:
            return False
        seen[j] = True
    return True


def invert_permutation(rule: Sequence[int]) -> list[int]:
    """Convert a rule between the direct and inverse conventions."""
    inverse = [0] * len(rule)
    for i, j in enumerate(rule):
        inverse[j] = i
    return inverse


def apply_permutation(
    swap: Swapper,
    length: int,
    rule: Sequence[int],
    convention: Convention = Convention.DIRECT,
) -> None:
    """Reorder ``length`` elements reachable through ``swap`` following ``rule``."""
    if length < 2:
        return
    assert is_permutation(rule, length), "rule is not a permutation of range(length)"

    done = [False] * length
    if convention is Convention.DIRECT:
        for i in range(length):
            if done[i]:
                continue
            done[i] = True
            j, k = i, rule[i]
            # slot j takes the value from k, the displaced value travels on
            while k != i:
                swap(j, k)
                done[k] = True
                j, k = k, rule[k]
    elif convention is Convention.INVERSE:
        for i in range(length):
            if done[i]:
                continue
            done[i] = True
            j = rule[i]
            # the value parked at i is sent to its destination j
            while j != i:
                swap(i, j)
                done[j] = True
                j = rule[j]
    else:
        raise ValueError(f"unknown convention {convention!r}")
