"""Rendezvous (highest random weight) hashing."""

from .exceptions import InvalidArgumentError, RendezvousError, UnsupportedTypeError
from .hashing import Hasher, element_hash, element_rules, get_hasher, hash_key, register_hasher
from .permutation import Convention, apply_permutation, invert_permutation, swapper
from .ranking import sort_by_weight
from .selector import RendezvousSelector
from .sorting import (
    rank_by_value,
    rank_nodes_by_weight,
    reorder_by_positional_rank,
    reorder_by_value,
)
from .weight import weight
