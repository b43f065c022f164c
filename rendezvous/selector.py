import logging
from collections.abc import Iterable

from .exceptions import InvalidArgumentError
from .hashing import KeyHasher, get_hasher, hash_key
from .ranking import sort_by_weight

logger = logging.getLogger(__name__)


class RendezvousSelector:
    """Pick owners for keys among a fixed snapshot of nodes.

    Node names are hashed once into 64-bit identifiers. The snapshot never
    changes; :meth:`with_node` and :meth:`without` build new selectors so a
    membership change can be compared against the current placement.
    """

    def __init__(self, nodes: Iterable[str], *, hasher: str | KeyHasher | None = None) -> None:
        names = tuple(nodes)
        if len(set(names)) != len(names):
            raise InvalidArgumentError("node names must be unique")
        self._hasher = get_hasher(hasher)
        self._nodes = names
        self._ids = [hash_key(name, self._hasher) for name in names]
        logger.debug("RendezvousSelector created with %d nodes", len(names))

    @property
    def nodes(self) -> tuple[str, ...]:
        return self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def preference_list(self, key: bytes | str, n: int | None = None) -> list[str]:
        """Return nodes responsible for ``key``, most preferred first."""
        if not self._nodes or (n is not None and n <= 0):
            return []
        order = sort_by_weight(self._ids, hash_key(key, self._hasher))
        if n is not None:
            order = order[:n]
        return [self._nodes[i] for i in order]

    def owner(self, key: bytes | str) -> str | None:
        ranked = self.preference_list(key, 1)
        return ranked[0] if ranked else None

    def with_node(self, node: str) -> "RendezvousSelector":
        if node in self._nodes:
            return self
        return RendezvousSelector(self._nodes + (node,), hasher=self._hasher)

    def without(self, node: str) -> "RendezvousSelector":
        if node not in self._nodes:
            return self
        return RendezvousSelector(
            [name for name in self._nodes if name != node], hasher=self._hasher
        )
