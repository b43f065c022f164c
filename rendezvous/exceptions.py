class RendezvousError(Exception):
    """Base class for errors raised by the ranking operations."""


class InvalidArgumentError(RendezvousError, TypeError):
    """A sequence, seed or identifier argument has the wrong shape."""


class UnsupportedTypeError(RendezvousError, TypeError):
    """An element has no built-in encoding and does not implement ``Hasher``."""
