"""Runtime settings read from the environment.

``RENDEZVOUS_KEY_HASHER`` selects the hasher used by :func:`hash_key` when no
hasher is passed explicitly. Every process that must agree on rankings has to
use the same value.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping

DEFAULT_KEY_HASHER = "murmur3"


@dataclass(frozen=True)
class Settings:
    key_hasher: str = DEFAULT_KEY_HASHER


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from ``env`` (defaults to ``os.environ``)."""
    env = os.environ if env is None else env
    name = env.get("RENDEZVOUS_KEY_HASHER", "").strip().lower()
    return Settings(key_hasher=name or DEFAULT_KEY_HASHER)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
