from __future__ import annotations
import hashlib
from abc import ABC, abstractmethod
from functools import partial
from typing import Callable, Dict, Iterable, Optional, Union

from .errors import UnsupportedHashError

DIGEST_SIZE = 32


class HashFunction(ABC):
    """A 256-bit digest with an ordered multi-input combinator.

    Trees and verifiers only ever call :meth:`digest` and :meth:`combine`, so any
    collision-resistant hash producing 32 bytes can back them.
    """

    name: str = "abstract"
    digest_size: int = DIGEST_SIZE

    @abstractmethod
    def new(self):
        """Return a fresh hashlib-style object (``update``/``digest``)."""

    def combine(self, parts: Iterable[bytes]) -> bytes:
        """Hash the in-order concatenation of ``parts`` with one hash instance."""
        h = self.new()
        for part in parts:
            h.update(part)
        return h.digest()

    def digest(self, data: bytes) -> bytes:
        return self.combine((data,))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class HashlibHash(HashFunction):
    def __init__(self, name: str, factory: Callable[[], "hashlib._Hash"]):
        size = factory().digest_size
        if size != DIGEST_SIZE:
            raise UnsupportedHashError(
                f"{name}: digest size {size} != {DIGEST_SIZE}"
            )
        self.name = name
        self._factory = factory

    def new(self):
        return self._factory()


_REGISTRY: Dict[str, HashFunction] = {}


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "_")


def register_hash(name: str, factory: Callable[[], "hashlib._Hash"]) -> HashFunction:
    """Register a hashlib-compatible constructor under ``name``."""
    key = _normalize(name)
    hasher = HashlibHash(key, factory)
    _REGISTRY[key] = hasher
    return hasher


def available_hashes() -> list:
    return sorted(_REGISTRY)


def get_hasher(name: Optional[str] = None) -> HashFunction:
    """Look up a registered hash; ``None`` means the configured default."""
    if name is None:
        from .settings import settings

        name = settings.hash_algorithm
    try:
        return _REGISTRY[_normalize(name)]
    except KeyError:
        raise UnsupportedHashError(f"unsupported hash algorithm: {name}") from None


register_hash("sha3_256", hashlib.sha3_256)
register_hash("sha256", hashlib.sha256)
register_hash("blake2b_256", partial(hashlib.blake2b, digest_size=DIGEST_SIZE))
register_hash("blake2s", hashlib.blake2s)


def digest_hex(d: bytes, short: bool = False) -> str:
    """Hex-encode a digest; ``short`` keeps only the first 12 characters."""
    h = bytes(d).hex()
    return h[:12] if short else h


def parse_digest(value: Union[bytes, bytearray, str]) -> bytes:
    """Accept 32 raw bytes or 64 hex characters, with strict validation."""
    if isinstance(value, str):
        try:
            raw = bytes.fromhex(value.strip())
        except ValueError as e:
            raise ValueError("invalid hex digest") from e
    elif isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
    else:
        raise ValueError(f"unsupported digest type: {type(value).__name__}")
    if len(raw) != DIGEST_SIZE:
        raise ValueError(f"digest must be {DIGEST_SIZE} bytes, got {len(raw)}")
    return raw
