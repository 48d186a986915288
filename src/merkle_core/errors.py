from __future__ import annotations


class MerkleError(Exception):
    """Base class for every error raised by merkle_core."""


class EmptyInputError(MerkleError, ValueError):
    """Tree construction was attempted with zero blocks."""


class NotFoundError(MerkleError, LookupError):
    """No leaf digest matches the requested block."""


class UnsupportedHashError(MerkleError, ValueError):
    """Unknown hash algorithm, or one whose digest is not 32 bytes."""
