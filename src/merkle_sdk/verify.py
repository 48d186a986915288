from typing import Optional, Union
from merkle_core.hashing import get_hasher, parse_digest
from merkle_core.merkle import verify_inclusion
from merkle_core.models import InclusionProof


def verify_proof(
    proof: InclusionProof,
    block: Union[bytes, str],
    root: Union[bytes, str],
    algorithm: Optional[str] = None,
) -> bool:
    """Return True if ``proof`` places ``block`` under the published ``root``.

    ``root`` may be 32 raw bytes or a 64-char hex string. No tree instance is
    needed; a malformed root or unknown algorithm yields False rather than raising.
    """
    try:
        trusted = parse_digest(root)
        hasher = get_hasher(algorithm)
    except ValueError:  # includes UnsupportedHashError
        return False
    return verify_inclusion(proof.siblings, block, proof.index, trusted, hasher)
