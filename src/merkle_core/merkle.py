from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from .errors import EmptyInputError, NotFoundError
from .hashing import HashFunction, digest_hex, get_hasher
from .models import InclusionProof, ProofStep
from .settings import settings

logger = logging.getLogger(__name__)

Block = Union[bytes, bytearray, memoryview, str]


def _as_bytes(block: Block) -> bytes:
    if isinstance(block, str):
        return block.encode("utf-8")
    if isinstance(block, (bytes, bytearray, memoryview)):
        return bytes(block)
    raise TypeError(f"block must be bytes-like or str, not {type(block).__name__}")


def build_levels(leaves: Sequence[bytes], hasher: HashFunction) -> List[List[bytes]]:
    """Reduce leaf digests level by level until a single root remains.

    A level of length 1 is already the root, so the loop condition is checked
    before any pairing happens.
    """
    if not leaves:
        raise EmptyInputError("no leaves")
    lvl = [bytes(leaf) for leaf in leaves]
    for i, leaf in enumerate(lvl):
        if len(leaf) != hasher.digest_size:
            raise ValueError(
                f"leaf {i} is {len(leaf)} bytes, expected {hasher.digest_size}"
            )
    levels = [lvl]
    while len(lvl) > 1:
        nxt = []
        for i in range(0, len(lvl), 2):
            a = lvl[i]
            b = lvl[i + 1] if i + 1 < len(lvl) else lvl[i]  # self-pair if odd
            nxt.append(hasher.combine((a, b)))
        levels.append(nxt)
        lvl = nxt
    return levels


@dataclass
class MerkleTree:
    levels: List[List[bytes]]  # level 0 = leaves
    hasher: HashFunction = field(default_factory=get_hasher, repr=False)

    @classmethod
    def from_leaves(
        cls, leaves: Sequence[bytes], hasher: Optional[HashFunction] = None
    ) -> "MerkleTree":
        hasher = hasher or get_hasher()
        levels = build_levels(leaves, hasher)
        logger.debug(
            "built tree leaves=%d levels=%d root=%s",
            len(levels[0]),
            len(levels),
            digest_hex(levels[-1][0]),
        )
        return cls(levels, hasher)

    @classmethod
    def from_blocks(
        cls, blocks: Sequence[Block], hasher: Optional[HashFunction] = None
    ) -> "MerkleTree":
        hasher = hasher or get_hasher()
        leaves = [hasher.digest(_as_bytes(b)) for b in blocks]
        if not leaves:
            raise EmptyInputError("cannot build a tree from zero blocks")
        return cls.from_leaves(leaves, hasher)

    @property
    def leaves(self) -> List[bytes]:
        return self.levels[0]

    @property
    def root(self) -> bytes:
        return self.levels[-1][0]

    @property
    def depth(self) -> int:
        return len(self.levels)

    def __len__(self) -> int:
        return len(self.levels[0])

    def __contains__(self, block: Block) -> bool:
        return self.hasher.digest(_as_bytes(block)) in self.levels[0]

    def index_of(self, block: Block) -> int:
        """Level-0 index of the first leaf matching ``block``'s digest."""
        leaf = self.hasher.digest(_as_bytes(block))
        try:
            return self.levels[0].index(leaf)
        except ValueError:
            logger.debug("no leaf matches digest %s", digest_hex(leaf))
            raise NotFoundError(f"block not in tree (leaf {digest_hex(leaf)})") from None

    def proof_for_index(self, index: int) -> InclusionProof:
        """Sibling path for the leaf at ``index``, leaf level first, root excluded."""
        if not 0 <= index < len(self.levels[0]):
            raise IndexError(f"leaf index {index} out of range")
        steps = []
        idx = index
        for level in self.levels[:-1]:
            if idx % 2 == 1:
                pos = idx - 1
            elif idx + 1 < len(level):
                pos = idx + 1
            else:
                pos = idx  # odd trailing node is its own sibling
            steps.append(ProofStep(position=pos, sibling=level[pos]))
            idx //= 2
        return InclusionProof(index=index, steps=steps)

    def inclusion_proof(self, block: Block) -> InclusionProof:
        return self.proof_for_index(self.index_of(block))

    def verify(
        self, proof: Union[InclusionProof, Sequence[bytes]], block: Block
    ) -> bool:
        """Check ``proof`` for ``block`` against this tree's current root.

        A bare sibling list carries no index, so it is looked up in level 0;
        an absent block simply fails verification.
        """
        if isinstance(proof, InclusionProof):
            index, siblings = proof.index, proof.siblings
        else:
            try:
                index = self.index_of(block)
            except NotFoundError:
                return False
            siblings = list(proof)
        return verify_inclusion(siblings, block, index, self.root, self.hasher)

    def add_element(self, block: Block) -> None:
        """Append ``block`` as the rightmost leaf and rebuild every level."""
        leaves = self.levels[0] + [self.hasher.digest(_as_bytes(block))]
        self.levels = build_levels(leaves, self.hasher)
        logger.debug(
            "appended leaf index=%d root=%s", len(leaves) - 1, digest_hex(self.root)
        )


def verify_inclusion(
    proof: Sequence[bytes],
    block: Block,
    index: int,
    root: bytes,
    hasher: Optional[HashFunction] = None,
) -> bool:
    """Fold ``proof`` over ``block``'s leaf digest and compare with ``root``.

    Needs nothing from a tree besides the published root. A mismatch, a negative
    index, an index too wide for the proof or an over-long proof returns False;
    it is never an error.
    """
    # the fold only reads the low len(proof) bits, so higher bits must be zero
    if index < 0 or index >> len(proof) or len(proof) > settings.max_proof_depth:
        return False
    hasher = hasher or get_hasher()
    h = hasher.digest(_as_bytes(block))
    idx = index
    for sibling in proof:
        if idx % 2 == 1:
            h = hasher.combine((sibling, h))
        else:
            h = hasher.combine((h, sibling))
        idx //= 2
    return h == root


def build(blocks: Sequence[Block], hasher: Optional[HashFunction] = None) -> MerkleTree:
    return MerkleTree.from_blocks(blocks, hasher)


def root(tree: MerkleTree) -> bytes:
    return tree.root


def generate_proof(tree: MerkleTree, block: Block) -> Tuple[int, List[bytes]]:
    proof = tree.inclusion_proof(block)
    return proof.index, proof.siblings


def verify(
    proof: Sequence[bytes],
    block: Block,
    index: int,
    root: bytes,
    hasher: Optional[HashFunction] = None,
) -> bool:
    return verify_inclusion(proof, block, index, root, hasher)


def append(tree: MerkleTree, block: Block) -> None:
    tree.add_element(block)
