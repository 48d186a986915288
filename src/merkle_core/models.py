from __future__ import annotations
from typing import List
from pydantic import BaseModel, Field, field_validator
from pydantic import ConfigDict

from .hashing import DIGEST_SIZE


class ProofStep(BaseModel):
    """One sibling on the path from a leaf to the root.

    ``position`` is the sibling's index within its own level. For an odd trailing
    node it equals the node's own index, since that node is paired with itself.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    position: int = Field(ge=0)
    sibling: bytes

    @field_validator("sibling")
    @classmethod
    def _digest_sized(cls, v: bytes) -> bytes:
        if len(v) != DIGEST_SIZE:
            raise ValueError(f"sibling must be {DIGEST_SIZE} bytes")
        return v


class InclusionProof(BaseModel):
    """Leaf index plus the ordered sibling path, leaf level first."""

    model_config = ConfigDict(strict=True, frozen=True)

    index: int = Field(ge=0)
    steps: List[ProofStep] = Field(default_factory=list)

    @property
    def siblings(self) -> List[bytes]:
        return [s.sibling for s in self.steps]

    @property
    def positions(self) -> List[int]:
        return [s.position for s in self.steps]

    def __len__(self) -> int:
        return len(self.steps)
