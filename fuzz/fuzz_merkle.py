"""Fuzz harness for Merkle tree construction & inclusion proof verification."""
from __future__ import annotations
import atheris
import sys

with atheris.instrument_imports():
    from merkle_core.errors import EmptyInputError
    from merkle_core.merkle import build, generate_proof, verify


def TestOneInput(data: bytes):  # noqa: N802
    if not data:
        return
    # Split data deterministically into raw blocks (bounded count)
    # Use fixed-size chunks to avoid quadratic blowups.
    size = max(1, min(32, data[0]))
    blocks = [data[i : i + size] for i in range(1, min(len(data), 1 + size * 32), size)]
    try:
        tree = build(blocks)
    except EmptyInputError:
        return
    if tree.depth != (len(blocks) - 1).bit_length() + 1:
        raise RuntimeError("unexpected tree depth")
    # Pick a block based on trailing byte
    block = blocks[data[-1] % len(blocks)]
    index, proof = generate_proof(tree, block)
    if not verify(proof, block, index, tree.root):
        raise RuntimeError("valid inclusion proof failed")


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
