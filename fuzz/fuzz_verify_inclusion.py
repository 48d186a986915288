"""Higher-level inclusion proof fuzzing with mutated proofs and appends."""
from __future__ import annotations
import atheris
import sys
import random

with atheris.instrument_imports():
    from merkle_core.merkle import build, generate_proof, verify


def TestOneInput(data: bytes):  # noqa: N802
    if len(data) < 8:
        return
    # Derive variable chunk size & mutation seed
    seed = int.from_bytes(data[:4], 'little')
    random.seed(seed)
    chunk_len = 1 + (data[4] % 32)
    body = data[5:]
    blocks = [body[i:i+chunk_len] for i in range(0, min(len(body), chunk_len * 16), chunk_len)]
    blocks = [b for b in blocks if b]
    if len(blocks) < 3:
        return
    tree = build(blocks[:-1])
    tree.add_element(blocks[-1])
    if tree.root != build(blocks).root:
        raise RuntimeError("append root differs from full build")
    block = blocks[seed % len(blocks)]
    index, proof = generate_proof(tree, block)
    # With some probability, mutate one sibling to exercise negative path
    if random.random() < 0.2 and proof:
        j = random.randrange(len(proof))
        sib = proof[j]
        proof[j] = bytes([(sib[0] ^ 0x01)]) + sib[1:]
        if verify(proof, block, index, tree.root):
            raise RuntimeError("tampered proof unexpectedly verified")
    elif not verify(proof, block, index, tree.root):
        raise RuntimeError("valid proof failed")


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
