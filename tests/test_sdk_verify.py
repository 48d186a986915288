from merkle_core.hashing import get_hasher
from merkle_core.merkle import build
from merkle_core.models import InclusionProof, ProofStep
from merkle_sdk.verify import verify_proof


def test_verify_against_published_hex_root():
    tree = build([b"r1", b"r2", b"r3"])
    published = tree.root.hex()
    proof = tree.inclusion_proof(b"r3")
    del tree
    assert verify_proof(proof, b"r3", published)
    assert not verify_proof(proof, b"r2", published)


def test_verify_with_raw_root_and_algorithm():
    tree = build([b"x", b"y"], hasher=get_hasher("blake2s"))
    proof = tree.inclusion_proof(b"y")
    assert verify_proof(proof, b"y", tree.root, algorithm="blake2s")
    assert not verify_proof(proof, b"y", tree.root)


def test_malformed_inputs_are_false():
    tree = build([b"x", b"y"])
    proof = tree.inclusion_proof(b"x")
    assert verify_proof(proof, b"x", "not-hex") is False
    assert verify_proof(proof, b"x", tree.root[:16]) is False
    assert verify_proof(proof, b"x", tree.root, algorithm="md5") is False


def test_rebuilt_proof_object_verifies():
    tree = build([b"a", b"b", b"c", b"d"])
    original = tree.inclusion_proof(b"c")
    rebuilt = InclusionProof(
        index=original.index,
        steps=[ProofStep(position=p, sibling=s) for p, s in zip(original.positions, original.siblings)],
    )
    assert verify_proof(rebuilt, b"c", tree.root)
