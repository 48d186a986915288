from merkle_core.settings import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("MERKLE_HASH_ALGORITHM", raising=False)
    monkeypatch.delenv("MERKLE_MAX_PROOF_DEPTH", raising=False)
    monkeypatch.delenv("MERKLE_LOG_LEVEL", raising=False)
    s = Settings()
    assert s.hash_algorithm == "sha3_256"
    assert s.max_proof_depth == 64
    assert s.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MERKLE_HASH_ALGORITHM", "BLAKE2B-256")
    monkeypatch.setenv("MERKLE_MAX_PROOF_DEPTH", "8")
    monkeypatch.setenv("MERKLE_LOG_LEVEL", "debug")
    s = Settings()
    assert s.hash_algorithm == "blake2b_256"
    assert s.max_proof_depth == 8
    assert s.log_level == "DEBUG"


def test_configured_algorithm_drives_default_hasher(monkeypatch):
    import hashlib

    from merkle_core import settings as settings_mod
    from merkle_core.hashing import get_hasher

    monkeypatch.setattr(settings_mod.settings, "hash_algorithm", "sha256")
    assert get_hasher().digest(b"a") == hashlib.sha256(b"a").digest()
