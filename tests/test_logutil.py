import logging

from merkle_core.logutil import DigestShorteningFilter, setup_logging
from merkle_core.merkle import build


def _record(msg, *args):
    return logging.LogRecord("merkle_core", logging.DEBUG, __file__, 1, msg, args, None)


def test_filter_shortens_full_digests():
    d = "ab" * 32
    rec = _record("root=%s leaves=%d", d, 3)
    assert DigestShorteningFilter().filter(rec)
    assert rec.getMessage() == "root=abababababab… leaves=3"


def test_filter_leaves_other_text():
    rec = _record("no digests here: %s", "deadbeef")
    DigestShorteningFilter().filter(rec)
    assert rec.getMessage() == "no digests here: deadbeef"


def test_setup_logging_default_shortens_tree_digests(caplog):
    setup_logging(logging.DEBUG)
    lg = logging.getLogger("merkle_core.merkle")
    try:
        assert any(isinstance(f, DigestShorteningFilter) for f in lg.filters)
        with caplog.at_level(logging.DEBUG, logger="merkle_core.merkle"):
            tree = build([b"a", b"b"])
        assert any(tree.root.hex()[:12] + "…" in r.getMessage() for r in caplog.records)
        assert not any(tree.root.hex() in r.getMessage() for r in caplog.records)
    finally:
        for f in list(lg.filters):
            lg.removeFilter(f)
